# normalizer.py
import unicodedata


def _decompose(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(
        ch for ch in decomposed if not unicodedata.category(ch).startswith("M")
    )


def normalize(text: str) -> str:
    """
    Canonical form used for every dictionary key, value and lookup term:
    NFKD decomposition, combining marks removed, lower-cased, trimmed.

    None and "" come back unchanged. The decomposition runs again after
    lower-casing because some lower-case forms decompose further
    (e.g. "İ" lowers to "i" plus a combining dot), so the result is a
    fixed point: normalize(normalize(x)) == normalize(x).
    """
    if not text:
        return text

    return _decompose(_decompose(text).lower()).strip()
