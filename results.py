# results.py
from dataclasses import dataclass
from enum import Enum

NOT_FOUND_TEXT = "Translation not found"


class ResultStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class TranslationResult:
    """
    Outcome of a single lookup. Callers branch on `status`; `text` is the
    plain-string form sent over the wire.
    """

    status: ResultStatus
    value: str = None
    reason: str = None

    @classmethod
    def found(cls, value: str) -> "TranslationResult":
        return cls(ResultStatus.FOUND, value=value)

    @classmethod
    def not_found(cls) -> "TranslationResult":
        return cls(ResultStatus.NOT_FOUND)

    @classmethod
    def error(cls, reason: str) -> "TranslationResult":
        return cls(ResultStatus.ERROR, reason=reason)

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.FOUND

    @property
    def text(self) -> str:
        if self.status is ResultStatus.FOUND:
            return self.value
        if self.status is ResultStatus.NOT_FOUND:
            return NOT_FOUND_TEXT
        return f"Error: {self.reason}"

    def __str__(self):
        return self.text


def collapse(texts) -> list:
    """
    Case-fold (upper, then lower), de-duplicate and sort a batch of result
    strings. Used for the batch contract on both server and client.
    """
    return sorted({text.upper().lower() for text in texts})
