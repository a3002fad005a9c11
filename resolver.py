# resolver.py
import re

from results import TranslationResult


def resolve(term: str, dictionary) -> TranslationResult:
    """
    Look up an already normalized term. Precedence:
      1. exact key
      2. a key containing the term as a whitespace-delimited word
      3. the first key containing the term as a substring
    A match in an earlier tier is never replaced by a later one.
    """
    if not term:
        return TranslationResult.not_found()

    if term in dictionary:
        return TranslationResult.found(dictionary[term])

    word_pattern = re.compile(r"(?<!\S)" + re.escape(term) + r"(?!\S)")
    for key, value in dictionary.items():
        if word_pattern.search(key):
            return TranslationResult.found(value)

    for key, value in dictionary.items():
        if term in key:
            return TranslationResult.found(value)

    return TranslationResult.not_found()
