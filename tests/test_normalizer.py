"""
Tests for text normalization.
"""

import pytest

from normalizer import normalize


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Кот  ", "кот"),
        ("HOUSE", "house"),
        ("café", "cafe"),
        ("Ñandú", "nandu"),
        ("ﬁsh", "fish"),
        (" дом\t", "дом"),
        ("ℌello", "hello"),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_empty_and_none_are_returned_unchanged():
    assert normalize("") == ""
    assert normalize(None) is None


@pytest.mark.parametrize(
    "raw",
    [
        "İstanbul",
        "Straße",
        "ΟΔΟΣ",
        "㎁",
        "Ёлка",
        "й",
        "  mixed Case ÀÉÎ  ",
        "́leading mark",
        "①②③",
        "",
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_cyrillic_diacritics_are_folded():
    # й and ё decompose to и and е plus a combining mark
    assert normalize("Ёж") == "еж"
    assert normalize("мой") == "мои"
