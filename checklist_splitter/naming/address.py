"""Canonical forms for the site address and page text comparisons."""

import re

_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_address(raw: str | None) -> str:
    """Uppercase, blank out all but ASCII word characters, collapse whitespace, trim.

    >>> normalize_address("123 Main St.!!")
    '123 MAIN ST'
    """
    upper = (raw or "").upper()
    spaced = _NON_WORD.sub(" ", upper)
    return _WHITESPACE.sub(" ", spaced).strip()


def matches(text: str, phrase: str) -> bool:
    """Case-insensitive containment of an upper-case trigger phrase.

    Page text is only case-folded; punctuation is left as extracted.
    """
    return phrase in text.upper()
