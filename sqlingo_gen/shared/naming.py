"""Naming utilities for code generation."""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache
from typing import Sequence

# Prefix that turns an unexported or empty name into an exported Go identifier
EXPORTED_PREFIX = "E"

_NON_WORD_RE = re.compile(r"\W", re.ASCII)


def _split_words(value: str) -> list[str]:
    """Split a name into words on every character that is not a letter or decimal digit.

    The first character of each word is upper-cased, the rest is kept as-is.
    """
    words: list[str] = []
    start_new_word = True
    for char in value:
        if char.isalpha() or unicodedata.category(char) == "Nd":
            if start_new_word:
                upper = char.upper()
                # Characters like "ß" have no single-character upper form
                words.append(upper if len(upper) == 1 else char)
                start_new_word = False
            else:
                words[-1] += char
        else:
            start_new_word = True
    return words


@lru_cache(maxsize=1024)
def _to_exported_identifier(value: str, force_cases: tuple[str, ...]) -> str:
    result = ""
    for word in _split_words(value):
        for case_word in force_cases:
            if word.casefold() == case_word.casefold():
                word = case_word
                break
        result += word

    if not result or not result[0].isupper():
        result = EXPORTED_PREFIX + result
    return result


def to_exported_identifier(value: str, force_cases: Sequence[str] = ()) -> str:
    """Convert a schema name to an exported Go identifier.

    Uses caching for repeated calls with the same input.

    Examples:
        >>> to_exported_identifier("user_id")
        'UserId'
        >>> to_exported_identifier("user_id", ["ID"])
        'UserID'
        >>> to_exported_identifier("2fa_codes")
        'E2faCodes'
    """
    return _to_exported_identifier(value, tuple(force_cases))


@lru_cache(maxsize=1024)
def ensure_identifier(value: str) -> str:
    """Sanitize a free-form name (e.g. a database name) into an identifier.

    Examples:
        >>> ensure_identifier("my-db")
        'my_db'
        >>> ensure_identifier("1st")
        '_1st'
    """
    result = _NON_WORD_RE.sub("_", value)
    if not result or "0" <= result[0] <= "9":
        result = "_" + result
    return result


def lower_first(value: str) -> str:
    """Lower-case the first character, e.g. a runtime class name to its private alias."""
    return value[:1].lower() + value[1:]
