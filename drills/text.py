"""String drills: reversal, palindromes, letter frequency and space encoding."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase

_SPACE_CODE = "@40"


def reverse_string(s: str) -> str:
    """Characters of ``s`` in reverse order."""
    return s[::-1]


def is_palindrome(s: str) -> bool:
    """True if ``s`` reads the same backwards, case included."""
    return s == s[::-1]


def is_palindrome_ignore_case(s: str) -> bool:
    """True if ``s`` reads the same backwards when letter case is ignored."""
    lowered = s.lower()
    return lowered == lowered[::-1]


def max_occurring_char(s: str) -> str:
    """Most frequent lowercase letter of ``s``; the alphabetically first on ties."""
    if not s:
        raise ValueError("an empty string has no most frequent character")
    invalid = set(s) - set(ascii_lowercase)
    if invalid:
        raise ValueError(f"only lowercase letters are allowed, got {sorted(invalid)}")
    counts = Counter(s)
    return min(counts, key=lambda letter: (-counts[letter], letter))


def encode_spaces(s: str) -> str:
    """Replace every space in ``s`` with ``@40``."""
    return s.replace(" ", _SPACE_CODE)