"""MPN normalization and shared string helpers.

Every lookup in the engine starts from the normalized form of a part number:
surrounding whitespace removed and ASCII letters uppercased. The helpers
below are the small string utilities that handlers and similarity
calculators share (digit scanning, prefix checks, edit distance).
"""

from typing import Iterable

from rapidfuzz.distance import Levenshtein

from .config import TEXT_TOKEN_PREFIXES, TEXT_TOKEN_SUFFIXES


# ASCII-only uppercase table; str.upper() would also fold non-ASCII letters
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
)

# Characters stripped from the edges of words pulled out of free text
_TOKEN_EDGE_CHARS = " \t\r\n.,:;()[]{}\"'"


def normalize(mpn: str | None) -> str:
    """Canonicalize an MPN: ' bma456-fb ' -> 'BMA456-FB', None -> ''"""
    if not mpn:
        return ""
    return mpn.strip().translate(_ASCII_UPPER)


def first_digit_index(s: str | None) -> int:
    """Index of the first digit in s, or -1: 'BMA456' -> 3"""
    if not s:
        return -1
    for i, c in enumerate(s):
        if c.isdigit():
            return i
    return -1


def last_digit_index(s: str | None) -> int:
    """Index of the last digit in s, or -1: 'NTD4808N' -> 6"""
    if not s:
        return -1
    for i in range(len(s) - 1, -1, -1):
        if s[i].isdigit():
            return i
    return -1


def starts_with_any(s: str | None, prefixes: Iterable[str]) -> bool:
    """True if s starts with any of the given prefixes."""
    if not s:
        return False
    return any(s.startswith(p) for p in prefixes)


def leading_letters(s: str) -> str:
    """Letter prefix of s: '2N2222' -> '', 'BMA456' -> 'BMA'"""
    end = 0
    while end < len(s) and s[end].isalpha():
        end += 1
    return s[:end]


def trailing_letters(s: str) -> str:
    """Letter suffix of s: 'NTD4808N' -> 'N', 'XAL4020-222MEB' -> 'MEB'"""
    start = len(s)
    while start > 0 and s[start - 1].isalpha():
        start -= 1
    return s[start:]


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance (insert, delete, substitute): 'BMA456' vs 'BMA400' -> 2"""
    return Levenshtein.distance(a, b)


def levenshtein_similarity(a: str, b: str) -> float:
    """Edit distance scaled to [0, 1]: 1 - distance / longest length, 1.0 for two empty strings."""
    return Levenshtein.normalized_similarity(a, b)


def clean_token(word: str | None) -> str:
    """Strip free-text decoration around a candidate MPN.

    Examples:
        'P/N:LM358D,' -> 'LM358D'
        'IC-NE555P'   -> 'NE555P'
        'BAT54-SMD'   -> 'BAT54'
    """
    token = normalize(word).strip(_TOKEN_EDGE_CHARS)
    for prefix in TEXT_TOKEN_PREFIXES:
        if token.startswith(prefix):
            token = token[len(prefix):]
            break
    for suffix in TEXT_TOKEN_SUFFIXES:
        if token.endswith(suffix):
            token = token[:-len(suffix)]
            break
    return token.strip(_TOKEN_EDGE_CHARS)
