"""Lexical MPN similarity, the fallback when no category knowledge applies.

An MPN is split around its longest digit run into a letter prefix, a
numeric core and a suffix ('IRF540NPBF' -> 'IRF', 540, 'NPBF'). The
three parts are compared separately and blended with fixed weights.
"""

import math
import re

from ..config import (
    LEXICAL_LOG_SCALE_ABOVE,
    LEXICAL_MISSING_SUFFIX_SCORE,
    LEXICAL_NUMERIC_WEIGHT,
    LEXICAL_PREFIX_WEIGHT,
    LEXICAL_SUFFIX_WEIGHT,
)
from ..normalize import levenshtein_similarity, normalize

_DIGIT_RUN_PATTERN = re.compile(r"\d+")
_NON_ALNUM_PATTERN = re.compile(r"[^A-Z0-9]")


def split_mpn(mpn: str) -> tuple[str, int | None, str]:
    """Split a normalized MPN: '2N2222A' -> ('2N', 2222, 'A'), 'LM' -> ('LM', None, '')"""
    runs = list(_DIGIT_RUN_PATTERN.finditer(mpn))
    if not runs:
        return _NON_ALNUM_PATTERN.sub("", mpn), None, ""
    # First of the longest runs
    core = max(runs, key=lambda m: len(m.group()))
    prefix = _NON_ALNUM_PATTERN.sub("", mpn[:core.start()])
    suffix = _NON_ALNUM_PATTERN.sub("", mpn[core.end():])
    return prefix, int(core.group()), suffix


def _numeric_similarity(n1: int | None, n2: int | None) -> float:
    if n1 is None and n2 is None:
        return 1.0
    if n1 is None or n2 is None:
        return 0.0
    if n1 == n2:
        return 1.0
    low, high = min(n1, n2), max(n1, n2)
    if high > LEXICAL_LOG_SCALE_ABOVE:
        return math.log10(low + 1) / math.log10(high + 1)
    return low / high


def _suffix_similarity(s1: str, s2: str) -> float:
    if not s1 and not s2:
        return 1.0
    if not s1 or not s2:
        return LEXICAL_MISSING_SUFFIX_SCORE
    return levenshtein_similarity(s1, s2)


def lexical_similarity(mpn1: str | None, mpn2: str | None) -> float:
    """Weighted prefix/core/suffix similarity of two MPNs in [0, 1]."""
    a = normalize(mpn1)
    b = normalize(mpn2)
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0

    prefix1, core1, suffix1 = split_mpn(a)
    prefix2, core2, suffix2 = split_mpn(b)
    score = (
        LEXICAL_PREFIX_WEIGHT * levenshtein_similarity(prefix1, prefix2)
        + LEXICAL_NUMERIC_WEIGHT * _numeric_similarity(core1, core2)
        + LEXICAL_SUFFIX_WEIGHT * _suffix_similarity(suffix1, suffix2)
    )
    return max(0.0, min(1.0, score))
