"""Bipolar junction transistor similarity.

Scoring order:
1. Opposite polarity (NPN vs PNP) -> LOW
2. Different numbering families (2N/PN vs BC) -> LOW
3. Same curated equivalence group, or same part once packaging
   suffixes are stripped -> HIGH
4. Both electrical characteristics known -> HIGH within tolerance, else LOW
5. Neighbouring parts of one series (2N2218..2N2222) -> MEDIUM
6. Otherwise a lexical score scaled into [LOW, MEDIUM]
"""

import re
from dataclasses import dataclass

from ..config import (
    CURRENT_TOLERANCE,
    GAIN_TOLERANCE,
    HIGH_SIMILARITY,
    LOW_SIMILARITY,
    MEDIUM_SIMILARITY,
    VOLTAGE_TOLERANCE,
)
from ..types import ComponentType
from .base import SimilarityCalculator
from .lexical import lexical_similarity

# 2N7000..2N7002 are MOSFETs
_TRANSISTOR_PATTERN = re.compile(r"^(?!2N700[0-2])(2N|PN|BC|BD|TIP|2SC|2SA|MPSA|MPSH|MPS)\d")
_BASE_PATTERN = re.compile(r"^(2N|PN|BC|BD|TIP|2SC|2SA|MPSA|MPSH|MPS)(\d+)")
_PACKAGING_SUFFIX_PATTERN = re.compile(r"-?(T|TR|TA|TF|G|L|R|Q|X)$")

_POLARITY_RULES = (
    (re.compile(r"^(2N|PN)(2222|3904|4401)"), "NPN"),
    (re.compile(r"^(2N|PN)(2907|3906|4403)"), "PNP"),
    (re.compile(r"^BC(54\d|33\d)"), "NPN"),
    (re.compile(r"^BC(55\d|32\d)"), "PNP"),
    (re.compile(r"^2SC"), "NPN"),
    (re.compile(r"^2SA"), "PNP"),
)

# Interchangeable parts, in suffix-stripped form
EQUIVALENT_GROUPS = (
    frozenset({"2N2222", "PN2222"}),
    frozenset({"2N3904", "PN3904"}),
    frozenset({"2N4401", "PN4401"}),
    frozenset({"BC547", "BC547B", "BC548", "BC337"}),
    frozenset({"BC337", "BC337-40"}),
    frozenset({"2N2907", "PN2907"}),
    frozenset({"2N3906", "PN3906"}),
    frozenset({"2N4403", "PN4403"}),
    frozenset({"BC557", "BC557B", "BC558", "BC327"}),
    frozenset({"BC327", "BC327-40"}),
)

# Numeric ranges whose members are close relatives within one family
SERIES_RANGES = (
    (2218, 2222),
    (2904, 2907),
    (3903, 3904),
    (3905, 3906),
)


@dataclass(frozen=True)
class TransistorCharacteristics:
    npn: bool
    vceo: float  # Collector-emitter voltage (V)
    ic: float  # Collector current (A)
    hfe: float  # DC current gain
    package: str


KNOWN_CHARACTERISTICS = {
    "2N2222": TransistorCharacteristics(True, 40, 0.8, 30, "TO-18"),
    "PN2222": TransistorCharacteristics(True, 40, 0.8, 30, "TO-92"),
    "2N3904": TransistorCharacteristics(True, 40, 0.2, 20, "TO-92"),
    "2N4401": TransistorCharacteristics(True, 40, 0.6, 25, "TO-92"),
    "BC547": TransistorCharacteristics(True, 45, 0.1, 20, "TO-92"),
    "2N2907": TransistorCharacteristics(False, 40, 0.8, 30, "TO-18"),
    "PN2907": TransistorCharacteristics(False, 40, 0.8, 30, "TO-92"),
    "2N3906": TransistorCharacteristics(False, 40, 0.2, 20, "TO-92"),
    "BC557": TransistorCharacteristics(False, 45, 0.1, 20, "TO-92"),
}


def strip_packaging_suffix(mpn: str) -> str:
    """Drop tape/lead-form suffixes and the 'A' revision: '2N2222A-TR' -> '2N2222'"""
    stripped = _PACKAGING_SUFFIX_PATTERN.sub("", mpn)
    return stripped[:-1] if stripped.endswith("A") else stripped


def _within(a: float, b: float, tolerance: float) -> bool:
    high = max(abs(a), abs(b))
    return high == 0 or abs(a - b) / high <= tolerance


class TransistorSimilarityCalculator(SimilarityCalculator):
    name = "transistor"
    APPLICABLE_TYPES = frozenset({ComponentType.TRANSISTOR})
    CATEGORY = ComponentType.TRANSISTOR

    def recognizes(self, normalized_mpn: str) -> bool:
        return bool(_TRANSISTOR_PATTERN.match(normalized_mpn))

    def base_part(self, mpn: str) -> str:
        """Family prefix plus number: '2N2222A-TR' -> '2N2222', 'BC547B' -> 'BC547'"""
        match = _BASE_PATTERN.match(mpn)
        return match.group(0) if match else mpn

    def characteristics(self, mpn: str) -> TransistorCharacteristics | None:
        return KNOWN_CHARACTERISTICS.get(self.base_part(mpn))

    def polarity(self, mpn: str) -> str:
        """'NPN', 'PNP', or '' when unknown."""
        chars = self.characteristics(mpn)
        if chars is not None:
            return "NPN" if chars.npn else "PNP"
        for pattern, polarity in _POLARITY_RULES:
            if pattern.match(mpn):
                return polarity
        return ""

    def family(self, mpn: str) -> str:
        if mpn.startswith(("2N", "PN")):
            return "2N"
        if mpn.startswith("BC"):
            return "BC"
        return ""

    def _series_number(self, mpn: str) -> int | None:
        match = _BASE_PATTERN.match(mpn)
        return int(match.group(2)) if match else None

    def _same_series(self, a: str, b: str) -> bool:
        n1, n2 = self._series_number(a), self._series_number(b)
        if n1 is None or n2 is None:
            return False
        return any(low <= n1 <= high and low <= n2 <= high for low, high in SERIES_RANGES)

    def _compatible(self, c1: TransistorCharacteristics, c2: TransistorCharacteristics) -> bool:
        return (
            c1.npn == c2.npn
            and _within(c1.vceo, c2.vceo, VOLTAGE_TOLERANCE)
            and _within(c1.ic, c2.ic, CURRENT_TOLERANCE)
            and _within(c1.hfe, c2.hfe, GAIN_TOLERANCE)
        )

    def _score(self, a: str, b: str) -> float:
        polarity1, polarity2 = self.polarity(a), self.polarity(b)
        if polarity1 and polarity2 and polarity1 != polarity2:
            return LOW_SIMILARITY

        family1, family2 = self.family(a), self.family(b)
        if family1 and family2 and family1 != family2:
            return LOW_SIMILARITY

        core1, core2 = strip_packaging_suffix(a), strip_packaging_suffix(b)
        if core1 == core2:
            return HIGH_SIMILARITY
        if any(core1 in group and core2 in group for group in EQUIVALENT_GROUPS):
            return HIGH_SIMILARITY

        chars1, chars2 = self.characteristics(a), self.characteristics(b)
        if chars1 is not None and chars2 is not None:
            return HIGH_SIMILARITY if self._compatible(chars1, chars2) else LOW_SIMILARITY

        if self._same_series(a, b):
            return MEDIUM_SIMILARITY
        return LOW_SIMILARITY + (MEDIUM_SIMILARITY - LOW_SIMILARITY) * lexical_similarity(a, b)
