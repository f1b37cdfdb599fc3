"""Chip resistor similarity across Vishay, Yageo and Viking Tech ordering codes.

Each supported format decodes to (size, ohms, tolerance). The score adds
up independent matches:
- same chip size: +0.3
- same resistance (within 2%): +0.5
- same tolerance class: +0.2, half of that when the classes differ
  (the tighter part still replaces the looser one)
"""

import re
from dataclasses import dataclass

from ..config import PASSIVE_PACKAGE_WEIGHT, RESISTOR_TOLERANCE_WEIGHT, RESISTOR_VALUE_WEIGHT
from ..parsers import parse_resistance_code, values_match
from ..types import ComponentType
from .base import SimilarityCalculator

_FORMATS = (
    # Vishay: CRCW060310K0FKEA
    re.compile(r"^CRCW(?P<size>\d{4})(?P<value>\d*[RKM]\d*)(?P<tolerance>[BDFGJ])"),
    # Yageo: RC0603FR-0710KL
    re.compile(r"^RC(?P<size>\d{4})(?P<tolerance>[BDFGJ])R-\d{2}(?P<value>\d*[RKM]\d*)"),
    # Viking Tech chip: CR0603-FX-1001ELF
    re.compile(r"^(?:CR|AR)(?P<size>\d{4})-(?P<tolerance>[FGJ])[A-Z]*-(?P<value>\d*R\d+|\d+)"),
    # Viking Tech current sense: CSR0805-0R010F
    re.compile(r"^CSR(?P<size>\d{4})-(?P<value>[0-9R]+?)(?P<tolerance>[FGJ])"),
)

TOLERANCE_PERCENT = {
    "B": 0.1,
    "D": 0.5,
    "F": 1.0,
    "G": 2.0,
    "J": 5.0,
}


@dataclass(frozen=True)
class ResistorSpec:
    size: str
    ohms: float | None
    tolerance: float | None  # percent


def parse_resistor(mpn: str) -> ResistorSpec | None:
    """Decode a normalized resistor MPN: 'RC0603FR-0710KL' -> ResistorSpec('0603', 10000.0, 1.0)"""
    for pattern in _FORMATS:
        match = pattern.match(mpn)
        if match:
            return ResistorSpec(
                size=match.group("size"),
                ohms=parse_resistance_code(match.group("value")),
                tolerance=TOLERANCE_PERCENT.get(match.group("tolerance")),
            )
    return None


class ResistorSimilarityCalculator(SimilarityCalculator):
    name = "resistor"
    APPLICABLE_TYPES = frozenset({ComponentType.RESISTOR})
    CATEGORY = ComponentType.RESISTOR

    def recognizes(self, normalized_mpn: str) -> bool:
        return parse_resistor(normalized_mpn) is not None

    def _score(self, a: str, b: str) -> float:
        spec1, spec2 = parse_resistor(a), parse_resistor(b)
        score = 0.0
        if spec1.size == spec2.size:
            score += PASSIVE_PACKAGE_WEIGHT
        if values_match(spec1.ohms, spec2.ohms):
            score += RESISTOR_VALUE_WEIGHT
        if spec1.tolerance is not None and spec2.tolerance is not None:
            if spec1.tolerance == spec2.tolerance:
                score += RESISTOR_TOLERANCE_WEIGHT
            else:
                score += RESISTOR_TOLERANCE_WEIGHT / 2
        return score
