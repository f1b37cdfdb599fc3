"""General-purpose op-amp similarity.

Parts are grouped by channel count, since single, dual and quad op-amps
have different pinouts. Within a channel count the classic parts are
pin-compatible: same input stage is HIGH, bipolar vs JFET input is MEDIUM.
A different channel count is LOW.
"""

import re
from dataclasses import dataclass

from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from ..types import ComponentType
from .base import SimilarityCalculator


@dataclass(frozen=True)
class OpAmpCharacteristics:
    channels: int
    jfet_input: bool


KNOWN_OPAMPS = {
    # Single
    "LM741": OpAmpCharacteristics(1, False),
    "UA741": OpAmpCharacteristics(1, False),
    "MC741": OpAmpCharacteristics(1, False),
    "TL071": OpAmpCharacteristics(1, True),
    "TL081": OpAmpCharacteristics(1, True),
    # Dual
    "LM358": OpAmpCharacteristics(2, False),
    "LM2904": OpAmpCharacteristics(2, False),
    "MC1458": OpAmpCharacteristics(2, False),
    "LM1458": OpAmpCharacteristics(2, False),
    "RC4558": OpAmpCharacteristics(2, False),
    "NE5532": OpAmpCharacteristics(2, False),
    "TL072": OpAmpCharacteristics(2, True),
    "TL082": OpAmpCharacteristics(2, True),
    # Quad
    "LM324": OpAmpCharacteristics(4, False),
    "LM2902": OpAmpCharacteristics(4, False),
    "MC324": OpAmpCharacteristics(4, False),
    "MC3403": OpAmpCharacteristics(4, False),
    "RC4136": OpAmpCharacteristics(4, False),
    "TL074": OpAmpCharacteristics(4, True),
    "TL084": OpAmpCharacteristics(4, True),
}

# Longest names first so 'LM2904' is not read as a shorter family
_FAMILY_PATTERN = re.compile(
    "^(" + "|".join(sorted(KNOWN_OPAMPS, key=len, reverse=True)) + ")"
)


class OpAmpSimilarityCalculator(SimilarityCalculator):
    name = "opamp"
    APPLICABLE_TYPES = frozenset({ComponentType.OPAMP})
    CATEGORY = ComponentType.OPAMP

    def recognizes(self, normalized_mpn: str) -> bool:
        return bool(_FAMILY_PATTERN.match(normalized_mpn))

    def family(self, mpn: str) -> str:
        """'LM358DR' -> 'LM358', 'TL072CP' -> 'TL072', '' if unknown"""
        match = _FAMILY_PATTERN.match(mpn)
        return match.group(1) if match else ""

    def _score(self, a: str, b: str) -> float:
        family1, family2 = self.family(a), self.family(b)
        if family1 == family2:
            return HIGH_SIMILARITY

        chars1, chars2 = KNOWN_OPAMPS[family1], KNOWN_OPAMPS[family2]
        if chars1.channels != chars2.channels:
            return LOW_SIMILARITY
        if chars1.jfet_input == chars2.jfet_input:
            return HIGH_SIMILARITY
        return MEDIUM_SIMILARITY
