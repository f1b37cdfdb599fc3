"""Linear voltage regulator similarity.

Three families are decoded from the part number:
- fixed 78xx (positive) / 79xx (negative), with L/M/H current grades
- adjustable LM317/LM338/LM350 (positive) and LM337 (negative)
- 1117 LDOs, fixed when an output voltage is coded, otherwise adjustable

Fixed against adjustable, opposite polarity and a different fixed output
voltage are all LOW. Same output and current grade is HIGH whatever the
vendor prefix; a different current grade is MEDIUM.
"""

import re
from dataclasses import dataclass

from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from ..types import ComponentType
from .base import SimilarityCalculator

_FIXED_PATTERN = re.compile(r"^(?:LM|MC|UA|KA|L)?7([89])([LMH]?)([0-9]{2})")
_ADJUSTABLE_PATTERN = re.compile(r"^(?:LM|MC)3(17|37|38|50)(?![0-9])")
_LDO_PATTERN = re.compile(r"^(?:LM|NCP|AMS|LD|AZ)1117")
# Output voltage after the 1117: 'ST33', '-3.3', 'V50', '-ADJ'
_LDO_VOLTAGE_PATTERN = re.compile(r"^[A-Z]*-?(ADJ|[0-9]\.[0-9]|[0-9]{2})")

# 78xx/79xx current grade letter -> output current (mA)
FIXED_CURRENT_GRADES = {
    "L": 100,
    "M": 500,
    "": 1000,
    "H": 5000,
}

# LMxxx adjustable number -> (polarity, output current mA)
ADJUSTABLE_REGULATORS = {
    "17": ("positive", 1500),
    "37": ("negative", 1500),
    "38": ("positive", 5000),
    "50": ("positive", 3000),
}

LDO_CURRENT = 800

# Adjustable parts with the same pinout and feedback reference
COMPATIBLE_ADJUSTABLE = (
    frozenset({"LM317", "LM338", "LM350"}),
)


@dataclass(frozen=True)
class RegulatorSpec:
    kind: str  # 'fixed' or 'adjustable'
    polarity: str  # 'positive' or 'negative'
    voltage: str  # Output voltage code ('05', '12', '33'); '' when adjustable or unknown
    current: int  # Rated output current (mA)
    base: str  # Part number without package letters


def parse_regulator(mpn: str) -> RegulatorSpec | None:
    """Decode a normalized MPN: 'MC7805CT' -> fixed, positive, '05', 1000 mA"""
    match = _FIXED_PATTERN.match(mpn)
    if match:
        polarity = "positive" if match.group(1) == "8" else "negative"
        grade = match.group(2)
        return RegulatorSpec("fixed", polarity, match.group(3), FIXED_CURRENT_GRADES[grade], match.group(0))

    match = _ADJUSTABLE_PATTERN.match(mpn)
    if match:
        polarity, current = ADJUSTABLE_REGULATORS[match.group(1)]
        return RegulatorSpec("adjustable", polarity, "", current, f"LM3{match.group(1)}")

    match = _LDO_PATTERN.match(mpn)
    if match:
        voltage = _LDO_VOLTAGE_PATTERN.match(mpn[match.end():])
        code = voltage.group(1).replace(".", "") if voltage else ""
        if code in ("", "ADJ"):
            return RegulatorSpec("adjustable", "positive", "", LDO_CURRENT, match.group(0))
        return RegulatorSpec("fixed", "positive", code, LDO_CURRENT, match.group(0))

    return None


class VoltageRegulatorSimilarityCalculator(SimilarityCalculator):
    name = "voltage_regulator"
    APPLICABLE_TYPES = frozenset({ComponentType.VOLTAGE_REGULATOR})
    CATEGORY = ComponentType.VOLTAGE_REGULATOR

    def recognizes(self, normalized_mpn: str) -> bool:
        return parse_regulator(normalized_mpn) is not None

    def _score(self, a: str, b: str) -> float:
        spec1, spec2 = parse_regulator(a), parse_regulator(b)
        if spec1.kind != spec2.kind or spec1.polarity != spec2.polarity:
            return LOW_SIMILARITY

        if spec1.kind == "fixed":
            if spec1.voltage != spec2.voltage:
                return LOW_SIMILARITY
            if spec1.current == spec2.current:
                return HIGH_SIMILARITY
            return MEDIUM_SIMILARITY

        if spec1.base == spec2.base:
            return HIGH_SIMILARITY
        if any(spec1.base in group and spec2.base in group for group in COMPATIBLE_ADJUSTABLE):
            return HIGH_SIMILARITY
        return MEDIUM_SIMILARITY
