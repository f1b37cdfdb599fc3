"""Discrete diode similarity: signal, rectifier, zener and Schottky families."""

import re

from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from ..types import ComponentType
from .base import SimilarityCalculator

_DIODE_PATTERN = re.compile(
    r"^(1N|BAV|BAS|BAT|BZX|FR|MUR|MBR|UF|BAW|BYV|BYW|LL|RR|RL|SR|SB|SD|SM|SS)[A-Z]?\d"
)
_BASE_PATTERN = re.compile(r"^(\d[A-Z])?[A-Z]*\d+")
_RECTIFIER_PATTERN = re.compile(r"^(1N400|RL20)([1-7])")
_BZX_VOLTAGE_PATTERN = re.compile(r"C(\d+)(?:V(\d))?")
_MBR_PATTERN = re.compile(r"^MBR[A-Z]?(\d+)")

# (family, pattern) checked in order; first match wins
_FAMILY_RULES = (
    ("1N400X", re.compile(r"^(1N400|RL20)[1-7]")),
    ("SIGNAL", re.compile(r"^(1N4148|1N914|LL4148)")),
    ("SCHOTTKY", re.compile(r"^((BAT|SB|SD|MBR)[A-Z]?\d|1N581[7-9])")),
    ("ZENER", re.compile(r"^(BZX|1N47|1N52)\d")),
    ("FAST_RECTIFIER", re.compile(r"^(FR|UF|MUR)\d")),
    ("RECTIFIER", re.compile(r"^(1N|RL)\d")),
)

# 1N400x / RL20x ladder: last digit -> reverse voltage
RECTIFIER_VOLTAGES = {
    "1": 50,
    "2": 100,
    "3": 200,
    "4": 400,
    "5": 600,
    "6": 800,
    "7": 1000,
}

# 1N4728 .. 1N4761 follow the E24 zener voltages
ZENER_VOLTAGES = dict(zip(
    (f"1N{n}" for n in range(4728, 4762)),
    (
        3.3, 3.6, 3.9, 4.3, 4.7, 5.1, 5.6, 6.2, 6.8, 7.5, 8.2, 9.1,
        10.0, 11.0, 12.0, 13.0, 15.0, 16.0, 18.0, 20.0, 22.0, 24.0, 27.0, 30.0,
        33.0, 36.0, 39.0, 43.0, 47.0, 51.0, 56.0, 62.0, 68.0, 75.0,
    ),
))

SCHOTTKY_VOLTAGES = {
    "BAT54": 30,
    "BAT42": 30,
    "BAT43": 30,
    "BAT46": 100,
    "BAT48": 40,
    "BAT85": 30,
    "1N5817": 20,
    "1N5818": 30,
    "1N5819": 40,
}


class DiodeSimilarityCalculator(SimilarityCalculator):
    name = "diode"
    APPLICABLE_TYPES = frozenset({ComponentType.DIODE})
    CATEGORY = ComponentType.DIODE

    def recognizes(self, normalized_mpn: str) -> bool:
        return bool(_DIODE_PATTERN.match(normalized_mpn))

    def family(self, mpn: str) -> str:
        for family, pattern in _FAMILY_RULES:
            if pattern.match(mpn):
                return family
        return "OTHER"

    def base_part(self, mpn: str) -> str:
        """'1N4148W-7-F' -> '1N4148', 'BAT54S' -> 'BAT54', 'BZX84C5V1' -> 'BZX84'"""
        match = _BASE_PATTERN.match(mpn)
        return match.group(0) if match else mpn

    def rectifier_voltage(self, mpn: str) -> int:
        match = _RECTIFIER_PATTERN.match(mpn)
        return RECTIFIER_VOLTAGES[match.group(2)] if match else 0

    def zener_voltage(self, mpn: str) -> float | None:
        """'1N4733A' -> 5.1, 'BZX84C3V3' -> 3.3, 'BZX55C12' -> 12.0"""
        if mpn.startswith("BZX"):
            match = _BZX_VOLTAGE_PATTERN.search(mpn)
            if not match:
                return None
            return float(f"{match.group(1)}.{match.group(2) or '0'}")
        return ZENER_VOLTAGES.get(self.base_part(mpn))

    def schottky_voltage(self, mpn: str) -> int:
        """Reverse voltage of common Schottky parts; MBR codes carry it in the trailing digits."""
        base = self.base_part(mpn)
        if base in SCHOTTKY_VOLTAGES:
            return SCHOTTKY_VOLTAGES[base]
        match = _MBR_PATTERN.match(mpn)
        if match:
            digits = match.group(1)
            # MBR20100 -> 100V, MBR0520 -> 20V, MBRS340 -> 40V
            return int(digits[-3:]) if len(digits) >= 5 else int(digits[-2:])
        return 0

    def _score(self, a: str, b: str) -> float:
        family1, family2 = self.family(a), self.family(b)

        if family1 == "SIGNAL" and family2 == "SIGNAL":
            # 1N4148, 1N914 and the MELF LL4148 are the same die
            return HIGH_SIMILARITY

        if family1 == "1N400X" and family2 == "1N400X":
            # Same ladder position (1N4007 = RL207); otherwise one rating covers the other
            if self.rectifier_voltage(a) == self.rectifier_voltage(b):
                return HIGH_SIMILARITY
            return MEDIUM_SIMILARITY

        if family1 == "ZENER" and family2 == "ZENER":
            voltage1, voltage2 = self.zener_voltage(a), self.zener_voltage(b)
            if voltage1 is not None and voltage1 == voltage2:
                return HIGH_SIMILARITY
            if voltage1 is None and voltage2 is None and self.base_part(a) == self.base_part(b):
                return HIGH_SIMILARITY
            return LOW_SIMILARITY

        if family1 == "SCHOTTKY" and family2 == "SCHOTTKY":
            if self.base_part(a) == self.base_part(b):
                return HIGH_SIMILARITY
            voltage1, voltage2 = self.schottky_voltage(a), self.schottky_voltage(b)
            if voltage1 and voltage1 == voltage2:
                return HIGH_SIMILARITY
            if voltage1 and voltage2:
                return MEDIUM_SIMILARITY
            return LOW_SIMILARITY

        if {family1, family2} == {"1N400X", "RECTIFIER"}:
            return MEDIUM_SIMILARITY

        if family1 == family2 and family1 != "OTHER":
            return HIGH_SIMILARITY if self.base_part(a) == self.base_part(b) else MEDIUM_SIMILARITY

        return LOW_SIMILARITY
