"""Viking Tech precision resistors.

MPN structure (CR0603-FX-1001ELF):
- Series prefix: CR chip, AR anti-sulfur, PA power, CSR current sense
- Size code: 0402, 0603, 0805, ...
- Tolerance: F=1%, G=2%, J=5%
- Value: 4-digit EIA (1001 = 1k) or R-notation (0R010 = 10 mOhm)
- Suffix: ELF/GLF lead-free packing codes
"""

import re

from ..normalize import normalize
from ..parsers import format_resistance, parse_resistance_code
from ..types import ComponentType
from .base import ManufacturerHandler

_CHIP_PATTERN = re.compile(r"^(CR|AR)(\d{4})")
_CSR_PATTERN = re.compile(r"^CSR(\d{4})")
_POWER_PATTERN = re.compile(r"^PA(\d{4})?")
_CHIP_TOLERANCE_PATTERN = re.compile(r"^(?:CR|AR)\d{4}-([FGJ])")
_CHIP_VALUE_PATTERN = re.compile(r"^(?:CR|AR)\d{4}-[A-Z]+-(\d+)")
_CSR_VALUE_PATTERN = re.compile(r"^CSR\d{4}-([0-9R]+)")

TOLERANCE_PERCENT = {"F": 1.0, "G": 2.0, "J": 5.0}


class VikingTechHandler(ManufacturerHandler):
    name = "Viking Tech"

    PATTERNS = (
        (ComponentType.RESISTOR, r"^CR[0-9]{4}"),
        (ComponentType.RESISTOR_CHIP_VIKING, r"^CR[0-9]{4}"),
        (ComponentType.RESISTOR, r"^AR[0-9]{4}"),
        (ComponentType.RESISTOR_CHIP_VIKING, r"^AR[0-9]{4}"),
        (ComponentType.RESISTOR, r"^PA[0-9]+"),
        (ComponentType.RESISTOR, r"^CSR[0-9]{4}"),
        (ComponentType.RESISTOR_CHIP_VIKING, r"^CSR[0-9]{4}"),
    )

    def extract_package_code(self, mpn: str | None) -> str:
        """Chip size code: 'CR0603-FX-1001ELF' -> '0603', 'CSR0805-0R010F' -> '0805'"""
        normalized = normalize(mpn)
        if not normalized:
            return ""
        match = _CHIP_PATTERN.match(normalized)
        if match:
            return match.group(2)
        match = _CSR_PATTERN.match(normalized)
        if match:
            return match.group(1)
        match = _POWER_PATTERN.match(normalized)
        if match:
            return match.group(1) or ""
        return ""

    def extract_series(self, mpn: str | None) -> str:
        """Prefix plus size: 'CR0603-FX-1001ELF' -> 'CR0603', bare 'PA' for power parts"""
        normalized = normalize(mpn)
        if not normalized:
            return ""
        for prefix in ("CSR", "CR", "AR"):
            if normalized.startswith(prefix):
                size = self.extract_package_code(normalized)
                return prefix + size if size else ""
        if _POWER_PATTERN.match(normalized) and len(normalized) > 2 and normalized[2].isdigit():
            return "PA" + self.extract_package_code(normalized)
        return ""

    def extract_tolerance(self, mpn: str | None) -> str:
        """Tolerance letter: 'CR0603-FX-1001ELF' -> 'F', 'CSR0805-0R010F' -> 'F'"""
        normalized = normalize(mpn)
        if not normalized:
            return ""
        match = _CHIP_TOLERANCE_PATTERN.match(normalized)
        if match:
            return match.group(1)
        if _CSR_PATTERN.match(normalized) and "-" in normalized:
            for c in normalized[8:]:
                if c in TOLERANCE_PERCENT:
                    return c
        return ""

    def extract_resistance(self, mpn: str | None) -> float | None:
        """Resistance in ohms: 'CR0603-FX-1001ELF' -> 1000, 'CSR0805-0R010F' -> 0.01"""
        normalized = normalize(mpn)
        if not normalized:
            return None
        match = _CHIP_VALUE_PATTERN.match(normalized)
        if match:
            return parse_resistance_code(match.group(1))
        match = _CSR_VALUE_PATTERN.match(normalized)
        if match:
            return parse_resistance_code(match.group(1))
        return None

    def extract_value(self, mpn: str | None) -> str:
        """Display value: 'CR0603-FX-1001ELF' -> '1k', 'CR0603-FX-4702ELF' -> '47k'"""
        return format_resistance(self.extract_resistance(mpn))

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Same series and size; tolerance classes must agree when both are given."""
        series1 = self.extract_series(mpn1)
        if not series1 or series1 != self.extract_series(mpn2):
            return False
        tolerance1 = self.extract_tolerance(mpn1)
        tolerance2 = self.extract_tolerance(mpn2)
        if tolerance1 and tolerance2:
            return tolerance1 == tolerance2
        return True
