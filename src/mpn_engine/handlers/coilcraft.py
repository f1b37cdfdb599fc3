"""Coilcraft power and RF inductors.

MPN structure (XAL4020-222MEB):
- Family: XAL/XAT/XEL/XFL/SER/LPS/MSS/MSD/SLC/SLR/DO, or 0402HP/0603HP
- Size: four digits (4020 = 4.0 x 4.0 x 2.0 mm), DO adds a C/P/T variant
- Inductance: 3-digit code in nH (222 = 2.2 uH) or R-notation in uH (R47)
- Suffix: tolerance and packaging letters
"""

import re

from ..normalize import normalize
from ..parsers import format_inductance, parse_inductance_code
from ..types import ComponentType
from .base import ManufacturerHandler

_PART_PATTERNS = (
    re.compile(
        r"^(?P<family>XA[LT]|XEL|XFL|SER|LPS|MSS|MSD|SL[CR])(?P<size>\d{4})"
        r"-?(?P<value>\d{3}|R\d{2})(?P<suffix>[A-Z]*)$"
    ),
    re.compile(
        r"^(?P<family>DO)(?P<size>\d{4}[CPT]?)"
        r"-?(?P<value>\d{3}|R\d{2})?(?P<suffix>[A-Z]*)$"
    ),
    re.compile(
        r"^(?P<family>0[46]0[23]HP)(?P<size>)"
        r"-?(?P<value>\d{3}|R\d{2})(?P<suffix>[A-Z]*)$"
    ),
)

_FAMILY_PATTERN = re.compile(r"^(0[46]0[23]HP|XA[LT]|XEL|XFL|SER|LPS|MSS|MSD|SL[CR]|DO)\d*")

# Family -> construction description (Coilcraft does not encode a package name)
FAMILY_DESCRIPTIONS = {
    "XAL": "Shielded Power",
    "XAT": "Shielded Power",
    "XEL": "Shielded Low DCR",
    "XFL": "Low Profile",
    "SER": "High Efficiency",
    "LPS": "Low Profile Shielded",
    "MSS": "Magnetically Shielded",
    "DO": "Drum Core",
    "MSD": "Mid-Size Drum",
    "SLC": "High Q Chip",
    "SLR": "High Q Chip RF",
    "0402HP": "0402 High Performance",
    "0603HP": "0603 High Performance",
}


def _parse(mpn: str) -> re.Match[str] | None:
    for pattern in _PART_PATTERNS:
        match = pattern.match(mpn)
        if match:
            return match
    return None


class CoilcraftHandler(ManufacturerHandler):
    name = "Coilcraft"

    PATTERNS = tuple(
        (component_type, pattern)
        for pattern in (
            r"^XA[LT]\d{4}",
            r"^XEL\d{4}",
            r"^XFL\d{4}",
            r"^SER\d{4}",
            r"^LPS\d{4}",
            r"^MSS\d{4}",
            r"^DO\d{4}",
            r"^MSD\d{4}",
            r"^SL[CR]\d{4}",
            r"^0[46]0[23]HP",
        )
        for component_type in (ComponentType.INDUCTOR, ComponentType.INDUCTOR_CHIP_COILCRAFT)
    )

    def extract_family(self, mpn: str | None) -> str:
        match = _FAMILY_PATTERN.match(normalize(mpn))
        return match.group(1) if match else ""

    def extract_package_code(self, mpn: str | None) -> str:
        """Construction type: 'XAL4020-222MEB' -> 'Shielded Power'"""
        return FAMILY_DESCRIPTIONS.get(self.extract_family(mpn), "")

    def extract_series(self, mpn: str | None) -> str:
        """Family plus size: 'XAL4020-222MEB' -> 'XAL4020', 'DO3316P-103MLD' -> 'DO3316P'"""
        match = _parse(normalize(mpn))
        if not match:
            return ""
        return match.group("family") + match.group("size")

    def extract_inductance(self, mpn: str | None) -> float | None:
        """Inductance in henries: 'XAL4020-222MEB' -> 2.2e-6, 'SER2010-R47' -> 4.7e-7"""
        match = _parse(normalize(mpn))
        if not match or not match.group("value"):
            return None
        return parse_inductance_code(match.group("value"), "nH")

    def extract_inductance_value(self, mpn: str | None) -> str:
        """Display inductance: 'XAL4020-222MEB' -> '2.2uH', 'SLC7530-820' -> '82nH'"""
        return format_inductance(self.extract_inductance(mpn))

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Same family and size with the same non-empty inductance."""
        series1 = self.extract_series(mpn1)
        if not series1 or series1 != self.extract_series(mpn2):
            return False
        value1 = self.extract_inductance_value(mpn1)
        return bool(value1) and value1 == self.extract_inductance_value(mpn2)
