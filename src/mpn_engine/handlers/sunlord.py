"""Sunlord chip inductors and ferrite beads."""

import re

from ..normalize import normalize
from ..packages import imperial_size
from ..parsers import format_inductance, parse_eia_code, parse_inductance_code
from ..types import ComponentType
from .base import ManufacturerHandler

# Family, metric size, variant letter, value code, suffix
_INDUCTOR_PATTERN = re.compile(
    r"^(?P<family>SDCL|SWPA|SDFL)(?P<size>\d{4})(?P<variant>[A-Z]?)(?P<value>[0-9R]+)(?P<suffix>[A-Z0-9]*)$"
)
_BEAD_PATTERN = re.compile(
    r"^(?P<family>GZ)(?P<size>\d{4})(?P<variant>[A-Z]?)(?P<value>\d{3})(?P<suffix>[A-Z]*)$"
)
_PREFIX_PATTERN = re.compile(r"^(SDCL|SWPA|SDFL|GZ)(\d{4})")

SERIES_TYPES = {
    "SDCL": "Power Inductor",
    "SWPA": "Power Inductor (Shielded)",
    "SDFL": "Ferrite Chip Inductor",
    "GZ": "Ferrite Bead",
}


class SunlordHandler(ManufacturerHandler):
    name = "Sunlord"

    PATTERNS = (
        (ComponentType.INDUCTOR, r"^SDCL\d{4}"),
        (ComponentType.INDUCTOR, r"^SWPA\d{4}"),
        (ComponentType.INDUCTOR, r"^SDFL\d{4}"),
        (ComponentType.INDUCTOR, r"^GZ\d{4}"),
        (ComponentType.FERRITE_BEAD, r"^GZ\d{4}"),
    )

    def extract_package_code(self, mpn: str | None) -> str:
        """Imperial chip size: 'SDFL2012T100KTF' -> '0805', 'SWPA4020S4R7MT' -> '4020'"""
        match = _PREFIX_PATTERN.match(normalize(mpn))
        return imperial_size(match.group(2)) if match else ""

    def extract_series(self, mpn: str | None) -> str:
        """Family plus metric size: 'SWPA4020S4R7MT' -> 'SWPA4020'"""
        match = _PREFIX_PATTERN.match(normalize(mpn))
        return match.group(1) + match.group(2) if match else ""

    def series_type(self, mpn: str | None) -> str:
        match = _PREFIX_PATTERN.match(normalize(mpn))
        return SERIES_TYPES[match.group(1)] if match else ""

    def extract_inductance(self, mpn: str | None) -> float | None:
        """Inductance in henries, code in uH: '4R7' -> 4.7e-6, '100' -> 1e-5"""
        match = _INDUCTOR_PATTERN.match(normalize(mpn))
        if not match:
            return None
        return parse_inductance_code(match.group("value")[:3], "uH")

    def extract_inductance_value(self, mpn: str | None) -> str:
        return format_inductance(self.extract_inductance(mpn))

    def extract_impedance(self, mpn: str | None) -> float | None:
        """Ferrite bead impedance at 100 MHz in ohms: 'GZ1608D601TF' -> 600"""
        match = _BEAD_PATTERN.match(normalize(mpn))
        if not match:
            return None
        return parse_eia_code(match.group("value"))

    def extract_impedance_value(self, mpn: str | None) -> str:
        """Display impedance: 'GZ1608D601TF' -> '600 ohm'"""
        impedance = self.extract_impedance(mpn)
        return f"{impedance:.0f} ohm" if impedance is not None else ""

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Same family and size, then equal inductance (or equal impedance for beads)."""
        series1 = self.extract_series(mpn1)
        if not series1 or series1 != self.extract_series(mpn2):
            return False

        value1 = self.extract_inductance_value(mpn1)
        value2 = self.extract_inductance_value(mpn2)
        if value1 and value2:
            return value1 == value2

        impedance1 = self.extract_impedance_value(mpn1)
        impedance2 = self.extract_impedance_value(mpn2)
        if impedance1 and impedance2:
            return impedance1 == impedance2
        return False
