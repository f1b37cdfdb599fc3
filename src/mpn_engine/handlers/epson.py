"""Epson crystals, oscillators and real-time clock modules."""

import re

from ..normalize import normalize
from ..types import ComponentType
from .base import ManufacturerHandler

_MODEL_PATTERN = re.compile(r"^([A-Z]{2})-?(\d+)")

_OSCILLATOR_PREFIXES = ("SG", "TG", "VG", "HG")

# Crystal size codes (3 digits after the family)
CRYSTAL_SIZES = {
    "128": "1.2 x 1.0mm",
    "135": "1.6 x 1.2mm",
    "238": "2.0 x 1.6mm",
    "328": "3.2 x 2.5mm",
    "405": "4.0 x 2.5mm",
    "506": "5.0 x 3.2mm",
}

# Oscillator model numbers that encode the footprint
OSCILLATOR_SIZES = {
    "210": "2.0 x 1.6mm",
    "310": "2.5 x 2.0mm",
    "510": "3.2 x 2.5mm",
    "531": "5.0 x 3.2mm",
    "2016": "2.0 x 1.6mm",
    "2520": "2.5 x 2.0mm",
    "3225": "3.2 x 2.5mm",
    "5032": "5.0 x 3.2mm",
    "7050": "7.0 x 5.0mm",
    "8002": "8.0 x 4.5mm",
}

# Family prefix -> series description; (marker, description) pairs refine it
SERIES_NAMES = {
    "FA": "AT-Cut Crystal",
    "FC": "Tuning Fork Crystal",
    "MA": "High Frequency Crystal",
    "MC": "Ceramic Package Crystal",
    "SG": "Standard Oscillator",
    "TG": "TCXO",
    "VG": "VCXO",
    "HG": "OCXO",
    "RX": "RTC Module",
    "RA": "Programmable Timer",
    "RR": "RTC IC",
}

SERIES_VARIANTS = {
    "SG": ("210", "Programmable Oscillator"),
    "TG": ("3541", "High Stability TCXO"),
    "VG": ("4513", "High Stability VCXO"),
}

RTC_VARIANTS = (
    ("4571", "Low Power RTC"),
    ("8900", "High Accuracy RTC"),
)


class EpsonHandler(ManufacturerHandler):
    name = "Epson"

    PATTERNS = (
        # Crystals: FA AT-cut, FC tuning fork, MA high frequency, MC ceramic
        (ComponentType.CRYSTAL, r"^FA-?[0-9]"),
        (ComponentType.CRYSTAL_EPSON, r"^FA-?[0-9]"),
        (ComponentType.CRYSTAL, r"^FC-?[0-9]"),
        (ComponentType.CRYSTAL_EPSON, r"^FC-?[0-9]"),
        (ComponentType.CRYSTAL, r"^M[AC]-?[0-9]"),
        (ComponentType.CRYSTAL_EPSON, r"^M[AC]-?[0-9]"),
        # Oscillators
        (ComponentType.OSCILLATOR, r"^SG-?[0-9]"),
        (ComponentType.OSCILLATOR_EPSON, r"^SG-?[0-9]"),
        (ComponentType.OSCILLATOR, r"^TG-?[0-9]"),
        (ComponentType.OSCILLATOR_TCXO_EPSON, r"^TG-?[0-9]"),
        (ComponentType.OSCILLATOR, r"^VG-?[0-9]"),
        (ComponentType.OSCILLATOR_VCXO_EPSON, r"^VG-?[0-9]"),
        (ComponentType.OSCILLATOR, r"^HG-?[0-9]"),
        (ComponentType.OSCILLATOR_OCXO_EPSON, r"^HG-?[0-9]"),
        # RTC modules and timers
        (ComponentType.IC, r"^R[AXR]-?[0-9]"),
        (ComponentType.RTC, r"^R[XR]-?[0-9]"),
        (ComponentType.RTC_EPSON, r"^R[XR]-?[0-9]"),
    )

    def extract_package_code(self, mpn: str | None) -> str:
        """Footprint from the model number: 'FA-128' -> '1.2 x 1.0mm', 'SG-8002CA' -> '8.0 x 4.5mm'"""
        match = _MODEL_PATTERN.match(normalize(mpn))
        if not match:
            return ""
        family, digits = match.groups()

        if family in ("FA", "FC"):
            code = digits[:3]
            return CRYSTAL_SIZES.get(code, code)

        if family in _OSCILLATOR_PREFIXES:
            for code in (digits[:4], digits[:3]):
                if code in OSCILLATOR_SIZES:
                    return OSCILLATOR_SIZES[code]
            return digits[:4]

        return ""

    def extract_series(self, mpn: str | None) -> str:
        """Product line: 'FA-128' -> 'AT-Cut Crystal', 'TG-3541CE' -> 'High Stability TCXO'"""
        normalized = normalize(mpn)
        match = _MODEL_PATTERN.match(normalized)
        if not match:
            return ""
        family = match.group(1)
        if family not in SERIES_NAMES:
            return ""

        if family in SERIES_VARIANTS:
            marker, name = SERIES_VARIANTS[family]
            if marker in normalized:
                return name
        if family == "RX":
            for marker, name in RTC_VARIANTS:
                if marker in normalized:
                    return name
        return SERIES_NAMES[family]

    def extract_frequency_code(self, mpn: str | None) -> str:
        """Frequency/option code after the last hyphen: 'SG-8002CA-25.000M' -> '25.000M'"""
        normalized = normalize(mpn)
        match = _MODEL_PATTERN.match(normalized)
        if not match:
            return ""
        # The hyphen after the family letters ('SG-8002CA') is not a frequency separator
        rest = normalized[match.end(1):].lstrip("-")
        _, sep, code = rest.rpartition("-")
        return code if sep else ""

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Same series and footprint; oscillators must also share the frequency code."""
        series1 = self.extract_series(mpn1)
        if not series1 or series1 != self.extract_series(mpn2):
            return False
        if self.extract_package_code(mpn1) != self.extract_package_code(mpn2):
            return False
        if series1.startswith("High Stability"):
            return True
        return self.extract_frequency_code(mpn1) == self.extract_frequency_code(mpn2)
