"""Realtek audio codecs, Ethernet, Wi-Fi and display controllers."""

import re

from ..normalize import normalize, trailing_letters
from ..types import ComponentType
from .base import ManufacturerHandler

_ALC_PATTERN = re.compile(r"^ALC(\d)")
_WIFI_PREFIXES = ("RTL8188", "RTL8192", "RTL88")

# Package suffix -> package
PACKAGE_SUFFIXES = {
    "GR": "QFP",
    "VB": "QFN",
    "CG": "QFN",
    "VL": "QFN",
    "VS": "QFN",
    "VD": "QFN",
    "VA": "QFN",
    "VC": "QFN",
    "VF": "QFN",
    "LF": "QFN-LF",
    "TR": "QFN-TR",
    "BR": "BGA",
    "BG": "BGA",
}

# Base part numbers that are drop-in compatible within a series
COMPATIBLE_PARTS = frozenset({
    frozenset({"ALC892", "ALC898"}),
    frozenset({"ALC1150", "ALC1200"}),
    frozenset({"ALC1200", "ALC1220"}),
})

# Sub-families where any revision replaces any other (RTL8111E/F/H, ...)
COMPATIBLE_FAMILIES = ("RTL8111", "RTL8168", "RTL8211", "RTL8188", "RTL8192")

NETWORK_INTERFACES = (
    ("RTL8188", "WiFi"),
    ("RTL8192", "WiFi"),
    ("RTL88", "WiFi"),
    ("RTL810", "Fast Ethernet"),
    ("RTL811", "Gigabit Ethernet"),
    ("RTL816", "Gigabit Ethernet"),
    ("RTL821", "Gigabit PHY"),
)

AUDIO_GENERATIONS = {
    "1": "HD",
    "5": "Mobile",
    "2": "Standard",
    "6": "Standard",
    "8": "Standard",
}


def _decode_package(suffix: str) -> str:
    if not suffix:
        return ""
    if suffix in PACKAGE_SUFFIXES:
        return PACKAGE_SUFFIXES[suffix]
    if suffix.startswith("V"):
        return "QFN"
    if suffix.startswith(("BG", "BR")):
        return "BGA"
    if suffix.startswith("G"):
        return "QFP"
    return suffix


class RealtekHandler(ManufacturerHandler):
    name = "Realtek"

    PATTERNS = (
        # Audio codecs
        (ComponentType.IC, r"^ALC2[0-9]{2}"),
        (ComponentType.IC, r"^ALC6[0-9]{2}"),
        (ComponentType.IC, r"^ALC8[0-9]{2}"),
        (ComponentType.IC, r"^ALC1[0-9]{3}"),
        (ComponentType.IC, r"^ALC5[0-9]{3}"),
        # Ethernet controllers and PHYs
        (ComponentType.IC, r"^RTL810[0-9]"),
        (ComponentType.IC, r"^RTL811[0-9]"),
        (ComponentType.IC, r"^RTL816[0-9]"),
        (ComponentType.IC, r"^RTL821[0-9]"),
        # Wi-Fi
        (ComponentType.IC, r"^RTL8188"),
        (ComponentType.IC, r"^RTL8192"),
        (ComponentType.IC, r"^RTL881[0-9]"),
        (ComponentType.IC, r"^RTL882[0-9]"),
        # Display controllers
        (ComponentType.IC, r"^RTD2[0-9]{3}"),
    )

    def extract_package_code(self, mpn: str | None) -> str:
        """Package from the ordering suffix: 'RTL8111H-CG' -> 'QFN', 'ALC892GR' -> 'QFP'"""
        normalized = normalize(mpn)
        if not normalized:
            return ""
        if normalized.find("-") > 0:
            return _decode_package(normalized.rsplit("-", 1)[1])
        suffix = trailing_letters(normalized)
        if len(normalized) - len(suffix) < 4:
            return ""
        return _decode_package(suffix)

    def extract_series(self, mpn: str | None) -> str:
        """Product line: 'ALC892' -> 'ALC8', 'RTL8111H' -> 'RTL81', 'RTL8188EUS' -> 'RTL88'"""
        normalized = normalize(mpn)
        match = _ALC_PATTERN.match(normalized)
        if match:
            return f"ALC{match.group(1)}"
        if normalized.startswith(_WIFI_PREFIXES):
            return "RTL88"
        if normalized.startswith(("RTL81", "RTL82")):
            return normalized[:5]
        if normalized.startswith("RTD2"):
            return "RTD2"
        return ""

    def extract_base_part_number(self, mpn: str | None) -> str:
        """Part number without ordering suffix: 'RTL8111H-CG' -> 'RTL8111H', 'ALC892GR' -> 'ALC892'"""
        normalized = normalize(mpn)
        if normalized.find("-") > 0:
            return normalized.split("-", 1)[0]
        suffix = trailing_letters(normalized)
        if suffix and len(normalized) - len(suffix) > 4:
            return normalized[:-len(suffix)]
        return normalized

    def is_audio_codec(self, mpn: str | None) -> bool:
        return normalize(mpn).startswith("ALC")

    def is_wifi_controller(self, mpn: str | None) -> bool:
        return normalize(mpn).startswith(_WIFI_PREFIXES)

    def is_network_controller(self, mpn: str | None) -> bool:
        """Wired Ethernet MAC or PHY (Wi-Fi parts excluded)."""
        normalized = normalize(mpn)
        if normalized.startswith(_WIFI_PREFIXES):
            return False
        return normalized.startswith(("RTL81", "RTL82"))

    def is_display_controller(self, mpn: str | None) -> bool:
        return normalize(mpn).startswith("RTD")

    def audio_codec_generation(self, mpn: str | None) -> str:
        match = _ALC_PATTERN.match(normalize(mpn))
        return AUDIO_GENERATIONS.get(match.group(1), "") if match else ""

    def network_interface_type(self, mpn: str | None) -> str:
        normalized = normalize(mpn)
        for prefix, interface in NETWORK_INTERFACES:
            if normalized.startswith(prefix):
                return interface
        return ""

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Same series and same base part, or a known compatible pair/family."""
        series1 = self.extract_series(mpn1)
        if not series1 or series1 != self.extract_series(mpn2):
            return False

        base1 = self.extract_base_part_number(mpn1)
        base2 = self.extract_base_part_number(mpn2)
        if base1 == base2:
            return True
        if frozenset({base1, base2}) in COMPATIBLE_PARTS:
            return True
        return any(base1.startswith(f) and base2.startswith(f) for f in COMPATIBLE_FAMILIES)
