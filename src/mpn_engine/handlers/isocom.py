"""Isocom Components optocouplers.

Isocom builds its own IS* range plus second-source versions of industry
standard parts (4N25, 6N137, MOC3021, TLP521, H11A1, ...). The ordering
code after the hyphen selects the package: -1/-2/-4 are DIP-4/6/8 and an
S suffix marks the surface-mount lead form.
"""

import re

from ..normalize import normalize
from ..types import ComponentType
from .base import ManufacturerHandler

_IS_PATTERN = re.compile(r"^(IS[PQD])(\d{3})")
_4N_PATTERN = re.compile(r"^4N(\d{2})")
_6N_PATTERN = re.compile(r"^6N1\d{2}")
_MOC_PATTERN = re.compile(r"^MOC3(\d)\d{2}")
_TLP_PATTERN = re.compile(r"^TLP\d{3}")
_H11_PATTERN = re.compile(r"^H11[A-Z]\d")
_TRAILING_PIN_CODE_PATTERN = re.compile(r"\d([124])$")

# Package option code -> package
PIN_CODES = {
    "1": "DIP-4",
    "2": "DIP-6",
    "4": "DIP-8",
    "1S": "SMD-4",
    "2S": "SMD-6",
    "4S": "SMD-8",
}

# Standard parts with a fixed package when no option code is given
_DEFAULT_PACKAGES = (
    ("4N", "DIP-6"),
    ("6N", "DIP-8"),
    ("MOC", "DIP-6"),
    ("H11", "DIP-6"),
)

# Second-source part numbers that are named individually
NAMED_4N_PARTS = frozenset({"25", "26", "27", "28", "35", "36", "37"})
NAMED_6N_PARTS = frozenset({"6N135", "6N136", "6N137", "6N138", "6N139"})

# Interchangeable 4N groups (phototransistor output, same pinout)
COMPATIBLE_4N_GROUPS = (
    frozenset({"25", "26", "27", "28"}),
    frozenset({"35", "36", "37"}),
)

# Simple prefix families: regex -> series name
_FAMILY_SERIES = (
    (re.compile(r"^CNY\d{2}"), "CNY"),
    (re.compile(r"^PC\d{3}"), "PC"),
    (re.compile(r"^IL\d{3}"), "IL"),
    (re.compile(r"^SFH\d{4}"), "SFH"),
)


class IsocomHandler(ManufacturerHandler):
    name = "Isocom"

    PATTERNS = tuple(
        (component_type, pattern)
        for pattern in (
            r"^IS[PQD][0-9]{3}",
            r"^4N[0-9]{2}",
            r"^6N1[0-9]{2}",
            r"^MOC3[0-2][0-9]{2}",
            r"^TLP[0-9]{3}",
            r"^H11[A-Z][0-9]",
            r"^CNY[0-9]{2}",
            r"^PC[0-9]{3}",
            r"^IL[0-9]{3}",
            r"^SFH[0-9]{4}",
        )
        for component_type in (ComponentType.OPTOCOUPLER, ComponentType.OPTOCOUPLER_ISOCOM)
    )

    def extract_package_code(self, mpn: str | None) -> str:
        """Package from the option code: 'ISP817X-1' -> 'DIP-4', '4N35' -> 'DIP-6'"""
        normalized = normalize(mpn)
        if not normalized:
            return ""

        head, _, option = normalized.partition("-")
        if option:
            option = option.replace("X", "")
            return PIN_CODES.get(option, option)

        for prefix, package in _DEFAULT_PACKAGES:
            if head.startswith(prefix):
                return package

        if head.startswith(("ISP", "ISQ", "ISD", "TLP")):
            match = _TRAILING_PIN_CODE_PATTERN.search(head)
            if match:
                return PIN_CODES[match.group(1)]
        return ""

    def extract_series(self, mpn: str | None) -> str:
        """Series name: 'ISP817A' -> 'ISP', '4N35' -> '4N35', 'MOC3021' -> 'MOC30xx'"""
        normalized = normalize(mpn)
        if not normalized:
            return ""

        match = _IS_PATTERN.match(normalized)
        if match:
            return match.group(1)

        match = _4N_PATTERN.match(normalized)
        if match:
            return f"4N{match.group(1)}" if match.group(1) in NAMED_4N_PARTS else "4N"

        if _6N_PATTERN.match(normalized):
            return normalized[:5] if normalized[:5] in NAMED_6N_PARTS else "6N"

        match = _MOC_PATTERN.match(normalized)
        if match:
            return f"MOC3{match.group(1)}xx" if match.group(1) in "012" else "MOC3xxx"

        if _TLP_PATTERN.match(normalized):
            return re.sub(r"[^A-Z0-9]", "", normalized[:6])

        if _H11_PATTERN.match(normalized):
            return normalized[:4]

        for pattern, series in _FAMILY_SERIES:
            if pattern.match(normalized):
                return series
        return ""

    def extract_ctr_grade(self, mpn: str | None) -> str:
        """CTR rank letter following the part number: 'ISP817C' -> 'C', '' if none"""
        normalized = normalize(mpn)
        for i in range(4, len(normalized)):
            if normalized[i] in "ABCD" and normalized[i - 1].isdigit():
                return normalized[i]
        return ""

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Check if mpn2 can replace mpn1.

        Packages must agree when both are known. Within the IS* range the
        replacement's CTR grade must be equal or higher (A < B < C < D).
        """
        a = normalize(mpn1)
        b = normalize(mpn2)
        if not a or not b:
            return False

        pkg1 = self.extract_package_code(a)
        pkg2 = self.extract_package_code(b)
        if pkg1 and pkg2 and pkg1 != pkg2:
            return False

        is1 = _IS_PATTERN.match(a)
        is2 = _IS_PATTERN.match(b)
        if is1 and is2:
            if is1.groups() != is2.groups():
                return False
            grade1 = self.extract_ctr_grade(a)
            grade2 = self.extract_ctr_grade(b)
            if grade1 and grade2:
                return grade2 >= grade1
            return True

        n1 = _4N_PATTERN.match(a)
        n2 = _4N_PATTERN.match(b)
        if n1 and n2:
            num1, num2 = n1.group(1), n2.group(1)
            if num1 == num2:
                return True
            return any(num1 in group and num2 in group for group in COMPATIBLE_4N_GROUPS)

        m1 = _MOC_PATTERN.match(a)
        m2 = _MOC_PATTERN.match(b)
        if m1 and m2:
            return m1.group(1) == m2.group(1) and m1.group(1) in "012"

        series1 = self.extract_series(a)
        return bool(series1) and series1 == self.extract_series(b)
