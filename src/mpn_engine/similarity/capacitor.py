"""MLCC similarity for Murata GRM and Samsung CL part numbers."""

import re
from dataclasses import dataclass

from ..config import CAPACITOR_VALUE_WEIGHT, CAPACITOR_VOLTAGE_WEIGHT, PASSIVE_PACKAGE_WEIGHT
from ..parsers import parse_capacitance_code, values_match
from ..types import ComponentType
from .base import SimilarityCalculator

# GRM188R71H104KA93D: size 18, thickness 8, dielectric R7, voltage 1H, value 104, tolerance K
_MURATA_PATTERN = re.compile(
    r"^GRM(?P<size>\d{2})[0-9A-Z](?P<dielectric>[A-Z0-9]{2})(?P<voltage>\d[A-Z])(?P<value>[0-9R]{3})"
)
# CL10B104KB8NNNC: size 10, dielectric B, value 104, tolerance K, voltage B
_SAMSUNG_PATTERN = re.compile(
    r"^CL(?P<size>\d{2})(?P<dielectric>[A-Z])(?P<value>[0-9R]{3})[A-Z](?P<voltage>[A-Z])"
)

MURATA_SIZES = {
    "03": "0201",
    "15": "0402",
    "18": "0603",
    "21": "0805",
    "31": "1206",
    "32": "1210",
    "43": "1812",
    "55": "2220",
}

SAMSUNG_SIZES = {
    "03": "0201",
    "05": "0402",
    "10": "0603",
    "21": "0805",
    "31": "1206",
    "32": "1210",
    "43": "1812",
}

MURATA_VOLTAGES = {
    "0J": 6.3,
    "1A": 10,
    "1C": 16,
    "1E": 25,
    "1V": 35,
    "1H": 50,
    "2A": 100,
    "2D": 200,
    "2E": 250,
    "2J": 630,
    "3A": 1000,
}

SAMSUNG_VOLTAGES = {
    "R": 4,
    "Q": 6.3,
    "P": 10,
    "O": 16,
    "A": 25,
    "L": 35,
    "B": 50,
    "C": 100,
    "D": 200,
    "E": 250,
    "G": 500,
    "H": 630,
    "I": 1000,
}


@dataclass(frozen=True)
class CapacitorSpec:
    size: str
    farads: float | None
    volts: float | None


def parse_capacitor(mpn: str) -> CapacitorSpec | None:
    """Decode a normalized MLCC MPN: 'GRM188R71H104KA93D' -> CapacitorSpec('0603', 1e-7, 50)"""
    match = _MURATA_PATTERN.match(mpn)
    if match:
        return CapacitorSpec(
            size=MURATA_SIZES.get(match.group("size"), ""),
            farads=parse_capacitance_code(match.group("value")),
            volts=MURATA_VOLTAGES.get(match.group("voltage")),
        )
    match = _SAMSUNG_PATTERN.match(mpn)
    if match:
        return CapacitorSpec(
            size=SAMSUNG_SIZES.get(match.group("size"), ""),
            farads=parse_capacitance_code(match.group("value")),
            volts=SAMSUNG_VOLTAGES.get(match.group("voltage")),
        )
    return None


class CapacitorSimilarityCalculator(SimilarityCalculator):
    """Package, capacitance and voltage rating, normalized by what both parts encode.

    A rating difference earns half the voltage weight: the higher-rated
    part can always replace the lower one.
    """

    name = "capacitor"
    APPLICABLE_TYPES = frozenset({ComponentType.CAPACITOR})
    CATEGORY = ComponentType.CAPACITOR

    def recognizes(self, normalized_mpn: str) -> bool:
        return parse_capacitor(normalized_mpn) is not None

    def _score(self, a: str, b: str) -> float:
        spec1, spec2 = parse_capacitor(a), parse_capacitor(b)
        achieved = 0.0
        achievable = 0.0

        if spec1.size and spec2.size:
            achievable += PASSIVE_PACKAGE_WEIGHT
            if spec1.size == spec2.size:
                achieved += PASSIVE_PACKAGE_WEIGHT

        if spec1.farads is not None and spec2.farads is not None:
            achievable += CAPACITOR_VALUE_WEIGHT
            if values_match(spec1.farads, spec2.farads):
                achieved += CAPACITOR_VALUE_WEIGHT

        if spec1.volts is not None and spec2.volts is not None:
            achievable += CAPACITOR_VOLTAGE_WEIGHT
            if spec1.volts == spec2.volts:
                achieved += CAPACITOR_VOLTAGE_WEIGHT
            else:
                achieved += CAPACITOR_VOLTAGE_WEIGHT / 2

        return achieved / achievable if achievable else 0.0
