"""MEMS and environmental sensor similarity.

Each part is assigned a sensing kind (temperature, accelerometer, IMU,
pressure, ...). Different kinds never substitute for each other. Within a
kind, packaging variants of one part and curated equivalents are HIGH,
register-compatible successors and supersets are MEDIUM, anything else is
LOW: sensor families are rarely drop-in replacements for each other.
"""

import re

from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY
from ..types import ComponentType
from .base import SimilarityCalculator

# (kind, pattern) checked in order; first match wins
_KIND_RULES = (
    ("TEMPERATURE", re.compile(r"^(LM35(?![0-9])|DS18[BS]20|TMP[0-9]|MAX318[0-9])")),
    ("ACCELEROMETER", re.compile(r"^(ADXL[0-9]|MMA[0-9]|LIS[23][A-Z]|BMA[0-9]|SMB[0-9])")),
    ("GYROSCOPE", re.compile(r"^(L3GD[0-9]|ITG[0-9]|BMG[0-9])")),
    ("IMU", re.compile(r"^(MPU[0-9]|ICM[0-9]|LSM[0-9]|BMI[0-9])")),
    ("MAGNETOMETER", re.compile(r"^(BMM[0-9]|HMC[0-9]|QMC[0-9])")),
    ("HUMIDITY", re.compile(r"^(SHT[0-9]|HIH[0-9]|HDC[0-9]|AM23[0-9])")),
    ("PRESSURE", re.compile(r"^(BMP[0-9]|MS56[0-9]|LPS[0-9])")),
    ("ENVIRONMENTAL", re.compile(r"^BME[0-9]")),
)

# Part name without grade, package and reel suffixes
_BASE_PATTERN = re.compile(r"^(DS18[BS]20|LIS[23][A-Z]{2}[0-9]*|[A-Z]+[0-9]+)")

# Interchangeable parts (base names)
EQUIVALENT_GROUPS = (
    frozenset({"DS18B20", "MAX31820"}),
    frozenset({"LM35", "LM35A", "LM35C", "LM35D"}),
    frozenset({"SHT30", "SHT31"}),
    frozenset({"SHT31", "SHT35"}),
    frozenset({"HIH6130", "HIH6131"}),
    frozenset({"MS5611", "MS5607"}),
)

# Successors and supersets: same footprint, overlapping register map
COMPATIBLE_PAIRS = (
    frozenset({"BMP280", "BME280"}),
    frozenset({"BMP388", "BMP390"}),
    frozenset({"BMA455", "BMA456"}),
    frozenset({"BMI160", "BMI270"}),
    frozenset({"BME680", "BME688"}),
    frozenset({"HDC1080", "HDC2080"}),
    frozenset({"MPU6050", "MPU6500"}),
)

# Pressure sensors and combined environmental sensors share the pressure kind
_KIND_ALIASES = {"ENVIRONMENTAL": "PRESSURE"}

_LM35_PATTERN = re.compile(r"^LM35[ACD]?(?![0-9])")


class SensorSimilarityCalculator(SimilarityCalculator):
    name = "sensor"
    APPLICABLE_TYPES = frozenset({
        ComponentType.SENSOR,
        ComponentType.ACCELEROMETER,
        ComponentType.GYROSCOPE,
        ComponentType.MAGNETOMETER,
        ComponentType.PRESSURE_SENSOR,
        ComponentType.HUMIDITY_SENSOR,
        ComponentType.TEMPERATURE_SENSOR,
    })
    CATEGORY = ComponentType.SENSOR

    def recognizes(self, normalized_mpn: str) -> bool:
        return bool(self.kind(normalized_mpn))

    def kind(self, mpn: str) -> str:
        """'BMA456' -> 'ACCELEROMETER', 'DS18B20+' -> 'TEMPERATURE', '' if unknown"""
        for kind, pattern in _KIND_RULES:
            if pattern.match(mpn):
                return kind
        return ""

    def base_part(self, mpn: str) -> str:
        """'BMA456FB' -> 'BMA456', 'LIS3DHTR' -> 'LIS3DH', 'LM35DZ' -> 'LM35D'"""
        match = _LM35_PATTERN.match(mpn)
        if match:
            return match.group(0)
        match = _BASE_PATTERN.match(mpn)
        return match.group(0) if match else mpn

    def _score(self, a: str, b: str) -> float:
        kind1, kind2 = self.kind(a), self.kind(b)
        if kind1 != kind2 and _KIND_ALIASES.get(kind1, kind1) != _KIND_ALIASES.get(kind2, kind2):
            return LOW_SIMILARITY

        base1, base2 = self.base_part(a), self.base_part(b)
        if base1 == base2:
            return HIGH_SIMILARITY
        pair = frozenset({base1, base2})
        if any(pair <= group for group in EQUIVALENT_GROUPS):
            return HIGH_SIMILARITY
        if pair in COMPATIBLE_PAIRS:
            return MEDIUM_SIMILARITY
        return LOW_SIMILARITY
