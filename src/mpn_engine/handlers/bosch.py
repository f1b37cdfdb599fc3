"""Bosch Sensortec MEMS sensors (BMA, BMI, BMP, BME, ...)."""

import re

from ..normalize import normalize, trailing_letters
from ..types import ComponentType
from .base import ManufacturerHandler

_SERIES_PATTERN = re.compile(r"^([A-Z]+)(\d+)")

# Temperature grades, from widest to narrowest:
# A automotive (-40..125C), H high (-40..105C), T standard (-40..85C), L low (-40..65C)
_TEMP_GRADES = ("T", "H", "L", "A")

# Interface variants written as hyphen suffixes
_INTERFACES = {
    "-I2C": "I2C",
    "-SPI": "SPI",
    "-ANA": "ANALOG",
}

# Successor/predecessor pairs that share a footprint and register map subset
COMPATIBLE_SERIES = frozenset({
    frozenset({"BMA456", "BMA455"}),
    frozenset({"BMI270", "BMI160"}),
    frozenset({"BMP390", "BMP388"}),
    frozenset({"BME680", "BME688"}),
})


class BoschHandler(ManufacturerHandler):
    name = "Bosch"

    PATTERNS = (
        # Accelerometers: BMA digital, SMB analog
        (ComponentType.ACCELEROMETER, r"^BMA[0-9]"),
        (ComponentType.ACCELEROMETER_BOSCH, r"^BMA[0-9]"),
        (ComponentType.ACCELEROMETER, r"^SMB[0-9]"),
        (ComponentType.ACCELEROMETER_BOSCH, r"^SMB[0-9]"),
        # Gyroscopes
        (ComponentType.GYROSCOPE, r"^BMG[0-9]"),
        (ComponentType.GYROSCOPE_BOSCH, r"^BMG[0-9]"),
        # IMUs (accelerometer + gyroscope)
        (ComponentType.SENSOR, r"^BMI[0-9]"),
        (ComponentType.IMU_BOSCH, r"^BMI[0-9]"),
        (ComponentType.ACCELEROMETER_BOSCH, r"^BMI[0-9]"),
        (ComponentType.GYROSCOPE_BOSCH, r"^BMI[0-9]"),
        # Magnetometers
        (ComponentType.MAGNETOMETER, r"^BMM[0-9]"),
        (ComponentType.MAGNETOMETER_BOSCH, r"^BMM[0-9]"),
        # Barometric pressure
        (ComponentType.PRESSURE_SENSOR, r"^BMP[0-9]"),
        (ComponentType.PRESSURE_SENSOR_BOSCH, r"^BMP[0-9]"),
        # Environmental: humidity + pressure + temperature
        (ComponentType.HUMIDITY_SENSOR, r"^BME[0-9]"),
        (ComponentType.HUMIDITY_SENSOR_BOSCH, r"^BME[0-9]"),
        (ComponentType.PRESSURE_SENSOR_BOSCH, r"^BME[0-9]"),
        (ComponentType.TEMPERATURE_SENSOR, r"^BME[0-9]"),
        (ComponentType.TEMPERATURE_SENSOR_BOSCH, r"^BME[0-9]"),
        # Gas sensors
        (ComponentType.SENSOR, r"^BME6[89][0-9]"),
        (ComponentType.GAS_SENSOR_BOSCH, r"^BME6[89][0-9]"),
    )

    PACKAGE_CODES = {
        "FB": "LGA",
        "FL": "LGA",      # Ultra-small LGA
        "MI": "LGA-METAL",
        "TR": "LGA",      # Tape & reel
        "SG": "SMD",
        "WB": "WLCSP",
        "CP": "CSP",
    }

    def extract_package_code(self, mpn: str | None) -> str:
        """Package from the letters after the part number: 'BMA456FB' -> 'LGA'"""
        normalized = normalize(mpn)
        if not normalized:
            return ""
        main, _, rest = normalized.partition("-")
        suffix = trailing_letters(main)
        if suffix == main:
            return ""
        if not suffix and rest in self.PACKAGE_CODES:
            suffix = rest
        return self.PACKAGE_CODES.get(suffix, suffix)

    def extract_series(self, mpn: str | None) -> str:
        """Letter prefix plus digits, up to six characters: 'BMA456FB' -> 'BMA456'"""
        normalized = normalize(mpn)
        match = _SERIES_PATTERN.match(normalized)
        if not match:
            return ""
        letters, digits = match.groups()
        return letters + digits[:max(1, 6 - len(letters))]

    def extract_interface(self, mpn: str | None) -> str:
        normalized = normalize(mpn)
        for marker, interface in _INTERFACES.items():
            if marker in normalized:
                return interface
        return ""

    def extract_temp_grade(self, mpn: str | None) -> str:
        normalized = normalize(mpn)
        for grade in _TEMP_GRADES:
            if f"-{grade}" in normalized:
                return grade
        return ""

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Check if mpn2 can replace mpn1.

        Within a series the interface must agree and mpn1's temperature
        grade must cover mpn2's; across series only the known successor
        pairs are compatible.
        """
        a = normalize(mpn1)
        b = normalize(mpn2)
        if not a or not b:
            return False
        series1 = self.extract_series(a)
        series2 = self.extract_series(b)
        if not series1 or not series2:
            return False

        if series1 == series2:
            interface1 = self.extract_interface(a)
            interface2 = self.extract_interface(b)
            if interface1 and interface2 and interface1 != interface2:
                return False
            return _temp_grades_compatible(self.extract_temp_grade(a), self.extract_temp_grade(b))

        return frozenset({series1, series2}) in COMPATIBLE_SERIES


def _temp_grades_compatible(grade1: str, grade2: str) -> bool:
    if grade1 == grade2 or not grade1 or not grade2:
        return True
    if grade1 == "A":
        return True
    if grade1 == "H":
        return grade2 != "A"
    if grade1 == "T":
        return grade2 == "L"
    return False
