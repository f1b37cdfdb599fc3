"""ProTek Devices TVS and ESD protection arrays."""

import re

from ..normalize import normalize
from ..types import ComponentType
from .base import ManufacturerHandler

_SERIES_PATTERN = re.compile(r"^(GBLC|TVS|PSM|ULC|SMD|SP|LC)\d")
_TVS_PATTERN = re.compile(r"^TVS(\d{3})(\d{2})?")
_GBLC_PATTERN = re.compile(r"^GBLC(\d{2})")
_PSM_PATTERN = re.compile(r"^PSM(\d+)")
_ULC_PATTERN = re.compile(r"^ULC(\d{2})(\d{2})")
_SMD_PATTERN = re.compile(r"^SMD(\d{2})(\d{2})")
_SP_PATTERN = re.compile(r"^SP(\d{2,3})")
_LC_PATTERN = re.compile(r"^LC(\d{2})")
_GBLC_BIDIRECTIONAL_PATTERN = re.compile(r"^GBLC\d{2}C")

# Voltage codes written as two digits: 03 -> 3.3V
_LOW_VOLTAGE_CODES = {"03": "3.3", "05": "5"}

# SMD power code (hundreds of watts) -> DO-214 package
_SMD_POWER_PACKAGES = {
    "05": "SMA",
    "10": "SMB",
    "15": "SMC",
    "30": "SMC",
}

# Typical peak pulse power (W) for fixed-rating families
_FIXED_POWER_RATINGS = {
    "GBLC": 200,
    "PSM": 400,
    "ULC": 150,
}


class ProTekHandler(ManufacturerHandler):
    name = "ProTek Devices"

    PATTERNS = (
        (ComponentType.DIODE, r"^TVS[0-9]{5}"),
        (ComponentType.DIODE_TVS_PROTEK, r"^TVS[0-9]{5}"),
        (ComponentType.DIODE, r"^GBLC[0-9]{2}C"),
        (ComponentType.DIODE_TVS_PROTEK, r"^GBLC[0-9]{2}C"),
        (ComponentType.DIODE, r"^PSM[0-9]+"),
        (ComponentType.DIODE_TVS_PROTEK, r"^PSM[0-9]+"),
        (ComponentType.DIODE, r"^ULC[0-9]{4}"),
        (ComponentType.DIODE_TVS_PROTEK, r"^ULC[0-9]{4}"),
        (ComponentType.DIODE, r"^SMD[0-9]{4}"),
        (ComponentType.DIODE_TVS_PROTEK, r"^SMD[0-9]{4}"),
        (ComponentType.DIODE, r"^SP[0-9]{2,3}"),
        (ComponentType.DIODE, r"^LC[0-9]{2}"),
    )

    def extract_series(self, mpn: str | None) -> str:
        """Family prefix: 'GBLC05C' -> 'GBLC', 'SMD1512' -> 'SMD'"""
        normalized = normalize(mpn)
        match = _SERIES_PATTERN.match(normalized)
        if match:
            return match.group(1)
        # These families are recognizable without a following digit
        for prefix in ("GBLC", "TVS", "PSM", "ULC"):
            if normalized.startswith(prefix):
                return prefix
        return ""

    def extract_package_code(self, mpn: str | None) -> str:
        """Package by family: 'GBLC05C' -> 'SOT-23', 'SMD1512' -> 'SMC'"""
        normalized = normalize(mpn)
        series = self.extract_series(normalized)
        if series == "TVS":
            return "SMB"
        if series == "PSM":
            return "SOIC-8"
        if series == "ULC":
            match = _ULC_PATTERN.match(normalized)
            if match and match.group(2) == "12":
                return "SSOP-16"
            if match and match.group(2) == "24":
                return "SSOP-28"
            return "SOT-23"
        if series == "SMD":
            return _SMD_POWER_PACKAGES.get(normalized[3:5], "SMB")
        if series in ("GBLC", "SP", "LC"):
            return "SOT-23"
        return ""

    def extract_voltage(self, mpn: str | None) -> str:
        """Working voltage as text: 'GBLC03C' -> '3.3', 'TVS05012' -> '5.0', 'PSM712' -> '7'"""
        normalized = normalize(mpn)
        series = self.extract_series(normalized)

        if series == "TVS":
            match = _TVS_PATTERN.match(normalized)
            if not match:
                return ""
            code = int(match.group(1))
            return f"{code / 10:.1f}" if code < 100 else str(code // 10)

        if series in ("GBLC", "LC"):
            match = (_GBLC_PATTERN if series == "GBLC" else _LC_PATTERN).match(normalized)
            if not match:
                return ""
            code = match.group(1)
            return _LOW_VOLTAGE_CODES.get(code, str(int(code)))

        if series == "PSM":
            match = _PSM_PATTERN.match(normalized)
            if not match:
                return ""
            model = match.group(1)
            if model == "712":
                return "7"
            for prefix, voltage in (("05", "5"), ("12", "12"), ("24", "24")):
                if model.startswith(prefix):
                    return voltage
            return model

        if series == "ULC":
            match = _ULC_PATTERN.match(normalized)
            return str(int(match.group(1))) if match else ""

        if series == "SMD":
            match = _SMD_PATTERN.match(normalized)
            return str(int(match.group(2))) if match else ""

        if series == "SP":
            match = _SP_PATTERN.match(normalized)
            return match.group(1) if match else ""

        return ""

    def is_bidirectional(self, mpn: str | None) -> bool:
        normalized = normalize(mpn)
        if _GBLC_BIDIRECTIONAL_PATTERN.match(normalized):
            return True
        return normalized.startswith(("PSM", "ULC"))

    def is_lead_free(self, mpn: str | None) -> bool:
        return "-LF" in normalize(mpn)

    def power_rating(self, mpn: str | None) -> int:
        """Peak pulse power in watts: 'TVS05050' -> 500, 'SMD1512' -> 1500, 0 if unknown"""
        normalized = normalize(mpn)
        series = self.extract_series(normalized)
        if series == "TVS":
            match = _TVS_PATTERN.match(normalized)
            if match and match.group(2):
                return int(match.group(2)) * 10
            return 0
        if series == "SMD":
            match = _SMD_PATTERN.match(normalized)
            return int(match.group(1)) * 100 if match else 0
        return _FIXED_POWER_RATINGS.get(series, 0)

    def line_count(self, mpn: str | None) -> int:
        """Protected lines: 'ULC0524' -> 24, 'PSM712' -> 2, 0 for unrecognized input"""
        normalized = normalize(mpn)
        series = self.extract_series(normalized)
        if not series:
            return 0
        if series == "ULC":
            match = _ULC_PATTERN.match(normalized)
            return int(match.group(2)) if match else 1
        if series == "PSM":
            return 2
        return 1

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Same series, same non-empty working voltage, same directionality."""
        series1 = self.extract_series(mpn1)
        if not series1 or series1 != self.extract_series(mpn2):
            return False
        voltage1 = self.extract_voltage(mpn1)
        if not voltage1 or voltage1 != self.extract_voltage(mpn2):
            return False
        return self.is_bidirectional(mpn1) == self.is_bidirectional(mpn2)
