"""ON Semiconductor (onsemi): discretes, regulators, op-amps and drivers."""

import re

from ..normalize import last_digit_index, normalize, trailing_letters
from ..packages import resolve_package_code
from ..types import ComponentType
from .base import ManufacturerHandler

_RL_PATTERN = re.compile(r"^RL20([1-7])")
_TWO_N_PATTERN = re.compile(r"^2N[0-9]{4}")
_ZENER_PATTERN = re.compile(r"^1N(47|52)[0-9]{2}")
# Part number up to the digits that fix polarity, voltage or rating:
# 'MC78L05ACP' -> 'MC78L05', 'NCP1117ST33T3G' -> 'NCP1117ST33', 'FQP30N06L' -> 'FQP30N06'
_CLASS_PATTERN = re.compile(
    r"^(MC7[89][LMH]?[0-9]{2}|NCP[0-9]+[A-Z]*[0-9]{2}|[0-9]?[A-Z]+[0-9]+(?:[NP][0-9]+)?)"
)

# RL20x index -> repetitive peak reverse voltage (V)
RL_VOLTAGES = {
    "1": 50,
    "2": 100,
    "3": 200,
    "4": 400,
    "5": 600,
    "6": 800,
    "7": 1000,
}

# Axial packages that share a footprint
_AXIAL_PACKAGES = frozenset({"DO-41", "DO-201"})

# Series prefixes in lookup order (MBRS before MBR, MC1458 before MC14...)
SERIES_PREFIXES = (
    # MOSFETs
    "NTD", "NTP", "FQP", "FDP",
    # IGBTs
    "FGH", "FGA", "NGTB",
    # BJTs
    "MMBT", "MPSA", "MPSH",
    # Regulators
    "NCP", "MC78", "MC79", "MC33",
    # Op-amps
    "MC1458", "MC324", "MC741",
    # LED and motor drivers
    "NCL", "CAT4", "LV8", "NCV77",
    # Diodes
    "MBRS", "MBR", "MUR", "RHRP",
)


class OnSemiHandler(ManufacturerHandler):
    name = "ON Semiconductor"

    PATTERNS = (
        # Op-amps
        (ComponentType.OPAMP, r"^MC1458"),
        (ComponentType.OPAMP_ON, r"^MC1458"),
        (ComponentType.OPAMP, r"^MC324"),
        (ComponentType.OPAMP_ON, r"^MC324"),
        (ComponentType.OPAMP, r"^MC741"),
        (ComponentType.OPAMP_ON, r"^MC741"),
        # Linear regulators: MC78xx positive, MC79xx negative, NCP LDOs
        (ComponentType.VOLTAGE_REGULATOR, r"^MC78[LMH]?[0-9]{2}"),
        (ComponentType.VOLTAGE_REGULATOR_LINEAR_ON, r"^MC78[LMH]?[0-9]{2}"),
        (ComponentType.VOLTAGE_REGULATOR, r"^MC79[LMH]?[0-9]{2}"),
        (ComponentType.VOLTAGE_REGULATOR_LINEAR_ON, r"^MC79[LMH]?[0-9]{2}"),
        (ComponentType.VOLTAGE_REGULATOR, r"^NCP[0-9]{3,4}"),
        (ComponentType.VOLTAGE_REGULATOR_LINEAR_ON, r"^NCP[0-9]{3,4}"),
        # Switching regulators
        (ComponentType.VOLTAGE_REGULATOR, r"^MC33[0-9]{2}"),
        (ComponentType.VOLTAGE_REGULATOR_SWITCHING_ON, r"^MC33[0-9]{2}"),
        # MOSFETs
        (ComponentType.MOSFET, r"^NTD[0-9]+"),
        (ComponentType.MOSFET_ONSEMI, r"^NTD[0-9]+"),
        (ComponentType.MOSFET, r"^NTP[0-9]+"),
        (ComponentType.MOSFET_ONSEMI, r"^NTP[0-9]+"),
        (ComponentType.MOSFET, r"^FQP[0-9]+"),
        (ComponentType.MOSFET_ONSEMI, r"^FQP[0-9]+"),
        (ComponentType.MOSFET, r"^FDP[0-9]+"),
        (ComponentType.MOSFET_ONSEMI, r"^FDP[0-9]+"),
        # Small-signal MOSFETs numbered in the 2N range
        (ComponentType.MOSFET, r"^2N700[0-2]"),
        (ComponentType.MOSFET_ONSEMI, r"^2N700[0-2]"),
        # IGBTs
        (ComponentType.IGBT, r"^(FGH|FGA|NGTB)[0-9]+"),
        (ComponentType.IGBT_ONSEMI, r"^(FGH|FGA|NGTB)[0-9]+"),
        # Bipolar transistors
        (ComponentType.TRANSISTOR, r"^2N(?!700[0-2])[0-9]{4}"),
        (ComponentType.TRANSISTOR, r"^MMBT[0-9]{4}"),
        (ComponentType.TRANSISTOR, r"^MPSA[0-9]{2}"),
        (ComponentType.TRANSISTOR, r"^MPSH[0-9]{2}"),
        # LED drivers
        (ComponentType.LED_DRIVER, r"^(NCL|CAT4)[0-9]+"),
        (ComponentType.LED_DRIVER_ONSEMI, r"^(NCL|CAT4)[0-9]+"),
        # Motor drivers
        (ComponentType.MOTOR_DRIVER, r"^(LV8|NCV77)[0-9]+"),
        (ComponentType.MOTOR_DRIVER_ONSEMI, r"^(LV8|NCV77)[0-9]+"),
        # Diodes: RL20x rectifiers, MUR ultrafast, RHRP hyperfast, MBR Schottky, zeners
        (ComponentType.DIODE, r"^RL20[1-7]"),
        (ComponentType.DIODE_ON, r"^RL20[1-7]"),
        (ComponentType.DIODE, r"^MUR[0-9]+"),
        (ComponentType.DIODE_ON, r"^MUR[0-9]+"),
        (ComponentType.DIODE, r"^RHRP[0-9]+"),
        (ComponentType.DIODE_ON, r"^RHRP[0-9]+"),
        (ComponentType.DIODE, r"^MBRS?[0-9]+"),
        (ComponentType.DIODE_ON, r"^MBRS?[0-9]+"),
        (ComponentType.DIODE, r"^1N47[0-9]{2}"),
        (ComponentType.DIODE_ON, r"^1N47[0-9]{2}"),
        (ComponentType.DIODE, r"^1N52[0-9]{2}"),
        (ComponentType.DIODE_ON, r"^1N52[0-9]{2}"),
    )

    PACKAGE_CODES = {
        "N": "DIP",
        "P": "DIP",
        "D": "SOIC",
        "M": "SOIC",
        "DW": "SOIC-Wide",
        "PW": "TSSOP",
        "DGK": "MSOP",
        "DBV": "SOT-23",
        "RL": "DO-41",
        "G": "DO-35",
        "T": "TO-220",
        "FP": "TO-220F",
    }

    def extract_package_code(self, mpn: str | None) -> str:
        """Package by family or suffix: 'RL207' -> 'DO-41', 'MC7805CT' -> 'TO-220'"""
        normalized = normalize(mpn)
        if not normalized:
            return ""

        if normalized.startswith("RL"):
            return "DO-41"
        if normalized.startswith("MBRS"):
            return "SMB"
        if normalized.startswith(("MUR", "MBR")):
            return "TO-220" if normalized.endswith("T") else "DO-41"

        if normalized.startswith(("NTD", "NTP", "FQP", "FDP")):
            last_digit = last_digit_index(normalized)
            if 0 <= last_digit < len(normalized) - 1:
                return normalized[last_digit + 1:]
            return "TO-220" if normalized.startswith(("FQP", "FDP")) else ""

        if normalized.startswith("2N7002"):
            return "SOT-23"
        if _TWO_N_PATTERN.match(normalized) or normalized.startswith(("MPSA", "MPSH")):
            return "TO-92"
        if normalized.startswith("MMBT"):
            return "SOT-23"

        if normalized.startswith(("MC", "NCP")):
            suffix = trailing_letters(normalized)
            if not suffix:
                return ""
            # Suffix letters may carry a grade prefix ('CT' = C grade, T package)
            return (
                resolve_package_code(suffix, self.PACKAGE_CODES)
                or resolve_package_code(suffix[-1], self.PACKAGE_CODES)
                or suffix
            )

        return ""

    def extract_series(self, mpn: str | None) -> str:
        """Family prefix: 'NTD4808N' -> 'NTD', 'MC7805CT' -> 'MC78', 'RL205' -> 'RL207'"""
        normalized = normalize(mpn)
        if not normalized:
            return ""
        if normalized.startswith("2N700"):
            return "2N7000"
        if _TWO_N_PATTERN.match(normalized):
            return "2N"
        if _RL_PATTERN.match(normalized):
            return "RL207"
        match = _ZENER_PATTERN.match(normalized)
        if match:
            return f"1N{match.group(1)}"
        for prefix in SERIES_PREFIXES:
            if normalized.startswith(prefix):
                return prefix
        return ""

    def rl_voltage(self, mpn: str | None) -> int:
        """Reverse voltage of an RL20x rectifier: 'RL207' -> 1000, 0 if not RL20x"""
        match = _RL_PATTERN.match(normalize(mpn))
        return RL_VOLTAGES[match.group(1)] if match else 0

    def electrical_class(self, mpn: str | None) -> str:
        """Part number without grade and package letters: '2N2222A' -> '2N2222', 'MC7812CT' -> 'MC7812'"""
        normalized = normalize(mpn)
        match = _CLASS_PATTERN.match(normalized)
        return match.group(1) if match else normalized

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Check if mpn1 can replace mpn2.

        RL20x rectifiers follow the voltage ladder: a higher-voltage part
        replaces any lower-voltage one. Otherwise the series and the
        electrical class must match, so NPN/PNP pairs, regulators of another
        output voltage and zeners of another voltage are rejected, and
        packages must be equal or both axial (DO-41/DO-201).
        """
        a = normalize(mpn1)
        b = normalize(mpn2)
        if not a or not b:
            return False

        if _RL_PATTERN.match(a) and _RL_PATTERN.match(b):
            return self.rl_voltage(a) >= self.rl_voltage(b)

        series = self.extract_series(a)
        if not series or series != self.extract_series(b):
            return False
        if self.electrical_class(a) != self.electrical_class(b):
            return False

        pkg1 = self.extract_package_code(a)
        pkg2 = self.extract_package_code(b)
        if pkg1 == pkg2:
            return True
        return pkg1 in _AXIAL_PACKAGES and pkg2 in _AXIAL_PACKAGES
