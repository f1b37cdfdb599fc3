"""Decoders for value codes embedded in part numbers.

Vendors encode component values positionally inside the MPN. This module
decodes the common schemes:

- EIA significant-digit codes: '103' -> 10 * 10^3, '1001' -> 100 * 10^1
- R-notation, where R marks the decimal point: '4R7' -> 4.7, 'R47' -> 0.47
- European multiplier notation: '4K7' -> 4700, '1M5' -> 1.5e6

All parsers return values in base SI units:
- Resistance: ohms
- Capacitance: farads
- Inductance: henries
"""

import re

from .config import VALUE_MATCH_TOLERANCE


# =============================================================================
# PRE-COMPILED REGEX PATTERNS
# =============================================================================

_EIA_PATTERN = re.compile(r"^(\d{2,3})(\d)$")
_R_NOTATION_PATTERN = re.compile(r"^(\d*)R(\d*)$", re.IGNORECASE)
_MULTIPLIER_NOTATION_PATTERN = re.compile(r"^(\d+)([KM])(\d*)$", re.IGNORECASE)

_NANO = 1e-9
_MICRO = 1e-6
_PICO = 1e-12

INDUCTANCE_UNITS = {
    "nH": _NANO,
    "uH": _MICRO,
}


# =============================================================================
# CODE PARSERS
# =============================================================================
# Each parser returns a float in base units, or None if the code is not valid.


def parse_eia_code(code: str | None) -> float | None:
    """Parse an EIA value code: '103' -> 10000, '1001' -> 1000, '4702' -> 47000"""
    if not code:
        return None
    match = _EIA_PATTERN.match(code.strip())
    if not match:
        return None
    return float(match.group(1)) * 10 ** int(match.group(2))


def parse_r_notation(code: str | None) -> float | None:
    """Parse R-notation: '4R7' -> 4.7, 'R47' -> 0.47, '0R010' -> 0.01, '10R' -> 10"""
    if not code:
        return None
    match = _R_NOTATION_PATTERN.match(code.strip())
    if not match:
        return None
    int_part, frac_part = match.group(1), match.group(2)
    if not int_part and not frac_part:
        return None
    return float(f"{int_part or '0'}.{frac_part or '0'}")


def parse_resistance_code(code: str | None) -> float | None:
    """Parse a resistance code in ohms: '1001' -> 1000, '4R7' -> 4.7, '4K7' -> 4700, '10K' -> 10000"""
    if not code:
        return None
    code = code.strip().upper()

    if "R" in code:
        return parse_r_notation(code)

    match = _MULTIPLIER_NOTATION_PATTERN.match(code)
    if match:
        frac = match.group(3) or "0"
        value = float(f"{match.group(1)}.{frac}")
        return value * (1_000 if match.group(2) == "K" else 1_000_000)

    return parse_eia_code(code)


def parse_capacitance_code(code: str | None) -> float | None:
    """Parse a capacitance code in farads: '104' -> 1e-7 (100nF), '1R0' -> 1e-12 (1pF)"""
    if not code:
        return None
    code = code.strip().upper()
    if "R" in code:
        value = parse_r_notation(code)
        return value * _PICO if value is not None else None
    if len(code) != 3:
        return None
    value = parse_eia_code(code)
    return value * _PICO if value is not None else None


def parse_inductance_code(code: str | None, base_unit: str = "uH") -> float | None:
    """Parse an inductance code in henries.

    Three-digit codes count in `base_unit` ('nH' or 'uH'); R-notation is
    always microhenries.

    Examples:
        ('222', 'nH') -> 2.2e-6
        ('100', 'uH') -> 1e-5
        ('R47', 'nH') -> 4.7e-7
    """
    if not code:
        return None
    code = code.strip().upper()
    if "R" in code:
        value = parse_r_notation(code)
        return value * _MICRO if value is not None else None
    if len(code) != 3:
        return None
    unit = INDUCTANCE_UNITS.get(base_unit)
    value = parse_eia_code(code)
    if unit is None or value is None:
        return None
    return value * unit


# =============================================================================
# FORMATTERS
# =============================================================================


def _trim(value: float) -> str:
    """'4.70' -> '4.7', '10.0' -> '10'"""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def format_resistance(ohms: float | None) -> str:
    """Format ohms for display: 1000 -> '1k', 4700 -> '4.7k', 1e6 -> '1M', 47 -> '47'"""
    if ohms is None:
        return ""
    if ohms >= 1_000_000:
        return f"{_trim(ohms / 1_000_000)}M"
    if ohms >= 1_000:
        return f"{_trim(ohms / 1_000)}k"
    return _trim(ohms)


def format_inductance(henries: float | None) -> str:
    """Format henries for display: 2.2e-6 -> '2.2uH', 4.7e-7 -> '470nH', 1e-3 -> '1.0mH'"""
    if henries is None:
        return ""
    micro = henries / _MICRO
    if micro >= 1000:
        return f"{micro / 1000:.1f}mH"
    if micro >= 1:
        return f"{micro:.1f}uH"
    return f"{henries / _NANO:.0f}nH"


def values_match(a: float | None, b: float | None, tolerance: float = VALUE_MATCH_TOLERANCE) -> bool:
    """Check if two decoded values agree within a relative tolerance (default 2%)."""
    if a is None or b is None:
        return False
    if a == 0 or b == 0:
        return a == b
    return abs(a - b) / max(abs(a), abs(b)) < tolerance
