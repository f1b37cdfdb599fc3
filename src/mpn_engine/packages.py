"""Package-code registry and package-family compatibility.

Maps the ordering-code suffixes vendors append to a part number
(e.g., the 'D' of 'LM358D', the 'DBV' of 'TLV70033DBV') to package names,
and groups those packages into families for substitution checks.
"""

import re


# =============================================================================
# SUFFIX -> PACKAGE TABLE
# =============================================================================

STANDARD_PACKAGE_CODES: dict[str, str] = {
    # Dual in-line
    "N": "DIP",
    "P": "DIP",
    "PU": "PDIP",
    # Quad flat / no-lead (Microchip-style suffixes)
    "AU": "TQFP",
    "MU": "QFN",
    "SU": "SOIC",
    "XU": "TSSOP",
    "CU": "WLCSP",
    # Small outline
    "D": "SOIC",
    "M": "SOIC",
    "R": "SOIC",
    "DW": "SOIC-Wide",
    "PW": "TSSOP",
    "DT": "TSSOP",
    "PT": "TSSOP",
    "DGK": "MSOP",
    "DBV": "SOT-23",
    "MP": "SOT-223",
    "U": "SOT-223",
    "DRL": "SOT-553",
    "DRV": "SON",
    # Through-hole power
    "T": "TO-220",
    "T3": "TO-220",
    "CT": "TO-220",
    "TA": "TO-220F",
    "FP": "TO-220F",
    "K": "TO-3",
    "H": "TO-39",
    "TU": "TO-251",
    "F": "TO-251",
    # Surface-mount power
    "KC": "TO-252",
    "KV": "TO-252",
    "S": "D2PAK",
    "L": "DPAK",
    # Diodes
    "RL": "DO-41",
    "G": "DO-35",
    # Generic mounting markers
    "SMD": "SMD",
    "THT": "THT",
}

POWER_PACKAGES = frozenset({
    "TO-220", "TO-220F", "TO-247", "TO-3", "TO-39", "TO-251", "TO-252",
    "TO-263", "D2PAK", "DPAK", "SOT-223",
})

# Pin-compatible families: parts in these packages are interchangeable
# footprints when the pin count agrees
_INTERCHANGEABLE_IC_PACKAGES = frozenset({"DIP", "SOIC", "TSSOP", "MSOP"})

# Package names written without the hyphen: SOT23 -> SOT-23, TO220 -> TO-220
_UNHYPHENATED_PACKAGE_PATTERN = re.compile(r"^(SOT|TO|DO|SOD|SC)(\d+)(.*)$")


# =============================================================================
# LOOKUPS
# =============================================================================


def resolve_package_code(code: str | None, vendor_codes: dict[str, str] | None = None) -> str:
    """Resolve a suffix to a package name: 'D' -> 'SOIC', 'DBV' -> 'SOT-23'

    A vendor table, when given, takes precedence over the standard one.
    Returns '' for unknown codes.
    """
    if not code:
        return ""
    code = code.strip().upper()
    if vendor_codes and code in vendor_codes:
        return vendor_codes[code]
    return STANDARD_PACKAGE_CODES.get(code, "")


def normalize_package_name(package: str | None) -> str:
    """Canonical package spelling: 'sot23' -> 'SOT-23', 'TO220F' -> 'TO-220F'"""
    if not package:
        return ""
    package = package.strip().upper()
    match = _UNHYPHENATED_PACKAGE_PATTERN.match(package)
    if match:
        return f"{match.group(1)}-{match.group(2)}{match.group(3)}"
    return package


def _family(package: str) -> str:
    """Base package name without pin count: 'SOIC-8' -> 'SOIC', 'TO-220F' -> 'TO-220F'"""
    package = normalize_package_name(package)
    if package.startswith(("TO-", "DO-", "SOT-", "SOD-", "SC-")):
        return package
    return package.split("-", 1)[0]


def is_power_package(package: str | None) -> bool:
    return bool(package) and normalize_package_name(package) in POWER_PACKAGES


def packages_compatible(package_a: str | None, package_b: str | None) -> bool:
    """Check if two packages can substitute for each other.

    Compatible when the packages are the same, both are power packages, or
    both belong to the DIP/SOIC/TSSOP/MSOP family.
    """
    if not package_a or not package_b:
        return False
    a = normalize_package_name(package_a)
    b = normalize_package_name(package_b)
    if a == b:
        return True
    if is_power_package(a) and is_power_package(b):
        return True
    return _family(a) in _INTERCHANGEABLE_IC_PACKAGES and _family(b) in _INTERCHANGEABLE_IC_PACKAGES


# =============================================================================
# CHIP SIZES
# =============================================================================

# Metric chip size (mm x 0.1) -> imperial size (inch x 0.01)
METRIC_TO_IMPERIAL: dict[str, str] = {
    "0603": "0201",
    "1005": "0402",
    "1608": "0603",
    "2012": "0805",
    "3216": "1206",
    "3225": "1210",
    "4516": "1806",
    "4520": "1808",
    "4532": "1812",
    "5025": "2010",
    "6332": "2512",
}


def imperial_size(metric: str | None) -> str:
    """Convert a metric chip size to imperial: '1608' -> '0603', '2012' -> '0805'

    Unknown sizes are returned unchanged.
    """
    if not metric:
        return ""
    return METRIC_TO_IMPERIAL.get(metric, metric)
