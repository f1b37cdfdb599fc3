"""Manufacturer part number classification and compatibility engine.

Given a part number string, answers:
- what kind of component it is and which vendor rule set recognizes it
- its package code and product series
- whether one part is a vendor-sanctioned replacement for another
- how similar two parts are, as a score in [0, 1]

The functions below delegate to a shared dispatcher built on first use.
"""

from .dispatcher import MPNDispatcher, default_dispatcher
from .errors import InvalidPatternError, MPNEngineError, RegistryFrozenError
from .handlers import ManufacturerHandler
from .normalize import normalize
from .registry import PatternRegistry, PatternRule
from .similarity import SimilarityCalculator
from .types import ComponentType


def classify(mpn: str | None, component_type: ComponentType | None) -> bool:
    return default_dispatcher().classify(mpn, component_type)


def find_handler(mpn: str | None) -> ManufacturerHandler | None:
    return default_dispatcher().find_handler(mpn)


def extract_package_code(mpn: str | None) -> str:
    return default_dispatcher().extract_package_code(mpn)


def extract_series(mpn: str | None) -> str:
    return default_dispatcher().extract_series(mpn)


def is_official_replacement(mpn_a: str | None, mpn_b: str | None) -> bool:
    return default_dispatcher().is_official_replacement(mpn_a, mpn_b)


def similarity(mpn_a: str | None, mpn_b: str | None) -> float:
    return default_dispatcher().calculate_similarity(mpn_a, mpn_b)


__all__ = [
    # Operations
    "classify",
    "find_handler",
    "extract_package_code",
    "extract_series",
    "is_official_replacement",
    "similarity",
    "normalize",
    # Core types
    "ComponentType",
    "ManufacturerHandler",
    "MPNDispatcher",
    "PatternRegistry",
    "PatternRule",
    "SimilarityCalculator",
    "default_dispatcher",
    # Errors
    "MPNEngineError",
    "InvalidPatternError",
    "RegistryFrozenError",
]
