"""Manufacturer handler contract.

A handler is one vendor's rule set. Most of its behaviour is data on the
class: a PATTERNS table of (ComponentType, regex) pairs registered into a
PatternRegistry, and a PACKAGE_CODES table for ordering-code suffixes.
Subclasses override the extraction and replacement hooks where the
vendor's naming scheme needs more than the defaults.

Every operation is total: unrecognized or empty input yields "" or False,
never an exception.
"""

import logging
import re

from ..normalize import first_digit_index, last_digit_index, normalize
from ..packages import packages_compatible, resolve_package_code
from ..registry import PatternRegistry
from ..types import ComponentType, is_satisfied_by

logger = logging.getLogger(__name__)

_SERIES_PATTERN = re.compile(r"^([A-Z]*\d+)")


class ManufacturerHandler:
    """Base class for vendor rule sets."""

    name: str = ""

    # (ComponentType, regex) pairs; a type may appear more than once
    PATTERNS: tuple[tuple[ComponentType, str], ...] = ()

    # Vendor ordering-code suffix -> package name; falls back to the standard table
    PACKAGE_CODES: dict[str, str] = {}

    # =========================================================================
    # REGISTRATION AND MATCHING
    # =========================================================================

    def initialize_patterns(self, registry: PatternRegistry) -> int:
        """Register this vendor's rules; returns how many were new.

        Safe to call repeatedly against the same registry.
        """
        added = 0
        for component_type, pattern in self.PATTERNS:
            if registry.register(component_type, pattern, owner=self.name):
                added += 1
        return added

    def supported_types(self) -> frozenset[ComponentType]:
        return frozenset(component_type for component_type, _ in self.PATTERNS)

    def manufacturer_types(self) -> frozenset[ComponentType]:
        """Reserved for cross-vendor tagging; no handler populates it."""
        return frozenset()

    def matches(
        self,
        mpn: str | None,
        component_type: ComponentType | None,
        registry: PatternRegistry,
    ) -> bool:
        """Check if the MPN is in this vendor's catalog and satisfies the type.

        A request for a generic type (ACCELEROMETER) is answered by this
        handler's rules for any qualified child (ACCELEROMETER_BOSCH).
        """
        if component_type is None:
            return False
        normalized = normalize(mpn)
        if not normalized:
            return False
        return any(
            registry.matches_for(self.name, normalized, t)
            for t in self.supported_types()
            if is_satisfied_by(component_type, t)
        )

    def matches_any(self, mpn: str | None, registry: PatternRegistry) -> bool:
        """True if any of this handler's rules matches the MPN."""
        normalized = normalize(mpn)
        if not normalized:
            return False
        return any(registry.matches_for(self.name, normalized, t) for t in self.supported_types())

    # =========================================================================
    # EXTRACTION
    # =========================================================================

    def extract_package_code(self, mpn: str | None) -> str:
        """Package from the ordering-code suffix: 'LM358-D' / 'LM358D' -> 'SOIC'

        Uses the text after the last hyphen if present, otherwise the letters
        after the last digit, resolved through PACKAGE_CODES and then the
        standard package table.
        """
        normalized = normalize(mpn)
        if not normalized:
            return ""
        if "-" in normalized:
            code = normalized.rsplit("-", 1)[1]
        else:
            last_digit = last_digit_index(normalized)
            if last_digit < 0:
                return ""
            code = normalized[last_digit + 1:]
        return resolve_package_code(code, self.PACKAGE_CODES)

    def extract_series(self, mpn: str | None) -> str:
        """Product family: the prefix through the first digit run, 'LM358DR' -> 'LM358'"""
        normalized = normalize(mpn)
        if not normalized or first_digit_index(normalized) < 0:
            return ""
        match = _SERIES_PATTERN.match(normalized)
        return match.group(1) if match else ""

    # =========================================================================
    # REPLACEMENT
    # =========================================================================

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Check if mpn2 can officially replace mpn1.

        The default requires the same non-empty series and, when both
        package codes are known, compatible packages. Not necessarily
        symmetric in subclasses.
        """
        a = normalize(mpn1)
        b = normalize(mpn2)
        if not a or not b:
            return False
        series = self.extract_series(a)
        if not series or series != self.extract_series(b):
            return False
        pkg_a = self.extract_package_code(a)
        pkg_b = self.extract_package_code(b)
        if pkg_a and pkg_b:
            return packages_compatible(pkg_a, pkg_b)
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
