"""Handler dispatch: routes an MPN to the vendor rule set that recognizes it.

The dispatcher owns a PatternRegistry. Construction is the only build
phase: every handler registers its rules in the order given, then the
registry is frozen and all further operations are pure reads.
"""

import logging
import threading
from typing import Iterable

from .config import (
    DEFAULT_SAME_BASE_TYPE_WEIGHT,
    DEFAULT_SAME_MANUFACTURER_WEIGHT,
    DEFAULT_SAME_SERIES_WEIGHT,
)
from .handlers import ManufacturerHandler, default_handlers
from .normalize import clean_token
from .normalize import normalize as normalize_mpn
from .registry import PatternRegistry
from .similarity import SimilarityCalculator, default_calculators
from .types import ComponentType

logger = logging.getLogger(__name__)


class MPNDispatcher:
    """Classification, extraction and similarity across all registered handlers."""

    def __init__(
        self,
        handlers: Iterable[ManufacturerHandler] | None = None,
        calculators: Iterable[SimilarityCalculator] | None = None,
    ):
        self._handlers = list(handlers) if handlers is not None else default_handlers()
        self._calculators = list(calculators) if calculators is not None else default_calculators()
        self.registry = PatternRegistry()

        self._by_type: dict[ComponentType, set[ManufacturerHandler]] = {}
        for handler in self._handlers:
            added = handler.initialize_patterns(self.registry)
            if added == 0:
                logger.warning(f"Handler {handler.name or type(handler).__name__} registered no new patterns")
            for component_type in handler.supported_types():
                self._by_type.setdefault(component_type, set()).add(handler)
        self.registry.freeze()

        logger.info(
            f"MPN dispatcher ready: {len(self._handlers)} handlers, "
            f"{len(self.registry)} patterns, {len(self._by_type)} component types"
        )

    # =========================================================================
    # HANDLER LOOKUP
    # =========================================================================

    def handlers_for_type(self, component_type: ComponentType | None) -> frozenset[ManufacturerHandler]:
        """Handlers that declare the type among their supported types."""
        if component_type is None:
            return frozenset()
        return frozenset(self._by_type.get(component_type, ()))

    def all_handlers(self) -> tuple[ManufacturerHandler, ...]:
        return tuple(self._handlers)

    def find_handler(
        self,
        mpn: str | None,
        component_type: ComponentType | None = None,
    ) -> ManufacturerHandler | None:
        """First handler, in registration order, that recognizes the MPN.

        Args:
            mpn: Part number to look up
            component_type: Restrict to handlers matching this type; any type when None

        Returns:
            The matching handler, or None. When several vendors' patterns
            match the same string, which one wins is not part of the contract.
        """
        normalized = normalize_mpn(mpn)
        if not normalized:
            return None
        for handler in self._handlers:
            if component_type is None:
                if handler.matches_any(normalized, self.registry):
                    return handler
            elif handler.matches(normalized, component_type, self.registry):
                return handler
        return None

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    def classify(self, mpn: str | None, component_type: ComponentType | None) -> bool:
        """True if any handler classifies the MPN as the type (or a qualified child of it)."""
        if component_type is None:
            return False
        normalized = normalize_mpn(mpn)
        if not normalized:
            return False
        return any(handler.matches(normalized, component_type, self.registry) for handler in self._handlers)

    def matching_types(self, mpn: str | None) -> frozenset[ComponentType]:
        """Every type some handler confirms for the MPN, generic parents included."""
        normalized = normalize_mpn(mpn)
        if not normalized:
            return frozenset()
        found: set[ComponentType] = set()
        for handler in self._handlers:
            for component_type in handler.supported_types():
                if self.registry.matches_for(handler.name, normalized, component_type):
                    found.add(component_type)
                    found.add(component_type.base_type)
        return frozenset(found)

    def component_type(self, mpn: str | None) -> ComponentType | None:
        """Most specific type for the MPN.

        Uses the first handler that recognizes the MPN, preferring a
        manufacturer-qualified type over a generic one, each in the order
        the handler declares its patterns. MPNs no handler claims fall back
        to the base category of the first calculator that recognizes them.
        """
        normalized = normalize_mpn(mpn)
        if not normalized:
            return None

        handler = self.find_handler(normalized)
        if handler is not None:
            matched = []
            for component_type, _ in handler.PATTERNS:
                if component_type not in matched and self.registry.matches_for(
                    handler.name, normalized, component_type
                ):
                    matched.append(component_type)
            for component_type in matched:
                if component_type.is_manufacturer_specific:
                    return component_type
            if matched:
                return matched[0]

        for calculator in self._calculators:
            if calculator.CATEGORY is not None and calculator.recognizes(normalized):
                return calculator.CATEGORY
        return None

    # =========================================================================
    # EXTRACTION AND REPLACEMENT
    # =========================================================================

    def extract_package_code(self, mpn: str | None) -> str:
        handler = self.find_handler(mpn)
        return handler.extract_package_code(mpn) if handler else ""

    def get_package_code(self, mpn: str | None) -> str:
        """Alias of extract_package_code."""
        return self.extract_package_code(mpn)

    def extract_series(self, mpn: str | None) -> str:
        handler = self.find_handler(mpn)
        return handler.extract_series(mpn) if handler else ""

    def is_official_replacement(self, mpn1: str | None, mpn2: str | None) -> bool:
        """Vendor replacement rule of the handler that recognizes mpn1."""
        if not normalize_mpn(mpn1) or not normalize_mpn(mpn2):
            return False
        handler = self.find_handler(mpn1)
        if handler is None:
            return False
        return handler.is_official_replacement(mpn1, mpn2)

    # =========================================================================
    # SIMILARITY
    # =========================================================================

    def calculate_similarity(self, mpn1: str | None, mpn2: str | None) -> float:
        """Cross-vendor similarity in [0, 1].

        The first calculator applicable to either part's type that returns a
        positive score decides. Otherwise the score is a blend of shared base
        type (+0.4), shared manufacturer (+0.3) and shared series (+0.2).
        """
        a = normalize_mpn(mpn1)
        b = normalize_mpn(mpn2)
        if not a or not b:
            return 0.0
        if a == b:
            return 1.0

        type1 = self.component_type(a)
        type2 = self.component_type(b)
        if type1 is None or type2 is None:
            logger.debug(f"Unknown component type: {a} -> {type1}, {b} -> {type2}")
            return 0.0

        for calculator in self._calculators:
            if not (calculator.is_applicable(type1) or calculator.is_applicable(type2)):
                continue
            score = calculator.calculate_similarity(a, b, self.registry)
            if score > 0:
                logger.debug(f"{calculator.name} scored {a} vs {b}: {score:.3f}")
                return score

        score = 0.0
        if type1.base_type is type2.base_type:
            score += DEFAULT_SAME_BASE_TYPE_WEIGHT
        handler1 = self.find_handler(a)
        if handler1 is not None and handler1 is self.find_handler(b):
            score += DEFAULT_SAME_MANUFACTURER_WEIGHT
        series1 = self.extract_series(a)
        if series1 and series1 == self.extract_series(b):
            score += DEFAULT_SAME_SERIES_WEIGHT
        return min(score, 1.0)

    # =========================================================================
    # TEXT
    # =========================================================================

    def find_mpns_in_text(self, text: str | None) -> list[str]:
        """Recognized MPNs in free text, in order of appearance, without duplicates.

        Example:
            'Replace P/N:BMA456 with BMA400, see GBLC05C.' -> ['BMA456', 'BMA400', 'GBLC05C']
        """
        if not text:
            return []
        found: list[str] = []
        for word in text.split():
            token = clean_token(word)
            if token and token not in found and self.find_handler(token) is not None:
                found.append(token)
        return found

    def normalize(self, mpn: str | None) -> str:
        return normalize_mpn(mpn)


# Global instance with thread safety
_default: MPNDispatcher | None = None
_default_lock = threading.Lock()


def default_dispatcher() -> MPNDispatcher:
    """Get or create the shared dispatcher over the default handlers."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = MPNDispatcher()
    return _default
