"""Similarity calculator contract.

Every calculator scores a pair of MPNs in [0, 1]. The public entry point
is a template shared by all of them: normalize, reject what the
calculator does not recognize, order the pair canonically, short-circuit
identical parts, then hand off to the category-specific `_score`.
"""

import logging

from ..normalize import normalize
from ..registry import PatternRegistry
from ..types import ComponentType

logger = logging.getLogger(__name__)


class SimilarityCalculator:
    """Base class for category similarity calculators."""

    name: str = ""

    # Generic types this calculator scores; qualified children are covered via base_type
    APPLICABLE_TYPES: frozenset[ComponentType] = frozenset()

    # Generic type reported for MPNs that only this calculator recognizes
    CATEGORY: ComponentType | None = None

    def is_applicable(self, component_type: ComponentType | None) -> bool:
        if component_type is None:
            return False
        return component_type.base_type in self.APPLICABLE_TYPES

    def recognizes(self, normalized_mpn: str) -> bool:
        """Whether a normalized MPN looks like a part this calculator understands."""
        return bool(normalized_mpn)

    def calculate_similarity(
        self,
        mpn1: str | None,
        mpn2: str | None,
        registry: PatternRegistry | None = None,
    ) -> float:
        """Score two MPNs in [0, 1].

        Args:
            mpn1: First part number (any case, may be None)
            mpn2: Second part number
            registry: Pattern registry of the calling dispatcher, if any

        Returns:
            0.0 if either side is empty or not recognized, 1.0 for identical
            parts, otherwise the category score clamped to [0, 1]. The result
            does not depend on argument order.
        """
        a = normalize(mpn1)
        b = normalize(mpn2)
        if not a or not b:
            return 0.0
        if not (self.recognizes(a) and self.recognizes(b)):
            logger.debug(f"{self.name}: not comparable: {a} vs {b}")
            return 0.0
        if a > b:
            a, b = b, a
        if a == b:
            return 1.0

        score = self._score(a, b)
        logger.debug(f"{self.name}: {a} vs {b} -> {score:.3f}")
        return max(0.0, min(1.0, score))

    def _score(self, a: str, b: str) -> float:
        """Category score for two distinct, recognized, normalized MPNs (a < b)."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
