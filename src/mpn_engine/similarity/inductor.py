"""Inductor similarity for Coilcraft and Sunlord part numbers.

Decoding is delegated to the vendor handlers so the calculator and the
replacement rules read ordering codes the same way.
"""

from ..config import INDUCTOR_FAMILY_WEIGHT, INDUCTOR_VALUE_WEIGHT, PASSIVE_PACKAGE_WEIGHT
from ..handlers.coilcraft import CoilcraftHandler
from ..handlers.sunlord import SunlordHandler
from ..normalize import leading_letters
from ..parsers import values_match
from ..types import ComponentType
from .base import SimilarityCalculator


class InductorSimilarityCalculator(SimilarityCalculator):
    """Same series and size +0.3, same inductance +0.5, same family +0.2."""

    name = "inductor"
    APPLICABLE_TYPES = frozenset({ComponentType.INDUCTOR})
    CATEGORY = ComponentType.INDUCTOR

    def __init__(self):
        self._coilcraft = CoilcraftHandler()
        self._sunlord = SunlordHandler()

    def _decoder(self, mpn: str) -> CoilcraftHandler | SunlordHandler | None:
        for handler in (self._coilcraft, self._sunlord):
            if handler.extract_series(mpn):
                return handler
        return None

    def recognizes(self, normalized_mpn: str) -> bool:
        return self._decoder(normalized_mpn) is not None

    def family(self, mpn: str) -> str:
        """'XAL4020-222MEB' -> 'XAL', 'SWPA4020S4R7MT' -> 'SWPA'"""
        decoder = self._decoder(mpn)
        if decoder is self._coilcraft:
            return self._coilcraft.extract_family(mpn)
        if decoder is self._sunlord:
            return leading_letters(mpn)
        return ""

    def _score(self, a: str, b: str) -> float:
        decoder1, decoder2 = self._decoder(a), self._decoder(b)
        score = 0.0
        if decoder1.extract_series(a) == decoder2.extract_series(b):
            score += PASSIVE_PACKAGE_WEIGHT
        if values_match(decoder1.extract_inductance(a), decoder2.extract_inductance(b)):
            score += INDUCTOR_VALUE_WEIGHT
        if self.family(a) == self.family(b):
            score += INDUCTOR_FAMILY_WEIGHT
        return score
