"""Power MOSFET similarity.

Channel polarity is decided first (N vs P -> LOW). Curated cross-vendor
equivalents score HIGH. With known ratings, a part that meets or exceeds
the other's drain-source voltage and drain current counts as compatible on
both ratings, since a stronger part can stand in for a weaker one.
Unknown parts fall back to a lexical score scaled into [LOW, MEDIUM].
"""

import re
from dataclasses import dataclass

from ..config import HIGH_SIMILARITY, LOW_SIMILARITY, MEDIUM_SIMILARITY, VOLTAGE_TOLERANCE
from ..types import ComponentType
from .base import SimilarityCalculator
from .lexical import lexical_similarity

_MOSFET_PATTERN = re.compile(r"^((IRF|IRL|FQ[PNS]|FDS|FDP|STF|STP|SI|BS|FD|NTD|NTB|NTP|NDS|NDF)\d|2N700[0-2])")
_BASE_PATTERN = re.compile(r"^(IRF|IRL|STF|STP|FQP|FQN|FDS|FDP|NTD|NTP|2N)([0-9N]+)")
_P_CHANNEL_PATTERN = re.compile(r"^(IRF9|IRFR9|IRL9)|\dP\d")

# Rating comparisons (fractions)
RATING_TOLERANCE = VOLTAGE_TOLERANCE
RDS_ON_RATIO = 1.5

# Contributions of the characteristic comparison
BASE_SCORE = 0.3
VOLTAGE_SCORE = 0.25
CURRENT_SCORE = 0.25
RDS_ON_SCORE = 0.1
PACKAGE_SCORE = 0.1

SMALL_POWER_PACKAGES = frozenset({"SOT-223", "DPAK", "TO-252"})

EQUIVALENT_GROUPS = (
    frozenset({"IRF530", "IRF530N", "STF530", "STF530N", "FQP30N06"}),
    frozenset({"IRF540", "IRF540N", "STF540", "STF540N", "FQP50N06"}),
    frozenset({"IRF640", "IRF640N", "STF640", "STF640N", "FQP44N10"}),
)


@dataclass(frozen=True)
class MosfetCharacteristics:
    vds: float  # Drain-source voltage (V)
    id: float  # Continuous drain current (A)
    rds_on: float  # On resistance (ohm)
    package: str


KNOWN_CHARACTERISTICS = {
    "IRF530": MosfetCharacteristics(100, 14, 0.16, "TO-220"),
    "STF530": MosfetCharacteristics(100, 14, 0.16, "TO-220"),
    "IRF530N": MosfetCharacteristics(100, 17, 0.11, "TO-220"),
    "STF530N": MosfetCharacteristics(100, 17, 0.11, "TO-220"),
    "FQP30N06": MosfetCharacteristics(60, 30, 0.095, "TO-220"),
    "IRF540": MosfetCharacteristics(100, 28, 0.077, "TO-220"),
    "STF540": MosfetCharacteristics(100, 28, 0.077, "TO-220"),
    "IRF540N": MosfetCharacteristics(100, 33, 0.052, "TO-220"),
    "STF540N": MosfetCharacteristics(100, 33, 0.052, "TO-220"),
    "FQP50N06": MosfetCharacteristics(60, 50, 0.040, "TO-220"),
    "IRF640": MosfetCharacteristics(200, 18, 0.150, "TO-220"),
    "STF640": MosfetCharacteristics(200, 18, 0.150, "TO-220"),
    "FQP44N10": MosfetCharacteristics(100, 44, 0.085, "TO-220"),
}


def _strip_n(part: str) -> str:
    return part[:-1] if part.endswith("N") else part


def _close(a: float, b: float) -> bool:
    return min(a, b) >= (1 - RATING_TOLERANCE) * max(a, b)


def _packages_compatible(p1: str, p2: str) -> bool:
    if p1 == p2:
        return True
    if p1.startswith("TO-220") and p2.startswith("TO-220"):
        return True
    return p1 in SMALL_POWER_PACKAGES and p2 in SMALL_POWER_PACKAGES


class MosfetSimilarityCalculator(SimilarityCalculator):
    name = "mosfet"
    APPLICABLE_TYPES = frozenset({ComponentType.MOSFET})
    CATEGORY = ComponentType.MOSFET

    def recognizes(self, normalized_mpn: str) -> bool:
        return bool(_MOSFET_PATTERN.match(normalized_mpn))

    def is_n_channel(self, mpn: str) -> bool:
        """IRF9xxx and 'nnPnn' ratings codes are P-channel; everything else is N."""
        return not _P_CHANNEL_PATTERN.search(mpn)

    def base_part(self, mpn: str) -> str:
        """Prefix with rating digits: 'IRF540NPBF' -> 'IRF540N', 'FQP30N06L' -> 'FQP30N06'"""
        match = _BASE_PATTERN.match(mpn)
        return match.group(0) if match else mpn

    def characteristics(self, mpn: str) -> MosfetCharacteristics | None:
        base = self.base_part(mpn)
        for key in (mpn, base, _strip_n(base)):
            if key in KNOWN_CHARACTERISTICS:
                return KNOWN_CHARACTERISTICS[key]
        return None

    def are_known_equivalents(self, a: str, b: str) -> bool:
        base1, base2 = _strip_n(self.base_part(a)), _strip_n(self.base_part(b))
        for group in EQUIVALENT_GROUPS:
            stripped = {_strip_n(part) for part in group}
            if base1 in stripped and base2 in stripped:
                return True
        return False

    def _characteristics_score(self, c1: MosfetCharacteristics, c2: MosfetCharacteristics) -> float:
        score = BASE_SCORE
        # One part meeting both of the other's ratings is a drop-in upgrade
        dominates = (c1.vds >= c2.vds and c1.id >= c2.id) or (c2.vds >= c1.vds and c2.id >= c1.id)
        if dominates or _close(c1.vds, c2.vds):
            score += VOLTAGE_SCORE
        if dominates or _close(c1.id, c2.id):
            score += CURRENT_SCORE
        if max(c1.rds_on, c2.rds_on) <= RDS_ON_RATIO * min(c1.rds_on, c2.rds_on):
            score += RDS_ON_SCORE
        if _packages_compatible(c1.package, c2.package):
            score += PACKAGE_SCORE
        # Only curated equivalents and identical parts go above HIGH
        return min(score, HIGH_SIMILARITY)

    def _score(self, a: str, b: str) -> float:
        if self.is_n_channel(a) != self.is_n_channel(b):
            return LOW_SIMILARITY
        if self.base_part(a) == self.base_part(b) or self.are_known_equivalents(a, b):
            return HIGH_SIMILARITY

        chars1, chars2 = self.characteristics(a), self.characteristics(b)
        if chars1 is not None and chars2 is not None:
            return self._characteristics_score(chars1, chars2)

        return LOW_SIMILARITY + (MEDIUM_SIMILARITY - LOW_SIMILARITY) * lexical_similarity(a, b)
