"""Category similarity calculators."""

from .base import SimilarityCalculator
from .capacitor import CapacitorSimilarityCalculator
from .diode import DiodeSimilarityCalculator
from .inductor import InductorSimilarityCalculator
from .lexical import lexical_similarity
from .mosfet import MosfetSimilarityCalculator
from .opamp import OpAmpSimilarityCalculator
from .regulator import VoltageRegulatorSimilarityCalculator
from .resistor import ResistorSimilarityCalculator
from .sensor import SensorSimilarityCalculator
from .transistor import TransistorSimilarityCalculator


def default_calculators() -> list[SimilarityCalculator]:
    """Calculators in the order the dispatcher consults them."""
    return [
        MosfetSimilarityCalculator(),
        TransistorSimilarityCalculator(),
        DiodeSimilarityCalculator(),
        ResistorSimilarityCalculator(),
        CapacitorSimilarityCalculator(),
        InductorSimilarityCalculator(),
        VoltageRegulatorSimilarityCalculator(),
        OpAmpSimilarityCalculator(),
        SensorSimilarityCalculator(),
    ]


__all__ = [
    "SimilarityCalculator",
    "CapacitorSimilarityCalculator",
    "DiodeSimilarityCalculator",
    "InductorSimilarityCalculator",
    "MosfetSimilarityCalculator",
    "OpAmpSimilarityCalculator",
    "ResistorSimilarityCalculator",
    "SensorSimilarityCalculator",
    "TransistorSimilarityCalculator",
    "VoltageRegulatorSimilarityCalculator",
    "default_calculators",
    "lexical_similarity",
]
