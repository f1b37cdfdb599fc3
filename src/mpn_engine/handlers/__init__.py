"""Manufacturer rule sets."""

from .base import ManufacturerHandler
from .bosch import BoschHandler
from .coilcraft import CoilcraftHandler
from .epson import EpsonHandler
from .isocom import IsocomHandler
from .onsemi import OnSemiHandler
from .protek import ProTekHandler
from .realtek import RealtekHandler
from .sunlord import SunlordHandler
from .vikingtech import VikingTechHandler

# Registration order; also the order find_handler tries them in
HANDLER_CLASSES: tuple[type[ManufacturerHandler], ...] = (
    BoschHandler,
    VikingTechHandler,
    ProTekHandler,
    OnSemiHandler,
    IsocomHandler,
    CoilcraftHandler,
    SunlordHandler,
    RealtekHandler,
    EpsonHandler,
)


def default_handlers() -> list[ManufacturerHandler]:
    """Fresh instances of every shipped handler, in registration order."""
    return [cls() for cls in HANDLER_CLASSES]


__all__ = [
    "ManufacturerHandler",
    "BoschHandler",
    "CoilcraftHandler",
    "EpsonHandler",
    "IsocomHandler",
    "OnSemiHandler",
    "ProTekHandler",
    "RealtekHandler",
    "SunlordHandler",
    "VikingTechHandler",
    "HANDLER_CLASSES",
    "default_handlers",
]
