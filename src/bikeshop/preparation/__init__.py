"""Trip preparation roles."""

from .base import PreparationTask, Preparer
from .coordinator import TripCoordinator
from .driver import Driver
from .mechanic import Mechanic

__all__ = [
    "Driver",
    "Mechanic",
    "PreparationTask",
    "Preparer",
    "TripCoordinator",
]
