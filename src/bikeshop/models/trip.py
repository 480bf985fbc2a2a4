"""Trip model and the things a trip carries."""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from bikeshop.preparation.base import PreparationTask, Preparer

from .gear import Gear

logger = logging.getLogger(__name__)


class Bicycle(BaseModel):
    """A rental bicycle assigned to a trip."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Bicycle identifier (e.g., 'road-07')")
    style: str = Field(default="road", description="Bicycle style")
    gear: Gear | None = Field(default=None, description="Current gear setup")


class Customer(BaseModel):
    """A customer booked on a trip."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Full name")
    dietary_notes: str | None = Field(default=None, description="Food restrictions, if any")


class Vehicle(BaseModel):
    """The support vehicle following a trip."""

    model_config = ConfigDict(frozen=True)

    registration: str = Field(..., description="Licence plate")
    fuel_capacity: float = Field(default=60.0, gt=0, description="Fuel tank size in litres")
    water_capacity: float = Field(default=40.0, gt=0, description="Water tank size in litres")


class Trip(BaseModel):
    """A bicycle tour: who rides, on what, followed by which vehicle."""

    model_config = ConfigDict(frozen=True)

    bicycles: tuple[Bicycle, ...] = Field(default=(), description="Bicycles on the trip")
    customers: tuple[Customer, ...] = Field(default=(), description="Customers on the trip")
    vehicle: Vehicle | None = Field(default=None, description="Support vehicle")

    def prepare(self, preparers: Iterable[Preparer]) -> list[PreparationTask]:
        """Ask every preparer to get this trip ready.

        Each preparer is called once, in the order given, and decides for
        itself which parts of the trip it needs.

        Args:
            preparers: Objects exposing ``prepare_trip(trip)``

        Returns:
            Tasks reported by all preparers, in call order
        """
        tasks: list[PreparationTask] = []
        count = 0
        for preparer in preparers:
            logger.debug(f"Calling preparer {count}: {preparer!r}")
            tasks.extend(preparer.prepare_trip(self) or [])
            count += 1
        logger.info(f"Trip prepared by {count} preparers ({len(tasks)} tasks)")
        return tasks
