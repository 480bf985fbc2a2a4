"""Driver: readies the support vehicle."""

import logging
from typing import TYPE_CHECKING

from bikeshop.errors import MissingCollaborator

from .base import PreparationTask

if TYPE_CHECKING:
    from bikeshop.models.trip import Trip, Vehicle

logger = logging.getLogger(__name__)


class Driver:
    """Fuels the support vehicle and fills its water tank."""

    role = "driver"

    def __init__(self, name: str = "driver"):
        self.name = name
        self.completed: list[PreparationTask] = []

    def prepare_trip(self, trip: "Trip") -> list[PreparationTask]:
        """Get the trip's vehicle ready.

        Raises:
            MissingCollaborator: If the trip has no vehicle
        """
        vehicle = trip.vehicle
        if vehicle is None:
            raise MissingCollaborator("Trip", "vehicle")
        return [self.gas_up(vehicle), self.fill_water_tank(vehicle)]

    def gas_up(self, vehicle: "Vehicle") -> PreparationTask:
        return self._record("gas_up", vehicle, f"{vehicle.fuel_capacity:g} l fuel")

    def fill_water_tank(self, vehicle: "Vehicle") -> PreparationTask:
        return self._record("fill_water_tank", vehicle, f"{vehicle.water_capacity:g} l water")

    def _record(self, action: str, vehicle: "Vehicle", detail: str) -> PreparationTask:
        task = PreparationTask(self.role, action, vehicle.registration, detail)
        logger.debug(f"{self.name}: {action} on {vehicle.registration}")
        self.completed.append(task)
        return task
