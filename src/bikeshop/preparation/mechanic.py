"""Mechanic: readies the bicycles."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .base import PreparationTask

if TYPE_CHECKING:
    from bikeshop.models.trip import Bicycle, Trip

logger = logging.getLogger(__name__)


class Mechanic:
    """Tunes every bicycle going on a trip."""

    role = "mechanic"

    def __init__(self, name: str = "mechanic"):
        self.name = name
        self.completed: list[PreparationTask] = []

    def prepare_trip(self, trip: "Trip") -> list[PreparationTask]:
        return self.prepare_bicycles(trip.bicycles)

    def prepare_bicycles(self, bicycles: Iterable["Bicycle"]) -> list[PreparationTask]:
        return [self.prepare_bicycle(bicycle) for bicycle in bicycles]

    def prepare_bicycle(self, bicycle: "Bicycle") -> PreparationTask:
        """Tune a single bicycle.

        Bicycles with a mounted gear report their gear inches in the task
        detail; bicycles without one are tuned all the same.
        """
        detail = ""
        if bicycle.gear is not None and bicycle.gear.wheel is not None:
            detail = f"{bicycle.gear.gear_inches():.1f} gear inches"
        task = PreparationTask(self.role, "prepare_bicycle", bicycle.id, detail)
        logger.debug(f"{self.name} prepared bicycle {bicycle.id}")
        self.completed.append(task)
        return task
