"""Trip coordinator: feeds the customers."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .base import PreparationTask

if TYPE_CHECKING:
    from bikeshop.models.trip import Customer, Trip

logger = logging.getLogger(__name__)


class TripCoordinator:
    """Buys food for everyone booked on a trip."""

    role = "coordinator"

    def __init__(self, name: str = "coordinator"):
        self.name = name
        self.completed: list[PreparationTask] = []

    def prepare_trip(self, trip: "Trip") -> list[PreparationTask]:
        return self.buy_food(trip.customers)

    def buy_food(self, customers: Iterable["Customer"]) -> list[PreparationTask]:
        tasks = [
            PreparationTask(self.role, "buy_food", customer.name, customer.dietary_notes or "")
            for customer in customers
        ]
        logger.debug(f"{self.name} bought food for {len(tasks)} customers")
        self.completed.extend(tasks)
        return tasks
