#!/usr/bin/env python3
"""Trip preparation example.

A mechanic, a coordinator and a driver each prepare the same trip without
the trip knowing which is which.

Usage:
    python examples/prepare_trip.py [--export]
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bikeshop.models import Bicycle, Customer, Gear, Trip, Vehicle, Wheel
from bikeshop.output import ConsoleOutput, Exporter
from bikeshop.preparation import Driver, Mechanic, TripCoordinator


def create_trip() -> Trip:
    """Create a small weekend tour."""
    road_wheel = Wheel(rim=622, tire=25)
    bicycles = [
        Bicycle(id="road-01", gear=Gear(chainring=50, cog=17, wheel=road_wheel)),
        Bicycle(id="road-02", gear=Gear(chainring=34, cog=28, wheel=road_wheel)),
        Bicycle(id="mtb-01", style="mountain"),
    ]
    customers = [
        Customer(name="Ada Byron"),
        Customer(name="Grace Hopper", dietary_notes="vegetarian"),
    ]
    return Trip(
        bicycles=bicycles,
        customers=customers,
        vehicle=Vehicle(registration="BK-1234", fuel_capacity=70, water_capacity=50),
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    trip = create_trip()
    tasks = trip.prepare([Mechanic(), TripCoordinator(), Driver()])
    ConsoleOutput.print_preparation_tasks(tasks)

    if "--export" in sys.argv:
        path = Exporter().export_tasks_json(tasks)
        print(f"Exported to {path}")


if __name__ == "__main__":
    main()
