"""Data models for bicycles, gearing and trips."""

from .gear import Gear, GearConfig, build_gear
from .trip import Bicycle, Customer, Trip, Vehicle
from .wheel import Wheel, WheelSizeTable, wheelify

__all__ = [
    "Bicycle",
    "Customer",
    "Gear",
    "GearConfig",
    "Trip",
    "Vehicle",
    "Wheel",
    "WheelSizeTable",
    "build_gear",
    "wheelify",
]
