"""Bicycle gearing models and trip preparation."""

from .errors import BikeshopError, MissingCollaborator
from .models import Bicycle, Customer, Gear, GearConfig, Trip, Vehicle, Wheel

__all__ = [
    "Bicycle",
    "BikeshopError",
    "Customer",
    "Gear",
    "GearConfig",
    "MissingCollaborator",
    "Trip",
    "Vehicle",
    "Wheel",
]
