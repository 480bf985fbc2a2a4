"""Wheel geometry model."""

import math
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bikeshop.errors import MissingCollaborator


class Wheel(BaseModel):
    """Represents a bicycle wheel by its rim and tire size."""

    model_config = ConfigDict(frozen=True)

    rim: float = Field(..., ge=0.0, description="Rim diameter")
    tire: float = Field(..., ge=0.0, description="Tire width (height above the rim)")
    gear: Any = Field(
        default=None,
        description="Gear driving this wheel; any object exposing gear_inches_for()",
    )

    def diameter(self) -> float:
        """Outer diameter: the rim plus a tire on each side."""
        return self.rim + (self.tire * 2)

    def circumference(self) -> float:
        """Distance covered by one full wheel revolution."""
        return self.diameter() * math.pi

    def gear_inches(self) -> float:
        """Gear inches of the mounted gear, using this wheel's diameter.

        Raises:
            MissingCollaborator: If no gear is mounted on this wheel
        """
        if self.gear is None:
            raise MissingCollaborator("Wheel", "gear")
        return self.gear.gear_inches_for(self.diameter())


def wheelify(rows: Iterable[Sequence[float]]) -> list[Wheel]:
    """Build wheels from raw ``(rim, tire)`` rows.

    Args:
        rows: Pairs of rim and tire sizes, in that order

    Returns:
        One Wheel per row, in row order
    """
    return [Wheel(rim=row[0], tire=row[1]) for row in rows]


class WheelSizeTable:
    """Wheel sizes loaded from raw rows, accessed by name instead of index."""

    def __init__(self, rows: Iterable[Sequence[float]]):
        """Initialize the table.

        Args:
            rows: Pairs of rim and tire sizes (e.g. ``[[622, 20], [559, 40]]``)
        """
        self.wheels = wheelify(rows)

    def diameters(self) -> list[float]:
        return [self.diameter(wheel) for wheel in self.wheels]

    def diameter(self, wheel: Wheel) -> float:
        return wheel.diameter()

    def __len__(self) -> int:
        return len(self.wheels)
