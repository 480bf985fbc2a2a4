"""Gear ratio model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bikeshop.config import DEFAULT_CHAINRING, DEFAULT_COG
from bikeshop.errors import MissingCollaborator

from .wheel import Wheel


class GearConfig(BaseModel):
    """Named, optional settings for building a Gear."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    chainring: int = Field(default=DEFAULT_CHAINRING, gt=0, description="Chainring tooth count")
    cog: int = Field(default=DEFAULT_COG, gt=0, description="Cog tooth count")
    wheel: Any = Field(default=None, description="Any object exposing diameter()")


class Gear(BaseModel):
    """Represents a chainring/cog combination, optionally mounted on a wheel."""

    model_config = ConfigDict(frozen=True)

    chainring: int = Field(..., ge=0, description="Chainring tooth count")
    cog: int = Field(..., description="Cog tooth count (never zero)")
    wheel: Any = Field(
        default=None,
        description="Wheel or any other object exposing diameter()",
    )

    @field_validator("cog")
    @classmethod
    def _cog_not_zero(cls, value: int) -> int:
        if value == 0:
            raise ValueError("cog must not be zero")
        return value

    @classmethod
    def from_config(cls, config: GearConfig) -> "Gear":
        """Create a gear from an explicit configuration."""
        return cls(chainring=config.chainring, cog=config.cog, wheel=config.wheel)

    @classmethod
    def with_wheel_size(cls, chainring: int, cog: int, rim: float, tire: float) -> "Gear":
        """Create a gear and build its Wheel from raw rim and tire sizes."""
        return cls(chainring=chainring, cog=cog, wheel=Wheel(rim=rim, tire=tire))

    def ratio(self) -> float:
        """Chainring teeth per cog tooth.

        Always a float, even when both tooth counts are integers.
        """
        return self.chainring / float(self.cog)

    def gear_inches(self) -> float:
        """Ratio scaled by the wheel diameter.

        Raises:
            MissingCollaborator: If no wheel is associated with this gear
        """
        return self.ratio() * self.diameter()

    def gear_inches_for(self, diameter: float) -> float:
        """Gear inches for a diameter supplied by the caller."""
        return self.ratio() * diameter

    def diameter(self) -> float:
        """Diameter of the associated wheel."""
        if self.wheel is None:
            raise MissingCollaborator("Gear", "wheel")
        return self.wheel.diameter()


def build_gear(**fields: Any) -> Gear:
    """Create a gear from keyword settings, filling in defaults.

    Args:
        **fields: Any of ``chainring``, ``cog`` and ``wheel``

    Returns:
        Gear built from a GearConfig
    """
    return Gear.from_config(GearConfig(**fields))
