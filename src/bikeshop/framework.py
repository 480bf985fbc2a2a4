"""Adapter around a gear class whose constructor we do not control."""

from typing import Any

from bikeshop.errors import MissingCollaborator
from bikeshop.models.gear import GearConfig


class FrameworkGear:
    """Gear as shipped by an outside framework: positional arguments only."""

    def __init__(self, chainring: int, cog: int, wheel: Any):
        self.chainring = chainring
        self.cog = cog
        self.wheel = wheel

    def ratio(self) -> float:
        return self.chainring / float(self.cog)

    def gear_inches(self) -> float:
        return self.ratio() * self.diameter()

    def diameter(self) -> float:
        if self.wheel is None:
            raise MissingCollaborator("FrameworkGear", "wheel")
        return self.wheel.diameter()


class GearWrapper:
    """Builds framework gears from named arguments."""

    @staticmethod
    def gear(**fields: Any) -> FrameworkGear:
        """Create a FrameworkGear without depending on argument order.

        Args:
            **fields: ``chainring``, ``cog`` and ``wheel``; missing tooth
                counts fall back to the GearConfig defaults

        Returns:
            FrameworkGear instance

        Raises:
            pydantic.ValidationError: On unknown or invalid settings
        """
        config = GearConfig(**fields)
        return FrameworkGear(config.chainring, config.cog, config.wheel)
