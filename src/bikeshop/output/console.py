"""Console output formatting."""

import math

import pandas as pd

from bikeshop.models import Gear, Wheel
from bikeshop.preparation import PreparationTask


class ConsoleOutput:
    """Formats gear data and preparation tasks for console display."""

    @staticmethod
    def print_wheel(wheel: Wheel) -> None:
        """Print a wheel's geometry.

        Args:
            wheel: Wheel to describe
        """
        print(f"Wheel rim={wheel.rim:g} tire={wheel.tire:g}")
        print(f"  Diameter:      {wheel.diameter():.3f}")
        print(f"  Circumference: {wheel.circumference():.3f}")

    @staticmethod
    def print_gear_summary(gears: list[Gear]) -> None:
        """Print ratio and gear inches for each gear.

        Args:
            gears: Gears to list, in display order
        """
        print("\n" + "=" * 50)
        print("GEARS")
        print("=" * 50)
        print(f"{'Chainring':<10} {'Cog':<6} {'Ratio':<10} {'Gear inches':<12}")
        print("-" * 50)

        for gear in gears:
            inches = f"{gear.gear_inches():.2f}" if gear.wheel is not None else "-"
            print(
                f"{gear.chainring:<10} "
                f"{gear.cog:<6} "
                f"{gear.ratio():<10.3f} "
                f"{inches:<12}"
            )

        print("=" * 50)

    @staticmethod
    def print_gear_chart(chart: pd.DataFrame) -> None:
        """Print a chainring x cog gear-inch chart.

        Args:
            chart: Output of ``gear_chart``
        """
        width = 8 + 8 * len(chart.columns)
        print("\n" + "=" * width)
        print("GEAR CHART (gear inches)")
        print("=" * width)
        print(f"{'':<8}" + "".join(f"{cog:>8}" for cog in chart.columns))
        print("-" * width)

        for chainring, row in chart.iterrows():
            cells = "".join(
                f"{value:>8.1f}" if not math.isnan(value) else f"{'-':>8}"
                for value in row
            )
            print(f"{chainring:<8}{cells}")

        print("=" * width)

    @staticmethod
    def print_preparation_tasks(tasks: list[PreparationTask]) -> None:
        """Print tasks reported while preparing a trip.

        Args:
            tasks: Tasks in the order they were done
        """
        print("\n" + "=" * 70)
        print("TRIP PREPARATION")
        print("=" * 70)
        print(f"{'#':<4} {'Role':<13} {'Action':<17} {'Subject':<15} {'Detail':<20}")
        print("-" * 70)

        for i, task in enumerate(tasks, 1):
            print(
                f"{i:<4} "
                f"{task.role:<13} "
                f"{task.action:<17} "
                f"{task.subject:<15} "
                f"{task.detail:<20}"
            )

        print("=" * 70)
