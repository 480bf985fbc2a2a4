#!/usr/bin/env python3
"""Gear and wheel example.

Prints wheel geometry, a few gear setups and a full gear chart.

Usage:
    python examples/gear_inches.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bikeshop.analysis import gear_chart
from bikeshop.config import ROAD_WHEEL_SIZES
from bikeshop.framework import GearWrapper
from bikeshop.models import Gear, GearConfig, Wheel, WheelSizeTable
from bikeshop.output import ConsoleOutput, Exporter


def main() -> None:
    wheel = Wheel(rim=26, tire=1.5)
    ConsoleOutput.print_wheel(wheel)

    gears = [
        Gear(chainring=52, cog=11, wheel=wheel),
        Gear(chainring=52, cog=11),
        Gear.from_config(GearConfig(wheel=wheel)),
    ]
    ConsoleOutput.print_gear_summary(gears)

    wrapped = GearWrapper.gear(chainring=52, cog=11, wheel=wheel)
    print(f"\nFramework gear: {wrapped.gear_inches():.3f} gear inches")

    table = WheelSizeTable(ROAD_WHEEL_SIZES)
    print(f"Road wheel diameters (mm): {table.diameters()}")

    chart = gear_chart([34, 39, 50, 53], [11, 13, 15, 17, 19, 21, 25, 28], wheel)
    ConsoleOutput.print_gear_chart(chart)

    if "--export" in sys.argv:
        path = Exporter().export_gear_chart_csv(chart)
        print(f"Exported to {path}")


if __name__ == "__main__":
    main()
