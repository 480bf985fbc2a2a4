from __future__ import annotations

import math
import unittest

from pydantic import ValidationError

from bikeshop.config import ROAD_WHEEL_SIZES
from bikeshop.models import Wheel, WheelSizeTable, wheelify


class TestWheel(unittest.TestCase):
    def test_diameter(self) -> None:
        self.assertEqual(Wheel(rim=26, tire=1.5).diameter(), 29)

    def test_circumference(self) -> None:
        wheel = Wheel(rim=26, tire=1.5)
        self.assertAlmostEqual(wheel.circumference(), 91.106186954104, places=9)
        self.assertAlmostEqual(wheel.circumference(), 29 * math.pi)

    def test_zero_sizes_allowed(self) -> None:
        wheel = Wheel(rim=0, tire=0)
        self.assertEqual(wheel.diameter(), 0)
        self.assertEqual(wheel.circumference(), 0)

    def test_negative_sizes_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Wheel(rim=-1, tire=1.5)
        with self.assertRaises(ValidationError):
            Wheel(rim=26, tire=-0.1)

    def test_frozen(self) -> None:
        wheel = Wheel(rim=26, tire=1.5)
        with self.assertRaises(ValidationError):
            wheel.rim = 27


class TestWheelSizeTable(unittest.TestCase):
    def test_diameters_in_row_order(self) -> None:
        table = WheelSizeTable([[622, 20], [622, 23], [559, 30], [559, 40]])
        self.assertEqual(table.diameters(), [662, 668, 619, 639])
        self.assertEqual(len(table), 4)

    def test_wheelify_names_fields(self) -> None:
        wheels = wheelify(ROAD_WHEEL_SIZES)
        self.assertEqual(wheels[0].rim, 622)
        self.assertEqual(wheels[0].tire, 20)
        self.assertEqual(wheels[-1].tire, 40)

    def test_empty_table(self) -> None:
        self.assertEqual(WheelSizeTable([]).diameters(), [])


if __name__ == "__main__":
    unittest.main()
