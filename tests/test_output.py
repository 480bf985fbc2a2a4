from __future__ import annotations

import io
import json
import math
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

import pandas as pd

from bikeshop.analysis import gear_chart, summarize_gears
from bikeshop.models import Gear, Wheel
from bikeshop.output import ConsoleOutput, Exporter
from bikeshop.preparation import PreparationTask


class TestGearChart(unittest.TestCase):
    def test_chart_values(self) -> None:
        chart = gear_chart([52, 39], [11, 13], Wheel(rim=26, tire=1.5))
        self.assertEqual(list(chart.index), [52, 39])
        self.assertEqual(list(chart.columns), [11, 13])
        self.assertAlmostEqual(chart.loc[52, 11], 137.090909090909, places=9)
        self.assertAlmostEqual(chart.loc[39, 13], 39 / 13 * 29)

    def test_zero_cog(self) -> None:
        with self.assertRaises(ValueError):
            gear_chart([52], [0, 11], Wheel(rim=26, tire=1.5))

    def test_summary(self) -> None:
        wheel = Wheel(rim=26, tire=1.5)
        summary = summarize_gears([Gear(chainring=52, cog=11, wheel=wheel), Gear(chainring=1, cog=2)])
        self.assertEqual(list(summary.columns), ["chainring", "cog", "ratio", "gear_inches"])
        self.assertAlmostEqual(summary.loc[0, "gear_inches"], 137.090909090909, places=9)
        self.assertEqual(summary.loc[1, "ratio"], 0.5)
        self.assertTrue(math.isnan(summary.loc[1, "gear_inches"]))


class TestConsoleOutput(unittest.TestCase):
    def test_gear_summary(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            ConsoleOutput.print_gear_summary([Gear(chainring=52, cog=11)])
        self.assertIn("4.727", buf.getvalue())

    def test_wheel(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            ConsoleOutput.print_wheel(Wheel(rim=26, tire=1.5))
        output = buf.getvalue()
        self.assertIn("29.000", output)
        self.assertIn("91.106", output)

    def test_gear_chart(self) -> None:
        chart = gear_chart([52, 39], [11, 13], Wheel(rim=26, tire=1.5))
        buf = io.StringIO()
        with redirect_stdout(buf):
            ConsoleOutput.print_gear_chart(chart)
        output = buf.getvalue()
        self.assertIn("GEAR CHART", output)
        self.assertIn("137.1", output)
        self.assertIn("87.0", output)

    def test_tasks(self) -> None:
        buf = io.StringIO()
        with redirect_stdout(buf):
            ConsoleOutput.print_preparation_tasks([PreparationTask("driver", "gas_up", "BK-1")])
        self.assertIn("gas_up", buf.getvalue())


class TestExporter(unittest.TestCase):
    def test_export_all(self) -> None:
        chart = gear_chart([52], [11], Wheel(rim=26, tire=1.5))
        tasks = [PreparationTask("mechanic", "prepare_bicycle", "b1", "note")]
        with tempfile.TemporaryDirectory() as tmp:
            paths = Exporter(Path(tmp) / "out").export_all(chart, tasks, prefix="trip")
            self.assertEqual(paths["gear_chart_csv"].name, "trip_gear_chart.csv")

            loaded = pd.read_csv(paths["gear_chart_csv"], index_col=0)
            self.assertAlmostEqual(float(loaded.iloc[0, 0]), 137.091, places=3)

            with open(paths["tasks_json"]) as f:
                payload = json.load(f)
            self.assertEqual(payload["metadata"]["num_tasks"], 1)
            self.assertEqual(payload["tasks"][0]["subject"], "b1")


if __name__ == "__main__":
    unittest.main()
