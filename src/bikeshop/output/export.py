"""Export gear charts and preparation tasks to CSV and JSON."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import pandas as pd

from bikeshop.config import DEFAULT_OUTPUT_DIR
from bikeshop.preparation import PreparationTask


class Exporter:
    """Writes bikeshop results to files."""

    def __init__(self, output_dir: str | Path = DEFAULT_OUTPUT_DIR):
        """Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_gear_chart_csv(
        self,
        chart: pd.DataFrame,
        filename: str = "gear_chart.csv",
    ) -> Path:
        """Export a gear chart to CSV.

        Args:
            chart: Output of ``gear_chart``
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename
        chart.round(3).to_csv(filepath)
        return filepath

    def export_tasks_json(
        self,
        tasks: list[PreparationTask],
        filename: str = "preparation.json",
    ) -> Path:
        """Export trip preparation tasks to JSON.

        Args:
            tasks: Tasks in the order they were done
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        payload: dict[str, Any] = {
            "metadata": {"num_tasks": len(tasks)},
            "tasks": [asdict(task) for task in tasks],
        }

        with open(filepath, "w") as f:
            json.dump(payload, f, indent=2)

        return filepath

    def export_all(
        self,
        chart: pd.DataFrame,
        tasks: list[PreparationTask],
        prefix: str = "",
    ) -> dict[str, Path]:
        """Export every format.

        Args:
            chart: Gear chart
            tasks: Preparation tasks
            prefix: Optional prefix for filenames

        Returns:
            Dictionary of format -> filepath
        """
        prefix = f"{prefix}_" if prefix else ""

        return {
            "gear_chart_csv": self.export_gear_chart_csv(chart, f"{prefix}gear_chart.csv"),
            "tasks_json": self.export_tasks_json(tasks, f"{prefix}preparation.json"),
        }
