"""Gear chart analysis."""

from .gear_chart import gear_chart, summarize_gears

__all__ = ["gear_chart", "summarize_gears"]
