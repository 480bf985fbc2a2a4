"""Gear charts: gear inches across chainring and cog combinations."""

from collections.abc import Iterable, Sequence

import numpy as np
import pandas as pd

from bikeshop.models import Gear, Wheel


def gear_chart(
    chainrings: Sequence[int],
    cogs: Sequence[int],
    wheel: Wheel,
) -> pd.DataFrame:
    """Build a gear-inch chart for every chainring/cog pair.

    Args:
        chainrings: Chainring tooth counts (one row each)
        cogs: Cog tooth counts (one column each)
        wheel: Wheel the gears drive

    Returns:
        DataFrame indexed by chainring, with one column per cog
    """
    cog_array = np.asarray(cogs, dtype=float)
    if np.any(cog_array == 0):
        raise ValueError("cog must not be zero")

    ratios = np.outer(np.asarray(chainrings, dtype=float), 1.0 / cog_array)
    chart = pd.DataFrame(
        ratios * wheel.diameter(),
        index=pd.Index(list(chainrings), name="chainring"),
        columns=pd.Index(list(cogs), name="cog"),
    )
    return chart


def summarize_gears(gears: Iterable[Gear]) -> pd.DataFrame:
    """Tabulate ratio and gear inches for a set of gears.

    Gears without a wheel get NaN gear inches.
    """
    rows = []
    for gear in gears:
        gear_inches = gear.gear_inches() if gear.wheel is not None else np.nan
        rows.append({
            "chainring": gear.chainring,
            "cog": gear.cog,
            "ratio": gear.ratio(),
            "gear_inches": gear_inches,
        })

    return pd.DataFrame(rows, columns=["chainring", "cog", "ratio", "gear_inches"])
