"""
Global defaults
===============
Constants shared by the gear models, examples and output helpers.

Exports:
    DEFAULT_CHAINRING (int): Chainring tooth count used when none is given.
    DEFAULT_COG (int): Cog tooth count used when none is given.
    ROAD_WHEEL_SIZES (list): Common (rim, tire) pairs in millimetres.
"""

DEFAULT_CHAINRING: int = 40
DEFAULT_COG: int = 18

# rim and tire sizes in millimetres: 700c road and 26" mountain
ROAD_WHEEL_SIZES: list[tuple[float, float]] = [
    (622, 20),
    (622, 23),
    (559, 30),
    (559, 40),
]

DEFAULT_OUTPUT_DIR: str = "output"
