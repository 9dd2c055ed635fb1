"""Domain Types — units, fuel components and the fixed physical constants.

Invariants:
    - Densities and the lube ratio are policy constants, never configuration
    - Every FuelComponent has exactly one density entry

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, unit shows in signatures
    - str Enum for components: serializes to JSON without custom encoders
"""

import sys
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Grams = NewType("Grams", float)
Milliliters = NewType("Milliliters", float)
MassFraction = NewType("MassFraction", float)   # 0.0–1.0


# ─── Enums ───────────────────────────────────────────────────────

class FuelComponent(str, Enum):
    """The two fuels of a mixture."""
    NITRO = "nitro"  # Shell Nitro+
    M5 = "m5"


# ─── Constants ───────────────────────────────────────────────────

DENSITY_G_PER_ML: dict[FuelComponent, float] = {
    FuelComponent.NITRO: 0.74,
    FuelComponent.M5: 0.80,
}

# 5 ml of lube per 1000 ml of fuel
LUBE_RATIO = 5.0 / 1000.0

# binary64 machine epsilon
PERCENTAGE_TOLERANCE = sys.float_info.epsilon
