"""
Constants module for the climbset hold editor.

This module contains shared constants used across the package,
including hold type, colour and size mappings, the V-scale and the
proximity tolerances used to match pointer events to holds.
"""

from typing import Final, Literal

HoldType = Literal["start", "hand", "foot", "finish"]
HoldSize = Literal["small", "medium", "large"]

# Tap-to-cycle order (hand -> foot -> start -> finish -> hand)
HOLD_TYPE_CYCLE: Final[tuple[HoldType, ...]] = ("hand", "foot", "start", "finish")

HOLD_COLORS: Final[dict[str, str]] = {
    "start": "#10b981",  # green
    "hand": "#ef4444",  # red
    "foot": "#3b82f6",  # blue
    "finish": "#f59e0b",  # yellow
}

# Marker diameter as a percentage of the wall image
HOLD_SIZES: Final[dict[str, str]] = {
    "small": "2.5%",
    "medium": "4%",
    "large": "7%",
}

# Marker border width in pixels
HOLD_BORDER_WIDTH: Final[dict[str, int]] = {
    "small": 2,
    "medium": 3,
    "large": 4,
}

DEFAULT_HOLD_TYPE: Final[HoldType] = "hand"
DEFAULT_HOLD_SIZE: Final[HoldSize] = "medium"

# Proximity tolerances, in percentage units of the wall image
ADD_TOLERANCE: Final[float] = 3.0
REMOVE_MARGIN: Final[float] = 2.0

V_GRADES: Final[tuple[str, ...]] = (
    "VB", "V0", "V1", "V2", "V3", "V4", "V5", "V6", "V7", "V8", "V9",
    "V10", "V11", "V12", "V13", "V14", "V15", "V16", "V17",
)  # fmt: skip

DRAFT_KEY: Final[str] = "climbset-draft"
