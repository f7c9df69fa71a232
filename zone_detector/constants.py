"""Default thresholds and labels for zone detection."""

from typing import Final

# Input
PRICE_FIELD: Final[str] = "lp"
PRICE_DECIMALS: Final[int] = 2

# Touch / reversal rules
TOUCH_TOLERANCE: Final[float] = 0.05        # touch = within 5% of the candidate level
REVERSAL_THRESHOLD: Final[float] = 0.10     # bounce/drop = 10% move away from the touch
MIN_CONFIRMATIONS: Final[int] = 3           # bounces (or drops) needed to emit a zone
DEDUP_TOLERANCE: Final[float] = 0.05        # skip candidates this close to an accepted level

# Trend confirmation
TREND_RANGE: Final[int] = 10                # look-ahead window, base index included
TREND_STEP: Final[float] = 0.01             # 1% of the base price per bar
TREND_DEVIATION: Final[float] = 0.03        # allowed deviation from the expected trend value
TREND_MIN_MATCHES: Final[int] = 3

# Prior resistance behaviour
HISTORY_TOLERANCE: Final[float] = 0.05
HISTORY_DROP_THRESHOLD: Final[float] = 0.10

# Ancient zones: candidates below this share of the latest price are ignored
ANCIENT_PRICE_RATIO: Final[float] = 0.5

# Support/resistance overlap, relative to the support price
OVERLAP_TOLERANCE: Final[float] = 0.05
OVERLAP_TYPE: Final[str] = "support-resistance overlap"

DIRECTION_SUPPORT: Final[str] = "support"
DIRECTION_RESISTANCE: Final[str] = "resistance"

__all__ = [
    "PRICE_FIELD",
    "PRICE_DECIMALS",
    "TOUCH_TOLERANCE",
    "REVERSAL_THRESHOLD",
    "MIN_CONFIRMATIONS",
    "DEDUP_TOLERANCE",
    "TREND_RANGE",
    "TREND_STEP",
    "TREND_DEVIATION",
    "TREND_MIN_MATCHES",
    "HISTORY_TOLERANCE",
    "HISTORY_DROP_THRESHOLD",
    "ANCIENT_PRICE_RATIO",
    "OVERLAP_TOLERANCE",
    "OVERLAP_TYPE",
    "DIRECTION_SUPPORT",
    "DIRECTION_RESISTANCE",
]
