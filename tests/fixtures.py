"""Hand-built price series shared by the zone detection tests."""

# Touches 100 three times with rallies above 110 in between; the bars after
# the first bar track a 1%-per-bar decline closely enough to confirm a support.
SUPPORT_SERIES = [100.0, 99.0, 112.0, 97.0, 112.0, 96.0, 112.0]

# Mirror image: touches 100 three times with sell-offs below 90 in between.
RESISTANCE_SERIES = [100.0, 101.0, 88.0, 103.0, 88.0, 104.0, 88.0]

# 100 first rejects price down to 85, then later holds as a support.
FLIPPED_SUPPORT_SERIES = [100.0, 120.0, 85.0, 100.0, 99.0, 112.0, 97.0, 112.0, 96.0, 112.0]

FLAT_SERIES = [100.0] * 20


def as_observations(prices):
    return [{"lp": price} for price in prices]

# A support at 97 that qualifies on its own...
LOWER_SUPPORT_SERIES = [97.0, 96.0, 112.0, 95.0, 112.0, 94.0, 112.0]
# ...and the same bars preceded by a qualifying support at 99, 2% above it.
STACKED_SUPPORT_SERIES = [99.0] + LOWER_SUPPORT_SERIES

# A resistance at 103 that qualifies on its own...
HIGHER_RESISTANCE_SERIES = [103.0, 104.0, 88.0, 105.0, 88.0, 106.0, 88.0]
# ...and the same bars preceded by a qualifying resistance at 101, 2% below it.
STACKED_RESISTANCE_SERIES = [101.0] + HIGHER_RESISTANCE_SERIES

# A support at 105 followed by a separate support at 100, exactly 5% apart.
SPACED_SUPPORT_SERIES = [105.0, 104.0, 118.0, 102.0, 118.0, 101.0, 118.0] + SUPPORT_SERIES
