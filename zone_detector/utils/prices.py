"""Helpers for price formatting and relative price distances."""

from decimal import ROUND_HALF_UP, Decimal

from zone_detector.constants import PRICE_DECIMALS


def canonical_price(price: float, decimals: int = PRICE_DECIMALS) -> str:
    """Format a price as the fixed-decimal string used as a zone key.

    Two prices that only differ by floating point noise collapse to the same
    key, while prices a cent apart stay distinct. Exact ties on the binary
    value round half up, so 100.125 becomes "100.13".
    """

    quantized = Decimal(float(price)).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{quantized:f}"


def relative_difference(price: float, reference: float) -> float:
    """Absolute distance between two prices as a fraction of ``reference``."""

    return abs(price - reference) / reference
