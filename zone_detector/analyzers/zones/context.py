"""Helpers for turning caller input into a validated analysis context."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Any, List

import numpy as np
import pandas as pd

from zone_detector.configuration import ZoneSettings

from .errors import InvalidPriceDataError
from .models import ZoneContext


def build_context(price_data: Any, settings: ZoneSettings) -> ZoneContext:
    """Validate the price series and derive the values every pass needs."""
    prices = extract_last_prices(price_data, settings.price_field)
    latest_price = float(prices[-1])

    return ZoneContext(
        prices=prices,
        latest_price=latest_price,
        min_valid_price=latest_price * settings.ancient_price_ratio,
        settings=settings,
    )


def extract_last_prices(price_data: Any, price_field: str) -> np.ndarray:
    """Return the last-price column of ``price_data`` as a float array.

    Accepts a DataFrame with a ``price_field`` column, a Series, a 1-D array,
    or a sequence of mappings, objects exposing ``price_field`` or bare
    numbers. Raises ``InvalidPriceDataError`` for empty input, missing fields
    and non-positive or non-finite prices.
    """
    if price_data is None:
        raise InvalidPriceDataError("Price data is required.")

    if isinstance(price_data, pd.DataFrame):
        if price_field not in price_data.columns:
            raise InvalidPriceDataError(f"Price data has no '{price_field}' column.")
        raw = price_data[price_field].tolist()
    elif isinstance(price_data, pd.Series):
        raw = price_data.tolist()
    elif isinstance(price_data, np.ndarray):
        if price_data.ndim != 1:
            raise InvalidPriceDataError(
                f"Price array must be one-dimensional, got {price_data.ndim} dimensions."
            )
        raw = [_read_price(item, price_field, idx) for idx, item in enumerate(price_data.tolist())]
    elif isinstance(price_data, (str, bytes)):
        raise InvalidPriceDataError("Price data must be a sequence of observations, not a string.")
    else:
        try:
            items = list(price_data)
        except TypeError as exc:
            raise InvalidPriceDataError(
                f"Price data must be iterable, got {type(price_data).__name__}."
            ) from exc
        raw = [_read_price(item, price_field, idx) for idx, item in enumerate(items)]

    if not raw:
        raise InvalidPriceDataError("Price data is empty.")

    return _validate_prices(raw)


def _read_price(item: Any, price_field: str, idx: int) -> Any:
    if isinstance(item, Mapping):
        if price_field not in item:
            raise InvalidPriceDataError(f"Observation {idx} has no '{price_field}' field.")
        return item[price_field]
    if isinstance(item, (Real, Decimal)) and not isinstance(item, bool):
        return item
    if not hasattr(item, price_field):
        raise InvalidPriceDataError(f"Observation {idx} has no '{price_field}' field.")
    return getattr(item, price_field)


def _validate_prices(raw: List[Any]) -> np.ndarray:
    values: List[float] = []
    for idx, value in enumerate(raw):
        if isinstance(value, bool):
            raise InvalidPriceDataError(f"Observation {idx} has a non-numeric price: {value!r}.")
        try:
            price = float(value)
        except (TypeError, ValueError) as exc:
            raise InvalidPriceDataError(
                f"Observation {idx} has a non-numeric price: {value!r}."
            ) from exc
        if not np.isfinite(price) or price <= 0:
            raise InvalidPriceDataError(
                f"Observation {idx} has an invalid price {price!r}; prices must be positive and finite."
            )
        values.append(price)

    return np.asarray(values, dtype=float)


__all__ = ["build_context", "extract_last_prices"]
