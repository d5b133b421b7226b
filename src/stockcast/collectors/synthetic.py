"""Synthetic daily price history for demos and tests."""

from __future__ import annotations

import datetime
import math

import numpy as np

from stockcast.models import PricePoint

BASE_PRICES: dict[str, float] = {
    "AAPL": 175.50,
    "GOOGL": 140.25,
    "MSFT": 415.30,
    "TSLA": 245.80,
    "AMZN": 155.90,
    "META": 325.60,
    "NVDA": 875.20,
    "NFLX": 450.15,
}
DEFAULT_BASE_PRICE = 100.0
DAILY_VOLATILITY = 0.03


def generate_history(
    symbol: str,
    days: int = 30,
    *,
    rng: np.random.Generator,
    end: datetime.date | None = None,
) -> list[PricePoint]:
    """Random walk of ``days + 1`` daily prices ending on *end* (default today).

    Starts from the symbol's base price and adds a slow sinusoidal drift
    to the daily move.  Prices are rounded to cents.
    """
    if days < 0:
        raise ValueError(f"days ({days}) must be >= 0")
    end = end or datetime.date.today()
    price = BASE_PRICES.get(symbol.upper(), DEFAULT_BASE_PRICE)

    points: list[PricePoint] = []
    for i in range(days, -1, -1):
        drift = math.sin(i / 10) * 0.005
        change = (rng.random() - 0.5) * 2 * DAILY_VOLATILITY + drift
        price = price * (1 + change)
        points.append(
            PricePoint(
                date=end - datetime.timedelta(days=i),
                price=round(price, 2),
            )
        )
    return points
