"""Load a price history from a JSON or CSV file."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from stockcast.errors import InsufficientDataError
from stockcast.models import PricePoint

REQUIRED_COLUMNS = ("date", "price")


def load_price_history(path: str | Path, min_points: int = 50) -> list[PricePoint]:
    """Read ``[{"date": "YYYY-MM-DD", "price": 100.0}, ...]`` records.

    ``.csv`` files need ``date`` and ``price`` columns; anything else is
    parsed as a JSON array of records.  Rows are returned sorted by date.

    Raises:
        InsufficientDataError: If the file holds fewer than *min_points* rows.
        ValueError: If columns are missing or a value cannot be parsed.
    """
    path = Path(path)
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path)
    else:
        df = pd.read_json(path, orient="records")

    if len(df) < min_points:
        raise InsufficientDataError(
            f"Please provide at least {min_points} data points, got {len(df)}"
        )

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Price history is missing columns: {', '.join(missing)}")

    dates = pd.to_datetime(df["date"], errors="raise").dt.date
    prices = pd.to_numeric(df["price"], errors="raise")
    if prices.isna().any():
        raise ValueError("Price history contains empty prices")

    frame = pd.DataFrame({"date": dates, "price": prices}).sort_values("date")
    return [
        PricePoint(date=row.date, price=float(row.price))
        for row in frame.itertuples(index=False)
    ]
