"""Yahoo Finance daily close history downloader."""

from __future__ import annotations

import datetime

import yfinance as yf

from stockcast.errors import InsufficientDataError
from stockcast.logging import get_logger
from stockcast.models import PricePoint

logger = get_logger(__name__)


def fetch_close_history(
    ticker: str,
    start: datetime.date,
    end: datetime.date,
) -> list[PricePoint]:
    """Fetch adjusted daily closes from Yahoo Finance.

    Args:
        ticker: Stock ticker symbol (e.g. "AAPL").
        start: Start date (inclusive).
        end: End date (inclusive).

    Returns:
        List of PricePoint objects sorted by date ascending.
    """
    data = yf.download(
        ticker,
        start=start.isoformat(),
        end=(end + datetime.timedelta(days=1)).isoformat(),
        auto_adjust=True,
        progress=False,
    )
    if data.empty:
        return []

    # yfinance >= 0.2.31 returns multi-level columns for single tickers;
    # flatten so we can index by simple column name.
    if hasattr(data.columns, "nlevels") and data.columns.nlevels > 1:
        data.columns = data.columns.droplevel(1)

    return [
        PricePoint(date=ts.date(), price=float(close))  # type: ignore[union-attr]
        for ts, close in data["Close"].dropna().sort_index().items()
    ]


def load_ticker_history(
    ticker: str,
    start: datetime.date,
    end: datetime.date,
    min_points: int = 50,
) -> list[PricePoint]:
    """Fetch closes for *ticker* and require at least *min_points* of them.

    Raises:
        InsufficientDataError: If Yahoo Finance returns fewer than
            *min_points* closes for the range.
    """
    points = fetch_close_history(ticker, start, end)
    if len(points) < min_points:
        raise InsufficientDataError(
            f"Please provide at least {min_points} data points, got {len(points)} "
            f"closes for {ticker} between {start.isoformat()} and {end.isoformat()}"
        )
    logger.info(
        "ticker_history_loaded ticker=%s points=%d start=%s end=%s",
        ticker,
        len(points),
        points[0].date.isoformat(),
        points[-1].date.isoformat(),
    )
    return points
