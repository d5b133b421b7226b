"""Command-line forecast: load a history, run one strategy, print the result."""

from __future__ import annotations

import argparse
import datetime
import json
import sys

import numpy as np

from stockcast.collectors.files import load_price_history
from stockcast.collectors.price import load_ticker_history
from stockcast.collectors.synthetic import generate_history
from stockcast.config import Settings
from stockcast.errors import ForecastError
from stockcast.forecaster import run_forecast
from stockcast.logging import get_logger
from stockcast.models import ForecastResult, ModelKind, StrategyConfig
from stockcast.progress import TrainingProgress


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="stockcast",
        description="Forecast future daily prices from a price history.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--data",
        type=str,
        default=None,
        help='JSON ([{"date": "YYYY-MM-DD", "price": 100.0}]) or CSV price history.',
    )
    source.add_argument(
        "--symbol",
        type=str,
        default=None,
        help="Generate a synthetic history for this symbol (default: AAPL).",
    )
    source.add_argument(
        "--ticker",
        type=str,
        default=None,
        help="Download daily closes for this ticker from Yahoo Finance.",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        choices=[k.value for k in ModelKind],
        help="Forecast strategy. Defaults to STOCKCAST_MODEL_KIND.",
    )
    parser.add_argument("--window", type=int, default=None, help="Window width in days.")
    parser.add_argument("--days", type=int, default=None, help="Days to forecast.")
    parser.add_argument(
        "--history-days",
        type=int,
        default=60,
        help="Length of the synthetic history when --symbol is used.",
    )
    parser.add_argument(
        "--start",
        type=str,
        default=None,
        help="First date (YYYY-MM-DD) for --ticker. Defaults to one year before --end.",
    )
    parser.add_argument(
        "--end",
        type=str,
        default=None,
        help="Last date (YYYY-MM-DD) for --ticker. Defaults to today.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the result as a JSON document.",
    )
    return parser


def _print_result(result: ForecastResult) -> None:
    for point in result.points:
        print(f"{point.date.isoformat()}  {point.price:10.2f}")
    if result.trend is not None:
        arrow = "upward" if result.trend.direction.value == "up" else "downward"
        print(
            f"{len(result.points)}-day forecast shows {arrow} trend of "
            f"{result.trend.percent_change:.2f}%"
        )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``python -m stockcast.cli``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = Settings()
    logger = get_logger("stockcast.cli")
    seed = args.seed if args.seed is not None else settings.random_seed
    if seed is not None:
        settings.random_seed = seed

    try:
        if args.data:
            history = load_price_history(args.data, settings.min_history_points)
        elif args.ticker:
            end = (
                datetime.date.fromisoformat(args.end)
                if args.end
                else datetime.date.today()
            )
            start = (
                datetime.date.fromisoformat(args.start)
                if args.start
                else end - datetime.timedelta(days=365)
            )
            history = load_ticker_history(
                args.ticker, start, end, settings.min_history_points
            )
        else:
            history = generate_history(
                args.symbol or "AAPL",
                args.history_days,
                rng=np.random.default_rng(seed),
            )

        config = StrategyConfig(
            window_width=args.window if args.window is not None else settings.window_width,
            horizon_days=args.days if args.days is not None else settings.horizon_days,
            model_kind=args.model or settings.model_kind,
        )

        progress = TrainingProgress()
        progress.subscribe(
            lambda pct: logger.debug("training_progress percent=%.0f", pct)
        )
        result = run_forecast(
            history,
            config,
            rng=np.random.default_rng(seed),
            progress=progress,
            settings=settings,
        )
    except (ForecastError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
