"""Forecast orchestrator: validate → normalize → predict → denormalize → date."""

from __future__ import annotations

import asyncio
import datetime
import time
import uuid
from collections.abc import Sequence

import numpy as np

from stockcast.config import Settings
from stockcast.errors import InsufficientDataError
from stockcast.logging import get_logger
from stockcast.models import (
    ForecastPoint,
    ForecastResult,
    ModelKind,
    PricePoint,
    StrategyConfig,
    TrendDirection,
    TrendSummary,
)
from stockcast.progress import TrainingProgress
from stockcast.series import denormalize, normalize
from stockcast.strategies.backend import SklearnNetworkBackend
from stockcast.strategies.ensemble import predict_ensemble
from stockcast.strategies.linear import predict_linear
from stockcast.strategies.network import NetworkBackend, predict_network
from stockcast.strategies.recurrent import predict_recurrent

logger = get_logger(__name__)


def forecast_dates(last_date: datetime.date, horizon: int) -> list[datetime.date]:
    """Return *horizon* consecutive calendar days starting after *last_date*."""
    return [last_date + datetime.timedelta(days=i + 1) for i in range(horizon)]


def summarize_trend(points: Sequence[ForecastPoint]) -> TrendSummary | None:
    """Compare the first and last forecast prices.

    Returns ``None`` for an empty forecast.  A zero first price yields a
    0% change rather than dividing by zero.
    """
    if not points:
        return None
    first = points[0].price
    last = points[-1].price
    direction = TrendDirection.UP if last >= first else TrendDirection.DOWN
    change = abs((last - first) / first) * 100 if first != 0 else 0.0
    return TrendSummary(direction=direction, percent_change=change)


async def forecast(
    history: Sequence[PricePoint],
    config: StrategyConfig,
    *,
    backend: NetworkBackend | None = None,
    rng: np.random.Generator | None = None,
    progress: TrainingProgress | None = None,
    cancel_event: asyncio.Event | None = None,
    settings: Settings | None = None,
) -> ForecastResult:
    """Forecast *config.horizon_days* prices following *history*.

    Args:
        history: Chronological price history, at least
            ``config.window_width + 1`` points.
        config: Strategy, window width and horizon for this request.
        backend: Network backend for the ``neural`` strategy.  Defaults to
            a fresh :class:`SklearnNetworkBackend`.
        rng: Source of the random perturbations used by the ``lstm`` and
            ``ensemble`` strategies.  Seed it for reproducible output.
        progress: Channel receiving percentage updates.
        cancel_event: Stops ``neural`` training at the next checkpoint.
        settings: Network hyperparameters; defaults to :class:`Settings`.

    Returns:
        A :class:`ForecastResult` with one point per horizon day.

    Raises:
        InvalidConfigurationError: Unknown model kind or bad window/horizon.
        InsufficientDataError: History shorter than ``window_width + 1``.
        DegenerateSeriesError: Constant price history.
        DependencyUnavailableError: Network backend not ready.
        ForecastCancelledError: *cancel_event* set during training.
    """
    settings = settings or Settings()
    kind = ModelKind.parse(config.model_kind)
    width = config.window_width
    horizon = config.horizon_days

    if len(history) < width + 1:
        raise InsufficientDataError(
            f"Need at least {width + 1} data points for a window of {width}, "
            f"got {len(history)}"
        )

    request_id = uuid.uuid4().hex[:8]
    t0 = time.monotonic()
    logger.info(
        "forecast_start request_id=%s model=%s window=%d horizon=%d points=%d",
        request_id,
        kind.value,
        width,
        horizon,
        len(history),
    )

    series = normalize([p.price for p in history])
    if rng is None:
        rng = np.random.default_rng(settings.random_seed)

    if kind is ModelKind.NEURAL:
        if backend is None:
            backend = SklearnNetworkBackend(
                hidden_layers=settings.hidden_layers,
                learning_rate=settings.learning_rate,
                random_state=settings.random_seed,
            )
        raw = await predict_network(
            series.values,
            width,
            horizon,
            backend=backend,
            progress=progress,
            cancel_event=cancel_event,
            max_iterations=settings.max_iterations,
            error_threshold=settings.error_threshold,
            log_period=settings.log_period,
        )
    else:
        if kind is ModelKind.LSTM:
            raw = predict_recurrent(series.values, width, horizon, rng=rng)
        elif kind is ModelKind.LINEAR:
            raw = predict_linear(series.values, horizon, clamp=False)
        else:
            raw = predict_ensemble(series.values, width, horizon, rng=rng)
        if progress is not None:
            progress.report(100.0)

    dates = forecast_dates(history[-1].date, horizon)
    points = tuple(
        ForecastPoint(
            date=d,
            price=max(0.0, denormalize(v, series.min, series.max)),
        )
        for d, v in zip(dates, raw)
    )
    trend = summarize_trend(points)

    logger.info(
        "forecast_complete request_id=%s model=%s trend=%s change=%.2f elapsed=%.2fs",
        request_id,
        kind.value,
        trend.direction.value if trend else "n/a",
        trend.percent_change if trend else 0.0,
        time.monotonic() - t0,
    )
    return ForecastResult(model_kind=kind, points=points, trend=trend)


def run_forecast(
    history: Sequence[PricePoint],
    config: StrategyConfig,
    **kwargs: object,
) -> ForecastResult:
    """Synchronous wrapper around :func:`forecast` for non-async callers."""
    return asyncio.run(forecast(history, config, **kwargs))  # type: ignore[arg-type]
