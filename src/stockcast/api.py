"""FastAPI application exposing the forecast engine."""

from __future__ import annotations

import datetime
from typing import Literal

import numpy as np
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from stockcast.collectors.price import fetch_close_history
from stockcast.collectors.synthetic import generate_history
from stockcast.config import Settings
from stockcast.errors import (
    DegenerateSeriesError,
    DependencyUnavailableError,
    ForecastCancelledError,
    ForecastError,
    InsufficientDataError,
    InvalidConfigurationError,
)
from stockcast.forecaster import forecast
from stockcast.logging import get_logger
from stockcast.models import ModelKind, PricePoint, StrategyConfig
from stockcast.strategies.backend import SklearnNetworkBackend

app = FastAPI(title="stockcast API", version="0.1.0")
logger = get_logger(__name__)

_STATUS_BY_ERROR: dict[type[ForecastError], int] = {
    InsufficientDataError: 422,
    DegenerateSeriesError: 422,
    InvalidConfigurationError: 422,
    DependencyUnavailableError: 503,
    ForecastCancelledError: 409,
}

MODEL_INFO: dict[ModelKind, dict[str, str]] = {
    ModelKind.NEURAL: {
        "architecture": "Deep Neural Network",
        "hidden_layers": "[20, 15, 10]",
        "training_method": "Backpropagation",
        "learning_rate": "0.02",
    },
    ModelKind.LSTM: {
        "architecture": "LSTM Recurrent",
        "hidden_layers": "Memory Gates",
        "training_method": "Sequential Learning",
        "learning_rate": "Adaptive",
    },
    ModelKind.LINEAR: {
        "architecture": "Linear Regression",
        "hidden_layers": "Single Layer",
        "training_method": "Least Squares",
        "learning_rate": "Optimal",
    },
    ModelKind.ENSEMBLE: {
        "architecture": "Ensemble Hybrid",
        "hidden_layers": "Multi-Model",
        "training_method": "Weighted Voting",
        "learning_rate": "Dynamic",
    },
}


class PricePointIn(BaseModel):
    date: datetime.date
    price: float


class ForecastRequest(BaseModel):
    """Body of ``POST /forecast``. Omitted fields fall back to settings."""

    history: list[PricePointIn]
    model_kind: str | None = None
    window_width: int | None = None
    horizon_days: int | None = None
    seed: int | None = None


@app.exception_handler(ForecastError)
async def forecast_error_handler(request: Request, exc: ForecastError) -> JSONResponse:
    """Translate engine errors into JSON responses."""
    status = next(
        (code for cls, code in _STATUS_BY_ERROR.items() if isinstance(exc, cls)),
        500,
    )
    logger.warning(
        "forecast_rejected path=%s error=%s status=%d detail=%s",
        request.url.path,
        type(exc).__name__,
        status,
        exc,
    )
    return JSONResponse(
        status_code=status,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


@app.post("/forecast")
async def forecast_endpoint(req: ForecastRequest) -> dict[str, object]:
    """Forecast the prices following the posted history."""
    settings = Settings()
    config = StrategyConfig(
        window_width=(
            req.window_width if req.window_width is not None else settings.window_width
        ),
        horizon_days=(
            req.horizon_days if req.horizon_days is not None else settings.horizon_days
        ),
        model_kind=req.model_kind or settings.model_kind,
    )
    try:
        history = [PricePoint(date=p.date, price=p.price) for p in req.history]
    except ValueError as exc:
        raise InvalidConfigurationError(str(exc)) from exc

    seed = req.seed if req.seed is not None else settings.random_seed
    backend = SklearnNetworkBackend(
        hidden_layers=settings.hidden_layers,
        learning_rate=settings.learning_rate,
        random_state=seed,
    )
    result = await forecast(
        history,
        config,
        backend=backend,
        rng=np.random.default_rng(seed),
        settings=settings,
    )
    return result.to_dict()


@app.get("/models")
def models_list() -> list[dict[str, str]]:
    """Return the available model kinds with their descriptive metadata."""
    return [{"model_kind": kind.value, **info} for kind, info in MODEL_INFO.items()]


@app.get("/history/{symbol}")
def history(
    symbol: str,
    days: int = Query(default=30, ge=1, le=3650, description="Days of history"),
    seed: int | None = Query(default=None, description="Random seed"),
    source: Literal["synthetic", "yahoo"] = Query(
        default="synthetic", description="Synthetic series or Yahoo Finance closes"
    ),
) -> dict[str, object]:
    """Return a daily price history for *symbol*.

    ``source=yahoo`` returns the Yahoo Finance closes of the last *days*
    calendar days; otherwise a seeded synthetic series of *days* + 1 points.
    """
    if source == "yahoo":
        end = datetime.date.today()
        points = fetch_close_history(
            symbol.upper(), end - datetime.timedelta(days=days), end
        )
    else:
        points = generate_history(symbol, days, rng=np.random.default_rng(seed))
    return {
        "symbol": symbol.upper(),
        "data": [{"date": p.date.isoformat(), "price": p.price} for p in points],
    }
