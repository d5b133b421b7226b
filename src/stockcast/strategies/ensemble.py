"""Fixed-weight blend of three forecasts."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

import numpy as np

from stockcast.strategies.linear import predict_linear
from stockcast.strategies.recurrent import predict_recurrent

WEIGHTS = (0.4, 0.4, 0.2)


def predict_momentum(
    normalized: Sequence[float],
    window_width: int,
    horizon: int,
    *,
    rng: np.random.Generator,
) -> list[float]:
    """Lightweight autoregressive rollout: window mean plus 0.2 * trend.

    Adds a uniform perturbation in [-0.025, 0.025).  Emitted values are
    clamped to [0, 1]; the window slides with the unclamped value.
    """
    window = deque(normalized[-window_width:], maxlen=window_width)
    width = len(window)

    predictions: list[float] = []
    for _ in range(horizon):
        mean = sum(window) / width
        trend = window[-1] - window[0]
        prediction = mean + trend * 0.2 + (rng.random() - 0.5) * 0.05

        predictions.append(max(0.0, min(1.0, prediction)))
        window.append(prediction)

    return predictions


def combine(
    momentum: Sequence[float],
    recurrent: Sequence[float],
    linear: Sequence[float],
) -> list[float]:
    """Element-wise ``0.4*momentum + 0.4*recurrent + 0.2*linear``."""
    w_mom, w_rec, w_lin = WEIGHTS
    return [
        m * w_mom + r * w_rec + lin * w_lin
        for m, r, lin in zip(momentum, recurrent, linear)
    ]


def predict_ensemble(
    normalized: Sequence[float],
    window_width: int,
    horizon: int,
    *,
    rng: np.random.Generator,
) -> list[float]:
    """Blend the momentum, recurrent and linear forecasts.

    The recurrent forecast draws from *rng* before the momentum rollout.
    """
    recurrent = predict_recurrent(normalized, window_width, horizon, rng=rng)
    linear = predict_linear(normalized, horizon)
    momentum = predict_momentum(normalized, window_width, horizon, rng=rng)
    return combine(momentum, recurrent, linear)
