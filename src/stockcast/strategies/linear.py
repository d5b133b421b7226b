"""Least-squares linear trend extrapolation."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from stockcast.errors import InsufficientDataError


def fit_line(values: Sequence[float]) -> tuple[float, float]:
    """Closed-form OLS fit of ``value = slope * index + intercept``.

    Returns:
        Tuple of (slope, intercept).

    Raises:
        InsufficientDataError: If fewer than two values are given.
    """
    n = len(values)
    if n <= 1:
        raise InsufficientDataError(
            f"Linear trend needs at least 2 data points, got {n}"
        )
    x = np.arange(n, dtype=float)
    y = np.asarray(values, dtype=float)

    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    sum_xx = float((x * x).sum())

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def predict_linear(
    normalized: Sequence[float], horizon: int, *, clamp: bool = True
) -> list[float]:
    """Continue the fitted line *horizon* steps past the end of the series.

    With *clamp* each prediction is limited to [0, 1], which flattens any
    extrapolation beyond the historical range.
    """
    slope, intercept = fit_line(normalized)
    n = len(normalized)
    predictions = [slope * (n + i) + intercept for i in range(horizon)]
    if clamp:
        predictions = [max(0.0, min(1.0, p)) for p in predictions]
    return predictions
