"""Series normalization and training-window construction."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from stockcast.errors import (
    DegenerateSeriesError,
    InsufficientDataError,
    InvalidConfigurationError,
)
from stockcast.models import NormalizedSeries, TrainingPair


def normalize(prices: Sequence[float]) -> NormalizedSeries:
    """Rescale *prices* to [0, 1] using the series' own min and max.

    Raises:
        InsufficientDataError: If *prices* is empty.
        InvalidConfigurationError: If any price is NaN or infinite.
        DegenerateSeriesError: If every price is the same, since the
            mapping would divide by zero.
    """
    arr = np.asarray(prices, dtype=float)
    if arr.size == 0:
        raise InsufficientDataError("Cannot normalize an empty price series")
    if not np.isfinite(arr).all():
        raise InvalidConfigurationError("Price series contains NaN or infinite values")

    lo = float(arr.min())
    hi = float(arr.max())
    if hi == lo:
        raise DegenerateSeriesError(
            f"Price series is constant ({lo}); cannot normalize"
        )

    values = (arr - lo) / (hi - lo)
    return NormalizedSeries(values=tuple(float(v) for v in values), min=lo, max=hi)


def denormalize(value: float, lo: float, hi: float) -> float:
    """Inverse of :func:`normalize` for a single value. Does not clamp."""
    return value * (hi - lo) + lo


def make_training_pairs(
    normalized: Sequence[float], window_width: int
) -> list[TrainingPair]:
    """Slide a window of *window_width* over *normalized*.

    Produces ``len(normalized) - window_width`` pairs whose output is the
    value immediately following each input window.

    Raises:
        InsufficientDataError: If the series has no more than
            *window_width* values.
    """
    if len(normalized) <= window_width:
        raise InsufficientDataError(
            f"Need at least {window_width + 1} data points to build "
            f"training windows of width {window_width}, got {len(normalized)}"
        )
    values = list(normalized)
    return [
        TrainingPair(
            input=tuple(values[i - window_width:i]),
            output=values[i],
        )
        for i in range(window_width, len(values))
    ]
