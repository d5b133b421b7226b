"""LSTM-inspired rollout with a scalar memory cell.

Not a real LSTM: the forget and input gates are fixed constants and the
"cell" is a single exponentially smoothed mean of the sliding window.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

import numpy as np

FORGET_GATE = 0.7
INPUT_GATE = 0.3
TREND_WEIGHT = 0.1
NOISE_WEIGHT = 0.1


def predict_recurrent(
    normalized: Sequence[float],
    window_width: int,
    horizon: int,
    *,
    rng: np.random.Generator,
) -> list[float]:
    """Roll the memory cell forward *horizon* steps.

    Every emitted value is clamped to [0, 1].  The window slides with the
    unclamped prediction.
    """
    window = deque(normalized[-window_width:], maxlen=window_width)
    width = len(window)
    cell_state = sum(window) / width

    predictions: list[float] = []
    for _ in range(horizon):
        mean = sum(window) / width
        trend = window[-1] - window[0]

        cell_state = cell_state * FORGET_GATE + mean * INPUT_GATE

        volatility = math.sqrt(sum((v - mean) ** 2 for v in window) / width)
        noise = (rng.random() - 0.5) * volatility * NOISE_WEIGHT
        prediction = cell_state + trend * TREND_WEIGHT + noise

        predictions.append(max(0.0, min(1.0, prediction)))
        window.append(prediction)

    return predictions
