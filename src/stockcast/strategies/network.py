"""Trained feed-forward network strategy.

Training and inference are delegated to an injected :class:`NetworkBackend`
so the strategy has no hidden dependency on a particular library.
"""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import Sequence
from typing import Callable, Protocol

from stockcast.errors import DependencyUnavailableError, ForecastCancelledError
from stockcast.models import TrainingPair
from stockcast.progress import TrainingProgress
from stockcast.series import make_training_pairs

MAX_ITERATIONS = 4000
ERROR_THRESHOLD = 0.002
LOG_PERIOD = 100


class NetworkBackend(Protocol):
    """Interface every trainable network backend must satisfy."""

    @property
    def ready(self) -> bool:
        """Whether the backend can train and run right now."""
        ...  # pragma: no cover

    async def train_async(
        self,
        pairs: Sequence[TrainingPair],
        *,
        iterations: int,
        error_threshold: float,
        log_period: int,
        callback: Callable[[int], None] | None = None,
    ) -> dict[str, float]:
        """Train on *pairs*, calling *callback* every *log_period* iterations."""
        ...  # pragma: no cover

    def run(self, window: Sequence[float]) -> float:
        """Return the network's output for one input window."""
        ...  # pragma: no cover


def training_percent(iterations: int, max_iterations: int = MAX_ITERATIONS) -> float:
    """Progress as ``iterations / max_iterations * 100``, capped at 100."""
    return min(iterations / max_iterations * 100, 100.0)


async def predict_network(
    normalized: Sequence[float],
    window_width: int,
    horizon: int,
    *,
    backend: NetworkBackend | None,
    progress: TrainingProgress | None = None,
    cancel_event: asyncio.Event | None = None,
    max_iterations: int = MAX_ITERATIONS,
    error_threshold: float = ERROR_THRESHOLD,
    log_period: int = LOG_PERIOD,
) -> list[float]:
    """Train *backend* on sliding windows, then roll it forward *horizon* steps.

    Args:
        normalized: Series scaled to [0, 1].
        window_width: Input width of the network.
        horizon: Number of future values to produce.
        backend: Network implementation.  Must be present and ready.
        progress: Receives a percentage every *log_period* iterations.
        cancel_event: When set, training stops at the next checkpoint.

    Returns:
        *horizon* raw network outputs, unclamped.

    Raises:
        DependencyUnavailableError: If *backend* is missing or not ready.
        ForecastCancelledError: If *cancel_event* was set during training.
    """
    if backend is None or not backend.ready:
        raise DependencyUnavailableError(
            "Network backend is not ready. Try again once it has loaded."
        )

    pairs = make_training_pairs(normalized, window_width)

    def _on_checkpoint(iterations: int) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise ForecastCancelledError(
                f"Training cancelled after {iterations} iterations"
            )
        if progress is not None:
            progress.report(training_percent(iterations, max_iterations))

    await backend.train_async(
        pairs,
        iterations=max_iterations,
        error_threshold=error_threshold,
        log_period=log_period,
        callback=_on_checkpoint,
    )

    window = deque(normalized[-window_width:], maxlen=window_width)
    predictions: list[float] = []
    for _ in range(horizon):
        prediction = backend.run(list(window))
        predictions.append(prediction)
        window.append(prediction)
    return predictions
