"""Feed-forward network backend using scikit-learn's MLPRegressor."""

from __future__ import annotations

import asyncio
import math
from collections.abc import Sequence
from typing import Callable

import numpy as np
from sklearn.neural_network import MLPRegressor

from stockcast.models import TrainingPair


class SklearnNetworkBackend:
    """A sigmoid MLP trained one full-batch epoch per iteration.

    Implements the ``NetworkBackend`` protocol.  ``partial_fit`` is called
    once per iteration so training can yield to the event loop between
    progress checkpoints.
    """

    ready = True

    def __init__(
        self,
        hidden_layers: Sequence[int] = (20, 15, 10),
        learning_rate: float = 0.02,
        random_state: int | None = None,
    ) -> None:
        self._model = MLPRegressor(
            hidden_layer_sizes=tuple(hidden_layers),
            activation="logistic",
            solver="sgd",
            learning_rate_init=learning_rate,
            momentum=0.1,
            nesterovs_momentum=False,
            alpha=0.0,
            random_state=random_state,
        )
        self.iterations = 0
        self.error = math.nan

    async def train_async(
        self,
        pairs: Sequence[TrainingPair],
        *,
        iterations: int,
        error_threshold: float,
        log_period: int,
        callback: Callable[[int], None] | None = None,
    ) -> dict[str, float]:
        """Train until *iterations* or until the MSE drops below *error_threshold*.

        Returns:
            Dict with the number of ``iterations`` run and the final ``error``.
        """
        X = np.array([p.input for p in pairs], dtype=float)
        y = np.array([p.output for p in pairs], dtype=float)
        # one full-batch epoch per iteration, so loss_ is the whole-set error
        self._model.set_params(batch_size=len(X))

        for i in range(1, iterations + 1):
            self._model.partial_fit(X, y)
            self.iterations = i
            # loss_ is half the mean squared error when alpha is zero
            self.error = 2.0 * float(self._model.loss_)
            if self.error < error_threshold:
                break
            if i % log_period == 0:
                if callback is not None:
                    callback(i)
                await asyncio.sleep(0)

        return {"iterations": float(self.iterations), "error": self.error}

    def run(self, window: Sequence[float]) -> float:
        """Predict the value following *window*."""
        X = np.asarray(window, dtype=float).reshape(1, -1)
        return float(self._model.predict(X)[0])
