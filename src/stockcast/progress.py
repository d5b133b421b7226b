"""Training progress channel.

Progress is published as a percentage in [0, 100].  Callers can either poll
:attr:`TrainingProgress.percent` between awaited steps or subscribe a
callback that fires on every report.
"""

from __future__ import annotations

from typing import Callable

ProgressCallback = Callable[[float], None]


class TrainingProgress:
    """Observable percentage of work completed for a single forecast."""

    def __init__(self) -> None:
        self._percent = 0.0
        self._history: list[float] = []
        self._subscribers: list[ProgressCallback] = []

    @property
    def percent(self) -> float:
        """Most recently reported percentage."""
        return self._percent

    @property
    def history(self) -> list[float]:
        """Every percentage reported so far, in order."""
        return list(self._history)

    def subscribe(self, callback: ProgressCallback) -> None:
        self._subscribers.append(callback)

    def report(self, percent: float) -> None:
        """Publish *percent*, clamped to [0, 100]."""
        value = max(0.0, min(float(percent), 100.0))
        self._percent = value
        self._history.append(value)
        for callback in self._subscribers:
            callback(value)
