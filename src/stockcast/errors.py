"""Exception hierarchy for forecast requests.

Every error is terminal for the invocation that raised it.  Callers may
resubmit; nothing in the engine retries.
"""

from __future__ import annotations


class ForecastError(Exception):
    """Base class for all forecast failures."""


class InsufficientDataError(ForecastError):
    """The price history is too short for the requested window."""


class DegenerateSeriesError(ForecastError):
    """The price series is constant and cannot be normalized."""


class DependencyUnavailableError(ForecastError):
    """The network backend is missing or not ready."""


class InvalidConfigurationError(ForecastError, ValueError):
    """Unknown model kind or a non-positive window/horizon."""


class ForecastCancelledError(ForecastError):
    """Training was cancelled at a progress checkpoint."""
