"""Canonical data models for stockcast."""

from __future__ import annotations

import datetime
import math
from dataclasses import dataclass
from enum import Enum

from stockcast.errors import InvalidConfigurationError

WINDOW_PRESETS: tuple[int, ...] = (5, 10, 15, 30)


@dataclass(frozen=True, slots=True)
class PricePoint:
    """A single historical daily price."""

    date: datetime.date
    price: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError(f"price ({self.price}) must be finite and >= 0")


@dataclass(frozen=True, slots=True)
class NormalizedSeries:
    """Prices rescaled to [0, 1] together with the bounds used."""

    values: tuple[float, ...]
    min: float
    max: float

    def __post_init__(self) -> None:
        if self.max <= self.min:
            raise ValueError(
                f"max ({self.max}) must be > min ({self.min})"
            )

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True, slots=True)
class TrainingPair:
    """One (input window, next value) sample."""

    input: tuple[float, ...]
    output: float


@dataclass(frozen=True, slots=True)
class ForecastPoint:
    """A single forecast price for a future calendar day."""

    date: datetime.date
    price: float
    is_prediction: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError(f"price ({self.price}) must be finite and >= 0")

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {
            "date": self.date.isoformat(),
            "price": self.price,
            "isPrediction": self.is_prediction,
        }


class ModelKind(Enum):
    """Available forecasting strategies."""

    NEURAL = "neural"
    LSTM = "lstm"
    LINEAR = "linear"
    ENSEMBLE = "ensemble"

    @classmethod
    def parse(cls, value: str | ModelKind) -> ModelKind:
        """Resolve a short value (``"lstm"``) or long name (``"pseudo-recurrent"``).

        Raises:
            InvalidConfigurationError: If *value* names no known strategy.
        """
        if isinstance(value, ModelKind):
            return value
        key = str(value).strip().lower()
        try:
            return cls(_ALIASES.get(key, key))
        except ValueError:
            raise InvalidConfigurationError(
                f"Unknown model kind '{value}'. "
                f"Expected one of: {', '.join(k.value for k in cls)}"
            ) from None


_ALIASES = {
    "trained-network": "neural",
    "pseudo-recurrent": "lstm",
    "linear-trend": "linear",
}


@dataclass(frozen=True, slots=True)
class StrategyConfig:
    """Per-request forecast configuration."""

    window_width: int
    horizon_days: int
    model_kind: ModelKind = ModelKind.NEURAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "model_kind", ModelKind.parse(self.model_kind))
        for name in ("window_width", "horizon_days"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidConfigurationError(
                    f"{name} ({value!r}) must be a positive integer"
                )


class TrendDirection(Enum):
    """Direction of a forecast from its first to its last point."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True, slots=True)
class TrendSummary:
    """First-vs-last direction and percentage change over a forecast."""

    direction: TrendDirection
    percent_change: float

    def __post_init__(self) -> None:
        if self.percent_change < 0:
            raise ValueError(
                f"percent_change ({self.percent_change}) must be >= 0"
            )

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {
            "direction": self.direction.value,
            "percentChange": round(self.percent_change, 2),
        }


@dataclass(frozen=True, slots=True)
class ForecastResult:
    """Output of one forecast request."""

    model_kind: ModelKind
    points: tuple[ForecastPoint, ...]
    trend: TrendSummary | None

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {
            "model_kind": self.model_kind.value,
            "predictions": [p.to_dict() for p in self.points],
            "trend": self.trend.to_dict() if self.trend is not None else None,
        }
