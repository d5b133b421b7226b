"""Configuration loaded from environment variables with sensible defaults."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings. Override via STOCKCAST_* env vars."""

    log_level: str = "INFO"

    model_kind: str = "neural"
    window_width: int = 10
    horizon_days: int = 10
    min_history_points: int = 50
    random_seed: int | None = None

    hidden_layers: list[int] = [20, 15, 10]
    learning_rate: float = 0.02
    max_iterations: int = 4000
    error_threshold: float = 0.002
    log_period: int = 100

    model_config = {"env_prefix": "STOCKCAST_"}
