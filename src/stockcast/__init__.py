"""stockcast: toy price-series forecasting engine."""

__version__ = "0.1.0"
