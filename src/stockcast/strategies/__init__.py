"""Forecast strategies operating on normalized series."""

from stockcast.strategies.backend import SklearnNetworkBackend
from stockcast.strategies.ensemble import predict_ensemble
from stockcast.strategies.linear import predict_linear
from stockcast.strategies.network import NetworkBackend, predict_network
from stockcast.strategies.recurrent import predict_recurrent

__all__ = [
    "NetworkBackend",
    "SklearnNetworkBackend",
    "predict_ensemble",
    "predict_linear",
    "predict_network",
    "predict_recurrent",
]
