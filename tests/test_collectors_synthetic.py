"""Tests for the synthetic price history generator."""

from __future__ import annotations

import datetime

import numpy as np
import pytest

from stockcast.collectors.synthetic import BASE_PRICES, generate_history


class TestGenerateHistory:
    """Tests for generate_history()."""

    def test_length_and_dates(self) -> None:
        end = datetime.date(2024, 3, 31)
        history = generate_history("AAPL", 30, rng=np.random.default_rng(0), end=end)

        assert len(history) == 31
        assert history[-1].date == end
        assert history[0].date == end - datetime.timedelta(days=30)
        for a, b in zip(history, history[1:]):
            assert (b.date - a.date).days == 1

    def test_starts_near_base_price(self) -> None:
        history = generate_history("NVDA", 5, rng=np.random.default_rng(1))
        # first day moves at most 3% plus drift
        assert history[0].price == pytest.approx(BASE_PRICES["NVDA"], rel=0.04)

    def test_unknown_symbol_uses_default(self) -> None:
        history = generate_history("ZZZZ", 0, rng=np.random.default_rng(2))
        assert history[0].price == pytest.approx(100.0, rel=0.04)

    def test_rounded_to_cents(self) -> None:
        history = generate_history("MSFT", 20, rng=np.random.default_rng(3))
        assert all(round(p.price, 2) == p.price for p in history)

    def test_seeded_reproducible(self) -> None:
        end = datetime.date(2024, 1, 1)
        a = generate_history("TSLA", 10, rng=np.random.default_rng(7), end=end)
        b = generate_history("TSLA", 10, rng=np.random.default_rng(7), end=end)
        assert a == b

    def test_negative_days_rejected(self) -> None:
        with pytest.raises(ValueError):
            generate_history("AAPL", -1, rng=np.random.default_rng(0))
