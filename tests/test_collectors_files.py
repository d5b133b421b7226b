"""Tests for loading price histories from JSON and CSV files."""

from __future__ import annotations

import datetime
import json
from pathlib import Path

import pytest

from stockcast.collectors.files import load_price_history
from stockcast.errors import InsufficientDataError
from stockcast.models import PricePoint


def _records(n: int, start: datetime.date = datetime.date(2024, 1, 1)) -> list[dict[str, object]]:
    return [
        {"date": (start + datetime.timedelta(days=i)).isoformat(), "price": 100.0 + i}
        for i in range(n)
    ]


def _write_json(path: Path, records: object) -> Path:
    path.write_text(json.dumps(records))
    return path


class TestLoadPriceHistory:
    """Tests for load_price_history()."""

    def test_loads_json_records(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "prices.json", _records(50))

        history = load_price_history(path)

        assert len(history) == 50
        assert all(isinstance(p, PricePoint) for p in history)
        assert history[0] == PricePoint(date=datetime.date(2024, 1, 1), price=100.0)
        assert history[-1].date == datetime.date(2024, 2, 19)

    def test_loads_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "prices.csv"
        lines = ["date,price"] + [f"{r['date']},{r['price']}" for r in _records(60)]
        path.write_text("\n".join(lines) + "\n")

        history = load_price_history(path)

        assert len(history) == 60
        assert history[5].price == 105.0

    def test_sorted_by_date(self, tmp_path: Path) -> None:
        records = list(reversed(_records(55)))
        path = _write_json(tmp_path / "prices.json", records)

        history = load_price_history(path)

        dates = [p.date for p in history]
        assert dates == sorted(dates)

    def test_minimum_points_enforced(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "prices.json", _records(49))

        with pytest.raises(InsufficientDataError, match="at least 50"):
            load_price_history(path)

    def test_custom_minimum(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "prices.json", _records(12))
        assert len(load_price_history(path, min_points=10)) == 12

    def test_empty_array(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "prices.json", [])
        with pytest.raises(InsufficientDataError):
            load_price_history(path)

    def test_missing_column(self, tmp_path: Path) -> None:
        records = [{"date": r["date"], "close": r["price"]} for r in _records(50)]
        path = _write_json(tmp_path / "prices.json", records)

        with pytest.raises(ValueError, match="missing columns: price"):
            load_price_history(path)

    def test_negative_price_rejected(self, tmp_path: Path) -> None:
        records = _records(50)
        records[10]["price"] = -1.0
        path = _write_json(tmp_path / "prices.json", records)

        with pytest.raises(ValueError, match="finite and >= 0"):
            load_price_history(path)
