"""Tests for the command-line entry point."""

from __future__ import annotations

import datetime
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from stockcast.cli import _build_parser, main
from stockcast.models import ModelKind, PricePoint


def _write_history(path: Path, prices: list[float]) -> Path:
    start = datetime.date(2024, 1, 1)
    records = [
        {"date": (start + datetime.timedelta(days=i)).isoformat(), "price": p}
        for i, p in enumerate(prices)
    ]
    path.write_text(json.dumps(records))
    return path


class TestBuildParser:
    """Verify argparse configuration."""

    def test_help_flag_exits_zero(self) -> None:
        parser = _build_parser()
        with pytest.raises(SystemExit) as exc:
            parser.parse_args(["--help"])
        assert exc.value.code == 0

    def test_defaults(self) -> None:
        args = _build_parser().parse_args([])
        assert args.data is None
        assert args.symbol is None
        assert args.ticker is None
        assert args.start is None
        assert args.model is None
        assert args.window is None
        assert args.days is None
        assert args.json is False

    def test_data_and_symbol_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["--data", "x.json", "--symbol", "AAPL"])

    def test_ticker_and_data_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["--ticker", "AAPL", "--data", "x.json"])

    def test_rejects_unknown_model(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["--model", "arima"])


class TestMain:
    """Verify the main() entry point."""

    def test_forecast_from_file(self, tmp_path: Path, capsys) -> None:
        path = _write_history(tmp_path / "h.json", [100.0 + i for i in range(60)])

        code = main(["--data", str(path), "--model", "linear", "--window", "10", "--days", "5"])

        assert code == 0
        out = capsys.readouterr().out
        assert "2024-03-01" in out
        assert "2024-03-05" in out
        assert "upward trend" in out

    def test_json_output(self, tmp_path: Path, capsys) -> None:
        path = _write_history(tmp_path / "h.json", [100.0 + i for i in range(60)])

        main(["--data", str(path), "--model", "linear", "--days", "3", "--json"])

        data = json.loads(capsys.readouterr().out)
        assert data["model_kind"] == "linear"
        assert len(data["predictions"]) == 3

    def test_synthetic_symbol(self, capsys) -> None:
        code = main(["--symbol", "TSLA", "--model", "ensemble", "--days", "5", "--seed", "3", "--json"])

        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["predictions"]) == 5

    def test_too_few_points_exit_code(self, tmp_path: Path, capsys) -> None:
        path = _write_history(tmp_path / "h.json", [100.0 + i for i in range(20)])

        code = main(["--data", str(path), "--model", "linear"])

        assert code == 2
        assert "at least 50" in capsys.readouterr().err

    def test_constant_series_exit_code(self, tmp_path: Path, capsys) -> None:
        path = _write_history(tmp_path / "h.json", [50.0] * 60)

        code = main(["--data", str(path), "--model", "lstm"])

        assert code == 2
        assert "constant" in capsys.readouterr().err

    def test_passes_config_to_forecast(self, tmp_path: Path) -> None:
        path = _write_history(tmp_path / "h.json", [100.0 + i for i in range(60)])

        with patch("stockcast.cli.run_forecast") as mock_run:
            mock_run.return_value.points = ()
            mock_run.return_value.trend = None
            main(["--data", str(path), "--model", "lstm", "--window", "15", "--days", "30"])

        mock_run.assert_called_once()
        history, config = mock_run.call_args.args
        assert len(history) == 60
        assert config.window_width == 15
        assert config.horizon_days == 30
        assert config.model_kind is ModelKind.LSTM

    def test_forecast_from_ticker(self, capsys) -> None:
        start = datetime.date(2024, 1, 1)
        points = [
            PricePoint(date=start + datetime.timedelta(days=i), price=100.0 + i)
            for i in range(60)
        ]

        with patch(
            "stockcast.collectors.price.fetch_close_history", return_value=points
        ) as mock_fetch:
            code = main(
                [
                    "--ticker", "AAPL",
                    "--start", "2024-01-01",
                    "--end", "2024-02-29",
                    "--model", "linear",
                    "--days", "3",
                    "--json",
                ]
            )

        assert code == 0
        mock_fetch.assert_called_once_with(
            "AAPL", datetime.date(2024, 1, 1), datetime.date(2024, 2, 29)
        )
        data = json.loads(capsys.readouterr().out)
        assert data["predictions"][0]["date"] == "2024-03-01"

    def test_ticker_with_too_few_closes(self, capsys) -> None:
        points = [
            PricePoint(date=datetime.date(2024, 1, 1) + datetime.timedelta(days=i), price=10.0 + i)
            for i in range(20)
        ]

        with patch("stockcast.collectors.price.fetch_close_history", return_value=points):
            code = main(["--ticker", "AAPL", "--model", "linear"])

        assert code == 2
        assert "at least 50" in capsys.readouterr().err

    def test_ticker_bad_date(self, capsys) -> None:
        code = main(["--ticker", "AAPL", "--end", "yesterday"])

        assert code == 2
        assert "error:" in capsys.readouterr().err
