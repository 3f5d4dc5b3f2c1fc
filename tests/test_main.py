"""
Tests for the entry-point harnesses in main.py.
"""

import io
import json
import logging

import pytest

from main import NumberStreamApp, PriceAnalysisApp, main
from series_stats.config.config import Config


@pytest.fixture
def logger():
    return logging.getLogger("test_main")


def test_number_stream(logger):
    app = NumberStreamApp(Config(window_capacity=3), logger)
    source = io.StringIO("1\n2\n\nabc\n3\n4\n")
    sink = io.StringIO()

    assert app.run(source, sink) == 4
    assert app.rejected == 1

    lines = [json.loads(line) for line in sink.getvalue().splitlines()]
    assert len(lines) == 4
    assert lines[-1] == {
        "windowPrevState": [1.0, 2.0, 3.0],
        "windowCurrState": [2.0, 3.0, 4.0],
        "numbers": [2.0, 3.0, 4.0],
        "avg": 3.0,
    }


def test_add_number_rejects_without_touching_window(logger):
    app = NumberStreamApp(Config(), logger)
    app.add_number("5")
    assert app.add_number("   ") is None
    assert app.window.current == (5.0,)


def test_price_analysis(logger):
    histories = {"A": [10, 12, 11, 13], "B": [20, 19, 21, 18]}
    sink = io.StringIO()
    payload = PriceAnalysisApp(Config(), logger).run(histories, ["A", "B"], sink)
    assert payload["correlation"] == [[1.0, -0.8], [-0.8, 1.0]]
    assert json.loads(sink.getvalue()) == payload


def test_main_prices(tmp_path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("decimals: 3\n", encoding="utf-8")
    data_path = tmp_path / "prices.json"
    data_path.write_text(json.dumps({"A": [{"price": 1.0}, {"price": 2.0}], "B": [{"price": 4.0}, {"price": 3.0}]}),
                         encoding="utf-8")

    assert main(["--config", str(config_path), "prices", str(data_path), "A", "B"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["ids"] == ["A", "B"]
    assert payload["correlation"][0][1] == -1.0


def test_main_numbers_uses_packaged_config(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n2\n"))
    assert main(["numbers"]) == 0
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert lines[-1]["windowCurrState"] == [1.0, 2.0]
    assert lines[-1]["avg"] == 1.5
