"""
Tests for AnalysisFacade - price extraction, summaries and matrix assembly.
"""

import logging

import numpy as np
import pytest

from series_stats.analysis.analysis_facade import AnalysisFacade, SeriesSummary
from series_stats.config.config import Config


HISTORIES = {
    "NVDA": [
        {"price": 100.0, "lastUpdatedAt": "2025-05-08T04:11:42.465706306Z"},
        {"price": 102.0, "lastUpdatedAt": "2025-05-08T04:12:42.465706306Z"},
        {"price": 104.0, "lastUpdatedAt": "2025-05-08T04:13:42.465706306Z"},
    ],
    "PYPL": [
        {"price": 70.0, "lastUpdatedAt": "2025-05-08T04:11:40.000000000Z"},
        {"price": 69.0, "lastUpdatedAt": "2025-05-08T04:12:40.000000000Z"},
        {"price": 68.0, "lastUpdatedAt": "2025-05-08T04:13:40.000000000Z"},
    ],
    "AMD": {"stock": {"price": 50.0, "lastUpdatedAt": "2025-05-08T04:13:00.000000000Z"}},
}


class TestExtractPrices:

    def test_records(self):
        assert AnalysisFacade.extract_prices(HISTORIES["NVDA"]).tolist() == [100.0, 102.0, 104.0]

    def test_single_wrapped_record(self):
        assert AnalysisFacade.extract_prices(HISTORIES["AMD"]).tolist() == [50.0]

    def test_single_bare_record(self):
        assert AnalysisFacade.extract_prices({"price": 12.5}).tolist() == [12.5]

    def test_plain_numbers(self):
        assert AnalysisFacade.extract_prices([1, 2.5, 3]).tolist() == [1.0, 2.5, 3.0]

    def test_skips_invalid_records(self):
        records = [{"price": 1.0}, {"price": None}, {"lastUpdatedAt": "x"}, {"price": "2"},
                   {"price": float("nan")}, {"price": True}, {"price": 3.0}]
        assert AnalysisFacade.extract_prices(records).tolist() == [1.0, 3.0]

    def test_array_skips_non_finite(self):
        values = np.array([1.0, np.nan, 3.0, np.inf])
        assert AnalysisFacade.extract_prices(values).tolist() == [1.0, 3.0]
        assert AnalysisFacade.summarize_series(AnalysisFacade.extract_prices(values)).mean == 2.0

    def test_none(self):
        assert AnalysisFacade.extract_prices(None).size == 0


def test_summarize_series():
    summary = AnalysisFacade.summarize_series(np.array([1.0, 2.0, 3.0, 4.0, 5.0]))
    assert summary.mean == 3.0
    assert summary.stddev == pytest.approx(1.41421356)
    assert summary.count == 5
    assert AnalysisFacade.summarize_series([]) == SeriesSummary(0.0, 0.0, 0)


class TestAnalyze:

    def test_summaries_and_matrix(self):
        result = AnalysisFacade().analyze(HISTORIES, ["NVDA", "PYPL", "AMD"])
        assert result.summaries["NVDA"].mean == 102.0
        assert result.summaries["AMD"].count == 1
        assert result.correlation.get("NVDA", "PYPL") == pytest.approx(-1.0)
        assert result.correlation.get("NVDA", "AMD") == 0.0
        assert result.correlation.get("AMD", "AMD") == 1.0

    def test_missing_symbol(self):
        result = AnalysisFacade().analyze(HISTORIES, ["NVDA", "TSLA"])
        assert result.summaries["TSLA"] == SeriesSummary(0.0, 0.0, 0)
        assert result.correlation.to_rows() == [[1.0, 0.0], [0.0, 1.0]]

    def test_ids_default_to_config_symbols(self):
        facade = AnalysisFacade(Config(symbols=["PYPL", "NVDA"]))
        result = facade.analyze(HISTORIES)
        assert result.correlation.ids == ["PYPL", "NVDA"]

    def test_ids_default_to_history_keys(self):
        result = AnalysisFacade().analyze(HISTORIES)
        assert result.correlation.ids == ["NVDA", "PYPL", "AMD"]

    def test_unreadable_history_degrades_and_logs(self, caplog):
        histories = dict(HISTORIES, BAD=42)
        with caplog.at_level(logging.ERROR):
            result = AnalysisFacade().analyze(histories, ["NVDA", "BAD"])
        assert result.summaries["BAD"].count == 0
        assert result.correlation.get("NVDA", "BAD") == 0.0
        assert "BAD" in caplog.text

    def test_to_dict_rounds(self):
        payload = AnalysisFacade().analyze(HISTORIES, ["NVDA", "PYPL"]).to_dict(decimals=2)
        assert payload["ids"] == ["NVDA", "PYPL"]
        assert payload["summaries"]["NVDA"] == {"mean": 102.0, "stddev": 1.63, "count": 3}
        assert payload["correlation"] == [[1.0, -1.0], [-1.0, 1.0]]
