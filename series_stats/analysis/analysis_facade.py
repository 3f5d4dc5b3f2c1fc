#!/usr/bin/env python
# coding:utf-8

from dataclasses import dataclass
from numbers import Real
from typing import Dict, List, Any, Mapping, Optional, Sequence
import numpy as np

from .core.statistics import CoreStatistics
from .correlation import CorrelationMatrix



import logging
logger = logging.getLogger(__name__)



@dataclass(frozen=True)
class SeriesSummary:
    mean: float
    stddev: float
    count: int

    #-----------------------------------------------------------------------------------------------
    def to_dict(self, decimals: Optional[int] = None) -> Dict[str, Any]:
        if decimals is None:
            return {"mean": self.mean, "stddev": self.stddev, "count": self.count}
        return {"mean": round(self.mean, decimals), "stddev": round(self.stddev, decimals), "count": self.count}


@dataclass(frozen=True)
class AnalysisResult:
    summaries: Dict[str, SeriesSummary]
    correlation: CorrelationMatrix

    #-----------------------------------------------------------------------------------------------
    def to_dict(self, decimals: Optional[int] = None) -> Dict[str, Any]:
        rows = self.correlation.to_rows()
        if decimals is not None:
            rows = [[round(x, decimals) for x in row] for row in rows]
        return {
            "ids": self.correlation.ids,
            "summaries": {sid: s.to_dict(decimals) for sid, s in self.summaries.items()},
            "correlation": rows,
        }


class AnalysisFacade:
    """
    Orchestrates the price analysis pipeline.
    1. Prepares Data (price records -> Numpy)
    2. Calculates per-series summaries (Core Functions)
    3. Builds the correlation matrix across the selection
    """

    #-----------------------------------------------------------------------------------------------
    def __init__(self, config=None):
        self.config = config

    #-----------------------------------------------------------------------------------------------
    def analyze(self, histories: Mapping[str, Any], ids: Optional[Sequence[str]] = None) -> AnalysisResult:
        """
        Summaries and correlation matrix for `ids` (defaults to config.SYMBOLS, then to the
        keys of `histories`). A missing or unreadable history degrades to an empty series.
        """
        if ids is None:
            ids = list(getattr(self.config, "SYMBOLS", None) or histories.keys())

        prices: Dict[str, np.ndarray] = {}
        for symbol in ids:
            if symbol in prices:
                continue
            try:
                prices[symbol] = self.extract_prices(histories.get(symbol, []))
            except Exception as e:
                logger.error(f"Error extracting prices for {symbol}: {e}")
                prices[symbol] = np.empty(0, dtype=np.float64)

        summaries = {symbol: self.summarize_series(series) for symbol, series in prices.items()}
        correlation = CorrelationMatrix.build(prices, ids)

        logger.debug(f"Analyzed {len(ids)} series: " +
                     ", ".join(f"{sid}={summaries[sid].count}pts" for sid in summaries))
        return AnalysisResult(summaries=summaries, correlation=correlation)

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def summarize_series(series: Any) -> SeriesSummary:
        values = CoreStatistics.as_array(series)
        mean, std = CoreStatistics.calculate_mean_std(values)
        return SeriesSummary(mean=mean, stddev=std, count=int(values.size))

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def extract_prices(records: Any) -> np.ndarray:
        """
        Convert price history to a 1D float64 array, keeping order.
        Accepts a list of {"price": ..., "lastUpdatedAt": ...} records, a single such record
        (upstream answers with one object when only the latest price exists), its
        {"stock": {...}} wrapper, or a plain list of numbers.
        Records without a numeric price are skipped.
        """
        if records is None:
            return np.empty(0, dtype=np.float64)

        if isinstance(records, np.ndarray):
            values = records.astype(np.float64, copy=False).ravel()
            return values[np.isfinite(values)]

        if isinstance(records, Mapping):
            records = [records.get("stock", records)]

        prices: List[float] = []
        for record in records:
            if isinstance(record, Mapping):
                value = record.get("price")
            else:
                value = record

            # Ensure strictly valid numbers
            if isinstance(value, Real) and not isinstance(value, bool) and np.isfinite(value):
                prices.append(float(value))

        return np.array(prices, dtype=np.float64)
