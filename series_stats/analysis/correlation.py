#!/usr/bin/env python
# coding:utf-8

from typing import Dict, List, Mapping, Sequence, Tuple
import numpy as np

from .core.statistics import CoreStatistics, SeriesLike
from series_stats.utils.constant import MIN_ALIGNED_SAMPLES



#-----------------------------------------------------------------------------------------------
def tail_align(series_a: SeriesLike, series_b: SeriesLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Truncate both series to their most recent common-length suffix.
    Older unmatched samples are dropped, chronological order is kept.
    """
    a = CoreStatistics.as_array(series_a)
    b = CoreStatistics.as_array(series_b)
    min_len = min(a.size, b.size)
    if min_len == 0:
        return a[:0], b[:0]
    return a[-min_len:], b[-min_len:]


class CorrelationMatrix:
    """
    Square matrix of pairwise Pearson correlations keyed by series id.
    Diagonal is always 1.0, the matrix is symmetric and pairs with fewer than
    two aligned samples are 0.0.
    """

    #-----------------------------------------------------------------------------------------------
    def __init__(self, ids: Sequence[str], values: np.ndarray):
        self._ids = list(ids)
        self._values = np.array(values, dtype=np.float64)
        self._values.flags.writeable = False
        self._positions = {}
        for position, series_id in enumerate(self._ids):
            self._positions.setdefault(series_id, position)

    #-----------------------------------------------------------------------------------------------
    @classmethod
    def build(cls, series_map: Mapping[str, SeriesLike], ids: Sequence[str]) -> "CorrelationMatrix":
        """
        Build the full N x N matrix for `ids`, in that row/column order.
        An id missing from `series_map` is treated as an empty series.
        """
        arrays = []
        for series_id in ids:
            series = series_map.get(series_id)
            arrays.append(CoreStatistics.as_array(series if series is not None else ()))
        n = len(arrays)
        values = np.zeros((n, n), dtype=np.float64)

        for i in range(n):
            values[i, i] = 1.0
            for j in range(i + 1, n):
                tail_i, tail_j = tail_align(arrays[i], arrays[j])
                if tail_i.size >= MIN_ALIGNED_SAMPLES:
                    corr = CoreStatistics.pearson(tail_i, tail_j)
                else:
                    corr = 0.0
                values[i, j] = corr
                values[j, i] = corr

        return cls(ids, values)

    #-----------------------------------------------------------------------------------------------
    @property
    def ids(self) -> List[str]:
        return list(self._ids)

    #-----------------------------------------------------------------------------------------------
    @property
    def values(self) -> np.ndarray:
        """Read-only (N, N) array."""
        return self._values

    #-----------------------------------------------------------------------------------------------
    def get(self, id_a: str, id_b: str) -> float:
        """
        Correlation between two ids. Raises KeyError for ids not in the matrix.
        """
        return float(self._values[self._positions[id_a], self._positions[id_b]])

    #-----------------------------------------------------------------------------------------------
    def row(self, series_id: str) -> List[float]:
        return [float(x) for x in self._values[self._positions[series_id]]]

    #-----------------------------------------------------------------------------------------------
    def to_rows(self) -> List[List[float]]:
        """
        Matrix as nested lists, indexed by position (heatmap payload).
        """
        return [[float(x) for x in row] for row in self._values]

    #-----------------------------------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """
        Matrix as {id: {id: value}}. With duplicate ids the first occurrence wins.
        """
        return {
            series_id: {other: self.get(series_id, other) for other in self._positions}
            for series_id in self._positions
        }

    def __len__(self) -> int:
        return len(self._ids)
