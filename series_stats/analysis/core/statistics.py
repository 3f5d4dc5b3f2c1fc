#!/usr/bin/env python
# coding:utf-8

from dataclasses import dataclass
from typing import Iterable, Tuple, Union
import numpy as np


SeriesLike = Union[np.ndarray, Iterable[float]]



@dataclass(frozen=True)
class CorrelationResult:
    """
    Tagged correlation value.
    `defined` is False when the coefficient cannot be computed (constant operand,
    fewer than 2 samples or mismatched lengths), in which case `value` is 0.0.
    """
    defined: bool
    value: float


class CoreStatistics:
    """
    Pure mathematical statistics functions using Numpy.
    Stateless and side-effect free: degenerate inputs resolve to 0.0, nothing raises.
    """

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def as_array(series: SeriesLike) -> np.ndarray:
        """
        Convert any sequence of numbers to a flat float64 array.
        """
        if isinstance(series, np.ndarray):
            return series.astype(np.float64, copy=False).ravel()
        return np.fromiter((float(x) for x in series), dtype=np.float64)

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def mean(series: SeriesLike) -> float:
        """
        Arithmetic mean. Returns 0.0 if series is empty.
        """
        values = CoreStatistics.as_array(series)
        if values.size == 0:
            return 0.0
        return float(np.mean(values))

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def stddev(series: SeriesLike) -> float:
        """
        Population standard deviation (divides by N, not N-1).
        Returns 0.0 for empty, single-element or constant series.
        """
        values = CoreStatistics.as_array(series)
        # constant series are exactly 0, whatever rounding the mean picked up
        if values.size < 2 or np.all(values == values[0]):
            return 0.0
        return float(np.std(values))

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def covariance(series_a: SeriesLike, series_b: SeriesLike) -> float:
        """
        Population covariance: mean of the product of deviations from each series' own mean.
        Both series must be aligned by the caller; mismatched or empty input gives 0.0.
        """
        a = CoreStatistics.as_array(series_a)
        b = CoreStatistics.as_array(series_b)
        if a.size != b.size or a.size == 0:
            return 0.0
        return float(np.mean((a - np.mean(a)) * (b - np.mean(b))))

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def pearson(series_a: SeriesLike, series_b: SeriesLike) -> float:
        """
        Pearson correlation coefficient: covariance / (stddev_a * stddev_b).
        A zero denominator is treated as 1, so a constant operand gives 0.0 instead of NaN.
        """
        a = CoreStatistics.as_array(series_a)
        b = CoreStatistics.as_array(series_b)
        if a.size != b.size:
            return 0.0

        denominator = CoreStatistics.stddev(a) * CoreStatistics.stddev(b)
        if denominator == 0:
            # covariance against a constant series is 0
            return 0.0

        corr = CoreStatistics.covariance(a, b) / denominator
        if np.isnan(corr):
            return 0.0
        return float(np.clip(corr, -1.0, 1.0))

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def pearson_strict(series_a: SeriesLike, series_b: SeriesLike) -> CorrelationResult:
        """
        Same coefficient as `pearson` but reports undefined correlations explicitly
        instead of folding them into 0.0.
        """
        a = CoreStatistics.as_array(series_a)
        b = CoreStatistics.as_array(series_b)
        if a.size != b.size or a.size < 2:
            return CorrelationResult(defined=False, value=0.0)

        if CoreStatistics.stddev(a) == 0 or CoreStatistics.stddev(b) == 0:
            return CorrelationResult(defined=False, value=0.0)

        return CorrelationResult(defined=True, value=CoreStatistics.pearson(a, b))

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def calculate_mean_std(values: SeriesLike) -> Tuple[float, float]:
        """
        Calculate mean and standard deviation.
        Returns (0.0, 0.0) if array is empty.
        """
        values = CoreStatistics.as_array(values)
        return CoreStatistics.mean(values), CoreStatistics.stddev(values)
