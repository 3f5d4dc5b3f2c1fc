#!/usr/bin/env python
# coding:utf-8

import numpy as np
from dataclasses import dataclass
from numbers import Integral
from typing import Dict, Any, Tuple

from series_stats.analysis.core.statistics import CoreStatistics
from series_stats.helpers.error_handler import ConfigurationError
from .constant import DEFAULT_WINDOW_CAPACITY


import logging
logger = logging.getLogger(__name__)



@dataclass(frozen=True)
class WindowSnapshot:
    """
    Immutable view of a SlidingWindow after an insertion.
    """
    previous: Tuple[float, ...]
    current: Tuple[float, ...]
    average: float

    #-----------------------------------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        """
        Payload in the shape the number dashboard renders.
        """
        return {
            "windowPrevState": list(self.previous),
            "windowCurrState": list(self.current),
            "numbers": list(self.current),
            "avg": self.average,
        }


class SlidingWindow:
    """
    Bounded FIFO window over a stream of numbers.
    Backed by a pre-allocated numpy ring buffer: the oldest value is overwritten once
    capacity is reached. Keeps one step of history (`previous`) and the mean of `current`.
    Not thread-safe, callers serialize pushes.
    """

    #-----------------------------------------------------------------------------------------------
    def __init__(self, capacity: int = DEFAULT_WINDOW_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, Integral) or capacity <= 0:
            raise ConfigurationError(f"Window capacity must be a positive integer, got {capacity!r}")

        self._capacity = int(capacity)
        self._data = np.zeros(self._capacity, dtype=np.float64)
        self._index = 0
        self._size = 0
        self._previous: Tuple[float, ...] = ()
        self._average = 0.0

    #-----------------------------------------------------------------------------------------------
    def push(self, value: float) -> WindowSnapshot:
        """
        Append a single value, evicting the oldest one when full. O(capacity) for the copies.
        """
        self._previous = self.current

        if self._size == self._capacity:
            logger.debug(f"Window full, evicting {self._data[self._index]}")

        # Insert at current index, overwriting the oldest value when full
        self._data[self._index] = float(value)
        self._index = (self._index + 1) % self._capacity
        if self._size < self._capacity:
            self._size += 1

        self._average = CoreStatistics.mean(self._ordered())
        return self.snapshot()

    #-----------------------------------------------------------------------------------------------
    def snapshot(self) -> WindowSnapshot:
        return WindowSnapshot(previous=self._previous, current=self.current, average=self._average)

    #-----------------------------------------------------------------------------------------------
    def _ordered(self) -> np.ndarray:
        """
        Return a copy of the valid data ordered oldest -> newest.
        """
        if self._size < self._capacity:
            # Data is continuous from 0 to size
            return self._data[:self._size].copy()

        # Data is wrapped: [index:] + [:index]
        return np.concatenate((self._data[self._index:], self._data[:self._index]))

    #-----------------------------------------------------------------------------------------------
    @property
    def current(self) -> Tuple[float, ...]:
        return tuple(float(x) for x in self._ordered())

    #-----------------------------------------------------------------------------------------------
    @property
    def previous(self) -> Tuple[float, ...]:
        return self._previous

    #-----------------------------------------------------------------------------------------------
    @property
    def average(self) -> float:
        return self._average

    #-----------------------------------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self._size

    #-----------------------------------------------------------------------------------------------
    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size
