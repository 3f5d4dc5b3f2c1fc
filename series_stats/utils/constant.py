#!/usr/bin/env python
# coding:utf-8

"""
Constants shared by the numeric core and the configuration layer.
"""

# Number dashboard averages the last five numbers entered
DEFAULT_WINDOW_CAPACITY = 5

# Pairs need at least two aligned samples for a correlation
MIN_ALIGNED_SAMPLES = 2

DEFAULT_DECIMALS = 2
