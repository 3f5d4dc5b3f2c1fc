#!/usr/bin/env python
# coding:utf-8

from typing import Any, Dict, Optional
from os.path import exists as osPathExists, join as osPathJoin, \
                    dirname as osPathDirname, abspath as osPathAbspath
import yaml

from series_stats.helpers.error_handler import ConfigurationError
from series_stats.utils.constant import DEFAULT_WINDOW_CAPACITY, DEFAULT_DECIMALS


import logging
logger = logging.getLogger(__name__)

# Shipped next to this module as package data
DEFAULT_CONFIG_PATH = osPathJoin(osPathDirname(osPathAbspath(__file__)), "default.yaml")



class Config:
    """
    Application settings loaded from a YAML file over built-in defaults.
    Settings are exposed as upper-case attributes (config.WINDOW_CAPACITY, ...).
    """

    DEFAULTS: Dict[str, Any] = {
        "WINDOW_CAPACITY": DEFAULT_WINDOW_CAPACITY,
        "LOG_LEVEL": "INFO",
        "SYMBOLS": [],
        "DECIMALS": DEFAULT_DECIMALS,
    }

    #-----------------------------------------------------------------------------------------------
    def __init__(self, config_path: Optional[str] = None, **overrides):
        self.config_path = config_path
        values = dict(self.DEFAULTS)
        values["SYMBOLS"] = list(values["SYMBOLS"])

        if config_path is not None:
            values.update(self._load_file(config_path))
        values.update(self._filter_known(overrides, source="overrides"))

        self._validate(values)
        for key, value in values.items():
            setattr(self, key, value)

    #-----------------------------------------------------------------------------------------------
    def _load_file(self, config_path: str) -> Dict[str, Any]:
        if not osPathExists(config_path):
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigurationError(f"Config root must be a mapping in {config_path}")

        return self._filter_known(raw, source=config_path)

    #-----------------------------------------------------------------------------------------------
    def _filter_known(self, raw: Dict[Any, Any], source: str) -> Dict[str, Any]:
        """
        Upper-case the keys and drop (with a warning) those without a default.
        """
        loaded = {}
        for key, value in raw.items():
            name = str(key).upper()
            if name not in self.DEFAULTS:
                logger.warning(f"Ignoring unknown config key '{key}' in {source}")
                continue
            loaded[name] = value
        return loaded

    #-----------------------------------------------------------------------------------------------
    @staticmethod
    def _validate(values: Dict[str, Any]):
        capacity = values["WINDOW_CAPACITY"]
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConfigurationError(f"WINDOW_CAPACITY must be a positive integer, got {capacity!r}")

        decimals = values["DECIMALS"]
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise ConfigurationError(f"DECIMALS must be a non-negative integer, got {decimals!r}")

        level = values["LOG_LEVEL"]
        if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
            raise ConfigurationError(f"LOG_LEVEL is not a logging level: {level!r}")
        values["LOG_LEVEL"] = level.upper()

        symbols = values["SYMBOLS"]
        if symbols is None:
            symbols = []
        if not isinstance(symbols, list) or not all(isinstance(s, str) for s in symbols):
            raise ConfigurationError(f"SYMBOLS must be a list of strings, got {symbols!r}")
        values["SYMBOLS"] = list(symbols)

    #-----------------------------------------------------------------------------------------------
    def as_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in self.DEFAULTS}
