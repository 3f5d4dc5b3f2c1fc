#!/usr/bin/env python
# coding:utf-8

from typing import Optional, Tuple
import logging

from series_stats.config.config import Config



def get_config_logger(name: str, config_path: Optional[str] = None) -> Tuple[Config, logging.Logger]:
    """
    Load configuration and set up root logging at the configured level.
    Returns (config, logger) for the named application.
    """
    config = Config(config_path=config_path)

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s : %(message)s",
    )
    logging.getLogger().setLevel(config.LOG_LEVEL)
    logger = logging.getLogger(name)
    return config, logger
