#!/usr/bin/env python
# coding:utf-8

from typing import Any, Dict, IO, List, Optional
from json import load as jsonLoad, dumps as jsonDumps
from argparse import ArgumentParser
import sys


from series_stats.analysis.analysis_facade import AnalysisFacade
from series_stats.utils.sliding_window import SlidingWindow, WindowSnapshot
from series_stats.helpers.error_handler import ValidationError, handle_errors
from series_stats.helpers.validation import parse_sample
from series_stats.helpers.logger import get_config_logger
from series_stats.config.config import DEFAULT_CONFIG_PATH




class NumberStreamApp:
    """
    Feeds a stream of raw inputs into an owned SlidingWindow.
    Invalid inputs are logged and skipped, each accepted one yields a snapshot.
    """
    Name = "NumberStream"

    #-----------------------------------------------------------------------------------------------
    def __init__(self, config, logger, name: str = ""):
        self.config = config
        self.logger = logger
        if name != "":    self.Name = name
        self.window = SlidingWindow(capacity=self.config.WINDOW_CAPACITY)
        self.rejected = 0
        self.logger.info(f"Initialized {self.Name} with window capacity {self.window.capacity}")

    #-----------------------------------------------------------------------------------------------
    def add_number(self, raw: Any) -> Optional[WindowSnapshot]:
        try:
            value = parse_sample(raw)
        except ValidationError as e:
            self.rejected += 1
            self.logger.warning(f"{self.Name} : rejected input -> {e}")
            return None
        return self.window.push(value)

    #-----------------------------------------------------------------------------------------------
    def run(self, source: IO[str], sink: IO[str]) -> int:
        """
        Push one number per non-empty line of `source`, write JSON snapshots to `sink`.
        Returns the count of accepted numbers.
        """
        accepted = 0
        for line in source:
            if not line.strip():
                continue
            snapshot = self.add_number(line)
            if snapshot is None:
                continue
            accepted += 1
            sink.write(jsonDumps(snapshot.to_dict()) + "\n")
        self.logger.info(f"{self.Name} : {accepted} numbers accepted, {self.rejected} rejected")
        return accepted


class PriceAnalysisApp:
    """
    Computes per-symbol summaries and the correlation matrix for a set of price histories.
    """
    Name = "PriceAnalysis"

    #-----------------------------------------------------------------------------------------------
    def __init__(self, config, logger):
        self.config = config
        self.logger = logger
        self.analyzer = AnalysisFacade(self.config)

    #-----------------------------------------------------------------------------------------------
    def run(self, histories: Dict[str, Any], symbols: Optional[List[str]], sink: IO[str]) -> Dict[str, Any]:
        result = self.analyzer.analyze(histories, symbols or None)
        payload = result.to_dict(decimals=self.config.DECIMALS)
        sink.write(jsonDumps(payload) + "\n")
        self.logger.info(f"{self.Name} : analyzed {len(result.correlation)} series")
        return payload


#-----------------------------------------------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = ArgumentParser(description="Series statistics and sliding-window averages")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("numbers", help="read numbers from stdin, one per line")
    prices = sub.add_parser("prices", help="analyze a JSON file of {symbol: [price records]}")
    prices.add_argument("path")
    prices.add_argument("symbols", nargs="*")
    args = parser.parse_args(argv)

    config, logger = get_config_logger(name="SeriesStats", config_path=args.config)

    @handle_errors(logger)
    def _run() -> int:
        if args.command == "numbers":
            NumberStreamApp(config, logger).run(sys.stdin, sys.stdout)
        else:
            with open(args.path, "r", encoding="utf-8") as fh:
                histories = jsonLoad(fh)
            PriceAnalysisApp(config, logger).run(histories, args.symbols, sys.stdout)
        return 0

    try:
        return _run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt, user stopped application.")
        return 0




#================================================================
if __name__ == "__main__":
    raise SystemExit(main())
