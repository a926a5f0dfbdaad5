"""
Structured logging for lingocards.

Console and file output plus practice metrics (scores computed,
attempts finished, tier counts) for reviewing a study session.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json

from .feedback import TIERS


class StructuredLogger:
    """
    Logger with console/file handlers and practice metrics.
    """

    def __init__(
        self,
        name: str = "lingocards",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()

        self.metrics = {
            "scores_computed": 0,
            "attempts": 0,
            "reveals": 0,
            "score_total": 0,
            "tiers": {tier: 0 for tier in TIERS},
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_handler.setFormatter(logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"lingocards_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # file gets everything
            file_handler.setFormatter(logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, ensure_ascii=False)}"
        self.logger.log(level, message)

    # Metric tracking

    def record_score(self, score: int, tier: str):
        """Record one scored transcript (interim or final)."""
        self.metrics["scores_computed"] += 1
        self.metrics["score_total"] += score
        self.metrics["tiers"][tier] = self.metrics["tiers"].get(tier, 0) + 1

    def record_attempt(self, revealed: bool):
        """Record a finished attempt (final transcript received)."""
        self.metrics["attempts"] += 1
        if revealed:
            self.metrics["reveals"] += 1

    def get_metrics(self) -> dict:
        metrics_copy = dict(self.metrics)
        metrics_copy["tiers"] = dict(self.metrics["tiers"])
        computed = metrics_copy["scores_computed"]
        metrics_copy["mean_score"] = round(metrics_copy["score_total"] / computed, 1) if computed else 0.0
        return metrics_copy

    def log_metrics_summary(self):
        metrics = self.get_metrics()

        self.info("=== Practice Session Metrics ===")
        self.info(f"Scores computed: {metrics['scores_computed']} (mean {metrics['mean_score']})")
        self.info(f"Attempts: {metrics['attempts']} ({metrics['reveals']} revealed)")
        for tier, count in metrics["tiers"].items():
            self.info(f"  {tier}: {count}")


_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "lingocards",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
