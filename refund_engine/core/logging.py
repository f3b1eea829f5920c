"""
Logging setup for the eligibility API and the reversal table script.

Engine modules log verdicts as `EVENT | key=value` lines through their
module loggers; this module only decides level, format and destination.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None, force: bool = False) -> None:
    """
    Configure centralized application logging.

    The API logs to stdout. The script passes stderr so rendered rows
    stay alone on stdout, and force=True so --log-level wins over any
    configuration done at import time.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
        force=force,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Retrieve a namespaced logger.
    """
    return logging.getLogger(name)
