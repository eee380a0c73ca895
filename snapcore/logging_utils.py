"""
snapcore/logging_utils.py
-------------------------
Console (and optional rotating file) logging for Snap Suite scripts.
Library modules only create loggers; applications call configure_logging().
"""

__all__ = ["configure_logging", "ColorFormatter"]

import logging
import os
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, init as colorama_init


class ColorFormatter(logging.Formatter):
    """Colorized console formatter."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, "")
        reset = Style.RESET_ALL
        return (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{color}{record.levelname:<7s}{reset}] "
            f"{record.name}: {record.getMessage()}"
        )


def configure_logging(level=logging.INFO, log_dir=None, name="snapcurve", run_prefix="run"):
    """
    Attach a colorized console handler (and a rotating file handler when
    `log_dir` is given) to the named logger.

    Returns:
        Path of the log file, or None when logging to the console only.
    """
    colorama_init(strip=False)
    datefmt = "%H:%M:%S"

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(datefmt=datefmt))
    logger.addHandler(ch)

    log_path = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y-%m-%d_%H%M%S")
        log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"

        fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(logging.Formatter("[%(asctime)s] [%(levelname)-7s] %(name)s: %(message)s",
                                          datefmt))
        logger.addHandler(fh)

    logger.debug("Logging initialized - PID %d; file %s", os.getpid(), log_path)
    return log_path
