"""
logging_utils.py

Opt-in logging setup for applications using paracurve. The library itself only
creates module loggers under the "paracurve" namespace and never installs
handlers on import.
"""

__all__ = ["configure_logging", "ColorFormatter"]

import os
import time
import logging
from typing import Optional, Union
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorama import Fore, Style, just_fix_windows_console

PathLike = Union[str, os.PathLike]

MONO_FMT = "[%(asctime)s] [%(process)5d] [%(levelname)-5s] %(name)s: %(message)s"
DATE_FMT = "%H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Colorized console formatter."""
    COLORS = {
        "DEBUG":    Fore.CYAN,
        "INFO":     Fore.GREEN,
        "WARNING":  Fore.YELLOW,
        "ERROR":    Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        reset = Style.RESET_ALL
        return (
            f"[{self.formatTime(record, self.datefmt)}] "
            f"[{record.process:5d}] "
            f"[{color}{record.levelname:<5s}{reset}] "
            f"{record.name}: {record.getMessage()}"
        )


def configure_logging(level: int = logging.INFO,
                      log_dir: Optional[PathLike] = None,
                      name: str = "paracurve",
                      run_prefix: str = "run") -> Optional[Path]:
    """Configure colorized console logging, plus a rotating file if `log_dir` is set.

    Existing handlers on the `name` logger are replaced, so repeated calls do
    not duplicate output.

    Returns:
        Path of the log file, or None for console-only logging.
    """
    just_fix_windows_console()

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    ch = logging.StreamHandler()
    ch.setFormatter(ColorFormatter(datefmt=DATE_FMT))
    logger.addHandler(ch)

    log_path = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y-%m-%d_%H%M%S")
        log_path = log_dir / f"{run_prefix}_PID{os.getpid()}_{ts}.log"

        fh = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(logging.Formatter(MONO_FMT, DATE_FMT))
        logger.addHandler(fh)

    logger.info(f"Logging initialized - PID {os.getpid()}; file {log_path}")
    return log_path
