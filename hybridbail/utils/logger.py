from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import settings

_FMT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def get_logger(name: str) -> logging.Logger:
    log = logging.getLogger(name)
    if log.handlers:
        return log

    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    log.setLevel(level)

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(_FMT))
    log.addHandler(ch)

    # Optional file handler (HYBRIDBAIL_LOG_FILE)
    if settings.log_file:
        logfile = Path(settings.log_file)
        logfile.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(logfile, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(_FMT))
        log.addHandler(fh)

    log.propagate = False
    return log
