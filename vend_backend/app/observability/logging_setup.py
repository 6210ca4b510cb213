# vend_backend/app/observability/logging_setup.py
from __future__ import annotations

import logging

from vend_backend.app.config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Attach one stream handler to the `vend` logger tree. Safe to call more
    than once (the app factory runs per test app).
    """
    log = logging.getLogger("vend")
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        log.addHandler(handler)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))
    return log
