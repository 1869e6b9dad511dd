# jdutils/logger.py — Logging utilities
from __future__ import annotations
import logging
import sys
import time
import functools
from typing import Optional, Callable, Any

# Tests patch this name: jdutils.logger.config
from .config import config


def _safe_level(level_str: Optional[str]) -> int:
    """
    Safely convert a string log level to the corresponding logging numeric level.
    Falls back to INFO on invalid input.
    """
    if not level_str:
        return logging.INFO
    lvl = getattr(logging, str(level_str).upper(), None)
    if isinstance(lvl, int):
        return lvl
    return logging.INFO


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Idempotently configure a logger: avoid adding duplicate handlers and
    update existing handlers' format and level if they already exist.
    """
    logger = logging.getLogger(name)

    # Resolve level (prefer function argument, then config.LOG_LEVEL, then INFO)
    log_level = _safe_level(level or getattr(config, "LOG_LEVEL", "INFO"))
    fmt = getattr(config, "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    logger.setLevel(log_level)
    logger.propagate = False

    formatter = logging.Formatter(fmt)

    if logger.handlers:
        for h in logger.handlers:
            h.setLevel(log_level)
            if isinstance(h, logging.StreamHandler):
                h.setFormatter(formatter)
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


# Default application logger ("jdutils.logger")
logger = setup_logger(__name__)

app_logger = logger
__all__ = [
    "setup_logger",
    "timing_decorator",
    "logger",
    "app_logger",
    "config",
]


# -------------------------
# Performance timing decorator
# -------------------------
def timing_decorator(func: Callable) -> Callable:
    """
    Measure execution time and log it at info level.
    Sheet appends (append_job) that run longer than
    MAX_SUBMIT_TIME also log a warning.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        if not getattr(config, "ENABLE_PERFORMANCE_MONITORING", True):
            return func(*args, **kwargs)

        start_time = time.time()
        try:
            return func(*args, **kwargs)
        finally:
            duration = time.time() - start_time
            logger.info(f"{func.__name__} took {duration:.3f} seconds")

            max_submit = getattr(config, "MAX_SUBMIT_TIME", None)
            if max_submit is not None and func.__name__ == "append_job" and duration > max_submit:
                logger.warning(
                    f"{func.__name__} exceeded maximum time limit: "
                    f"{duration:.3f}s > {max_submit}s"
                )
    return wrapper
