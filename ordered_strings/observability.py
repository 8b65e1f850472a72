import json
import logging
from typing import Optional

from . import config


class Counter:
    """Minimal Prometheus-style counter."""

    def __init__(self, name: str, documentation: str):
        self.name = name
        self.documentation = documentation
        self.value = 0.0

    def inc(self, amount: float = 1.0) -> None:
        self.value += amount

    def reset(self) -> None:
        self.value = 0.0

    def render(self) -> str:
        return (
            f"# HELP {self.name} {self.documentation}\n"
            f"# TYPE {self.name} counter\n"
            f"{self.name} {self.value}\n"
        )


_RESERVED_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
}


class JSONFormatter(logging.Formatter):
    """Render a record and its ``extra`` fields as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                data[key] = value
        return json.dumps(data, default=str)


logger = logging.getLogger("ordered_strings")
logger.addHandler(logging.NullHandler())


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a JSON stream handler to the package logger.

    Repeated calls only update the level; no second handler is added.
    The root logger is left alone.
    """
    logger.setLevel((level or config.LOG_LEVEL).upper())
    if not any(isinstance(h.formatter, JSONFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
    return logger


# Counters
RESIZE_COUNTER = Counter(
    "ordered_list_resizes_total", "Number of backing buffer reallocations"
)
INDEX_ERROR_COUNTER = Counter(
    "ordered_list_index_errors_total", "Number of out-of-bounds index accesses"
)

COUNTERS = [
    RESIZE_COUNTER,
    INDEX_ERROR_COUNTER,
]


def load_thresholds() -> dict:
    """Alert thresholds per counter, taken from the config module."""
    return {
        "ordered_list_resizes_total": config.RESIZE_ALERT_THRESHOLD,
        "ordered_list_index_errors_total": config.INDEX_ERROR_ALERT_THRESHOLD,
    }


THRESHOLDS = load_thresholds()


def _check_threshold(name: str, value: float) -> None:
    threshold = THRESHOLDS.get(name) or 0
    if threshold and value >= threshold:
        logger.warning(f"{name} threshold {threshold} reached")


def inc_resize() -> None:
    RESIZE_COUNTER.inc()
    _check_threshold("ordered_list_resizes_total", RESIZE_COUNTER.value)


def inc_index_error() -> None:
    INDEX_ERROR_COUNTER.inc()
    _check_threshold("ordered_list_index_errors_total", INDEX_ERROR_COUNTER.value)


def generate_metrics() -> bytes:
    return "".join(counter.render() for counter in COUNTERS).encode()


def reset_metrics() -> None:
    for counter in COUNTERS:
        counter.reset()


__all__ = [
    "Counter",
    "JSONFormatter",
    "configure_logging",
    "inc_resize",
    "inc_index_error",
    "generate_metrics",
    "load_thresholds",
    "reset_metrics",
    "logger",
]
