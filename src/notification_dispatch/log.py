"""JSON logging for the ``notification_dispatch`` logger tree.

Only the package logger is touched, never the root logger, so a host
application keeps control of its own handlers.
"""

import json
import logging
import sys
from enum import Enum
from typing import TextIO

from notification_dispatch.config import DispatchConfig

PACKAGE_LOGGER = "notification_dispatch"

# Extra fields are emitted in this order, anything else follows.
_DELIVERY_FIELDS = (
    "channel",
    "provider",
    "recipient",
    "attempt",
    "max_attempts",
    "backoff_seconds",
    "reason",
)

_RECORD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime"}
)


def _plain(value: object) -> object:
    if isinstance(value, Enum):
        return value.value
    return value


class DeliveryJsonFormatter(logging.Formatter):
    """Renders delivery records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "thread": record.threadName,
            "event": record.getMessage(),
        }

        extras = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        for key in _DELIVERY_FIELDS:
            if key in extras:
                entry[key] = _plain(extras.pop(key))
        for key, value in extras.items():
            entry[key] = _plain(value)

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class _DispatchHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces only our own handler."""


def setup_logging(
    config: DispatchConfig | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a JSON handler to the package logger at ``config.log_level``.

    Safe to call more than once; the previous handler is replaced.
    """
    config = config or DispatchConfig()
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(package_logger.handlers):
        if isinstance(handler, _DispatchHandler):
            package_logger.removeHandler(handler)

    handler = _DispatchHandler(stream or sys.stdout)
    handler.setFormatter(DeliveryJsonFormatter())
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    package_logger.propagate = False
    return package_logger
