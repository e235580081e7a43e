"""Log entry model."""

import datetime
import logging
import traceback
from dataclasses import dataclass, field

from graylog_shipper.levels import Level, from_logging_level, parse_level

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


@dataclass
class LogEntry:
    level: Level = Level.INFO
    message: str = ""
    fields: dict = field(default_factory=dict)
    time: datetime.datetime = field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc)
    )


def create_log_entry(level, message: str, **fields) -> LogEntry:
    """Create a LogEntry stamped with the current time."""
    return LogEntry(level=parse_level(level), message=message, fields=fields)


def entry_from_record(record: logging.LogRecord) -> LogEntry:
    """Convert a stdlib LogRecord, keeping ``extra=`` attributes as fields."""
    extra = {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }
    extra["logger"] = record.name
    if record.exc_info:
        extra["full_message"] = "".join(traceback.format_exception(*record.exc_info))
    elif record.exc_text:
        extra["full_message"] = record.exc_text

    return LogEntry(
        level=from_logging_level(record.levelno),
        message=record.getMessage(),
        fields=extra,
        time=datetime.datetime.fromtimestamp(record.created, datetime.timezone.utc),
    )
