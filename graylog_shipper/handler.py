"""logging.Handler that forwards records through a GraylogHook."""

import logging

from graylog_shipper.config import GraylogConfig
from graylog_shipper.hook import GraylogHook
from graylog_shipper.levels import from_logging_level
from graylog_shipper.models import entry_from_record

# Diagnostics from the shipper itself must never be shipped.
_OWN_LOGGER_PREFIX = "graylog_shipper"


class GraylogHandler(logging.Handler):
    """Ships every record at or above the hook's minimum level to Graylog."""

    def __init__(self, config: GraylogConfig | None = None,
                 hook: GraylogHook | None = None, level=logging.NOTSET):
        super().__init__(level)
        if hook is None:
            if config is None:
                raise ValueError("GraylogHandler needs a config or a hook")
            hook = GraylogHook(config)
        self.hook = hook

    def filter(self, record: logging.LogRecord):
        if record.name.split(".", 1)[0] == _OWN_LOGGER_PREFIX:
            return False
        if from_logging_level(record.levelno) not in self.hook.levels():
            return False
        return super().filter(record)

    def emit(self, record: logging.LogRecord):
        try:
            self.hook.fire(entry_from_record(record))
        except Exception:
            self.handleError(record)

    def close(self):
        try:
            self.hook.close()
        finally:
            super().close()
