"""
Graylog shipper

Forwards structured log entries to a GELF endpoint over TLS, with bounded
connect and send retries.
"""

from .config import GraylogConfig, load_config
from .errors import ConnectError, DeliveryError, GraylogError, SerializationError
from .handler import GraylogHandler
from .hook import GraylogHook
from .levels import Level, applicable_levels
from .models import LogEntry, create_log_entry

__all__ = [
    'ConnectError',
    'DeliveryError',
    'GraylogConfig',
    'GraylogError',
    'GraylogHandler',
    'GraylogHook',
    'Level',
    'LogEntry',
    'SerializationError',
    'applicable_levels',
    'create_log_entry',
    'load_config',
]
