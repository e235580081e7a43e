"""Graylog hook — frame log entries and deliver them with retry and reconnect."""

import logging
import threading

from graylog_shipper.config import GraylogConfig
from graylog_shipper.errors import ConnectError, DeliveryError
from graylog_shipper.formatter import format_gelf
from graylog_shipper.levels import Level, applicable_levels, parse_level
from graylog_shipper.models import LogEntry
from graylog_shipper.transport import Connector, TLSTransport

logger = logging.getLogger(__name__)


class GraylogHook:
    """Ships one log entry per ``fire`` call to a GELF TLS endpoint."""

    def __init__(self, config: GraylogConfig, connector: Connector | None = None,
                 transport: TLSTransport | None = None):
        if transport is not None and connector is not None:
            raise ValueError("Pass either a connector or a transport, not both")
        self._config = config
        self._transport = transport or TLSTransport(config, connector)
        self._min_level = config.min_level
        self._lock = threading.Lock()

    @property
    def config(self) -> GraylogConfig:
        return self._config

    @property
    def transport(self) -> TLSTransport:
        return self._transport

    @property
    def min_level(self) -> Level:
        return self._min_level

    @min_level.setter
    def min_level(self, value):
        self._min_level = parse_level(value)

    def levels(self) -> list[Level]:
        """Levels this hook forwards, most severe first."""
        return applicable_levels(self._min_level)

    def format(self, entry: LogEntry) -> bytes:
        """Return the framed wire payload for *entry*."""
        return format_gelf(entry, self._config.token, self._config.host)

    def fire(self, entry: LogEntry):
        """Send *entry*, reconnecting between attempts.

        Raises:
            SerializationError: the entry's fields are not JSON-encodable.
            DeliveryError: no attempt managed to write the frame.
        """
        frame = self.format(entry)

        with self._lock:
            attempts = self._config.send_retries
            last_error = None
            for attempt in range(1, attempts + 1):
                try:
                    sock = self._transport.ensure_connected()
                except ConnectError as e:
                    last_error = e
                    continue

                try:
                    sock.sendall(frame)
                    return
                except OSError as e:
                    last_error = e
                    logger.warning("Send failed (attempt %d/%d): %s", attempt, attempts, e)
                    self._transport.invalidate()

            logger.error("Error while sending message to %s: %s", self._config.address, last_error)
            raise DeliveryError(attempts, last_error) from last_error

    def close(self):
        self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
