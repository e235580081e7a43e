"""TLS socket wrapper with lazy connect and bounded reconnect logic."""

import logging
import socket
import ssl
import threading
import time
from typing import Callable

from graylog_shipper.config import GraylogConfig
from graylog_shipper.errors import ConnectError
from graylog_shipper.tls_context import create_client_context

logger = logging.getLogger(__name__)

Connector = Callable[[], socket.socket]


def tls_connector(host: str, port: int, ssl_ctx: ssl.SSLContext,
                  timeout: float) -> Connector:
    """Return a callable that opens one TLS connection to host:port."""

    def connect() -> socket.socket:
        raw_sock = socket.create_connection((host, port), timeout=timeout)
        try:
            return ssl_ctx.wrap_socket(raw_sock, server_hostname=host)
        except (ssl.SSLError, OSError):
            raw_sock.close()
            raise

    return connect


class TLSTransport:
    """Owns the single connection to the Graylog endpoint.

    The connection is opened on first use and kept until a write fails;
    staleness is only discovered by that failed write.
    """

    def __init__(self, config: GraylogConfig, connector: Connector | None = None,
                 sleep: Callable[[float], None] = time.sleep):
        self._config = config
        if connector is None:
            connector = tls_connector(
                config.server_host, config.server_port,
                create_client_context(config), config.connect_timeout,
            )
        self._connector = connector
        self._sleep = sleep
        self._sock: socket.socket | None = None
        self._lock = threading.Lock()

    @property
    def connected(self) -> bool:
        with self._lock:
            return self._sock is not None

    def ensure_connected(self) -> socket.socket:
        """Return the live connection, opening a new one if needed.

        Raises:
            ConnectError: every one of ``connect_retries`` attempts failed.
        """
        with self._lock:
            if self._sock is not None:
                return self._sock

            attempts = self._config.connect_retries
            last_error = None
            for attempt in range(1, attempts + 1):
                try:
                    self._sock = self._connector()
                except OSError as e:
                    last_error = e
                    logger.warning(
                        "Connect to %s failed (attempt %d/%d): %s",
                        self._config.address, attempt, attempts, e,
                    )
                    if attempt < attempts:
                        self._sleep(self._config.retry_backoff)
                    continue
                logger.info("Connected to %s", self._config.address)
                return self._sock

            raise ConnectError(self._config.address, attempts, last_error) from last_error

    def invalidate(self):
        """Drop the current connection so the next call reconnects."""
        with self._lock:
            self._drop()

    def close(self):
        """Close the connection."""
        self.invalidate()

    def _drop(self):
        if self._sock:
            try:
                self._sock.close()
            except OSError:
                pass
            self._sock = None
