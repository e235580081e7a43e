"""Exceptions raised while shipping log entries to Graylog."""


class GraylogError(Exception):
    """Base class for all delivery failures."""


class ConnectError(GraylogError):
    """Every attempt to open the TLS connection failed."""

    def __init__(self, address: str, attempts: int, last_error: Exception | None):
        super().__init__(
            f"Could not connect to {address} after {attempts} attempts: {last_error}"
        )
        self.address = address
        self.attempts = attempts
        self.last_error = last_error


class SerializationError(GraylogError):
    """The entry's fields cannot be encoded as JSON."""


class DeliveryError(GraylogError):
    """The framed payload could not be written after all send attempts."""

    def __init__(self, attempts: int, last_error: Exception | None):
        super().__init__(f"Failed to send message after {attempts} attempts: {last_error}")
        self.attempts = attempts
        self.last_error = last_error
