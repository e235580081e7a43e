import datetime

import pytest

from graylog_shipper.config import GraylogConfig
from graylog_shipper.levels import Level
from graylog_shipper.models import LogEntry


class FakeSocket:
    """Records everything written to it."""

    def __init__(self):
        self.sent = []
        self.closed = False

    def sendall(self, data):
        self.sent.append(data)

    def close(self):
        self.closed = True


class BrokenSocket(FakeSocket):
    """Fails every write, as a connection reset by the peer would."""

    def sendall(self, data):
        raise BrokenPipeError("Broken pipe")


class ScriptedConnector:
    """Hands out the given sockets in order; exceptions in the script are raised."""

    def __init__(self, *results):
        self._results = list(results)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if not self._results:
            raise ConnectionRefusedError("Connection refused")
        result = self._results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class RefusingConnector:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        raise ConnectionRefusedError("Connection refused")


class SleepRecorder:
    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def config():
    return GraylogConfig(
        address="graylog.example.com:12202",
        token="secret-token",
        host="web-01",
    )


@pytest.fixture
def fixed_time():
    return datetime.datetime(2024, 1, 15, 8, 23, 45, tzinfo=datetime.timezone.utc)


@pytest.fixture
def entry(fixed_time):
    return LogEntry(
        level=Level.ERROR,
        message="[ERR] disk full",
        fields={"mount": "/var"},
        time=fixed_time,
    )
