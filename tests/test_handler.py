"""Tests for the logging.Handler integration."""

import json
import logging

import pytest

from conftest import FakeSocket, RefusingConnector, ScriptedConnector, SleepRecorder
from graylog_shipper.config import GraylogConfig
from graylog_shipper.handler import GraylogHandler
from graylog_shipper.hook import GraylogHook
from graylog_shipper.transport import TLSTransport


def _handler(config, connector):
    transport = TLSTransport(config, connector, sleep=SleepRecorder())
    return GraylogHandler(hook=GraylogHook(config, transport=transport))


@pytest.fixture
def app_logger():
    logger = logging.getLogger("test_app")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)


class TestGraylogHandler:
    def test_ships_record(self, config, app_logger):
        sock = FakeSocket()
        app_logger.addHandler(_handler(config, ScriptedConnector(sock)))
        app_logger.warning("[disk] %s almost full", "/var", extra={"mount": "/var"})

        data = json.loads(sock.sent[0][:-1])
        assert data["title"] == "disk"
        assert data["msg"] == "/var almost full"
        assert data["level"] == 3
        assert data["mount"] == "/var"
        assert data["logger"] == "test_app"
        assert data["host"] == "web-01"

    def test_below_min_level_not_sent(self, app_logger):
        config = GraylogConfig(min_level="warning")
        connector = ScriptedConnector(FakeSocket())
        app_logger.addHandler(_handler(config, connector))
        app_logger.info("chatty")
        app_logger.debug("chattier")
        assert connector.calls == 0

    def test_own_diagnostics_not_shipped(self, config):
        connector = ScriptedConnector(FakeSocket())
        handler = _handler(config, connector)
        record = logging.LogRecord(
            "graylog_shipper.hook", logging.ERROR, __file__, 1, "send failed", None, None,
        )
        handler.handle(record)
        assert connector.calls == 0

    def test_delivery_failure_goes_to_handle_error(self, config, app_logger, monkeypatch):
        handler = _handler(config, RefusingConnector())
        errors = []
        monkeypatch.setattr(handler, "handleError", errors.append)
        app_logger.addHandler(handler)
        app_logger.error("lost")
        assert len(errors) == 1
        assert errors[0].getMessage() == "lost"

    def test_requires_config_or_hook(self):
        with pytest.raises(ValueError):
            GraylogHandler()

    def test_builds_hook_from_config(self, config):
        handler = GraylogHandler(config)
        assert handler.hook.config is config
        handler.close()

    def test_close_closes_connection(self, config, app_logger):
        sock = FakeSocket()
        handler = _handler(config, ScriptedConnector(sock))
        app_logger.addHandler(handler)
        app_logger.info("hello")
        handler.close()
        assert sock.closed is True
