"""Graylog shipper — sends a few sample entries using env/YAML config."""

import logging
import sys

from graylog_shipper.config import load_config
from graylog_shipper.errors import GraylogError
from graylog_shipper.hook import GraylogHook
from graylog_shipper.models import create_log_entry

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main():
    config = load_config()
    logger = logging.getLogger(__name__)
    logger.info("Shipping to %s as host=%s", config.address, config.host)

    entries = [
        create_log_entry("INFO", "[startup] Application started successfully"),
        create_log_entry("WARNING", "[memory] High memory usage detected", percent=85),
        create_log_entry("ERROR", "[db] Failed to process request", timeout_s=30),
    ]

    sent = failed = 0
    with GraylogHook(config) as hook:
        for entry in entries:
            if entry.level not in hook.levels():
                continue
            try:
                hook.fire(entry)
            except GraylogError as e:
                failed += 1
                logger.error("Entry not delivered: %s", e)
            else:
                sent += 1

    logger.info("Done: sent=%d, failed=%d", sent, failed)
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
