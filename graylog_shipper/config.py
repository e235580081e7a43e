"""Configuration module — frozen dataclass loaded from a YAML file and env vars."""

import os
import socket
from dataclasses import dataclass, fields

import yaml

from graylog_shipper.levels import Level, parse_level


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


def split_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` (or ``[v6addr]:port``) into its parts."""
    host, sep, port = address.rpartition(":")
    if not sep or not host or not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(f"Address must be host:port, got {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, int(port)


@dataclass(frozen=True)
class GraylogConfig:
    address: str = "localhost:12202"
    token: str = ""
    host: str = "localhost"
    verify_certs: bool = True
    ca_file: str = ""
    client_cert_file: str = ""
    client_key_file: str = ""
    min_level: Level = Level.TRACE
    connect_retries: int = 5
    connect_timeout: float = 5.0
    retry_backoff: float = 0.2
    send_retries: int = 5

    def __post_init__(self):
        split_address(self.address)
        object.__setattr__(self, "min_level", parse_level(self.min_level))
        if self.connect_retries < 1 or self.send_retries < 1:
            raise ValueError("Retry counts must be at least 1")

    @property
    def server_host(self) -> str:
        return split_address(self.address)[0]

    @property
    def server_port(self) -> int:
        return split_address(self.address)[1]


_ENV_VARS = {
    "address": "GRAYLOG_ADDRESS",
    "token": "GRAYLOG_TOKEN",
    "host": "GRAYLOG_HOST",
    "verify_certs": "GRAYLOG_VERIFY_CERTS",
    "ca_file": "GRAYLOG_CA_FILE",
    "client_cert_file": "GRAYLOG_CLIENT_CERT",
    "client_key_file": "GRAYLOG_CLIENT_KEY",
    "min_level": "GRAYLOG_MIN_LEVEL",
    "connect_retries": "GRAYLOG_CONNECT_RETRIES",
    "connect_timeout": "GRAYLOG_CONNECT_TIMEOUT",
    "retry_backoff": "GRAYLOG_RETRY_BACKOFF",
    "send_retries": "GRAYLOG_SEND_RETRIES",
}

_CASTS = {
    "verify_certs": _parse_bool,
    "min_level": parse_level,
    "connect_retries": int,
    "connect_timeout": float,
    "retry_backoff": float,
    "send_retries": int,
}


def load_yaml(path: str) -> dict:
    """Load the ``graylog`` section (or the whole document) of a YAML file."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data.get("graylog", data)


def load_config(path: str | None = None) -> GraylogConfig:
    """Build GraylogConfig from defaults <- YAML file <- env vars (highest priority).

    The YAML path may also come from the ``CONFIG_PATH`` environment variable.
    """
    path = path or os.environ.get("CONFIG_PATH")
    known = {f.name for f in fields(GraylogConfig)}

    kwargs: dict = {"host": socket.gethostname()}
    if path:
        for key, value in load_yaml(path).items():
            if key not in known:
                raise ValueError(f"Unknown config key in {path}: {key}")
            kwargs[key] = value

    for key, env_name in _ENV_VARS.items():
        raw = os.environ.get(env_name)
        if raw is not None:
            cast = _CASTS.get(key, str)
            kwargs[key] = cast(raw)

    if isinstance(kwargs.get("verify_certs"), str):
        kwargs["verify_certs"] = _parse_bool(kwargs["verify_certs"])

    return GraylogConfig(**kwargs)
