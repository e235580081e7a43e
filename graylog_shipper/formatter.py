"""Turn log entries into null-terminated GELF JSON frames."""

import json
import re

from graylog_shipper.errors import SerializationError
from graylog_shipper.models import LogEntry

GELF_VERSION = "1.1"
TOKEN_FIELD = "X-OVH-TOKEN"
FRAME_TERMINATOR = b"\x00"

_TITLE_RE = re.compile(r"\[(.*?)\]")


def extract_title(message: str) -> tuple[str, str]:
    """Split a ``[title] body`` message into (title, body).

    The title is the text of the first bracketed segment. Every bracketed
    segment is removed from the body, which is then stripped. A message
    without brackets comes back unchanged with an empty title.
    """
    match = _TITLE_RE.search(message)
    if match is None:
        return "", message
    body = _TITLE_RE.sub("", message).strip()
    return match.group(1), body


def enrich(fields: dict, token: str, host: str) -> dict:
    """Copy caller fields and overlay the token, host and protocol version.

    Field names are converted to strings so mixed-type keys still sort.
    """
    result = {str(key): value for key, value in fields.items()}
    result[TOKEN_FIELD] = token
    result["host"] = host
    result["version"] = GELF_VERSION
    return result


def build_payload(entry: LogEntry, token: str, host: str) -> dict:
    """Build the GELF field mapping for *entry*."""
    title, body = extract_title(entry.message)

    data = enrich(entry.fields, token, host)
    data["level"] = int(entry.level)
    data["msg"] = body
    data["timestamp"] = int(entry.time.timestamp())
    if title:
        data["title"] = title
    return data


def serialize(data: dict) -> bytes:
    """Encode a payload as compact UTF-8 JSON with sorted keys."""
    try:
        text = json.dumps(
            data, separators=(",", ":"), sort_keys=True,
            ensure_ascii=False, allow_nan=False,
        )
        return text.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot encode log fields as JSON: {e}") from e


def encode_frame(payload: bytes) -> bytes:
    """Append the null byte that delimits messages on a GELF TCP stream."""
    return payload + FRAME_TERMINATOR


def format_gelf(entry: LogEntry, token: str, host: str) -> bytes:
    """Build, serialize and frame *entry* in one step."""
    return encode_frame(serialize(build_payload(entry, token, host)))
