"""Small string, time and JSON helpers."""

import base64
import dataclasses
import json
import re
from datetime import datetime

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_HTML_ESCAPE_RE = re.compile("[<>&\u2028\u2029]")


def string_to_int(text):
    """Parse a signed decimal integer; raise ValueError on bad syntax or a 64-bit overflow."""
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


def current_time_str():
    """Return the local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def current_time():
    """Return the current local time."""
    return datetime.now()


def _map_key(key):
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise TypeError(f"unsupported map key type: {type(key).__name__}")


def _normalize(value):
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: _normalize(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    if isinstance(value, dict):
        items = ((_map_key(k), _normalize(v)) for k, v in value.items())
        return dict(sorted(items, key=lambda item: item[0]))
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    return value


def to_json_str(value):
    """Serialise ``value`` to compact JSON with sorted map keys and HTML-safe escaping."""
    text = json.dumps(
        _normalize(value),
        ensure_ascii=False,
        allow_nan=False,
        separators=(",", ":"),
    )
    return _HTML_ESCAPE_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], text)