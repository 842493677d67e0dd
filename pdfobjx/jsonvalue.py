"""JSON notation for PDF values.

Decoded JSON maps directly onto the value model, with single-key marker
objects for the variants JSON cannot express::

    {"$name": "Type"}            -> Name("Type")
    {"$ref": [12, 0]}            -> Reference(12, 0)
    {"$date": "2024-01-02T03:04:05+01:00"} -> datetime
    {"$bytes": "deadbeef"}       -> ByteString(b"\\xde\\xad\\xbe\\xef")

Every other JSON object becomes a dictionary keyed by names.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Callable

from .encoder import EncoderOptions
from .exceptions import NestingDepthError, UnsupportedValueError
from .types import ByteString, Name, Reference

__all__ = ["from_json", "loads"]


def _name(payload: Any) -> Name:
    if not isinstance(payload, str):
        raise UnsupportedValueError(payload, f"$name expects a string, got {payload!r}")
    return Name(payload)


def _ref(payload: Any) -> Reference:
    if not isinstance(payload, list) or len(payload) != 2:
        raise UnsupportedValueError(payload, f"$ref expects [id, generation], got {payload!r}")
    try:
        return Reference(*payload)
    except ValueError as exc:
        raise UnsupportedValueError(payload, str(exc)) from exc


def _date(payload: Any) -> datetime:
    if not isinstance(payload, str):
        raise UnsupportedValueError(payload, f"$date expects an ISO-8601 string, got {payload!r}")
    try:
        return datetime.fromisoformat(payload)
    except ValueError as exc:
        raise UnsupportedValueError(payload, f"Invalid $date value: {payload!r}") from exc


def _bytes(payload: Any) -> ByteString:
    if not isinstance(payload, str):
        raise UnsupportedValueError(payload, f"$bytes expects a hex string, got {payload!r}")
    try:
        return ByteString(bytes.fromhex(payload))
    except ValueError as exc:
        raise UnsupportedValueError(payload, f"Invalid $bytes value: {payload!r}") from exc


_MARKERS: dict[str, Callable[[Any], Any]] = {
    "$name": _name,
    "$ref": _ref,
    "$date": _date,
    "$bytes": _bytes,
}


def _convert(obj: Any, options: EncoderOptions, depth: int) -> Any:
    if isinstance(obj, dict):
        if len(obj) == 1:
            (key, payload), = obj.items()
            if key in _MARKERS:
                return _MARKERS[key](payload)
            if key.startswith("$"):
                raise UnsupportedValueError(obj, f"Unknown marker {key!r}")
        if depth >= options.max_depth:
            raise NestingDepthError(options.max_depth)
        return {Name(key): _convert(value, options, depth + 1) for key, value in obj.items()}

    if isinstance(obj, list):
        if depth >= options.max_depth:
            raise NestingDepthError(options.max_depth)
        return [_convert(item, options, depth + 1) for item in obj]

    return obj


def from_json(obj: Any, *, options: EncoderOptions | None = None) -> Any:
    """Convert an already decoded JSON document into PDF values."""

    return _convert(obj, options or EncoderOptions(), 0)


def loads(text: str, *, options: EncoderOptions | None = None) -> Any:
    """Parse *text* as JSON and convert it with :func:`from_json`."""

    return from_json(json.loads(text), options=options)
