"""Object encoder for :mod:`pdfobjx`.

Serializes values built from the PDF value model into PDF object syntax::

    >>> encode(True)
    'true'
    >>> encode(1.2124)
    '1.2124'
    >>> encode(Name("Symbol"))
    '/Symbol'
    >>> encode(["foo", Name("bar"), [1, 2]], content_stream_mode=True)
    '[<666f6f> /bar [1 2]]'

Dictionaries are keyed by :class:`~pdfobjx.types.Name` or ``str``; any
other key type is rejected.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import re
from collections.abc import Mapping
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

from pypdf.generic import PdfObject

from .exceptions import InvalidDictionaryKeyError, NestingDepthError, UnsupportedValueError
from .types import ByteString, Name, Reference
from .utils import escape_literal, to_hex, to_utf16be_with_bom

_LOGGER = logging.getLogger("pdfobjx")

DEFAULT_MAX_DEPTH = 256

# '#', '(', ')', '/', '<', '>'
_NAME_DELIMITERS = frozenset(b"#()/<>")
_TRAILING_ZEROS = re.compile(r"\.?0+\Z")


@dataclasses.dataclass(slots=True, frozen=True)
class EncoderOptions:
    """Behavioural limits for a single encode call.

    ``max_depth`` is the number of nested array/dictionary levels accepted
    before :class:`NestingDepthError` is raised.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


_DEFAULT_OPTIONS = EncoderOptions()


def format_number(value: int | float | Decimal) -> str:
    """Render a number as a PDF numeric token, never in exponent notation."""

    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise UnsupportedValueError(value)
    if isinstance(value, int):
        return str(int(value))

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise UnsupportedValueError(value, f"PDF has no token for non-finite number {value!r}")
        text = str(value)
    else:
        value = float(value)
        if not math.isfinite(value):
            raise UnsupportedValueError(value, f"PDF has no token for non-finite number {value!r}")
        text = repr(value)

    if "e" in text.lower():
        # scientific notation is not supported in PDF
        fixed = format(value, ".16f")
        _LOGGER.debug("Rendering %s in fixed-point notation as %s", text, fixed)
        text = _TRAILING_ZEROS.sub("", fixed)
    return text


def _utc_offset_designator(value: datetime) -> str:
    offset = value.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    total_minutes = int(abs(offset.total_seconds())) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def format_date(value: datetime) -> str:
    """Return the body of a PDF date string, e.g. ``D:20240102030405+01'00'``.

    The minute part of the UTC offset is always replaced by ``'00'``.
    Naive datetimes are taken to be in the local time zone.
    """

    if not isinstance(value, datetime):
        raise UnsupportedValueError(value)
    if value.utcoffset() is None:
        value = value.astimezone()
    stamp = (
        f"D:{value.year:04d}{value.month:02d}{value.day:02d}"
        f"{value.hour:02d}{value.minute:02d}{value.second:02d}"
        f"{_utc_offset_designator(value)}"
    )
    return stamp[:-2] + "'00'"


def encode_name(name: Name) -> str:
    """Render *name* as ``/`` followed by its bytes, ``#XX``-escaping the rest."""

    parts = ["/"]
    for byte in name.raw:
        if byte < 33 or byte > 126 or byte in _NAME_DELIMITERS:
            parts.append(f"#{byte:02X}")
        else:
            parts.append(chr(byte))
    return "".join(parts)


def _encode_string(value: str | ByteString, content_stream_mode: bool) -> str:
    if isinstance(value, ByteString):
        data = value.data
    elif content_stream_mode:
        data = value.encode("utf-8", "surrogatepass")
    else:
        data = to_utf16be_with_bom(value)
    return "<" + to_hex(data) + ">"


def _dictionary_key(key: Any) -> Name:
    if isinstance(key, Name):
        return key
    if isinstance(key, str) and not isinstance(key, PdfObject):
        return Name(key)
    raise InvalidDictionaryKeyError(key)


def _encode(value: Any, content_stream_mode: bool, options: EncoderOptions, depth: int) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, Name):
        return encode_name(value)
    if isinstance(value, Reference):
        return str(value)
    if isinstance(value, PdfObject):
        raise UnsupportedValueError(
            value, f"pypdf objects must be converted with pdfobjx.interop.from_pypdf first ({value!r})"
        )
    if isinstance(value, (str, ByteString)):
        return _encode_string(value, content_stream_mode)
    if isinstance(value, datetime):
        return "(" + escape_literal(format_date(value)) + ")"
    if isinstance(value, (int, float, Decimal)):
        return format_number(value)

    if isinstance(value, Mapping):
        if depth >= options.max_depth:
            raise NestingDepthError(options.max_depth)
        output = ["<< "]
        for key, item in value.items():
            name = _dictionary_key(key)
            output.append(encode_name(name))
            output.append(" ")
            output.append(_encode(item, content_stream_mode, options, depth + 1))
            output.append("\n")
        output.append(">>")
        return "".join(output)

    if isinstance(value, (list, tuple)):
        if depth >= options.max_depth:
            raise NestingDepthError(options.max_depth)
        items = []
        for item in value:
            items.append(_encode(item, content_stream_mode, options, depth + 1))
        return "[" + " ".join(items) + "]"

    raise UnsupportedValueError(value)


def encode(
    value: Any,
    content_stream_mode: bool = False,
    *,
    options: EncoderOptions | None = None,
) -> str:
    """Serialize *value* to PDF object syntax.

    Parameters
    ----------
    value:
        ``None``, ``bool``, a number, ``str``, :class:`ByteString`,
        :class:`Name`, ``datetime``, :class:`Reference`, or a list/tuple or
        mapping of those. pypdf objects are rejected; convert them with
        :func:`pdfobjx.interop.from_pypdf` first.
    content_stream_mode:
        When true, ``str`` values are written as their raw UTF-8 bytes
        instead of BOM-prefixed UTF-16BE.
    options:
        Optional :class:`EncoderOptions`; defaults allow 256 nesting levels.

    Raises
    ------
    InvalidDictionaryKeyError
        A mapping key is not a ``str`` or :class:`Name`.
    UnsupportedValueError
        *value*, or something nested in it, is outside the value model.
    NestingDepthError
        Arrays/dictionaries are nested deeper than ``options.max_depth``.
    """

    options = options or _DEFAULT_OPTIONS
    try:
        return _encode(value, bool(content_stream_mode), options, 0)
    except RecursionError as exc:
        raise NestingDepthError(options.max_depth) from exc


def encode_bytes(
    value: Any,
    content_stream_mode: bool = False,
    *,
    options: EncoderOptions | None = None,
) -> bytes:
    """Same as :func:`encode` but returns ASCII bytes ready to append to a file body."""

    return encode(value, content_stream_mode, options=options).encode("ascii")
