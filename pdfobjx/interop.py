"""Conversion of :mod:`pypdf` generic objects into the pdfobjx value model.

References are kept as :class:`~pdfobjx.types.Reference` and never
dereferenced; streams are rejected since only their dictionaries could be
encoded here.
"""

from __future__ import annotations

import logging
from typing import Any

from pypdf.generic import (
    ArrayObject,
    BooleanObject,
    ByteStringObject,
    DictionaryObject,
    FloatObject,
    IndirectObject,
    NameObject,
    NullObject,
    NumberObject,
    StreamObject,
    TextStringObject,
)

from .encoder import EncoderOptions
from .exceptions import NestingDepthError, UnsupportedValueError
from .types import ByteString, Name, Reference

__all__ = ["from_pypdf", "name_from_pypdf"]

_LOGGER = logging.getLogger("pdfobjx")


def name_from_pypdf(name: NameObject) -> Name:
    """Convert a :class:`NameObject` (``"/Type"``) into a :class:`Name`."""

    text = str.__str__(name)
    if text.startswith("/"):
        text = text[1:]
    return Name(text)


def _convert(obj: Any, options: EncoderOptions, depth: int) -> Any:
    if isinstance(obj, IndirectObject):
        return Reference(obj.idnum, obj.generation)
    if isinstance(obj, NullObject):
        return None
    if isinstance(obj, BooleanObject):
        return bool(obj.value)
    if isinstance(obj, NameObject):
        return name_from_pypdf(obj)
    if isinstance(obj, TextStringObject):
        return str.__str__(obj)
    if isinstance(obj, ByteStringObject):
        return ByteString(bytes(obj))
    if isinstance(obj, NumberObject):
        return int(obj)
    if isinstance(obj, FloatObject):
        return float(obj)

    if isinstance(obj, StreamObject):
        _LOGGER.debug("Rejecting stream object with keys %s", list(obj.keys()))
        raise UnsupportedValueError(obj, "Stream objects cannot be converted; encode their dictionary instead")

    if isinstance(obj, DictionaryObject):
        if depth >= options.max_depth:
            raise NestingDepthError(options.max_depth)
        converted: dict[Any, Any] = {}
        for key, value in obj.items():
            name = name_from_pypdf(key) if isinstance(key, NameObject) else key
            converted[name] = _convert(value, options, depth + 1)
        return converted

    if isinstance(obj, ArrayObject):
        if depth >= options.max_depth:
            raise NestingDepthError(options.max_depth)
        return [_convert(item, options, depth + 1) for item in obj]

    return obj


def from_pypdf(obj: Any, *, options: EncoderOptions | None = None) -> Any:
    """Convert a :mod:`pypdf.generic` object tree for use with :func:`pdfobjx.encode`.

    Objects that are not pypdf generics are returned unchanged.
    """

    return _convert(obj, options or EncoderOptions(), 0)
