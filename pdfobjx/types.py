"""
Type definitions for the PDF value model.

Most PDF variants map onto builtin Python types (``None``, ``bool``,
numbers, ``str``, ``list``, ``dict`` and ``datetime``).  The classes in
this module tag the variants that have no natural builtin counterpart.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Mapping, Sequence, Union


@dataclass(frozen=True, slots=True)
class Name:
    """
    PDF name object, e.g. ``/Type``.

    Attributes:
        raw: Name bytes without the leading slash. A ``str`` passed to the
            constructor is stored UTF-8 encoded.
    """

    raw: bytes

    def __post_init__(self) -> None:
        raw = self.raw
        if isinstance(raw, str):
            raw = raw.encode("utf-8", "surrogatepass")
        elif isinstance(raw, bytearray):
            raw = bytes(raw)
        elif not isinstance(raw, bytes):
            raise TypeError(f"Name requires str or bytes, got {type(raw).__name__}")
        object.__setattr__(self, "raw", raw)


@dataclass(frozen=True, slots=True)
class ByteString:
    """Opaque binary string payload, emitted byte for byte."""

    data: bytes

    def __post_init__(self) -> None:
        data = self.data
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        elif not isinstance(data, bytes):
            raise TypeError(f"ByteString requires bytes, got {type(data).__name__}")
        object.__setattr__(self, "data", data)


@dataclass(frozen=True, slots=True)
class Reference:
    """Indirect reference to another object (``12 0 R``)."""

    obj_id: int
    generation: int = 0

    def __post_init__(self) -> None:
        for label, part in (("object id", self.obj_id), ("generation", self.generation)):
            if isinstance(part, bool) or not isinstance(part, int):
                raise ValueError(f"Reference {label} must be an integer, got {part!r}")
            if part < 0:
                raise ValueError(f"Reference {label} must be non-negative, got {part}")

    def __str__(self) -> str:
        return f"{self.obj_id} {self.generation} R"


PdfValue = Union[
    None,
    bool,
    int,
    float,
    Decimal,
    str,
    ByteString,
    Name,
    datetime,
    Reference,
    Sequence["PdfValue"],
    Mapping[Union[str, Name], "PdfValue"],
]
"""Any value accepted by :func:`pdfobjx.encode`."""
