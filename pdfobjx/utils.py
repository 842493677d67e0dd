"""Utility helpers for :mod:`pdfobjx`."""

from __future__ import annotations

import logging
import re

UTF16_BOM = b"\xfe\xff"

_LITERAL_SPECIALS = re.compile(r"([\\\n\r\t\b\f()])")


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def to_utf16be_with_bom(text: str) -> bytes:
    """Encode *text* as UTF-16BE prefixed with the ``FE FF`` byte order mark.

    Code points outside the Basic Multilingual Plane become surrogate pairs.
    Lone surrogates are passed through as single code units rather than
    rejected.
    """

    return UTF16_BOM + text.encode("utf-16-be", "surrogatepass")


def to_hex(data: bytes) -> str:
    """Return *data* as lowercase hex digits, two per byte, no separators."""

    return bytes(data).hex()


def escape_literal(text: str) -> str:
    """Backslash-escape the characters that are special inside ``( ... )``."""

    return _LITERAL_SPECIALS.sub(r"\\\1", text)
