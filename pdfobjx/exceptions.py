"""
Custom exceptions for pdfobjx.

This module defines all custom exceptions raised by the object encoder.
"""

from __future__ import annotations

from typing import Any


class PDFObjXError(Exception):
    """Base exception for all pdfobjx errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF object encoding error occurred."


class InvalidDictionaryKeyError(PDFObjXError):
    """Raised when a dictionary is keyed by something other than a name."""

    def __init__(self, key: Any, message: str = "") -> None:
        self.key = key
        super().__init__(message or f"A PDF dictionary must be keyed by names, got {key!r}")

    @property
    def default_message(self) -> str:
        return "A PDF dictionary must be keyed by names."


class UnsupportedValueError(PDFObjXError):
    """Raised when a value cannot be serialized to PDF."""

    def __init__(self, value: Any, message: str = "") -> None:
        self.value = value
        super().__init__(message or f"This object cannot be serialized to PDF ({value!r})")

    @property
    def default_message(self) -> str:
        return "This object cannot be serialized to PDF."


class NestingDepthError(PDFObjXError):
    """Raised when arrays and dictionaries are nested deeper than allowed."""

    def __init__(self, max_depth: int, message: str = "") -> None:
        self.max_depth = max_depth
        super().__init__(
            message or f"Nesting depth exceeds the configured limit of {max_depth}"
        )

    @property
    def default_message(self) -> str:
        return "Nesting depth exceeds the configured limit."
