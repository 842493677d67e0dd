"""
pdfobjx - Serialize Python values to PDF object syntax.

This library turns values built from a small, closed set of types into
their canonical PDF tokens (booleans, numbers, strings, names, arrays,
dictionaries, dates, indirect references and null). It is the encoding
layer of a PDF writer; it does no file I/O and resolves nothing.

Quick Start:
    >>> from pdfobjx import Name, Reference, encode
    >>> encode({"Type": Name("Page"), "Parent": Reference(2, 0)})
    '<< /Type /Page\\n/Parent 2 0 R\\n>>'

Value Types:
    - Name: PDF name object, e.g. ``/Type``
    - ByteString: binary string written byte for byte
    - Reference: indirect reference, e.g. ``12 0 R``

Exceptions:
    - PDFObjXError: Base exception
    - InvalidDictionaryKeyError: Dictionary keyed by a non-name
    - UnsupportedValueError: Value outside the PDF value model
    - NestingDepthError: Arrays/dictionaries nested beyond the limit

For CLI usage, use the 'pdfobjx' command after installation.
"""

# Encoder
from pdfobjx.encoder import (
    DEFAULT_MAX_DEPTH,
    EncoderOptions,
    encode,
    encode_bytes,
    encode_name,
    format_date,
    format_number,
)

# Value types
from pdfobjx.types import ByteString, Name, PdfValue, Reference

# Exceptions
from pdfobjx.exceptions import (
    PDFObjXError,
    InvalidDictionaryKeyError,
    UnsupportedValueError,
    NestingDepthError,
)

# Utility functions
from pdfobjx.utils import escape_literal, to_hex, to_utf16be_with_bom

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Encoder
    "encode",
    "encode_bytes",
    "encode_name",
    "format_number",
    "format_date",
    "EncoderOptions",
    "DEFAULT_MAX_DEPTH",
    # Value types
    "Name",
    "ByteString",
    "Reference",
    "PdfValue",
    # Exceptions
    "PDFObjXError",
    "InvalidDictionaryKeyError",
    "UnsupportedValueError",
    "NestingDepthError",
    # Utility functions
    "to_utf16be_with_bom",
    "to_hex",
    "escape_literal",
    # Version info
    "__version__",
]
