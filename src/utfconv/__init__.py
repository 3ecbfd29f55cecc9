"""utfconv: Unicode Transcoding Engine

A Python library for converting text between UTF-8, UTF-16 and UTF-32, in
both byte orders, with and without a leading byte-order marker (BOM).

Key Features:
- UTF-32 and UTF-16 to UTF-8, with surrogate pair handling
- UTF-8 to UTF-32 in either byte order, optionally marker-prefixed
- Byte order read from a marker or declared by the caller, never guessed
- Explicit shift/mask unit packing, independent of the host byte order
- Stateless, whole-buffer conversions that either succeed or raise

Quick Start:
    >>> from utfconv import Endian, u8_to_u32, u32_to_u8_with_marker
    >>>
    >>> units = u8_to_u32("héllo 😀".encode("utf-8"), Endian.LITTLE, add_marker=True)
    >>> units[:4]
    b'\\xff\\xfe\\x00\\x00'
    >>> u32_to_u8_with_marker(units).decode("utf-8")
    'héllo 😀'
"""

from __future__ import annotations

from .codec import (
    Endian,
    UnitWidth,
    detect_marker,
    generate_marker,
    matches_marker,
    u8_to_u32,
    u16_to_u8,
    u16_to_u8_with_marker,
    u32_to_u8,
    u32_to_u8_with_marker,
    utf8_length,
)
from .exceptions import (
    CodePointRangeError,
    InvalidSequenceError,
    InvalidSurrogatePairError,
    MarkerError,
    TranscodeError,
    TruncatedSequenceError,
    UtfConvError,
)
from .transcoder import Encoding, TranscodeRequest, transcode

__version__ = "0.1.0"

__all__ = [
    # Core API
    "u32_to_u8",
    "u32_to_u8_with_marker",
    "u16_to_u8",
    "u16_to_u8_with_marker",
    "u8_to_u32",
    # Byte order and markers
    "Endian",
    "UnitWidth",
    "generate_marker",
    "matches_marker",
    "detect_marker",
    "utf8_length",
    # Requests
    "Encoding",
    "TranscodeRequest",
    "transcode",
    # Exceptions
    "UtfConvError",
    "TranscodeError",
    "TruncatedSequenceError",
    "InvalidSequenceError",
    "InvalidSurrogatePairError",
    "CodePointRangeError",
    "MarkerError",
    # Version
    "__version__",
]
