"""Exception hierarchy for utfconv.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UtfConvError for easy catching of any utfconv-specific error.

Bad arguments (an unknown endianness, a value that does not fit a code unit)
are programming errors and raise the built-in ValueError instead.
"""

from __future__ import annotations


class UtfConvError(Exception):
    """Base exception for all utfconv errors."""

    pass


class TranscodeError(UtfConvError):
    """Raised when a buffer cannot be converted.

    Attributes:
        position: Byte offset into the input where the problem starts, if known
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class TruncatedSequenceError(TranscodeError):
    """Raised when input ends in the middle of an encoded character.

    Examples:
        - A UTF-8 lead byte without all of its continuation bytes
        - A UTF-16 high surrogate as the last unit
        - A buffer length that is not a whole number of code units
    """

    pass


class InvalidSequenceError(TranscodeError):
    """Raised when a byte or code unit has an invalid pattern.

    Examples:
        - A UTF-8 continuation byte in lead position
        - Overlong encodings or encoded surrogates (strict mode only)
    """

    pass


class InvalidSurrogatePairError(InvalidSequenceError):
    """Raised when a UTF-16 high surrogate is not followed by a low surrogate."""

    pass


class CodePointRangeError(TranscodeError):
    """Raised when a code point is above U+10FFFF."""

    pass


class MarkerError(TranscodeError):
    """Raised when a marker-bearing sequence has no usable byte-order marker.

    Examples:
        - Empty input
        - Leading unit matches neither the big- nor little-endian marker
    """

    pass
