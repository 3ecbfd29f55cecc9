"""UTF-32 and UTF-16 to UTF-8 encoders.

The ``*_with_marker`` entry points read the byte order from the leading
byte-order marker and hand the units after it to the same routines the
marker-free entry points use. Error positions are always byte offsets into
the buffer the caller passed in.
"""

from __future__ import annotations

import logging

from ..exceptions import (
    CodePointRangeError,
    InvalidSequenceError,
    InvalidSurrogatePairError,
    MarkerError,
    TruncatedSequenceError,
)
from .bom import detect_marker
from .units import Endian, UnitReader, UnitWidth
from .utf8 import MAX_CODE_POINT, SURROGATE_MAX, SURROGATE_MIN, encode_code_point

logger = logging.getLogger(__name__)

HIGH_SURROGATE_MIN = 0xD800
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_END = 0xE000


def u32_to_u8(units: bytes, endian: Endian | str, *, strict: bool = False) -> bytes:
    """Encode a marker-free UTF-32 buffer as UTF-8.

    Args:
        units: UTF-32 code units, 4 bytes each, no leading marker
        endian: Byte order of the units
        strict: Also reject surrogate code points

    Returns:
        UTF-8 bytes

    Raises:
        ValueError: If endian is unsupported
        TruncatedSequenceError: If the buffer is not a whole number of units
        CodePointRangeError: If a unit is above U+10FFFF
        InvalidSequenceError: Strict mode only, a unit is a surrogate

    Example:
        >>> u32_to_u8(b"\\x00\\x01\\xf6\\x00", Endian.BIG)
        b'\\xf0\\x9f\\x98\\x80'
    """
    return _encode_u32(_unit_reader(units, UnitWidth.U32, endian), strict)


def u32_to_u8_with_marker(units: bytes, *, strict: bool = False) -> bytes:
    """Encode a UTF-32 buffer that starts with a byte-order marker as UTF-8.

    Raises:
        MarkerError: If units is empty or does not start with a UTF-32 marker
        TruncatedSequenceError, CodePointRangeError: As for u32_to_u8
    """
    endian = _read_marker(units, UnitWidth.U32)
    return _encode_u32(_unit_reader(units, UnitWidth.U32, endian, UnitWidth.U32.size), strict)


def u16_to_u8(units: bytes, endian: Endian | str, *, strict: bool = False) -> bytes:
    """Encode a marker-free UTF-16 buffer as UTF-8, joining surrogate pairs.

    Args:
        units: UTF-16 code units, 2 bytes each, no leading marker
        endian: Byte order of the units
        strict: Also reject low surrogates that do not follow a high surrogate

    Returns:
        UTF-8 bytes

    Raises:
        ValueError: If endian is unsupported
        TruncatedSequenceError: If the buffer is not a whole number of units,
            or ends with a high surrogate
        InvalidSurrogatePairError: If a high surrogate is not followed by a low one
    """
    return _encode_u16(_unit_reader(units, UnitWidth.U16, endian), strict)


def u16_to_u8_with_marker(units: bytes, *, strict: bool = False) -> bytes:
    """Encode a UTF-16 buffer that starts with a byte-order marker as UTF-8.

    Raises:
        MarkerError: If units is empty or does not start with a UTF-16 marker
        TruncatedSequenceError, InvalidSurrogatePairError: As for u16_to_u8
    """
    endian = _read_marker(units, UnitWidth.U16)
    return _encode_u16(_unit_reader(units, UnitWidth.U16, endian, UnitWidth.U16.size), strict)


def _encode_u32(reader: UnitReader, strict: bool) -> bytes:
    target = bytearray()

    while reader.units_remaining():
        offset = reader.byte_offset()
        value = reader.read_unit()

        if value > MAX_CODE_POINT:
            raise CodePointRangeError(
                f"Code point 0x{value:X} at offset {offset} is outside the Unicode range", offset
            )
        if strict and SURROGATE_MIN <= value <= SURROGATE_MAX:
            raise InvalidSequenceError(
                f"Surrogate U+{value:04X} is not a valid code point (offset {offset})", offset
            )
        encode_code_point(value, target)

    return bytes(target)


def _encode_u16(reader: UnitReader, strict: bool) -> bytes:
    target = bytearray()

    while reader.units_remaining():
        offset = reader.byte_offset()
        value = reader.read_unit()

        if HIGH_SURROGATE_MIN <= value < LOW_SURROGATE_MIN:
            if not reader.units_remaining():
                raise TruncatedSequenceError(
                    f"Unpaired surrogate U+{value:04X} at end of input (offset {offset})", offset
                )
            low = reader.read_unit()
            if not LOW_SURROGATE_MIN <= low < LOW_SURROGATE_END:
                raise InvalidSurrogatePairError(
                    f"Invalid surrogate pair U+{value:04X} U+{low:04X} at offset {offset}",
                    offset,
                )
            code_point = 0x10000 + ((value - HIGH_SURROGATE_MIN) << 10) + (low - LOW_SURROGATE_MIN)
            encode_code_point(code_point, target)
        elif strict and LOW_SURROGATE_MIN <= value < LOW_SURROGATE_END:
            raise InvalidSurrogatePairError(
                f"Lone low surrogate U+{value:04X} at offset {offset}", offset
            )
        else:
            # Any other unit is a whole BMP code point
            encode_code_point(value, target)

    return bytes(target)


def _unit_reader(
    units: bytes, width: UnitWidth, endian: Endian | str, start: int = 0
) -> UnitReader:
    reader = UnitReader(units, width, endian, start)
    partial = (len(units) - start) % width.size
    if partial:
        raise TruncatedSequenceError(
            f"UTF-{int(width)} input of {len(units)} bytes ends with a partial unit",
            len(units) - partial,
        )
    return reader


def _read_marker(units: bytes, width: UnitWidth) -> Endian:
    if not len(units):
        raise MarkerError(f"UTF-{int(width)} input with marker must not be empty", 0)

    endian = detect_marker(units, width)
    if endian is None:
        lead = bytes(units[: width.size]).hex(" ")
        raise MarkerError(f"Unrecognized UTF-{int(width)} marker: {lead}", 0)

    logger.debug("UTF-%d marker declares %s-endian input", int(width), endian.value)
    return endian
