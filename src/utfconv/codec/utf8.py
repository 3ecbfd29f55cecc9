"""UTF-8 primitives shared by the encoders and the decoder.

Encoding layout per code point:

    U+000000..U+00007F  0xxxxxxx
    U+000080..U+0007FF  110xxxxx 10xxxxxx
    U+000800..U+00FFFF  1110xxxx 10xxxxxx 10xxxxxx
    U+010000..U+10FFFF  11110xxx 10xxxxxx 10xxxxxx 10xxxxxx
"""

from __future__ import annotations

from collections.abc import Iterator

from ..exceptions import (
    CodePointRangeError,
    InvalidSequenceError,
    TruncatedSequenceError,
)

MAX_CODE_POINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

# Smallest code point that needs a sequence of the given length
_MIN_FOR_LENGTH = {1: 0x00, 2: 0x80, 3: 0x800, 4: 0x10000}


def utf8_length(code_point: int) -> int:
    """Return how many UTF-8 bytes encode code_point.

    Raises:
        CodePointRangeError: If code_point is above U+10FFFF
    """
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point < 0x10000:
        return 3
    if code_point <= MAX_CODE_POINT:
        return 4
    raise CodePointRangeError(f"Code point 0x{code_point:X} is outside the Unicode range")


def encode_code_point(code_point: int, target: bytearray) -> None:
    """Append the UTF-8 encoding of code_point to target.

    Raises:
        CodePointRangeError: If code_point is above U+10FFFF
    """
    length = utf8_length(code_point)

    if length == 1:
        target.append(code_point)
    elif length == 2:
        target.append(0xC0 | (code_point >> 6) & 0x1F)
        target.append(0x80 | code_point & 0x3F)
    elif length == 3:
        target.append(0xE0 | (code_point >> 12) & 0x0F)
        target.append(0x80 | (code_point >> 6) & 0x3F)
        target.append(0x80 | code_point & 0x3F)
    else:
        target.append(0xF0 | (code_point >> 18) & 0x07)
        target.append(0x80 | (code_point >> 12) & 0x3F)
        target.append(0x80 | (code_point >> 6) & 0x3F)
        target.append(0x80 | code_point & 0x3F)


def sequence_length(lead: int) -> int | None:
    """Classify a lead byte by the length of the sequence it starts.

    The highest-order distinguishing bits are checked first, so any byte with
    the top nibble 1111 counts as a 4-byte lead.

    Returns:
        1-4, or None for a continuation byte (10xxxxxx)
    """
    if lead & 0xF0 == 0xF0:
        return 4
    if lead & 0xE0 == 0xE0:
        return 3
    if lead & 0xC0 == 0xC0:
        return 2
    if lead & 0x80 == 0:
        return 1
    return None


def iter_code_points(data: bytes, strict: bool = False) -> Iterator[int]:
    """Decode UTF-8 bytes into code points.

    In the default mode only the structure is checked: every lead byte must
    start a sequence and the sequence must be complete. Payload bits are
    reassembled as-is, so overlong forms and encoded surrogates pass through.

    Args:
        data: UTF-8 bytes
        strict: Also reject lead bytes F8-FF, malformed continuation bytes,
            overlong forms, encoded surrogates and values above U+10FFFF

    Yields:
        Code points in input order

    Raises:
        InvalidSequenceError: If a byte cannot start a sequence (or, in strict
            mode, the sequence is not well-formed)
        TruncatedSequenceError: If the input ends inside a sequence
        CodePointRangeError: Strict mode only, value above U+10FFFF
    """
    size = len(data)
    i = 0
    while i < size:
        lead = data[i]
        length = sequence_length(lead)
        if length is None:
            raise InvalidSequenceError(f"Invalid lead byte 0x{lead:02X} at offset {i}", i)
        if i + length > size:
            raise TruncatedSequenceError(
                f"Truncated {length}-byte sequence at offset {i}: "
                f"only {size - i} byte(s) remain",
                i,
            )

        if length == 1:
            code_point = lead
        elif length == 2:
            code_point = (lead & 0x1F) << 6 | data[i + 1] & 0x3F
        elif length == 3:
            code_point = (lead & 0x0F) << 12 | (data[i + 1] & 0x3F) << 6 | data[i + 2] & 0x3F
        else:
            code_point = (
                (lead & 0x07) << 18
                | (data[i + 1] & 0x3F) << 12
                | (data[i + 2] & 0x3F) << 6
                | data[i + 3] & 0x3F
            )

        if strict:
            _check_well_formed(data, i, length, code_point)

        yield code_point
        i += length


def _check_well_formed(data: bytes, offset: int, length: int, code_point: int) -> None:
    lead = data[offset]
    if lead >= 0xF8:
        raise InvalidSequenceError(f"Invalid lead byte 0x{lead:02X} at offset {offset}", offset)

    for j in range(offset + 1, offset + length):
        if data[j] & 0xC0 != 0x80:
            raise InvalidSequenceError(
                f"Invalid continuation byte 0x{data[j]:02X} at offset {j}", j
            )

    if code_point < _MIN_FOR_LENGTH[length]:
        raise InvalidSequenceError(
            f"Overlong {length}-byte encoding of U+{code_point:04X} at offset {offset}", offset
        )
    if SURROGATE_MIN <= code_point <= SURROGATE_MAX:
        raise InvalidSequenceError(
            f"Encoded surrogate U+{code_point:04X} at offset {offset}", offset
        )
    if code_point > MAX_CODE_POINT:
        raise CodePointRangeError(
            f"Code point 0x{code_point:X} at offset {offset} is outside the Unicode range", offset
        )
