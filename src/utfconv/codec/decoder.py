"""UTF-8 to UTF-32 decoder."""

from __future__ import annotations

import logging

from .bom import generate_marker
from .units import Endian, UnitWidth, UnitWriter
from .utf8 import iter_code_points

logger = logging.getLogger(__name__)


def u8_to_u32(
    data: bytes,
    target_endian: Endian | str,
    add_marker: bool = False,
    *,
    strict: bool = False,
) -> bytes:
    """Decode UTF-8 bytes into UTF-32 code units.

    Lead bytes are classified from the highest-order bits down (1111, 1110,
    11, 0). Only the sequence structure is validated by default; pass
    ``strict=True`` to also reject overlong forms, encoded surrogates and
    malformed continuation bytes.

    Args:
        data: UTF-8 bytes
        target_endian: Byte order of the output units
        add_marker: If True, start the output with the UTF-32 byte-order marker
        strict: Validate that the input is well-formed UTF-8

    Returns:
        UTF-32 code units, 4 bytes each

    Raises:
        ValueError: If target_endian is unsupported
        TruncatedSequenceError: If the input ends inside a multi-byte sequence
        InvalidSequenceError: If a continuation byte appears in lead position

    Examples:
        ```python
        from utfconv import Endian, u8_to_u32

        u8_to_u32(b"A", Endian.BIG)
        # b'\\x00\\x00\\x00A'

        u8_to_u32(b"A", Endian.LITTLE, add_marker=True)
        # b'\\xff\\xfe\\x00\\x00A\\x00\\x00\\x00'
        ```
    """
    writer = UnitWriter(UnitWidth.U32, target_endian)

    if add_marker:
        writer.write_bytes(generate_marker(UnitWidth.U32, target_endian))

    for code_point in iter_code_points(data, strict=strict):
        writer.write_unit(code_point)

    logger.debug(
        "Decoded %d UTF-8 bytes into %d UTF-32 units", len(data), writer.unit_count()
    )
    return writer.to_bytes()
