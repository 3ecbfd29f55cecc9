"""Byte-order marker (BOM) generation and recognition.

The marker is U+FEFF packed as the first code unit of a sequence. Reading it
back in the wrong byte order gives U+FFFE, a noncharacter, which is how the
endianness of the rest of the sequence is told apart.
"""

from __future__ import annotations

from .units import Endian, UnitWidth

_MARKERS: dict[tuple[UnitWidth, Endian], bytes] = {
    (UnitWidth.U32, Endian.BIG): b"\x00\x00\xfe\xff",
    (UnitWidth.U32, Endian.LITTLE): b"\xff\xfe\x00\x00",
    (UnitWidth.U16, Endian.BIG): b"\xfe\xff",
    (UnitWidth.U16, Endian.LITTLE): b"\xff\xfe",
}


def generate_marker(width: UnitWidth | int, endian: Endian | str) -> bytes:
    """Return the canonical marker unit for a width and byte order.

    Example:
        >>> generate_marker(UnitWidth.U32, Endian.LITTLE)
        b'\\xff\\xfe\\x00\\x00'
    """
    return _MARKERS[UnitWidth.coerce(width), Endian.coerce(endian)]


def matches_marker(unit: bytes, width: UnitWidth | int, endian: Endian | str) -> bool:
    """Check whether a unit's bytes are exactly the marker for width/endian.

    A unit carrying the opposite byte order's marker does not match.
    """
    return bytes(unit) == generate_marker(width, endian)


def detect_marker(data: bytes, width: UnitWidth | int) -> Endian | None:
    """Return the byte order declared by the leading unit of data.

    Returns:
        Endian of the matching marker, or None when data is shorter than one
        unit or its first unit is not a marker
    """
    width = UnitWidth.coerce(width)
    unit = bytes(data[: width.size])
    if len(unit) < width.size:
        return None

    for endian in Endian:
        if matches_marker(unit, width, endian):
            return endian
    return None
