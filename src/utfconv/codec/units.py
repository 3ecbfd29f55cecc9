"""Endian-aware code unit packing and unpacking.

This module turns raw bytes into 16-bit or 32-bit code unit values and back.
All composition is done with explicit shifts and masks, so the byte order is
always the one requested and never the host's.
"""

from __future__ import annotations

import enum


class Endian(enum.Enum):
    """Byte order of a code unit sequence."""

    BIG = "big"
    LITTLE = "little"

    @classmethod
    def coerce(cls, value: Endian | str) -> Endian:
        """Return value as an Endian, accepting the strings "big" and "little".

        Raises:
            ValueError: If value names no supported byte order
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unsupported endianness {value!r}, expected 'big' or 'little'"
            ) from None


class UnitWidth(enum.IntEnum):
    """Width of a code unit in bits."""

    U16 = 16
    U32 = 32

    @property
    def size(self) -> int:
        """Width of the unit in bytes."""
        return self.value // 8

    @classmethod
    def coerce(cls, value: UnitWidth | int) -> UnitWidth:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unsupported unit width {value!r}, expected 16 or 32") from None


def read_unit(data: bytes, offset: int, width: UnitWidth | int, endian: Endian | str) -> int:
    """Reconstruct one code unit value from raw bytes.

    Args:
        data: Buffer holding the unit
        offset: Byte offset of the unit's first byte
        width: Unit width (16 or 32 bits)
        endian: Byte order of the unit

    Returns:
        Unsigned unit value

    Raises:
        ValueError: If width or endian is unsupported
        IndexError: If the buffer ends before the unit does
    """
    width = UnitWidth.coerce(width)
    endian = Endian.coerce(endian)
    size = width.size

    if offset < 0 or offset + size > len(data):
        raise IndexError(f"Not enough bytes: need {size}, have {max(0, len(data) - offset)}")

    value = 0
    if endian is Endian.BIG:
        for i in range(size):
            value = (value << 8) | data[offset + i]
    else:
        for i in range(size - 1, -1, -1):
            value = (value << 8) | data[offset + i]
    return value


def pack_unit(value: int, width: UnitWidth | int, endian: Endian | str) -> bytes:
    """Split a code unit value into bytes in the requested order.

    Raises:
        ValueError: If value does not fit in the unit, or width/endian is unsupported
    """
    width = UnitWidth.coerce(width)
    endian = Endian.coerce(endian)

    max_value = (1 << width) - 1
    if value < 0 or value > max_value:
        raise ValueError(f"Value {value} does not fit in a {int(width)}-bit unit (max: {max_value})")

    # Most significant byte first
    shifts = range((width.size - 1) * 8, -1, -8)
    if endian is Endian.LITTLE:
        shifts = reversed(shifts)
    return bytes((value >> shift) & 0xFF for shift in shifts)


class UnitReader:
    """Reads fixed-width code units sequentially from a byte buffer.

    Example:
        >>> reader = UnitReader(b"\\x00A\\x00B", UnitWidth.U16, Endian.BIG)
        >>> reader.read_unit()
        65
        >>> reader.units_remaining()
        1
    """

    def __init__(
        self, data: bytes, width: UnitWidth | int, endian: Endian | str, start: int = 0
    ) -> None:
        """Initialize a reader over data.

        Args:
            data: Buffer of packed code units
            width: Unit width (16 or 32 bits)
            endian: Byte order of the units
            start: Byte offset of the first unit to read
        """
        self._data = data
        self._width = UnitWidth.coerce(width)
        self._endian = Endian.coerce(endian)
        self._start = start
        self._position = 0

    @property
    def width(self) -> UnitWidth:
        return self._width

    @property
    def endian(self) -> Endian:
        return self._endian

    def read_unit(self) -> int:
        """Read the next code unit.

        Raises:
            IndexError: If no complete unit remains
        """
        if self.units_remaining() < 1:
            raise IndexError("Attempted to read past end of unit buffer")

        value = read_unit(self._data, self.byte_offset(), self._width, self._endian)
        self._position += 1
        return value

    def units_remaining(self) -> int:
        """Return the number of complete units left to read."""
        return max(0, len(self._data) - self.byte_offset()) // self._width.size

    def position(self) -> int:
        """Return the current read position in units."""
        return self._position

    def byte_offset(self) -> int:
        """Return the current read position in bytes."""
        return self._start + self._position * self._width.size


class UnitWriter:
    """Accumulates fixed-width code units into a byte buffer.

    Example:
        >>> writer = UnitWriter(UnitWidth.U32, Endian.LITTLE)
        >>> writer.write_unit(0x1F600)
        >>> writer.to_bytes()
        b'\\x00\\xf6\\x01\\x00'
    """

    def __init__(self, width: UnitWidth | int, endian: Endian | str) -> None:
        self._width = UnitWidth.coerce(width)
        self._endian = Endian.coerce(endian)
        self._buffer = bytearray()

    def write_unit(self, value: int) -> None:
        """Append one code unit.

        Raises:
            ValueError: If value does not fit in the unit width
        """
        self._buffer += pack_unit(value, self._width, self._endian)

    def write_bytes(self, data: bytes) -> None:
        """Append pre-packed units verbatim.

        Raises:
            ValueError: If data is not a whole number of units
        """
        if len(data) % self._width.size:
            raise ValueError(
                f"Raw data must be a multiple of {self._width.size} bytes, got {len(data)}"
            )
        self._buffer += data

    def unit_count(self) -> int:
        return len(self._buffer) // self._width.size

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)
