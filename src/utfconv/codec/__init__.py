"""Transcoding codecs for utfconv.

This module provides the UTF-32/UTF-16 to UTF-8 encoders, the UTF-8 to UTF-32
decoder, and the byte-order and marker helpers they are built on.
"""

from __future__ import annotations

from .bom import detect_marker, generate_marker, matches_marker
from .decoder import u8_to_u32
from .encoder import u16_to_u8, u16_to_u8_with_marker, u32_to_u8, u32_to_u8_with_marker
from .units import Endian, UnitReader, UnitWidth, UnitWriter, pack_unit, read_unit
from .utf8 import iter_code_points, utf8_length

__all__ = [
    "u32_to_u8",
    "u32_to_u8_with_marker",
    "u16_to_u8",
    "u16_to_u8_with_marker",
    "u8_to_u32",
    "generate_marker",
    "matches_marker",
    "detect_marker",
    "Endian",
    "UnitWidth",
    "UnitReader",
    "UnitWriter",
    "read_unit",
    "pack_unit",
    "iter_code_points",
    "utf8_length",
]
