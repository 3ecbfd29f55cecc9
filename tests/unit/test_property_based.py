"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from utfconv import (
    CodePointRangeError,
    Endian,
    UtfConvError,
    u8_to_u32,
    u16_to_u8,
    u16_to_u8_with_marker,
    u32_to_u8,
    u32_to_u8_with_marker,
    utf8_length,
)
from utfconv.codec.units import UnitWidth, pack_unit

# Every Unicode scalar value: all code points except surrogates
scalar_values = st.one_of(
    st.integers(min_value=0, max_value=0xD7FF),
    st.integers(min_value=0xE000, max_value=0x10FFFF),
)
endians = st.sampled_from(list(Endian))
texts = st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=200)


class TestUtf32Properties:
    """Property-based tests for UTF-32 <-> UTF-8."""

    @given(code_point=scalar_values, endian=endians)
    def test_code_point_roundtrip(self, code_point: int, endian: Endian) -> None:
        """Test UTF-32 -> UTF-8 -> UTF-32 keeps every scalar value."""
        units = pack_unit(code_point, UnitWidth.U32, endian)
        utf8 = u32_to_u8(units, endian)

        assert len(utf8) == utf8_length(code_point)
        assert u8_to_u32(utf8, endian) == units

    @given(code_point=scalar_values, endian=endians)
    def test_matches_python_codec(self, code_point: int, endian: Endian) -> None:
        """Test output agrees with Python's UTF-8 encoder."""
        units = pack_unit(code_point, UnitWidth.U32, endian)
        assert u32_to_u8(units, endian) == chr(code_point).encode("utf-8")

    @given(text=texts, endian=endians)
    def test_marker_roundtrip(self, text: str, endian: Endian) -> None:
        """Test u8_to_u32 with a marker followed by the marker-aware encoder."""
        utf8 = text.encode("utf-8")
        assert u32_to_u8_with_marker(u8_to_u32(utf8, endian, add_marker=True)) == utf8

    @given(code_point=st.integers(min_value=0x110000, max_value=0xFFFFFFFF), endian=endians)
    def test_out_of_range_rejected(self, code_point: int, endian: Endian) -> None:
        """Test every value above U+10FFFF fails."""
        units = pack_unit(code_point, UnitWidth.U32, endian)
        with pytest.raises(CodePointRangeError):
            u32_to_u8(units, endian)


class TestUtf16Properties:
    """Property-based tests for UTF-16 -> UTF-8."""

    @given(text=texts)
    def test_matches_python_codec(self, text: str) -> None:
        """Test surrogate pairs and BMP units against Python's codecs."""
        utf8 = text.encode("utf-8")

        assert u16_to_u8(text.encode("utf-16-be"), Endian.BIG) == utf8
        assert u16_to_u8(text.encode("utf-16-le"), Endian.LITTLE) == utf8

    @given(text=texts)
    def test_python_utf16_with_bom(self, text: str) -> None:
        """Test Python's BOM-prefixed utf-16 output is read via its marker."""
        assert u16_to_u8_with_marker(text.encode("utf-16")) == text.encode("utf-8")

    @given(data=st.binary(max_size=64), endian=endians)
    def test_arbitrary_units_never_crash(self, data: bytes, endian: Endian) -> None:
        """Test arbitrary input either converts or raises a utfconv error."""
        try:
            u16_to_u8(data, endian)
        except UtfConvError:
            pass


class TestUtf8Properties:
    """Property-based tests for UTF-8 -> UTF-32."""

    @given(text=texts, endian=endians)
    def test_matches_python_codec(self, text: str, endian: Endian) -> None:
        """Test decoding agrees with Python's UTF-32 encoder."""
        codec = "utf-32-be" if endian is Endian.BIG else "utf-32-le"
        assert u8_to_u32(text.encode("utf-8"), endian, strict=True) == text.encode(codec)

    @given(data=st.binary(max_size=64), endian=endians)
    def test_arbitrary_bytes_never_crash(self, data: bytes, endian: Endian) -> None:
        """Test arbitrary bytes either decode or raise a utfconv error."""
        for strict in (False, True):
            try:
                units = u8_to_u32(data, endian, strict=strict)
            except UtfConvError:
                continue
            assert len(units) % 4 == 0
