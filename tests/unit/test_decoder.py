"""Unit tests for the UTF-8 to UTF-32 decoder."""

from __future__ import annotations

import pytest

from utfconv import (
    CodePointRangeError,
    Endian,
    InvalidSequenceError,
    TruncatedSequenceError,
    u8_to_u32,
)
from utfconv.codec.utf8 import iter_code_points, sequence_length, utf8_length


class TestU8ToU32:
    """Test UTF-8 to UTF-32 decoding."""

    def test_big_endian(self, sample_text: str, sample_utf8: bytes) -> None:
        """Test big-endian output."""
        assert u8_to_u32(sample_utf8, Endian.BIG) == sample_text.encode("utf-32-be")

    def test_little_endian(self, sample_text: str, sample_utf8: bytes) -> None:
        """Test little-endian output."""
        assert u8_to_u32(sample_utf8, Endian.LITTLE) == sample_text.encode("utf-32-le")

    def test_add_marker(self) -> None:
        """Test the marker is written in the target byte order."""
        assert u8_to_u32(b"A", Endian.BIG, add_marker=True) == b"\x00\x00\xfe\xff\x00\x00\x00A"
        assert u8_to_u32(b"A", Endian.LITTLE, add_marker=True) == b"\xff\xfe\x00\x00A\x00\x00\x00"

    def test_marker_matches_python_codec(self, sample_text: str, sample_utf8: bytes) -> None:
        """Test marker-prefixed output against Python's own UTF-32 encoder."""
        expected = b"\xff\xfe\x00\x00" + sample_text.encode("utf-32-le")
        assert u8_to_u32(sample_utf8, "little", True) == expected

    def test_empty(self) -> None:
        """Test empty input, with and without marker."""
        assert u8_to_u32(b"", Endian.BIG) == b""
        assert u8_to_u32(b"", Endian.BIG, add_marker=True) == b"\x00\x00\xfe\xff"

    def test_four_byte(self) -> None:
        """Test U+1F600."""
        assert u8_to_u32(b"\xf0\x9f\x98\x80", Endian.BIG) == b"\x00\x01\xf6\x00"

    def test_unsupported_endian(self) -> None:
        """Test contract violation on bad endianness."""
        with pytest.raises(ValueError):
            u8_to_u32(b"A", "native")

    @pytest.mark.parametrize(
        "data",
        [b"\xf0", b"\xf0\x9f", b"\xf0\x9f\x98", b"\xe2\x82", b"\xc3"],
    )
    def test_truncated(self, data: bytes) -> None:
        """Test multi-byte sequences cut off at end of input."""
        with pytest.raises(TruncatedSequenceError, match="Truncated") as exc_info:
            u8_to_u32(data, Endian.BIG)

        assert exc_info.value.position == 0

    def test_truncated_after_text(self) -> None:
        """Test the error position of a late truncation."""
        with pytest.raises(TruncatedSequenceError) as exc_info:
            u8_to_u32(b"abc\xe2\x82", Endian.LITTLE)

        assert exc_info.value.position == 3

    @pytest.mark.parametrize("lead", [0x80, 0x9F, 0xBF])
    def test_invalid_lead_byte(self, lead: int) -> None:
        """Test continuation bytes in lead position."""
        with pytest.raises(InvalidSequenceError, match="Invalid lead byte"):
            u8_to_u32(bytes([0x41, lead]), Endian.BIG)


class TestPermissiveDecoding:
    """Test that default decoding checks structure only."""

    def test_overlong_accepted(self) -> None:
        """Test a 2-byte encoding of '/' decodes to U+002F."""
        assert u8_to_u32(b"\xc0\xaf", Endian.BIG) == b"\x00\x00\x00/"

    def test_encoded_surrogate_accepted(self) -> None:
        """Test an encoded surrogate decodes to its value."""
        assert u8_to_u32(b"\xed\xa0\x80", Endian.BIG) == b"\x00\x00\xd8\x00"

    def test_continuation_bits_not_checked(self) -> None:
        """Test payload bits are taken from any trailing byte."""
        assert u8_to_u32(b"\xc3\x29", Endian.BIG) == b"\x00\x00\x00\xe9"

    def test_five_byte_lead_read_as_four(self) -> None:
        """Test leads F8-FF use the 4-byte layout."""
        assert u8_to_u32(b"\xf8\x80\x80\x80", Endian.BIG) == b"\x00\x00\x00\x00"


class TestStrictDecoding:
    """Test strict UTF-8 validation."""

    def test_valid_input(self, sample_text: str, sample_utf8: bytes) -> None:
        """Test well-formed input decodes as usual."""
        assert u8_to_u32(sample_utf8, Endian.BIG, strict=True) == sample_text.encode("utf-32-be")

    def test_overlong(self) -> None:
        """Test overlong encodings."""
        for data in (b"\xc0\xaf", b"\xe0\x80\xaf", b"\xf0\x80\x80\xaf"):
            with pytest.raises(InvalidSequenceError, match="Overlong"):
                u8_to_u32(data, Endian.BIG, strict=True)

    def test_encoded_surrogate(self) -> None:
        """Test encoded surrogates."""
        with pytest.raises(InvalidSequenceError, match="surrogate"):
            u8_to_u32(b"\xed\xa0\x80", Endian.BIG, strict=True)

    def test_bad_continuation(self) -> None:
        """Test a continuation byte without the 10xxxxxx marker."""
        with pytest.raises(InvalidSequenceError, match="continuation") as exc_info:
            u8_to_u32(b"\xc3\x29", Endian.BIG, strict=True)

        assert exc_info.value.position == 1

    def test_five_byte_lead(self) -> None:
        """Test leads F8-FF."""
        with pytest.raises(InvalidSequenceError, match="lead byte"):
            u8_to_u32(b"\xf8\x80\x80\x80", Endian.BIG, strict=True)

    def test_above_max(self) -> None:
        """Test 4-byte sequences above U+10FFFF."""
        with pytest.raises(CodePointRangeError):
            u8_to_u32(b"\xf4\x90\x80\x80", Endian.BIG, strict=True)


class TestUtf8Primitives:
    """Test shared UTF-8 helpers."""

    def test_sequence_length(self) -> None:
        """Test lead byte classification."""
        assert sequence_length(0x41) == 1
        assert sequence_length(0xC3) == 2
        assert sequence_length(0xE2) == 3
        assert sequence_length(0xF0) == 4
        assert sequence_length(0xFF) == 4
        assert sequence_length(0x80) is None

    def test_utf8_length(self) -> None:
        """Test encoded lengths at range boundaries."""
        assert [utf8_length(v) for v in (0x7F, 0x80, 0x7FF, 0x800, 0xFFFF, 0x10000, 0x10FFFF)] == [
            1,
            2,
            2,
            3,
            3,
            4,
            4,
        ]

        with pytest.raises(CodePointRangeError):
            utf8_length(0x110000)

    def test_iter_code_points(self, sample_text: str, sample_utf8: bytes) -> None:
        """Test iteration yields code points in order."""
        assert list(iter_code_points(sample_utf8)) == [ord(c) for c in sample_text]
