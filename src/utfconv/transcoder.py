"""Request-driven conversion between any supported pair of encodings.

UTF-8 is the pivot: UTF-16 and UTF-32 sources are encoded to UTF-8 first, and
UTF-32 output is decoded from that UTF-8. There is no UTF-16 output.
"""

from __future__ import annotations

import enum
import logging

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .codec.decoder import u8_to_u32
from .codec.encoder import u16_to_u8, u16_to_u8_with_marker, u32_to_u8, u32_to_u8_with_marker
from .codec.units import Endian
from .codec.utf8 import iter_code_points

logger = logging.getLogger(__name__)


class Encoding(enum.Enum):
    """Unicode encoding forms handled by the engine."""

    UTF8 = "utf-8"
    UTF16 = "utf-16"
    UTF32 = "utf-32"


class TranscodeRequest(BaseModel):
    """Validated description of a single conversion.

    Attributes:
        source: Encoding of the input buffer
        target: Encoding to produce (UTF-8 or UTF-32)
        source_endian: Byte order of a UTF-16/UTF-32 source; None means the
            input starts with a byte-order marker that declares it
        target_endian: Byte order of UTF-32 output; unused for UTF-8 output
        add_marker: Start UTF-32 output with a byte-order marker; only valid
            when target is UTF-32
        strict: Reject overlong forms, encoded surrogates and lone surrogates

    Example:
        >>> request = TranscodeRequest(source="utf-16", source_endian="little")
        >>> request.target
        <Encoding.UTF8: 'utf-8'>
    """

    model_config = ConfigDict(
        # Requests are plain values
        frozen=True,
        # Forbid options the engine does not know about
        extra="forbid",
    )

    source: Encoding
    target: Encoding = Encoding.UTF8
    source_endian: Endian | None = None
    target_endian: Endian = Endian.BIG
    add_marker: bool = False
    strict: bool = False

    @field_validator("target")
    @classmethod
    def _check_target(cls, value: Encoding) -> Encoding:
        if value is Encoding.UTF16:
            raise ValueError("UTF-16 output is not supported; convert to UTF-8 or UTF-32")
        return value

    @model_validator(mode="after")
    def _check_marker(self) -> TranscodeRequest:
        if self.add_marker and self.target is not Encoding.UTF32:
            raise ValueError("add_marker requires UTF-32 output; UTF-8 output has no marker")
        return self


def transcode(data: bytes, request: TranscodeRequest) -> bytes:
    """Convert data as described by request.

    Args:
        data: Input buffer in request.source encoding
        request: Conversion options

    Returns:
        Output buffer in request.target encoding

    Raises:
        TranscodeError: Any conversion failure from the underlying codecs

    Examples:
        ```python
        from utfconv import Endian, TranscodeRequest, transcode

        # UTF-16 with a marker to UTF-8
        transcode(b"\\xff\\xfeh\\x00i\\x00", TranscodeRequest(source="utf-16"))
        # b'hi'

        # UTF-8 to big-endian UTF-32 with a marker
        request = TranscodeRequest(source="utf-8", target="utf-32", add_marker=True)
        transcode(b"hi", request)
        ```
    """
    logger.debug(
        "Transcoding %d bytes %s -> %s", len(data), request.source.value, request.target.value
    )

    if request.source is Encoding.UTF8:
        utf8 = bytes(data)
        if request.target is Encoding.UTF8:
            # Nothing to convert; walk the input so malformed data still fails
            for _ in iter_code_points(utf8, strict=request.strict):
                pass
            return utf8
    else:
        utf8 = _to_utf8(data, request)

    if request.target is Encoding.UTF32:
        return u8_to_u32(utf8, request.target_endian, request.add_marker, strict=request.strict)
    return utf8


def _to_utf8(data: bytes, request: TranscodeRequest) -> bytes:
    if request.source is Encoding.UTF16:
        if request.source_endian is None:
            return u16_to_u8_with_marker(data, strict=request.strict)
        return u16_to_u8(data, request.source_endian, strict=request.strict)

    if request.source_endian is None:
        return u32_to_u8_with_marker(data, strict=request.strict)
    return u32_to_u8(data, request.source_endian, strict=request.strict)
