#!/usr/bin/env python3
"""Basic usage example for utfconv.

This example demonstrates:
1. Normalizing BOM-prefixed UTF-16 to UTF-8
2. Producing UTF-32 with a chosen byte order and marker
3. Converting with an explicit, unmarked byte order
4. Handling conversion errors
"""

from __future__ import annotations

from utfconv import (
    Endian,
    TranscodeError,
    TranscodeRequest,
    transcode,
    u8_to_u32,
    u16_to_u8,
    u16_to_u8_with_marker,
    u32_to_u8_with_marker,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("utfconv Basic Usage Example")
    print("=" * 60)
    print()

    text = "Depth 42 m, température 4 °C 🐋"

    # UTF-16 as written by Python (marker + native byte order)
    print("1. Normalizing BOM-prefixed UTF-16 to UTF-8...")
    utf16 = text.encode("utf-16")
    utf8 = u16_to_u8_with_marker(utf16)
    print(f"   UTF-16: {len(utf16)} bytes, marker {utf16[:2].hex(' ')}")
    print(f"   UTF-8:  {len(utf8)} bytes -> {utf8.decode('utf-8')!r}")
    print()

    print("2. Producing little-endian UTF-32 with a marker...")
    utf32 = u8_to_u32(utf8, Endian.LITTLE, add_marker=True)
    print(f"   UTF-32: {len(utf32)} bytes, marker {utf32[:4].hex(' ')}")
    assert u32_to_u8_with_marker(utf32) == utf8
    print("   Round-trip back to UTF-8: OK")
    print()

    print("3. Converting unmarked big-endian UTF-16 via a request...")
    request = TranscodeRequest(source="utf-16", source_endian="big", target="utf-32")
    print(f"   Request: {request.model_dump(mode='json')}")
    print(f"   Output:  {len(transcode(text.encode('utf-16-be'), request))} bytes")
    print()

    print("4. Handling errors...")
    for label, data in [
        ("lone high surrogate", b"\xd8\x3d"),
        ("broken surrogate pair", b"\xd8\x3d\x00\x41"),
    ]:
        try:
            u16_to_u8(data, Endian.BIG)
        except TranscodeError as e:
            print(f"   {label}: {type(e).__name__} at offset {e.position}: {e}")
    print()


if __name__ == "__main__":
    main()
