"""Buffer inspection report for the CLI."""

from __future__ import annotations

from pathlib import Path

from ..codec.bom import detect_marker
from ..codec.units import Endian, UnitWidth
from ..codec.utf8 import iter_code_points, utf8_length
from ..transcoder import Encoding, TranscodeRequest, transcode

_WIDTHS = {Encoding.UTF16: UnitWidth.U16, Encoding.UTF32: UnitWidth.U32}


def guess_marker(data: bytes) -> tuple[Encoding, Endian] | None:
    """Find a UTF-32 or UTF-16 byte-order marker at the start of data.

    UTF-32 is checked first because the little-endian UTF-32 marker begins
    with the little-endian UTF-16 one. A UTF-32 match only counts when the rest
    of the buffer is a whole number of 4-byte units.
    """
    endian = detect_marker(data, UnitWidth.U32)
    if endian is not None and len(data) % UnitWidth.U32.size == 0:
        return Encoding.UTF32, endian

    endian = detect_marker(data, UnitWidth.U16)
    if endian is not None:
        return Encoding.UTF16, endian
    return None


def inspect_file(
    file_path: Path,
    source: Encoding | None = None,
    endian: Endian | None = None,
) -> None:
    """Print a breakdown of the text stored in a file.

    Args:
        file_path: File to inspect
        source: Encoding of the file; read from its marker when None, falling
            back to UTF-8 if there is no marker
        endian: Byte order of an unmarked UTF-16/UTF-32 file

    Raises:
        TranscodeError: If the file is not valid in the chosen encoding
    """
    data = file_path.read_bytes()

    has_marker = False
    if source is None:
        found = guess_marker(data)
        source = found[0] if found is not None else Encoding.UTF8

    if source is not Encoding.UTF8 and endian is None:
        endian = detect_marker(data, _WIDTHS[source])
        if endian is None:
            raise ValueError(f"{file_path} has no {source.value} marker; pass --endian")
        has_marker = True

    request = TranscodeRequest(
        source=source, source_endian=None if has_marker else endian
    )
    utf8 = transcode(data, request)

    histogram = {1: 0, 2: 0, 3: 0, 4: 0}
    for code_point in iter_code_points(utf8):
        histogram[utf8_length(code_point)] += 1
    code_points = sum(histogram.values())

    # Print header
    print("|" * 7, "utfconv: Unicode Transcoding Engine", "|" * 7)
    print(f"File: {file_path} ({len(data)} bytes)")
    print()

    title = source.value.upper()
    if source is not Encoding.UTF8 and endian is not None:
        title += f" ({endian.value}-endian{', marker' if has_marker else ''})"
    print(f"{'=' * 19} {title} {'=' * 19}")

    if has_marker:
        marker_size = _WIDTHS[source].size
        print(_dotted("byte-order marker", f"{marker_size} bytes"))
    if source is not Encoding.UTF8:
        payload = len(data) - (_WIDTHS[source].size if has_marker else 0)
        print(_dotted("code units", str(payload // _WIDTHS[source].size)))
    print(_dotted("code points", str(code_points)))
    print(_dotted("UTF-8 size", f"{len(utf8)} bytes"))
    print(_dotted("UTF-32 size", f"{code_points * UnitWidth.U32.size} bytes"))
    print()

    print(f"{'-' * 19} UTF-8 sequence lengths {'-' * 19}")
    for length, count in histogram.items():
        print(_dotted(f"{length}-byte", str(count)))
    print()


def _dotted(label: str, value: str) -> str:
    dots = "." * max(1, 46 - len(label) - len(value))
    return f"        {label}{dots}{value}"
