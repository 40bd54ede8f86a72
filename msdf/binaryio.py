"""Reading typed values and fixed-length strings from binary streams."""

import struct
from typing import Any, BinaryIO

_BYTE_ORDER_PREFIXES = "@=<>!"
MAX_STRING_LENGTH = 1024


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def read_value(stream: BinaryIO, fmt: str) -> Any:
    """Read one value described by a struct format from the stream.

    Without an explicit byte order the data is taken as little-endian.
    A format describing several values yields a tuple.
    """
    if not fmt or fmt[0] not in _BYTE_ORDER_PREFIXES:
        fmt = "<" + fmt
    layout = struct.Struct(fmt)
    values = layout.unpack(_read_exact(stream, layout.size))
    return values[0] if len(values) == 1 else values


def read_string(stream: BinaryIO, length: int) -> str:
    """Read a string of ``length`` bytes, cut at the first NUL and trimmed."""
    if length < 0 or length >= MAX_STRING_LENGTH:
        raise ValueError(
            f"string length must be in [0, {MAX_STRING_LENGTH}), got {length}"
        )
    raw = _read_exact(stream, length)
    raw = raw.split(b"\0", 1)[0]
    return raw.decode("latin-1").strip()