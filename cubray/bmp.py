"""Screenshot output as 32-bit uncompressed BMP files."""

from __future__ import annotations

import os
import struct

SAVE_FLAG = "--save"
_HEADER = struct.Struct("<2sIHHIIiiHH6I")


def is_save_flag(arg):
    """Return True if the argument asks for a screenshot instead of a window."""
    return arg == SAVE_FLAG


def bmp_header(width, height, bits_per_pixel):
    """Return the 54-byte file and info header of a bottom-up BMP image."""
    return _HEADER.pack(
        b"BM",
        14 + 40 + 4 * width * height,
        0,
        0,
        54,
        40,
        width,
        height,
        1,
        bits_per_pixel,
        0, 0, 0, 0, 0, 0,
    )


def encode_bmp(pixels, width, height):
    """Encode row-major 0xRRGGBB pixels as a 32-bit BMP file image."""
    pixels = list(pixels)
    if len(pixels) != width * height:
        raise ValueError(
            f"expected {width * height} pixels, got {len(pixels)}"
        )
    rows = (
        pixels[row * width:(row + 1) * width]
        for row in reversed(range(height))
    )
    body = b"".join(
        struct.pack(f"<{width}I", *(value & 0xFFFFFFFF for value in row))
        for row in rows
    )
    return bmp_header(width, height, 32) + body


def write_bmp(path, pixels, width, height):
    """Write the pixels to ``path`` as a BMP file readable by everyone."""
    data = encode_bmp(pixels, width, height)
    with open(path, "wb") as handle:
        handle.write(data)
    os.chmod(path, 0o777)