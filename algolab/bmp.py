"""Reading and writing uncompressed BMP images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

HEADER_SIZE = 54
INFO_HEADER_SIZE = 40

_OFFSET_POS = 10
_SIZE_POS = 18
_BITS_POS = 28

PathArg = Union[str, PathLike]


@dataclass(frozen=True)
class BmpImage:
    """Raw pixel data of a bitmap, rows bottom-up, channels in BGR order."""

    width: int
    height: int
    pixels: bytes
    bits_per_pixel: int = 24
    data_offset: int = HEADER_SIZE

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("width and height must be non-negative")
        if self.bits_per_pixel < 8:
            raise ValueError("bits_per_pixel must be at least 8")
        if len(self.pixels) != self.data_size:
            raise ValueError(
                f"expected {self.data_size} bytes of pixel data, got {len(self.pixels)}"
            )

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def data_size(self) -> int:
        return self.width * self.height * self.bytes_per_pixel


def read_bmp(path: PathArg) -> BmpImage:
    """Read the header fields and raw pixel data of the bitmap at ``path``."""
    data = Path(path).read_bytes()
    if len(data) < _BITS_POS + 2:
        raise ValueError(f"{path}: file too short for a bitmap header")
    (offset,) = struct.unpack_from("<I", data, _OFFSET_POS)
    width, height = struct.unpack_from("<II", data, _SIZE_POS)
    (bits,) = struct.unpack_from("<H", data, _BITS_POS)
    size = width * height * (bits // 8)
    pixels = data[offset:offset + size]
    if len(pixels) != size:
        raise ValueError(f"{path}: pixel data is truncated")
    return BmpImage(width, height, bytes(pixels), bits, offset)


def write_bmp(path: PathArg, image: BmpImage) -> None:
    """Write ``image`` as a bitmap with a standard 54-byte header."""
    if image.data_offset < HEADER_SIZE:
        raise ValueError(f"data_offset must be at least {HEADER_SIZE}")
    file_size = image.data_size + image.data_offset
    header = struct.pack(
        "<2sIHHIIIIHHIIIIII",
        b"BM",
        file_size & 0xFFFFFFFF,
        0,
        0,
        image.data_offset,
        INFO_HEADER_SIZE,
        image.width,
        image.height,
        1,
        image.bits_per_pixel,
        0,
        0,
        0,
        0,
        0,
        0,
    )
    padding = bytes(image.data_offset - HEADER_SIZE)
    Path(path).write_bytes(header + padding + image.pixels)