"""Grey conversion, 3x3 mean smoothing and Sobel edge detection on bitmaps."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterator, Sequence
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from algolab.bmp import BmpImage, read_bmp, write_bmp

WINDOW = 3
MEAN_DIVISOR = WINDOW * WINDOW
MAX_LEVEL = 255

DEFAULT_MASK = "mask_Sobel.txt"
DEFAULT_INPUTS = tuple(f"input{k}.bmp" for k in range(1, 6))

PathArg = Union[str, PathLike]


def _window(width: int, height: int, i: int, j: int) -> Iterator[tuple[int, int]]:
    """Yield (kernel index, pixel index) pairs of the in-bounds window around (i, j)."""
    half = WINDOW // 2
    for y in range(WINDOW):
        b = j + y - half
        if not 0 <= b < height:
            continue
        for x in range(WINDOW):
            a = i + x - half
            if 0 <= a < width:
                yield y * WINDOW + x, b * width + a


def _check_plane(plane: bytes, width: int, height: int) -> None:
    if len(plane) != width * height:
        raise ValueError(f"expected {width * height} values, got {len(plane)}")


def to_grey(image: BmpImage) -> bytes:
    """Return one grey level per pixel, the mean of its three channels."""
    if image.bits_per_pixel != 24:
        raise ValueError("only 24-bit images are supported")
    pixels = image.pixels
    return bytes(
        min((pixels[p] + pixels[p + 1] + pixels[p + 2]) // 3, MAX_LEVEL)
        for p in range(0, len(pixels), 3)
    )


def mean_filter(grey: bytes, width: int, height: int) -> bytes:
    """Smooth with a 3x3 box; missing border cells count as zero."""
    _check_plane(grey, width, height)
    return bytes(
        min(sum(grey[idx] for _, idx in _window(width, height, i, j)) // MEAN_DIVISOR, MAX_LEVEL)
        for j in range(height)
        for i in range(width)
    )


def sobel_filter(
    mean: bytes, width: int, height: int, gx: Sequence[int], gy: Sequence[int]
) -> bytes:
    """Return 24-bit pixel data of the gradient magnitude under kernels ``gx`` and ``gy``.

    Each gradient component is clamped to 0..255 before the magnitude is taken.
    """
    _check_plane(mean, width, height)
    if len(gx) != MEAN_DIVISOR or len(gy) != MEAN_DIVISOR:
        raise ValueError(f"kernels must hold {MEAN_DIVISOR} values")
    out = bytearray()
    for j in range(height):
        for i in range(width):
            sum_x = sum_y = 0
            for k, idx in _window(width, height, i, j):
                sum_x += gx[k] * mean[idx]
                sum_y += gy[k] * mean[idx]
            sum_x = min(max(sum_x, 0), MAX_LEVEL)
            sum_y = min(max(sum_y, 0), MAX_LEVEL)
            level = min(math.isqrt(sum_x * sum_x + sum_y * sum_y), MAX_LEVEL)
            out += bytes((level, level, level))
    return bytes(out)


def load_mask(path: PathArg) -> tuple[list[int], list[int]]:
    """Read a kernel size followed by the horizontal and vertical kernels."""
    try:
        numbers = [int(token) for token in Path(path).read_text().split()]
    except ValueError as exc:
        raise ValueError(f"{path}: non-integer value in mask: {exc}") from None
    if not numbers:
        raise ValueError(f"{path}: mask is empty")
    size = numbers[0]
    if size != MEAN_DIVISOR:
        raise ValueError(f"{path}: mask size must be {MEAN_DIVISOR}, got {size}")
    if len(numbers) < 1 + 2 * size:
        raise ValueError(f"{path}: mask holds too few values")
    return numbers[1:1 + size], numbers[1 + size:1 + 2 * size]


def process_image(
    in_path: PathArg, out_path: PathArg, gx: Sequence[int], gy: Sequence[int]
) -> BmpImage:
    """Detect the edges of the bitmap at ``in_path`` and write them to ``out_path``."""
    source = read_bmp(in_path)
    grey = to_grey(source)
    mean = mean_filter(grey, source.width, source.height)
    edges = sobel_filter(mean, source.width, source.height, gx, gy)
    result = BmpImage(
        source.width, source.height, edges, source.bits_per_pixel, source.data_offset
    )
    write_bmp(out_path, result)
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sobel edge detection on 24-bit bitmaps.")
    parser.add_argument("inputs", nargs="*", default=list(DEFAULT_INPUTS), help="input bitmaps")
    parser.add_argument("--mask", type=Path, default=Path(DEFAULT_MASK), help="Sobel mask file")
    parser.add_argument(
        "--output-dir", type=Path, default=Path("."), help="directory for outputN.bmp files"
    )
    args = parser.parse_args(argv)

    gx, gy = load_mask(args.mask)
    for number, in_path in enumerate(args.inputs, start=1):
        process_image(in_path, args.output_dir / f"output{number}.bmp", gx, gy)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())