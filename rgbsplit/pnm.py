"""Reading and writing PNM (portable anymap) images."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import List, Tuple, Union

from rgbsplit.image import MAX_HEIGHT, MAX_WIDTH, Image, ImageError

PathLike = Union[str, "os.PathLike[str]"]

_WHITESPACE = b" \t\n\r\v\f"
_KNOWN_MAGICS = ("P1", "P2", "P3", "P4", "P5", "P6")
_BITMAP_MAGICS = ("P1", "P4")
_BINARY_MAGICS = ("P4", "P5", "P6")


@dataclass(frozen=True)
class PnmHeader:
    """The header fields of a PNM file and where its pixel data starts."""

    magic: str
    width: int
    height: int
    maxval: int
    data_offset: int


def _next_token(data: bytes, pos: int) -> Tuple[bytes, int]:
    """Return the next token at or after pos, skipping whitespace and comments."""
    length = len(data)
    while pos < length:
        byte = data[pos]
        if byte in _WHITESPACE:
            pos += 1
        elif byte == ord("#"):
            newline = data.find(b"\n", pos)
            pos = length if newline < 0 else newline + 1
        else:
            break
    start = pos
    while pos < length and data[pos] not in _WHITESPACE and data[pos] != ord("#"):
        pos += 1
    return data[start:pos], pos


def _read_int(data: bytes, pos: int, what: str) -> Tuple[int, int]:
    token, pos = _next_token(data, pos)
    if not token:
        raise ImageError(f"PNM data ended before the {what}")
    try:
        value = int(token)
    except ValueError:
        raise ImageError(f"invalid {what} in PNM data: {token!r}") from None
    if value < 0:
        raise ImageError(f"{what} must not be negative, got {value}")
    return value, pos


def parse_pnm_header(data: bytes) -> PnmHeader:
    """Parse the magic number, size and maximum value at the start of a PNM file."""
    token, pos = _next_token(data, 0)
    magic = token.decode("ascii", errors="replace")
    if magic not in _KNOWN_MAGICS:
        raise ImageError(f"not a valid PNM file: magic number {magic!r}")
    width, pos = _read_int(data, pos, "width")
    height, pos = _read_int(data, pos, "height")
    if magic in _BITMAP_MAGICS:
        maxval = 1
    else:
        maxval, pos = _read_int(data, pos, "maximum value")
        if maxval == 0:
            raise ImageError("maximum value must be at least 1")
    if magic in _BINARY_MAGICS:
        if pos >= len(data) or data[pos] not in _WHITESPACE:
            raise ImageError("missing whitespace before binary PNM pixel data")
        pos += 1
    return PnmHeader(magic=magic, width=width, height=height, maxval=maxval, data_offset=pos)


def read_pnm_header(path: PathLike) -> PnmHeader:
    """Read and parse the header of the PNM file at path."""
    with open(path, "rb") as handle:
        return parse_pnm_header(handle.read())


def _group_rows(values: Sequence[int], width: int, height: int) -> Tuple[tuple, ...]:
    stride = width * 3
    return tuple(
        tuple(
            tuple(values[y * stride + x * 3:y * stride + x * 3 + 3])
            for x in range(width)
        )
        for y in range(height)
    )


def decode_pnm(data: bytes) -> Image:
    """Decode a colour PNM image, binary (P6) or plain text (P3)."""
    header = parse_pnm_header(data)
    if header.magic not in ("P3", "P6"):
        raise ImageError(
            f"only P3 and P6 colour PNM images are supported, got {header.magic}"
        )
    width, height = header.width, header.height
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise ImageError(
            f"image exceeds the allowed limits ({MAX_WIDTH}x{MAX_HEIGHT})"
        )
    if header.maxval > 255:
        raise ImageError(
            f"maximum values above 255 are not supported, got {header.maxval}"
        )
    count = width * height * 3
    if header.magic == "P6":
        values: List[int] = list(data[header.data_offset:header.data_offset + count])
        if len(values) != count:
            raise ImageError("PNM pixel data truncated")
    else:
        values = []
        pos = header.data_offset
        for _ in range(count):
            value, pos = _read_int(data, pos, "sample")
            values.append(value)
    for value in values:
        if value > header.maxval:
            raise ImageError(
                f"sample {value} exceeds the maximum value {header.maxval}"
            )
    return Image(width, height, _group_rows(values, width, height))


def encode_pnm(image: Image) -> bytes:
    """Encode an image as a binary P6 PNM with maximum value 255."""
    header = f"P6\n{image.width} {image.height}\n255\n".encode("ascii")
    return header + bytes(component for pixel in image.pixels() for component in pixel)


def encode_pgm(rows: Iterable[Iterable[int]]) -> bytes:
    """Encode a matrix of 0-255 levels as a binary P5 greymap."""
    matrix = [list(row) for row in rows]
    width = len(matrix[0]) if matrix else 0
    body = bytearray()
    for y, row in enumerate(matrix):
        if len(row) != width:
            raise ImageError(f"row {y} has {len(row)} values, expected {width}")
        for value in row:
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ImageError(f"grey level {value!r} in row {y} outside 0-255")
        body += bytes(row)
    header = f"P5\n{width} {len(matrix)}\n255\n".encode("ascii")
    return header + bytes(body)


def read_pnm(path: PathLike) -> Image:
    """Read the colour PNM file at path."""
    with open(path, "rb") as handle:
        return decode_pnm(handle.read())


def write_pnm(path: PathLike, image: Image) -> None:
    """Write image to path as a binary P6 PNM."""
    with open(path, "wb") as handle:
        handle.write(encode_pnm(image))