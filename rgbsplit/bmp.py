"""Reading and writing uncompressed 24-bit BMP files."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Union

from rgbsplit.image import MAX_HEIGHT, MAX_WIDTH, Image, ImageError

PathLike = Union[str, "os.PathLike[str]"]

HEADER_SIZE = 54
DIB_HEADER_SIZE = 40
BITS_PER_PIXEL = 24

# File header (14 bytes) followed by the 40-byte BITMAPINFOHEADER.
_HEADER = struct.Struct("<2sIIIIiiHHIIiiII")


@dataclass(frozen=True)
class BmpHeader:
    """The fields of a BMP file header that the tools care about."""

    file_size: int
    data_offset: int
    dib_size: int
    width: int
    height: int
    planes: int
    bits_per_pixel: int
    image_size: int


def _row_padding(width: int) -> int:
    """Bytes appended to each row so its length is a multiple of four."""
    return (4 - (width * 3) % 4) % 4


def parse_bmp_header(data: bytes) -> BmpHeader:
    """Parse the 54-byte header at the start of a BMP file."""
    if len(data) < HEADER_SIZE:
        raise ImageError(
            f"BMP header needs {HEADER_SIZE} bytes, got {len(data)}"
        )
    (
        signature,
        file_size,
        _reserved,
        data_offset,
        dib_size,
        width,
        height,
        planes,
        bits_per_pixel,
        _compression,
        image_size,
        _x_ppm,
        _y_ppm,
        _colors,
        _important,
    ) = _HEADER.unpack_from(data, 0)
    if signature != b"BM":
        raise ImageError("not a valid BMP file: missing 'BM' signature")
    return BmpHeader(
        file_size=file_size,
        data_offset=data_offset,
        dib_size=dib_size,
        width=width,
        height=height,
        planes=planes,
        bits_per_pixel=bits_per_pixel,
        image_size=image_size,
    )


def read_bmp_header(path: PathLike) -> BmpHeader:
    """Read and parse the header of the BMP file at path."""
    with open(path, "rb") as handle:
        return parse_bmp_header(handle.read(HEADER_SIZE))


def decode_bmp(data: bytes) -> Image:
    """Decode a 24-bit BMP whose pixel rows follow the 54-byte header."""
    header = parse_bmp_header(data)
    width, height = header.width, header.height
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise ImageError(
            f"image exceeds the allowed limits ({MAX_WIDTH}x{MAX_HEIGHT})"
        )
    if width < 0 or height < 0:
        raise ImageError(f"unsupported BMP dimensions {width}x{height}")
    if header.bits_per_pixel != BITS_PER_PIXEL:
        raise ImageError(
            f"only 24-bit colour BMP images are supported, "
            f"got {header.bits_per_pixel} bits"
        )

    pixel_bytes = width * 3
    stride = pixel_bytes + _row_padding(width)
    stored_rows = []
    for index in range(height):
        start = HEADER_SIZE + index * stride
        chunk = data[start:start + pixel_bytes]
        if len(chunk) != pixel_bytes:
            raise ImageError(f"BMP pixel data truncated in row {index}")
        stored_rows.append(
            tuple(
                (chunk[i + 2], chunk[i + 1], chunk[i])
                for i in range(0, pixel_bytes, 3)
            )
        )
    # Rows are stored bottom-up.
    stored_rows.reverse()
    return Image(width, height, tuple(stored_rows))


def encode_bmp(image: Image) -> bytes:
    """Encode an image as an uncompressed 24-bit BMP."""
    padding = bytes(_row_padding(image.width))
    stride = image.width * 3 + len(padding)
    image_size = stride * image.height
    header = _HEADER.pack(
        b"BM",
        HEADER_SIZE + image_size,
        0,
        HEADER_SIZE,
        DIB_HEADER_SIZE,
        image.width,
        image.height,
        1,
        BITS_PER_PIXEL,
        0,
        image_size,
        0,
        0,
        0,
        0,
    )
    body = bytearray()
    for row in reversed(image.rows):
        for red, green, blue in row:
            body += bytes((blue, green, red))
        body += padding
    return header + bytes(body)


def read_bmp(path: PathLike) -> Image:
    """Read the BMP file at path."""
    with open(path, "rb") as handle:
        return decode_bmp(handle.read())


def write_bmp(path: PathLike, image: Image) -> None:
    """Write image to path as a 24-bit BMP."""
    with open(path, "wb") as handle:
        handle.write(encode_bmp(image))