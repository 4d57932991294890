"""Pixel filters: channel separation, greyscale, thresholding and blending."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

from rgbsplit.image import Image, ImageError, Pixel

_RED_WEIGHT = 0.299
_GREEN_WEIGHT = 0.587
_BLUE_WEIGHT = 0.114

WHITE: Pixel = (255, 255, 255)
BLACK: Pixel = (0, 0, 0)


class Channel(IntEnum):
    """A colour component, valued by its position in a pixel tuple."""

    RED = 0
    GREEN = 1
    BLUE = 2


def _clamp(value: int, low: int = 0, high: int = 255) -> int:
    return max(low, min(high, value))


def isolate_channel(image: Image, channel: Channel) -> Image:
    """Return a copy of image keeping only one channel; the others become zero."""
    index = Channel(channel).value

    def keep(pixel: Pixel) -> Pixel:
        return tuple(value if i == index else 0 for i, value in enumerate(pixel))

    return image.map_pixels(keep)


def channel_matrix(image: Image, channel: Channel) -> Tuple[Tuple[int, ...], ...]:
    """Return the levels of one channel as rows of integers, top row first."""
    index = Channel(channel).value
    return tuple(tuple(pixel[index] for pixel in row) for row in image.rows)


def gray_level(red: int, green: int, blue: int) -> int:
    """Weighted luminance of a pixel, truncated towards zero."""
    return int(red * _RED_WEIGHT + green * _GREEN_WEIGHT + blue * _BLUE_WEIGHT)


def gray_average(red: int, green: int, blue: int) -> int:
    """Plain integer mean of the three components."""
    return (red + green + blue) // 3


def to_grayscale(image: Image) -> Image:
    """Replace every pixel by its weighted grey level on all three channels."""

    def grey(pixel: Pixel) -> Pixel:
        level = gray_level(*pixel)
        return (level, level, level)

    return image.map_pixels(grey)


def to_black_white(image: Image, threshold: int) -> Image:
    """Make pixels whose grey level reaches threshold white, the rest black.

    The threshold is clamped to the range 0-255.
    """
    limit = _clamp(int(threshold))
    return image.map_pixels(lambda p: WHITE if gray_level(*p) >= limit else BLACK)


def blend(front: Image, back: Image, alpha: int) -> Image:
    """Mix two equally sized images, weighting front by alpha out of 255.

    Each component becomes (front * alpha + back * (255 - alpha)) // 256;
    alpha is clamped to the range 0-255.
    """
    if front.size != back.size:
        raise ImageError(
            f"images must have the same size: "
            f"{front.width}x{front.height} and {back.width}x{back.height}"
        )
    weight = _clamp(int(alpha))
    rows = tuple(
        tuple(
            tuple(
                _clamp((f * weight + b * (255 - weight)) // 256)
                for f, b in zip(front_pixel, back_pixel)
            )
            for front_pixel, back_pixel in zip(front_row, back_row)
        )
        for front_row, back_row in zip(front.rows, back.rows)
    )
    return Image(front.width, front.height, rows)