"""In-memory RGB raster shared by the readers, writers and filters."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Tuple

Pixel = Tuple[int, int, int]

MAX_WIDTH = 512
MAX_HEIGHT = 512


class ImageError(ValueError):
    """Raised when image data is malformed or cannot be processed."""


def _check_pixel(value: Sequence[int], x: int, y: int) -> Pixel:
    try:
        red, green, blue = value
    except (TypeError, ValueError):
        raise ImageError(f"pixel at ({x}, {y}) must have three components") from None
    for component in (red, green, blue):
        if not isinstance(component, int) or not 0 <= component <= 255:
            raise ImageError(
                f"pixel at ({x}, {y}) has component {component!r} outside 0-255"
            )
    return (red, green, blue)


@dataclass(frozen=True)
class Image:
    """A width x height grid of (red, green, blue) pixels, top row first."""

    width: int
    height: int
    rows: Tuple[Tuple[Pixel, ...], ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ImageError(
                f"image dimensions must not be negative: {self.width}x{self.height}"
            )
        rows = tuple(self.rows)
        if len(rows) != self.height:
            raise ImageError(f"expected {self.height} rows, got {len(rows)}")
        checked = []
        for y, row in enumerate(rows):
            row = tuple(row)
            if len(row) != self.width:
                raise ImageError(
                    f"row {y} has {len(row)} pixels, expected {self.width}"
                )
            checked.append(tuple(_check_pixel(p, x, y) for x, p in enumerate(row)))
        object.__setattr__(self, "rows", tuple(checked))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Sequence[int]]]) -> Image:
        """Build an image whose size is taken from the rows given."""
        materialised = [tuple(row) for row in rows]
        width = len(materialised[0]) if materialised else 0
        return cls(width, len(materialised), tuple(materialised))

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel in column x of row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return self.rows[y][x]

    def pixels(self) -> Iterator[Pixel]:
        """Yield every pixel row by row, left to right."""
        for row in self.rows:
            yield from row

    def map_pixels(self, func: Callable[[Pixel], Sequence[int]]) -> Image:
        """Return a new image of the same size with func applied to each pixel."""
        return Image(
            self.width,
            self.height,
            tuple(tuple(tuple(func(p)) for p in row) for row in self.rows),
        )


def blank_image(width: int, height: int) -> Image:
    """Return an all-black image of the given size."""
    if width < 0 or height < 0:
        raise ImageError(f"image dimensions must not be negative: {width}x{height}")
    row = tuple((0, 0, 0) for _ in range(width))
    return Image(width, height, tuple(row for _ in range(height)))