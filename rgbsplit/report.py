"""Histograms and plain-text reports of image data."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from typing import List, Tuple, Union

from rgbsplit.image import Image
from rgbsplit.processing import gray_level

PathLike = Union[str, "os.PathLike[str]"]

LEVELS = 256
HISTOGRAM_HEADER = "Tono\tValor\tHistograma\n"
# One asterisk in the bar stands for this many pixels.
BAR_SCALE = 100


def _empty() -> List[int]:
    return [0] * LEVELS


def color_histograms(image: Image) -> Tuple[List[int], List[int], List[int]]:
    """Count how often each level 0-255 occurs in the red, green and blue channels."""
    red, green, blue = _empty(), _empty(), _empty()
    for r, g, b in image.pixels():
        red[r] += 1
        green[g] += 1
        blue[b] += 1
    return red, green, blue


def gray_histogram(image: Image) -> List[int]:
    """Count how often each weighted grey level 0-255 occurs in the image."""
    counts = _empty()
    for pixel in image.pixels():
        counts[gray_level(*pixel)] += 1
    return counts


def format_histogram(histogram: Sequence[int]) -> str:
    """Render a 256-entry histogram as a tab-separated table with a bar column.

    Only levels that occur are listed; each bar has one asterisk per
    hundred pixels, rounded down.
    """
    if len(histogram) != LEVELS:
        raise ValueError(
            f"histogram must have {LEVELS} entries, got {len(histogram)}"
        )
    lines = [HISTOGRAM_HEADER]
    for level, count in enumerate(histogram):
        if count > 0:
            lines.append(f"{level}\t{count}\t{'*' * (count // BAR_SCALE)}\n")
    return "".join(lines)


def write_histogram(path: PathLike, histogram: Sequence[int]) -> None:
    """Write the formatted histogram to a text file at path."""
    text = format_histogram(histogram)
    with open(path, "w", encoding="ascii") as handle:
        handle.write(text)


def format_matrix(rows: Iterable[Iterable[int]]) -> str:
    """Render a matrix of levels, each right-aligned in three columns, one row per line."""
    return "".join(
        "".join(f"{value:3d} " for value in row) + "\n" for row in rows
    )