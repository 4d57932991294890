# rgbsplit

A small command-line tool and library for simple processing of
uncompressed 24-bit BMP images and colour PNM images. It can:

- split an image into its red, green and blue channels,
- convert an image to grayscale,
- convert an image to black and white with a threshold,
- compute colour and gray histograms and write them as text files,
- blend two images of the same size with an alpha coefficient.

Images are limited to 512 × 512 pixels. It needs nothing beyond the Python
standard library (Python 3.10 or later).

## Installation

```
pip install .
```

## Command line

The first argument chooses the operation and the format: a digit from 1 to 9,
followed by `b` for BMP or `p` for PNM. At most five arguments are accepted.

| Command | Arguments | Result |
|---------|-----------|--------|
| `1b` / `1p` | `image` | `rojo`, `verde`, `azul` channel images |
| `2b` / `2p` | `image` | red channel only (`rojo`) |
| `3b` / `3p` | `image` | green channel only (`verde`) |
| `4b` / `4p` | `image` | blue channel only (`azul`) |
| `5b` / `5p` | `image` | grayscale image (`grises`) |
| `6b` / `6p` | `image threshold` | black and white image (`bn`) |
| `7b` / `7p` | `image` | `histR.txt`, `histG.txt`, `histB.txt`, `histGris.txt` |
| `8b` / `8p` | `front back alpha` | blended image (`mezcla`) |
| `9b` / `9p` | `image back threshold alpha` | all of the above |

Before running the operation, the tool prints the header of the first image
(size, dimensions, bits per pixel and data offset for BMP; magic number,
dimensions and maximum value for PNM).

Output files are written to the current directory with the extension of the
chosen format (`.bmp` or `.pnm`; PNM output is always binary P6 with maximum
value 255). A channel image keeps the chosen channel and sets the other two
to zero. Messages are in Spanish. Examples:

```
rgbsplit -help
rgbsplit 1b picture.bmp
rgbsplit 6p picture.pnm 127
rgbsplit 8b front.bmp back.bmp 100
rgbsplit 9p picture.pnm back.pnm 127 100
```

Threshold and alpha are read as leading integers (text without one counts as
0). For `9b`/`9p` both must lie between 0 and 255, otherwise the command
fails; elsewhere they are clamped to 0–255. The blend is computed per channel
as `(front * alpha + back * (255 - alpha)) // 256`, and both images must have
the same size.

Errors (unknown command, missing arguments, unreadable or malformed images,
size mismatches) are reported on standard error and the command exits with
status 1; on success it exits with 0.

## Library

```python
from rgbsplit.bmp import read_bmp, write_bmp
from rgbsplit.processing import Channel, isolate_channel, to_grayscale, blend
from rgbsplit.report import gray_histogram, write_histogram

image = read_bmp("picture.bmp")
write_bmp("red.bmp", isolate_channel(image, Channel.RED))
write_bmp("gray.bmp", to_grayscale(image))
write_histogram("gray.txt", gray_histogram(image))
```

- `rgbsplit.image`: `Image` (an immutable grid of `(red, green, blue)`
  tuples, top row first, with `pixel`, `pixels`, `map_pixels`, `size` and
  `Image.from_rows`), `blank_image` and `ImageError`, the error raised for
  malformed data.
- `rgbsplit.bmp`: `BmpHeader`, `parse_bmp_header`, `read_bmp_header`,
  `decode_bmp`, `encode_bmp`, `read_bmp`, `write_bmp`.
- `rgbsplit.pnm`: `PnmHeader`, `parse_pnm_header`, `read_pnm_header`,
  `decode_pnm` and `read_pnm` (P3 and P6, maximum value up to 255),
  `encode_pnm` and `write_pnm` (P6), and `encode_pgm`, which encodes a
  matrix of levels as a binary P5 greymap.
- `rgbsplit.processing`: `Channel`, `isolate_channel`, `channel_matrix`,
  `gray_level` (weights 0.299, 0.587, 0.114, truncated), `gray_average`,
  `to_grayscale`, `to_black_white`, `blend`.
- `rgbsplit.report`: `color_histograms`, `gray_histogram`,
  `format_histogram` and `write_histogram` (a tab-separated table of the
  levels that occur, with one `*` per hundred pixels), and `format_matrix`.
- `rgbsplit.cli`: `main` and `help_text`.

## What it does not do

- Only uncompressed 24-bit BMP files are read; other bit depths and
  compressed BMPs are rejected.
- PNM bitmaps and greymaps (P1, P2, P4, P5) and samples above 255 are not
  read; their headers can still be parsed.
- Images larger than 512 × 512 pixels are rejected.
- The command line writes images and text files only; it does not print
  channel matrices (`format_matrix` and `channel_matrix` are available from
  the library for that) and has no viewer.

## Running the tests

```
pip install .[test]
pytest
```