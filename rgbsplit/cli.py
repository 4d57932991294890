"""Command-line front end: channel separation, greyscale, thresholding,
histograms and blending for BMP and PNM images."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import List, Optional

from rgbsplit.bmp import read_bmp, read_bmp_header, write_bmp
from rgbsplit.image import Image, ImageError
from rgbsplit.pnm import read_pnm, read_pnm_header, write_pnm
from rgbsplit.processing import (
    Channel,
    blend,
    isolate_channel,
    to_black_white,
    to_grayscale,
)
from rgbsplit.report import color_histograms, gray_histogram, write_histogram

PROGRAM = "rgbsplit"
MAX_ARGUMENTS = 5

_WIDE_RULE = "\n" + "-" * 110 + "\n"
_NARROW_RULE = "\n" + "-" * 72 + "\n"
_DOUBLE_RULE = "\n" + "=" * 79 + "\n"

_CHANNEL_FILES = (
    (Channel.RED, "rojo"),
    (Channel.GREEN, "verde"),
    (Channel.BLUE, "azul"),
)
_HISTOGRAM_FILES = ("histR.txt", "histG.txt", "histB.txt", "histGris.txt")


class _UsageError(Exception):
    """Raised when the command line does not fit the chosen command."""


@dataclass(frozen=True)
class _Format:
    extension: str
    read: Callable[[str], Image]
    write: Callable[[str, Image], None]
    show_header: Callable[[str], None]


def _show_bmp_header(path: str) -> None:
    header = read_bmp_header(path)
    print(_WIDE_RULE, end="")
    print("Informacion de la cabecera bmp:")
    print(f"Tamano del archivo: {header.file_size} bytes.")
    print(f"Dimensiones: {header.width}x{header.height} pixeles.")
    print(f"Bits por pixel: {header.bits_per_pixel}.")
    print(f"Offset de datos: {header.data_offset} bytes.")
    print(_NARROW_RULE, end="")


def _show_pnm_header(path: str) -> None:
    header = read_pnm_header(path)
    print(_WIDE_RULE, end="")
    print("Informacion de la cabecera pnm:")
    print(f"Numero magico: {header.magic}.")
    print(f"Dimensiones: {header.width}x{header.height} pixeles.")
    print(f"Valor maximo: {header.maxval}.")
    print(_WIDE_RULE, end="")


_FORMATS = {
    "b": _Format("bmp", read_bmp, write_bmp, _show_bmp_header),
    "p": _Format("pnm", read_pnm, write_pnm, _show_pnm_header),
}


def _to_int(text: str) -> int:
    """Leading integer of text, or 0 when there is none."""
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def help_text() -> str:
    """Return the usage summary shown for -help."""
    lines = [
        _WIDE_RULE.rstrip("\n"),
        "Uso del programa:",
        "1p o 1b -> Extrar matrices R, G, B de una imagen.",
        "2p o 2b -> Extraer unicamente la matriz R.",
        "3p o 3b -> Extraer unicamente la matriz G.",
        "4p o 4b -> Extraer unicamente la matriz B.",
        "5p o 5b -> Generar imagen en escala de grises.",
        "6p umbral o 6b umbral -> Generar imagen en blanco y negro con umbral (0-255).",
        "7p o 7b -> Calcular y guardar el histograma.",
        "8p alpha o 8b alpha -> Mezclar dos imagenes con coeficiente alpha (0-255).",
        "9p umbral alpha o 9b umbral alpha -> Realizar todos los procesos sobre las imagenes.",
        "-help -> Mostrar este menu de ayuda.",
        _WIDE_RULE.rstrip("\n"),
        "",
        "Uso: <tipo imagen> <nombre archivo> [parametros adicionales]",
        "Ejemplos de uso:",
        f"{PROGRAM} 1b/1p imagen.pnm",
        f"{PROGRAM} 2b/2p imagen.pnm",
        f"{PROGRAM} 3b/3p imagen.pnm",
        f"{PROGRAM} 4b/4p imagen.pnm",
        f"{PROGRAM} 5b/5p imagen.bmp",
        f"{PROGRAM} 6b/6p imagen.bmp umbral",
        f"{PROGRAM} 7b/7p imagen.bmp",
        f"{PROGRAM} 8b/8p frente.pnm fondo.pnm alpha",
        f"{PROGRAM} 9b/9p imagen1.pnm(Esta primera sera la imagen que haga todos "
        "los procesos) imagen2.bmp umbral alpha",
        _WIDE_RULE.rstrip("\n"),
    ]
    return "\n".join(lines) + "\n"


def _write_channels(fmt: _Format, image: Image, channels) -> List[str]:
    names = []
    for channel, stem in channels:
        name = f"{stem}.{fmt.extension}"
        fmt.write(name, isolate_channel(image, channel))
        names.append(name)
    return names


def _write_histograms(image: Image) -> None:
    red, green, blue = color_histograms(image)
    for name, histogram in zip(
        _HISTOGRAM_FILES, (red, green, blue, gray_histogram(image))
    ):
        write_histogram(name, histogram)


def _check_range(threshold: int, alpha: int) -> None:
    if not (0 <= threshold <= 255 and 0 <= alpha <= 255):
        raise _UsageError("umbral y alpha deben estar entre 0 y 255")


def _run_single(fmt: _Format, digit: str, args: Sequence[str]) -> None:
    ext = fmt.extension
    if digit == "1":
        image = fmt.read(args[0])
        _write_channels(fmt, image, _CHANNEL_FILES)
        print(f"\nSe han creado los archivos rojo.{ext}, verde.{ext} y azul.{ext}.")
    elif digit in ("2", "3", "4"):
        image = fmt.read(args[0])
        selected = _CHANNEL_FILES[int(digit) - 2]
        (name,) = _write_channels(fmt, image, [selected])
        print(f"\nSe ha creado el archivo {name}.")
    elif digit == "5":
        image = fmt.read(args[0])
        fmt.write(f"grises.{ext}", to_grayscale(image))
        print(f"\nSe ha creado el archivo grises.{ext}.")
    elif digit == "6":
        if len(args) < 2:
            raise _UsageError(f"Uso correcto: {PROGRAM} 6{ext[0]} imagen.{ext} umbral")
        threshold = _to_int(args[1])
        image = fmt.read(args[0])
        fmt.write(f"bn.{ext}", to_black_white(image, threshold))
        print(f"\nSe ha creado el archivo bn.{ext}.")
    elif digit == "7":
        image = fmt.read(args[0])
        _write_histograms(image)
        print("Histogramas generados exitosamente")
    print(_NARROW_RULE, end="")


def _run_blend(fmt: _Format, letter: str, args: Sequence[str]) -> None:
    ext = fmt.extension
    if len(args) != 3:
        raise _UsageError(
            f"Uso correcto: {PROGRAM} 8{letter} frente.{ext} fondo.{ext} alpha"
        )
    alpha = _to_int(args[2])
    front = fmt.read(args[0])
    back = fmt.read(args[1])
    if front.size != back.size:
        raise _UsageError("Las imagenes deben tener el mismo tamano")
    fmt.write(f"mezcla.{ext}", blend(front, back, alpha))
    print(f"\nMezcla realizada con exito. Resultado guardado en 'mezcla.{ext}'")
    print(_NARROW_RULE, end="")


def _run_all(fmt: _Format, letter: str, args: Sequence[str]) -> None:
    ext = fmt.extension
    if len(args) != 4:
        raise _UsageError(
            f"Uso correcto: {PROGRAM} 9{letter} imagen.{ext} fondo.{ext} umbral alpha"
        )
    threshold = _to_int(args[2])
    alpha = _to_int(args[3])
    _check_range(threshold, alpha)

    print(f"\n=== Procesando todos los comandos para {ext.upper()} ===")

    print("\n1. Separando canales RGB...")
    image = fmt.read(args[0])
    _write_channels(fmt, image, _CHANNEL_FILES)

    print("\n2. Generando imagen en escala de grises...")
    fmt.write(f"grises.{ext}", to_grayscale(image))

    print("\n3. Generando imagen en blanco y negro...")
    fmt.write(f"bn.{ext}", to_black_white(image, threshold))

    print("\n4. Calculando histogramas...")
    _write_histograms(image)

    print("\n5. Mezclando imagenes...")
    back = fmt.read(args[1])
    if image.size != back.size:
        raise _UsageError("Las imagenes deben tener el mismo tamano")
    fmt.write(f"mezcla.{ext}", blend(image, back, alpha))

    print("\n=== Procesamiento completado ===")
    print("Archivos generados:")
    print(f"- rojo.{ext}, verde.{ext}, azul.{ext}")
    print(f"- grises.{ext}")
    print(f"- bn.{ext}")
    print("- " + ", ".join(_HISTOGRAM_FILES))
    print(f"- mezcla.{ext}")
    print(_DOUBLE_RULE, end="")


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or len(args) > MAX_ARGUMENTS:
        print("Error: No se proporcionaron los argumentos correctos.", file=sys.stderr)
        print("Use el comando -help para obtener mas informacion.", file=sys.stderr)
        return 1

    command = args[0]
    if command == "-help":
        print(help_text(), end="")
        return 0

    valid = (
        len(command) == 2 and command[0] in "123456789" and command[1] in _FORMATS
    )
    if not valid:
        print("Error: Comando no reconocido.", file=sys.stderr)
        print("Use el comando -help para obtener mas informacion.", file=sys.stderr)
        return 1
    if len(args) < 2:
        return _fail("falta el nombre del archivo de imagen.")

    digit, letter = command
    fmt = _FORMATS[letter]
    operands = args[1:]
    try:
        fmt.show_header(operands[0])
        if digit == "8":
            _run_blend(fmt, letter, operands)
        elif digit == "9":
            _run_all(fmt, letter, operands)
        else:
            _run_single(fmt, digit, operands)
    except _UsageError as exc:
        return _fail(str(exc))
    except (OSError, ImageError) as exc:
        return _fail(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())