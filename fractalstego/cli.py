"""Command-line interface for embedding, extracting and comparing images."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Sequence, Union

from PIL import Image

from fractalstego.config import Config, FractalParams, StegoError
from fractalstego.factory import create_algorithm
from fractalstego.fractal import FRACTAL_NAME
from fractalstego.images import load_image, save_image
from fractalstego.metrics import calculate_image_metrics, format_metrics

PathLike = Union[str, Path]

DEFAULT_RATE = 0.4
MIN_RATE = 0.1
MAX_RATE = 0.9
DEFAULT_FRACTAL_TYPE = "Мандельброт"
FRACTAL_TYPES = ("Мандельброт", "Жулиа")
DEFAULT_ITERATIONS = "100"
DEFAULT_THRESHOLD = "2.0"

EMBED_SUCCESS = "Данные успешно сокрыты"
EXTRACT_SUCCESS = "Данные успешно извлечены"

_INTEGER = re.compile(r"[+-]?\d+")


def _parse_iterations(value: object) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value)
    if not _INTEGER.fullmatch(text):
        raise StegoError(f"invalid iterations value: {text!r}")
    return int(text)


def _parse_threshold(value: object) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    text = str(value)
    if text != text.strip():
        raise StegoError(f"invalid threshold value: {text!r}")
    try:
        return float(text)
    except ValueError as exc:
        raise StegoError(f"invalid threshold value: {text!r}") from exc


def _rate(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid embedding rate: {text!r}") from exc
    if not MIN_RATE <= value <= MAX_RATE:
        raise argparse.ArgumentTypeError(
            f"embedding rate must lie between {MIN_RATE} and {MAX_RATE}"
        )
    return value


def build_config(
    rate: float, fractal_type: str, iterations: object, threshold: object
) -> Config:
    """Build a configuration, parsing the iteration count and threshold."""
    params = FractalParams(
        type=fractal_type,
        iterations=_parse_iterations(iterations),
        threshold=_parse_threshold(threshold),
    )
    return Config(embedding_rate=float(rate), fractal_params=params)


def _add_algorithm_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--algorithm", default=FRACTAL_NAME, help="algorithm name")
    parser.add_argument(
        "--rate", type=_rate, default=DEFAULT_RATE, help="embedding rate (0.1-0.9)"
    )
    parser.add_argument(
        "--fractal-type",
        default=DEFAULT_FRACTAL_TYPE,
        help=f"fractal type, e.g. {' or '.join(FRACTAL_TYPES)}",
    )
    parser.add_argument("--iterations", default=DEFAULT_ITERATIONS)
    parser.add_argument("--threshold", default=DEFAULT_THRESHOLD)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser with the embed, extract and metrics commands."""
    parser = argparse.ArgumentParser(
        prog="fractalstego", description="Steganography with fractals."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    embed = commands.add_parser("embed", help="hide a file in an image")
    embed.add_argument("cover", help="cover image")
    embed.add_argument("secret", help="file to hide")
    embed.add_argument("output", help="output PNG image")
    _add_algorithm_options(embed)

    extract = commands.add_parser("extract", help="recover a hidden file")
    extract.add_argument("stego", help="image holding hidden data")
    extract.add_argument("output", help="file to write the data to")
    _add_algorithm_options(extract)

    metrics = commands.add_parser("metrics", help="compare two images")
    metrics.add_argument("original", help="original image")
    metrics.add_argument("stego", help="stego image")
    return parser


def embed_file(
    cover_path: PathLike,
    secret_path: PathLike,
    output_path: PathLike,
    config: Config,
    algorithm: str = FRACTAL_NAME,
) -> Image.Image:
    """Hide the file at ``secret_path`` in the cover image and save it as PNG."""
    if not str(cover_path):
        raise StegoError("please select a cover image")
    if not str(secret_path):
        raise StegoError("please select a secret data file")
    if not str(output_path):
        raise StegoError("please specify an output path")

    try:
        cover = load_image(cover_path)
    except OSError as exc:
        raise StegoError(f"failed to load cover image: {exc}") from exc
    try:
        secret = Path(secret_path).read_bytes()
    except OSError as exc:
        raise StegoError(f"failed to load secret data: {exc}") from exc

    steganographer = create_algorithm(algorithm)
    try:
        stego = steganographer.embed(cover, secret, config)
    except StegoError as exc:
        raise StegoError(f"failed to embed data: {exc}") from exc
    try:
        save_image(output_path, stego)
    except OSError as exc:
        raise StegoError(f"failed to save stego image: {exc}") from exc
    return stego


def extract_file(
    stego_path: PathLike,
    output_path: PathLike,
    config: Config,
    algorithm: str = FRACTAL_NAME,
) -> bytes:
    """Recover the data hidden in the image and write it to ``output_path``."""
    if not str(stego_path):
        raise StegoError("please select a stego image")
    if not str(output_path):
        raise StegoError("please specify an output path")

    try:
        stego = load_image(stego_path)
    except OSError as exc:
        raise StegoError(f"failed to load stego image: {exc}") from exc

    steganographer = create_algorithm(algorithm)
    try:
        data = steganographer.extract(stego, config)
    except StegoError as exc:
        raise StegoError(f"failed to extract data: {exc}") from exc
    try:
        Path(output_path).write_bytes(data)
    except OSError as exc:
        raise StegoError(f"failed to save extracted data: {exc}") from exc
    return data


def _metrics(original_path: str, stego_path: str) -> str:
    if not original_path or not stego_path:
        raise StegoError("please select both original and stego images")
    try:
        original = load_image(original_path)
        stego = load_image(stego_path)
    except OSError as exc:
        raise StegoError(str(exc)) from exc
    return format_metrics(calculate_image_metrics(original, stego))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        if args.command == "metrics":
            sys.stdout.write(_metrics(args.original, args.stego))
            return 0
        config = build_config(args.rate, args.fractal_type, args.iterations, args.threshold)
        if args.command == "embed":
            embed_file(args.cover, args.secret, args.output, config, args.algorithm)
            print(EMBED_SUCCESS)
        else:
            extract_file(args.stego, args.output, config, args.algorithm)
            print(EXTRACT_SUCCESS)
    except StegoError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())