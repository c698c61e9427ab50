"""Steganography in the blue-channel LSB of pixels chosen by a fractal."""

from __future__ import annotations

from typing import Iterable

from PIL import Image

from fractalstego.config import Config, FractalParams, Steganographer, StegoError

FRACTAL_NAME = "Фрактал"
JULIA_CONSTANT = complex(-0.8, 0.156)
HEADER_BITS = 32


def bytes_to_bits(data: bytes) -> list[int]:
    """Split bytes into bits, most significant bit first."""
    return [(byte >> shift) & 1 for byte in data for shift in range(7, -1, -1)]


def bits_to_bytes(bits: Iterable[int]) -> bytes:
    """Pack bits, most significant first, into bytes; the last byte is zero-padded."""
    bits = list(bits)
    packed = bytearray((len(bits) + 7) // 8)
    for index, bit in enumerate(bits):
        if bit == 1:
            packed[index // 8] |= 1 << (7 - index % 8)
    return bytes(packed)


def _require_params(config: Config) -> FractalParams:
    if config.fractal_params is None:
        raise StegoError("fractal parameters are required")
    return config.fractal_params


def _is_bounded(c: complex, params: FractalParams) -> bool:
    if params.iterations < 0:
        return False
    z = 0j
    for _ in range(params.iterations):
        z = z * z + c
        if abs(z) > params.threshold:
            return False
    return True


def _selected(pattern: list[bool]) -> list[int]:
    return [index for index, flag in enumerate(pattern) if flag]


class FractalStego(Steganographer):
    """Hides data in pixels that belong to a Mandelbrot or Julia set."""

    def name(self) -> str:
        return FRACTAL_NAME

    def embed(self, cover: Image.Image, data: bytes, config: Config) -> Image.Image:
        params = _require_params(config)
        data = bytes(data)
        width, height = cover.size
        if width * height < HEADER_BITS + len(data) * 8:
            raise StegoError("image too small to embed data")

        rgba = cover.convert("RGBA")
        pattern = self.generate_pattern(width, height, params)
        header = (len(data) & 0xFFFFFFFF).to_bytes(4, "big")
        bits = bytes_to_bits(header + data)

        red, green, blue, alpha = rgba.split()
        blue_values = bytearray(blue.tobytes())
        for index, bit in zip(_selected(pattern), bits):
            blue_values[index] = (blue_values[index] & 0xFE) | bit
        new_blue = Image.frombytes("L", rgba.size, bytes(blue_values))
        return Image.merge("RGBA", (red, green, new_blue, alpha))

    def extract(self, stego: Image.Image, config: Config) -> bytes:
        params = _require_params(config)
        width, height = stego.size
        pattern = self.generate_pattern(width, height, params)
        blue = stego.convert("RGBA").getchannel("B").tobytes()
        positions = _selected(pattern)

        header_bits = [blue[index] & 1 for index in positions[:HEADER_BITS]]
        header_bits.extend([0] * (HEADER_BITS - len(header_bits)))
        length = int.from_bytes(bits_to_bytes(header_bits), "big")
        if length == 0 or length > width * height:
            raise StegoError("invalid data length extracted")

        bit_count = length * 8
        data_bits = [
            blue[index] & 1 for index in positions[HEADER_BITS:HEADER_BITS + bit_count]
        ]
        data_bits.extend([0] * (bit_count - len(data_bits)))
        return bits_to_bytes(data_bits)

    def generate_pattern(
        self, width: int, height: int, params: FractalParams
    ) -> list[bool]:
        """Return a row-major mask of the pixels that lie inside the fractal."""
        if params.type == "Julia":
            # The orbit starts at zero with a fixed constant, so every pixel agrees.
            return [_is_bounded(JULIA_CONSTANT, params)] * (width * height)

        pattern = []
        for y in range(height):
            ny = y / height * 2.0 - 1.0
            for x in range(width):
                nx = x / width * 3.5 - 2.5
                pattern.append(_is_bounded(complex(nx, ny), params))
        return pattern