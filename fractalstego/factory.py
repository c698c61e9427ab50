"""Selection of a steganography algorithm by its display name."""

from __future__ import annotations

from fractalstego.config import Steganographer, StegoError
from fractalstego.fractal import FRACTAL_NAME, FractalStego


def create_algorithm(name: str) -> Steganographer:
    """Return the algorithm registered under ``name``."""
    if name == FRACTAL_NAME:
        return FractalStego()
    raise StegoError(f"unknown steganography algorithm: {name}")