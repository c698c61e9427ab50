"""Configuration types and the common interface of steganography algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from PIL import Image


class StegoError(ValueError):
    """Raised when data cannot be embedded into or extracted from an image."""


@dataclass(frozen=True)
class FractalParams:
    """Parameters of the fractal that selects the carrier pixels."""

    type: str
    iterations: int
    threshold: float


@dataclass(frozen=True)
class Config:
    """Settings passed to a steganography algorithm."""

    embedding_rate: float = 0.0
    fractal_params: FractalParams | None = None


class Steganographer(ABC):
    """Interface shared by all steganography algorithms."""

    @abstractmethod
    def embed(self, cover: Image.Image, data: bytes, config: Config) -> Image.Image:
        """Return a copy of ``cover`` with ``data`` hidden in it."""

    @abstractmethod
    def extract(self, stego: Image.Image, config: Config) -> bytes:
        """Return the data hidden in ``stego``."""

    @abstractmethod
    def name(self) -> str:
        """Return the display name of the algorithm."""