"""Fractal-guided image steganography and image distortion metrics."""

__version__ = "0.1.0"