"""Quality metrics comparing a cover image with its stego counterpart."""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from PIL import Image

_CHANNELS = ("R", "G", "B")


def _channels(image: Image.Image, size: tuple[int, int]) -> list[bytes]:
    """Return premultiplied R, G and B planes of ``image`` on a canvas of ``size``.

    Pixels outside the image count as fully transparent black.
    """
    rgba = image.convert("RGBA")
    if rgba.size != size:
        canvas = Image.new("RGBA", size, (0, 0, 0, 0))
        canvas.paste(rgba, (0, 0))
        rgba = canvas
    data = rgba.convert("RGBa").tobytes()
    return [data[offset::4] for offset in range(3)]


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero denominator."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def _mse(original: Sequence[int], stego: Sequence[int], count: int) -> float:
    total = sum((a - b) * (a - b) for a, b in zip(original, stego))
    return _divide(float(total), float(count))


def _correlation(original: Sequence[int], stego: Sequence[int], count: int) -> float:
    sum_x = sum(original)
    sum_y = sum(stego)
    sum_xx = sum(value * value for value in original)
    sum_yy = sum(value * value for value in stego)
    sum_xy = sum(a * b for a, b in zip(original, stego))

    numerator = float(count * sum_xy - sum_x * sum_y)
    variance = float((count * sum_xx - sum_x * sum_x) * (count * sum_yy - sum_y * sum_y))
    if variance < 0:
        return math.nan
    return _divide(numerator, math.sqrt(variance))


def calculate_image_metrics(
    original: Image.Image, stego: Image.Image
) -> dict[str, float]:
    """Return MSE, PSNR and per-channel correlation of two images.

    The comparison covers the area of ``original``.
    """
    size = original.size
    count = size[0] * size[1]
    planes_original = _channels(original, size)
    planes_stego = _channels(stego, size)

    mse_values = [
        _mse(orig, steg, count) for orig, steg in zip(planes_original, planes_stego)
    ]
    mse_total = sum(mse_values) / 3

    if mse_total == 0:
        psnr = math.inf
    elif math.isnan(mse_total):
        psnr = math.nan
    else:
        psnr = 20 * math.log10(255 / math.sqrt(mse_total))

    metrics: dict[str, float] = {"MSE": mse_total, "PSNR": psnr}
    correlations = [
        _correlation(orig, steg, count)
        for orig, steg in zip(planes_original, planes_stego)
    ]
    for channel, value in zip(_CHANNELS, correlations):
        metrics[f"Correlation ({channel})"] = value
    metrics["Correlation (Avg)"] = sum(correlations) / 3
    return metrics


def _format_value(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:.4f}"


def format_metrics(metrics: Mapping[str, float]) -> str:
    """Render metrics one per line as ``name: value`` with four decimals."""
    return "".join(f"{name}: {_format_value(value)}\n" for name, value in metrics.items())