import pytest
from PIL import Image

from fractalstego.config import Config, FractalParams, StegoError
from fractalstego.factory import create_algorithm
from fractalstego.fractal import FractalStego


def test_fractal_name_gives_fractal_algorithm():
    algorithm = create_algorithm("Фрактал")
    assert isinstance(algorithm, FractalStego)
    assert algorithm.name() == "Фрактал"


def test_unknown_name_raises():
    with pytest.raises(StegoError, match="unknown steganography algorithm: LSB"):
        create_algorithm("LSB")


def test_empty_name_raises():
    with pytest.raises(StegoError, match="unknown steganography algorithm"):
        create_algorithm("")


def test_created_algorithm_round_trips():
    algorithm = create_algorithm("Фрактал")
    cover = Image.new("RGBA", (100, 100), (200, 100, 50, 255))
    config = Config(
        embedding_rate=0.4,
        fractal_params=FractalParams(type="Мандельброт", iterations=100, threshold=2.0),
    )
    stego_image = algorithm.embed(cover, b"factory", config)
    assert algorithm.extract(stego_image, config) == b"factory"