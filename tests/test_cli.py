import random

import pytest
from PIL import Image

from fractalstego.cli import build_config, build_parser, embed_file, extract_file, main
from fractalstego.config import Config, FractalParams, StegoError

PAYLOAD = b"Hello, World!"


def _random_image(width, height, seed=1):
    rng = random.Random(seed)
    image = Image.new("RGBA", (width, height))
    image.putdata(
        [
            (rng.randrange(256), rng.randrange(256), rng.randrange(256), 255)
            for _ in range(width * height)
        ]
    )
    return image


@pytest.fixture
def cover_path(tmp_path):
    path = tmp_path / "cover.png"
    _random_image(200, 200).save(path)
    return path


@pytest.fixture
def payload_path(tmp_path):
    path = tmp_path / "payload.bin"
    path.write_bytes(PAYLOAD)
    return path


@pytest.fixture
def config():
    return build_config(0.4, "Мандельброт", "100", "2.0")


def test_build_config_parses_text_values():
    result = build_config(0.4, "Мандельброт", "100", "2.0")
    assert result == Config(
        embedding_rate=0.4,
        fractal_params=FractalParams(type="Мандельброт", iterations=100, threshold=2.0),
    )


@pytest.mark.parametrize("iterations", ["abc", "1.5", "", " 100"])
def test_build_config_rejects_bad_iterations(iterations):
    with pytest.raises(StegoError, match="invalid iterations value"):
        build_config(0.4, "Мандельброт", iterations, "2.0")


@pytest.mark.parametrize("threshold", ["two", "", " 2.0"])
def test_build_config_rejects_bad_threshold(threshold):
    with pytest.raises(StegoError, match="invalid threshold value"):
        build_config(0.4, "Мандельброт", "100", threshold)


def test_embed_and_extract_files_round_trip(tmp_path, cover_path, payload_path, config):
    stego_path = tmp_path / "stego.png"
    out_path = tmp_path / "out.bin"
    stego = embed_file(cover_path, payload_path, stego_path, config)
    assert stego.size == (200, 200)
    data = extract_file(stego_path, out_path, config)
    assert data == PAYLOAD
    assert out_path.read_bytes() == PAYLOAD


def test_embedded_image_is_saved_as_png(tmp_path, cover_path, payload_path, config):
    stego_path = tmp_path / "stego.dat"
    embed_file(cover_path, payload_path, stego_path, config)
    with Image.open(stego_path) as saved:
        assert saved.format == "PNG"


def test_embed_file_requires_cover_path(tmp_path, payload_path, config):
    with pytest.raises(StegoError, match="please select a cover image"):
        embed_file("", payload_path, tmp_path / "o.png", config)


def test_embed_file_requires_output_path(cover_path, payload_path, config):
    with pytest.raises(StegoError, match="please specify an output path"):
        embed_file(cover_path, payload_path, "", config)


def test_embed_file_reports_missing_cover(tmp_path, payload_path, config):
    with pytest.raises(StegoError, match="failed to load cover image"):
        embed_file(tmp_path / "missing.png", payload_path, tmp_path / "o.png", config)


def test_embed_file_reports_missing_payload(tmp_path, cover_path, config):
    with pytest.raises(StegoError, match="failed to load secret data"):
        embed_file(cover_path, tmp_path / "missing.bin", tmp_path / "o.png", config)


def test_embed_file_rejects_unknown_algorithm(tmp_path, cover_path, payload_path, config):
    with pytest.raises(StegoError, match="unknown steganography algorithm"):
        embed_file(cover_path, payload_path, tmp_path / "o.png", config, "LSB")


def test_extract_file_requires_stego_path(tmp_path, config):
    with pytest.raises(StegoError, match="please select a stego image"):
        extract_file("", tmp_path / "out.bin", config)


def test_main_embed_then_extract(tmp_path, cover_path, payload_path, capsys):
    stego_path = tmp_path / "stego.png"
    out_path = tmp_path / "out.bin"
    assert main(["embed", str(cover_path), str(payload_path), str(stego_path)]) == 0
    assert "Данные успешно сокрыты" in capsys.readouterr().out
    assert main(["extract", str(stego_path), str(out_path)]) == 0
    assert "Данные успешно извлечены" in capsys.readouterr().out
    assert out_path.read_bytes() == PAYLOAD


def test_main_reports_bad_iterations(tmp_path, cover_path, payload_path, capsys):
    code = main(
        [
            "embed",
            str(cover_path),
            str(payload_path),
            str(tmp_path / "stego.png"),
            "--iterations",
            "many",
        ]
    )
    assert code == 1
    assert "invalid iterations value" in capsys.readouterr().err
    assert not (tmp_path / "stego.png").exists()


def test_main_metrics_of_identical_images(cover_path, capsys):
    assert main(["metrics", str(cover_path), str(cover_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "MSE: 0.0000" in lines
    assert "PSNR: +Inf" in lines
    assert "Correlation (Avg): 1.0000" in lines


def test_parser_rejects_rate_out_of_range(cover_path, payload_path):
    with pytest.raises(SystemExit):
        build_parser().parse_args(
            ["embed", str(cover_path), str(payload_path), "o.png", "--rate", "1.5"]
        )


def test_parser_defaults():
    args = build_parser().parse_args(["extract", "in.png", "out.bin"])
    assert args.rate == 0.4
    assert args.fractal_type == "Мандельброт"
    assert args.iterations == "100"
    assert args.threshold == "2.0"
    assert args.algorithm == "Фрактал"