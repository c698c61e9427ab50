# fractalstego

Hide a file inside an image and get it back later. The pixels that carry
the hidden bits are chosen by a fractal mask: a pixel is selected when its
point in the complex plane stays bounded for the configured number of
iterations. Each selected pixel carries one bit in the least significant
bit of its blue channel. Embedding and extraction compute the same mask
from the same parameters, so they agree on which pixels to use.

The package also measures how much an image changed: mean squared error,
PSNR and per-channel correlation between an original and a stego image.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `fractalstego` command with three
subcommands:

```
fractalstego embed COVER SECRET OUTPUT [options]
fractalstego extract STEGO OUTPUT [options]
fractalstego metrics ORIGINAL STEGO
```

`embed` and `extract` accept:

- `--algorithm` – algorithm name, default `Фрактал` (the only one known)
- `--rate` – embedding rate, a number between 0.1 and 0.9, default 0.4
- `--fractal-type` – default `Мандельброт`
- `--iterations` – an integer, default `100`
- `--threshold` – escape radius, default `2.0`

Run `fractalstego --help` or `fractalstego embed --help` for details.

`embed` writes the stego image as PNG whatever the output file's extension,
since a lossy format would destroy the hidden bits. `extract` writes the
recovered bytes to the output file. `metrics` prints one line per metric
with four decimals (`NaN`, `+Inf` or `-Inf` where the value is not finite).
On success `embed` and `extract` print a short confirmation; any failure is
printed to standard error as `error: ...` and the command exits with
status 1.

Embedding and extraction must use the same fractal type, iteration count
and threshold; otherwise different pixels are read, and extraction fails
or yields garbage.

## Library use

```python
from fractalstego.cli import build_config
from fractalstego.factory import create_algorithm
from fractalstego.images import load_image, save_image
from fractalstego.metrics import calculate_image_metrics, format_metrics

config = build_config(0.4, "Mandelbrot", 100, 2.0)
algorithm = create_algorithm("Фрактал")

cover = load_image("cover.png")
with open("secret.txt", "rb") as fh:
    stego = algorithm.embed(cover, fh.read(), config)
save_image("stego.png", stego)

recovered = algorithm.extract(load_image("stego.png"), config)

print(format_metrics(calculate_image_metrics(cover, stego)))
```

`fractalstego.cli` also offers `embed_file` and `extract_file`, which do
the whole file-to-file job of the two commands, and `build_parser` and
`main`.

`create_algorithm` knows one algorithm, named `"Фрактал"`; any other name
raises an error. It returns a `fractalstego.fractal.FractalStego`, which
implements the `fractalstego.config.Steganographer` interface
(`embed`, `extract`, `name`). Settings travel in a
`fractalstego.config.Config` holding an `embedding_rate` and an optional
`fractalstego.config.FractalParams` (`type`, `iterations`, `threshold`).
The embedding rate is carried in the configuration but does not change
which pixels are used.

Failures are reported by raising `fractalstego.config.StegoError`, for
example when the configuration carries no fractal parameters, when the
image has fewer pixels than the 32 header bits plus eight bits per
payload byte, or when the length read back from an image is zero or larger
than the number of pixels.

## Fractal types

Only the exact type `"Julia"` is treated specially. Its orbit starts at
zero with the fixed constant c = -0.8 + 0.156i, independent of the pixel,
so the mask selects either every pixel or none. Any other type, including
the command-line defaults `Мандельброт` and `Жулиа`, uses the Mandelbrot
set over the region x in [-2.5, 1.0), y in [-1.0, 1.0).

The size check counts all pixels of the image, not only the selected ones.
When the mask selects fewer pixels than the payload needs, the bits that do
not fit are left out, and extraction fills the missing bits with zeros.

## Format

The payload is preceded by its length as a 32-bit big-endian integer.
Both are written bit by bit, most significant bit first, into the selected
pixels in row-major order. The stego image is RGBA; red, green, alpha and
unselected blue values are copied from the cover.

## Metrics

`calculate_image_metrics` compares the two images over the area of the
original and returns `MSE`, `PSNR` (infinite when the images are equal) and
`Correlation (R)`, `(G)`, `(B)` and `(Avg)`. Channels are taken with alpha
premultiplied; where the stego image is smaller than the original, the
missing pixels count as transparent black.

## What it does not do

There is no graphical interface and no image preview; everything is done
through the `fractalstego` command or from Python.