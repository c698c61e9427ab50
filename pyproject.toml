[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractalstego"
version = "0.1.0"
description = "Hide files in images using fractal-selected pixels, and measure the distortion it causes"
requires-python = ">=3.10"
keywords = ["steganography", "fractal", "mandelbrot", "julia", "lsb", "image", "psnr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Security",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractalstego = "fractalstego.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fractalstego"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
