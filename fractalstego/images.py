"""Reading and writing of image files."""

from __future__ import annotations

import os
from typing import Union

from PIL import Image

PathLike = Union[str, "os.PathLike[str]"]


def load_image(path: PathLike) -> Image.Image:
    """Decode the image stored at ``path`` and return it fully loaded."""
    with Image.open(path) as image:
        image.load()
        return image.copy()


def save_image(path: PathLike, image: Image.Image) -> None:
    """Write ``image`` to ``path`` as PNG, whatever the file extension."""
    image.save(path, format="PNG")