# renderer/image_io.py
import logging
from pathlib import Path
from typing import Union
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def _check_rgb8(rgb8: np.ndarray):
    if rgb8.ndim != 3 or rgb8.shape[2] != 3 or rgb8.dtype != np.uint8:
        raise ValueError(f"Expected a (height, width, 3) uint8 array, got {rgb8.shape} {rgb8.dtype}")


def write_ppm(path: Union[str, Path], rgb8: np.ndarray):
    """Write a plain-text (P3) PPM, one pixel per line, top row first."""
    _check_rgb8(rgb8)
    height, width, _ = rgb8.shape
    with open(path, "w", encoding="ascii") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for row in rgb8:
            for r, g, b in row:
                f.write(f"{r} {g} {b}\n")
    logger.info("Wrote %s", path)


def write_image(path: Union[str, Path], rgb8: np.ndarray):
    """Write an image file; the format follows the file suffix."""
    _check_rgb8(rgb8)
    path = Path(path)
    if path.suffix.lower() == ".ppm":
        write_ppm(path, rgb8)
        return
    Image.fromarray(rgb8).save(path)
    logger.info("Wrote %s", path)
