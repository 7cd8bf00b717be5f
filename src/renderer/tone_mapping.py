# renderer/tone_mapping.py
import math
from typing import Tuple
import numpy as np
from numba import njit
from core.vector import Color


def _channel(value: float, scale: float) -> int:
    # NaN and negative radiance map to 0
    if not value > 0.0:
        return 0
    return int(min(max(255.999 * math.sqrt(value * scale), 0.0), 255.0))


def format_color(pixel_color: Color, samples_per_pixel: int) -> Tuple[int, int, int]:
    """
    Average an accumulated pixel over its samples, gamma-correct (gamma 2)
    and quantize each channel to [0, 255].
    """
    scale = 1.0 / samples_per_pixel
    return (_channel(pixel_color.x, scale),
            _channel(pixel_color.y, scale),
            _channel(pixel_color.z, scale))


@njit
def gamma_quantize_kernel(accumulated, scale, output):
    height, width, _ = accumulated.shape
    for y in range(height):
        for x in range(width):
            for c in range(3):
                value = accumulated[y, x, c] * scale
                if value > 0.0:
                    output[y, x, c] = np.uint8(min(255.999 * math.sqrt(value), 255.0))
                else:
                    output[y, x, c] = 0


def to_rgb8(accumulated: np.ndarray, samples_per_pixel: int) -> np.ndarray:
    """
    Convert an accumulation buffer of shape (height, width, 3) to uint8 RGB
    with the same averaging, gamma and clamping as format_color.
    """
    if samples_per_pixel < 1:
        raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
    accumulated = np.ascontiguousarray(accumulated, dtype=np.float64)
    output = np.zeros(accumulated.shape, dtype=np.uint8)
    gamma_quantize_kernel(accumulated, 1.0 / samples_per_pixel, output)
    return output
