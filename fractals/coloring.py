# fractals/coloring.py
import math

import numpy as np


def encode_color(m: int):
    """
    False-color palette for an escape count m:

        r = floor(m * log2(m))  mod 256
        g = m                   mod 256
        b = floor(m * log10(m)) mod 256

    log(0) is undefined, so m = 0 (a grid cell that was never generated)
    maps to black (0, 0, 0).
    """
    m = int(m)
    if m <= 0:
        return (0, 0, 0)
    r = math.floor(m * math.log2(m)) % 256
    g = m % 256
    b = math.floor(m * math.log10(m)) % 256
    return (r, g, b)


def color_table(max_value: int) -> np.ndarray:
    """(max_value + 1, 3) uint8 lookup table of encode_color."""
    return np.array([encode_color(m) for m in range(max_value + 1)], dtype=np.uint8)


def colorize(iters) -> np.ndarray:
    """Map an iteration grid to an (H, W, 3) uint8 RGB image."""
    iters = np.asarray(iters)
    if iters.size == 0:
        return np.zeros(iters.shape + (3,), dtype=np.uint8)
    table = color_table(int(iters.max()))
    return table[iters]
