import numpy as np

from fractals.complex_num import Complex
from fractals.errors import check_budget
from fractals.viewport import Viewport, map_pixel_to_complex

ESCAPE_SQ_RADIUS = 4.0


def escape_time(c: Complex, max_iterations: int) -> int:
    """
    Iterate z <- z^2 + c from z = 0 and count the steps.

    Stops once |z|^2 > 4 or the count reaches max_iterations.
    A return value equal to max_iterations means the orbit never escaped
    (the point is treated as inside the set).
    """
    check_budget(max_iterations)
    c = Complex.from_complex(c)
    z = Complex()
    iterations = 0
    while iterations < max_iterations and z.sqmagnitude() <= ESCAPE_SQ_RADIUS:
        z = z * z + c
        iterations += 1
    return iterations


def escape_time_at_pixel(x, y, width, height, viewport: Viewport, max_iterations):
    """escape_time of the plane point under pixel (x, y)."""
    point = map_pixel_to_complex(x, y, width, height, viewport.minimum, viewport.maximum)
    return escape_time(point, max_iterations)


def escape_time_grid(real, imag, max_iterations: int) -> np.ndarray:
    """
    Vectorized escape_time over a grid of points.

    Args:
        real: 1-D array of column real parts (or a 2-D array of real parts)
        imag: 1-D array of row imaginary parts (or a 2-D array matching real)
        max_iterations: iteration budget

    Returns:
        int64 array of shape (len(imag), len(real)) for 1-D input, else real.shape.

    Each point goes through the same float operations as escape_time,
    so results are identical to the scalar loop.
    """
    check_budget(max_iterations)
    real = np.asarray(real, dtype=np.float64)
    imag = np.asarray(imag, dtype=np.float64)
    if real.ndim == 1 and imag.ndim == 1:
        cr, ci = np.meshgrid(real, imag)
    else:
        cr, ci = np.broadcast_arrays(real, imag)
        cr, ci = cr.copy(), ci.copy()

    zr = np.zeros_like(cr)
    zi = np.zeros_like(ci)
    iters = np.zeros(cr.shape, dtype=np.int64)
    active = np.ones(cr.shape, dtype=bool)

    for _ in range(max_iterations):
        # points still under the bound take another step
        active &= (zr * zr + zi * zi) <= ESCAPE_SQ_RADIUS
        if not np.any(active):
            break
        ar, ai = zr[active], zi[active]
        zr[active] = (ar * ar - ai * ai) + cr[active]
        zi[active] = (ar * ai + ar * ai) + ci[active]
        iters[active] += 1

    return iters
