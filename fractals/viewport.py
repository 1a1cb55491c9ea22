"""
Pixel <-> complex-plane mapping.

A Viewport is the rectangle of the complex plane spread over the image:
pixel (0, 0) lands on ``minimum`` and the one-past-the-end pixel
(width, height) lands on ``maximum``. Inverted or degenerate viewports are
accepted and simply produce mirrored or flat images.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from fractals.complex_num import Complex
from fractals.errors import check_dimensions


@dataclass(frozen=True)
class Viewport:
    minimum: Complex
    maximum: Complex

    @classmethod
    def from_bounds(cls, xmin: float, xmax: float, ymin: float, ymax: float) -> Viewport:
        return cls(Complex(xmin, ymin), Complex(xmax, ymax))

    @property
    def real_span(self) -> float:
        return self.maximum.real - self.minimum.real

    @property
    def imag_span(self) -> float:
        return self.maximum.imag - self.minimum.imag

    def zoom(self, center: Complex, scale: float) -> Viewport:
        """Scale this viewport by ``scale`` and shift it by ``center * scale``."""
        return zoom_viewport(center, scale, self.maximum, self.minimum)


DEFAULT_VIEWPORT = Viewport(Complex(-2.0, -1.0), Complex(1.0, 1.0))


def map_pixel_to_complex(
    x: int,
    y: int,
    width: int,
    height: int,
    minimum: Complex,
    maximum: Complex,
) -> Complex:
    """Affine map of pixel (x, y) into the [minimum, maximum] rectangle."""
    check_dimensions(width, height)
    return Complex(
        x * (maximum.real - minimum.real) / width + minimum.real,
        y * (maximum.imag - minimum.imag) / height + minimum.imag,
    )


def pixel_axes(width: int, height: int, viewport: Viewport) -> Tuple[np.ndarray, np.ndarray]:
    """
    Real part of every column and imaginary part of every row.

    Same arithmetic as map_pixel_to_complex, so entry i of each axis equals
    the scalar mapping of pixel index i bit for bit.
    """
    check_dimensions(width, height)
    xs = np.arange(width, dtype=np.float64)
    ys = np.arange(height, dtype=np.float64)
    lo, hi = viewport.minimum, viewport.maximum
    real = xs * (hi.real - lo.real) / width + lo.real
    imag = ys * (hi.imag - lo.imag) / height + lo.imag
    return real, imag


def zoom_viewport(center: Complex, scale: float, upper: Complex, lower: Complex) -> Viewport:
    """
    Derive a zoomed viewport.

    offset = center * scale
    max    = upper * scale + offset
    min    = lower * scale + offset
    """
    center = Complex.from_complex(center)
    offset = center * scale
    return Viewport(
        minimum=Complex.from_complex(lower) * scale + offset,
        maximum=Complex.from_complex(upper) * scale + offset,
    )


def centered_viewport(center: Complex, scale: float, upper: Complex, lower: Complex) -> Viewport:
    """
    Frame ``upper``/``lower`` scaled by ``scale`` around an absolute center.

    Unlike zoom_viewport the center is not scaled, so the image stays on
    ``center`` at every zoom level.
    """
    center = Complex.from_complex(center)
    return Viewport(
        minimum=Complex.from_complex(lower) * scale + center,
        maximum=Complex.from_complex(upper) * scale + center,
    )
