"""
Mandelbrot iteration map.

MandelbrotGenerator owns a height x width grid of escape counts for one
viewport. The grid starts zeroed and is overwritten in a single
generation pass by load_iteration_map(); there are no partial updates.

Every pixel is independent, so the pass is split into row bands that are
computed on a thread pool and joined before the method returns. Each band
writes only its own rows.
"""

from __future__ import annotations

import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from fractals.complex_num import Complex
from fractals.errors import check_budget, check_dimensions
from fractals.iterators import escape_time, escape_time_grid
from fractals.viewport import DEFAULT_VIEWPORT, Viewport, pixel_axes, zoom_viewport

ENGINES = ("numpy", "threads", "serial")


def grid_dtype(max_iterations: int):
    """Smallest unsigned dtype holding counts up to max_iterations."""
    if max_iterations <= np.iinfo(np.uint16).max:
        return np.uint16
    return np.uint32


def row_bands(height: int, n_bands: int) -> List[Tuple[int, int]]:
    """Split [0, height) into at most n_bands contiguous, non-overlapping ranges."""
    n_bands = max(1, min(n_bands, height))
    edges = np.linspace(0, height, n_bands + 1).astype(int)
    return [(int(a), int(b)) for a, b in zip(edges[:-1], edges[1:]) if b > a]


class MandelbrotGenerator:
    """Escape-count grid for one viewport at a fixed resolution."""

    def __init__(self, height: int, width: int, viewport: Viewport = DEFAULT_VIEWPORT):
        check_dimensions(width, height)
        self.height = height
        self.width = width
        self.viewport = viewport
        self.max_iterations: Optional[int] = None
        self._grid = np.zeros((height, width), dtype=np.uint16)

    @classmethod
    def zoom(
        cls,
        center: Complex,
        scale: float,
        upper: Complex,
        lower: Complex,
        width: int,
        height: int,
    ) -> MandelbrotGenerator:
        """New (not yet generated) generator over the zoomed viewport."""
        return cls(height, width, zoom_viewport(center, scale, upper, lower))

    @property
    def populated(self) -> bool:
        return self.max_iterations is not None

    @property
    def iteration_map(self) -> np.ndarray:
        """Read-only view of the (height, width) grid."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def get_iteration(self, x: int, y: int) -> int:
        """Count stored for column x, row y (0 before generation)."""
        return int(self._grid[y, x])

    def load_iteration_map(
        self,
        max_iterations: int,
        engine: str = "numpy",
        workers: Optional[int] = None,
        verbose: bool = False,
    ) -> np.ndarray:
        """
        Fill the whole grid with escape counts.

        Args:
            max_iterations: iteration budget, counts never exceed it
            engine: "numpy" (vectorized bands), "threads" (scalar loop per
                pixel, bands on a thread pool) or "serial" (scalar, one band)
            workers: thread count for the band split; None uses
                os.cpu_count()

        Returns:
            the read-only iteration map

        All engines produce identical grids for identical inputs.
        """
        check_budget(max_iterations)
        if engine not in ENGINES:
            raise ValueError(f"Unknown engine: {engine}")

        start = time.time()
        grid = np.zeros((self.height, self.width), dtype=grid_dtype(max_iterations))
        real, imag = pixel_axes(self.width, self.height, self.viewport)

        if engine == "numpy":
            def fill(band):
                lo, hi = band
                grid[lo:hi] = escape_time_grid(real, imag[lo:hi], max_iterations)
        else:
            def fill(band):
                lo, hi = band
                for y in range(lo, hi):
                    for x in range(self.width):
                        grid[y, x] = escape_time(Complex(float(real[x]), float(imag[y])), max_iterations)

        if engine == "serial":
            fill((0, self.height))
        else:
            n_bands = workers or os.cpu_count() or 1
            with ThreadPoolExecutor(max_workers=n_bands) as executor:
                # list() re-raises any worker exception here
                list(executor.map(fill, row_bands(self.height, n_bands)))

        self._grid = grid
        self.max_iterations = max_iterations

        if verbose:
            print(
                f"[generate] {self.width}x{self.height} | max_iter={max_iterations} "
                f"| engine={engine} | {time.time() - start:.2f}s"
            )
        return self.iteration_map
