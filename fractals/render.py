"""
Image output for iteration grids.

The core hands over an (H, W, 3) uint8 RGB array; this module serializes
it as a plain-text P3 pixmap, or a PNG through Pillow, or an annotated
matplotlib figure of the raw iteration counts.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, TextIO

import numpy as np

from fractals.coloring import colorize
from fractals.complex_num import Complex
from fractals.generate_mandelbrot import MandelbrotGenerator
from fractals.viewport import Viewport, zoom_viewport

# The reference output writes 256 here even though channels stop at 255.
PPM_MAX_COLOR = 256


def _check_rgb(rgb) -> np.ndarray:
    rgb = np.asarray(rgb)
    if rgb.ndim != 3 or rgb.shape[2] != 3:
        raise ValueError(f"Expected an (H, W, 3) RGB array, got shape {rgb.shape}")
    return rgb


def write_ppm_stream(out: TextIO, rgb, max_color: int = PPM_MAX_COLOR) -> None:
    """Write P3 header and pixels; each row is 'r g b r g b ... ' plus newline."""
    rgb = _check_rgb(rgb)
    height, width = rgb.shape[:2]
    out.write("P3\n")
    out.write(f"{width} {height}\n")
    out.write(f"{max_color}\n")
    for row in rgb:
        out.write("".join(f"{r} {g} {b} " for r, g, b in row.tolist()))
        out.write("\n")


def format_ppm(rgb, max_color: int = PPM_MAX_COLOR) -> str:
    buf = io.StringIO()
    write_ppm_stream(buf, rgb, max_color)
    return buf.getvalue()


def write_ppm(path, rgb, max_color: int = PPM_MAX_COLOR) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="ascii", newline="\n") as f:
        write_ppm_stream(f, rgb, max_color)
    return out_path


def save_png(path, rgb) -> Path:
    from PIL import Image

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(_check_rgb(rgb), dtype=np.uint8)).save(out_path)
    return out_path


def save_figure(path, iters, viewport: Viewport, title: Optional[str] = None, cmap: str = "magma") -> Path:
    """Plot raw escape counts with plane coordinates on the axes."""
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    lo, hi = viewport.minimum, viewport.maximum

    fig, ax = plt.subplots(figsize=(10, 10))
    # row 0 is imag = lo.imag, so draw with origin at the bottom
    im = ax.imshow(iters, cmap=cmap, origin="lower", extent=[lo.real, hi.real, lo.imag, hi.imag])
    ax.set_xlabel("Re(c)")
    ax.set_ylabel("Im(c)")
    if title:
        ax.set_title(title)
    fig.colorbar(im, ax=ax, label="Iterations to Escape")
    ax.set_aspect("equal", adjustable="box")
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out_path


def save_image(path, rgb, max_color: int = PPM_MAX_COLOR) -> Path:
    """Pick the writer from the file suffix (.ppm, anything else via Pillow)."""
    if Path(path).suffix.lower() == ".ppm":
        return write_ppm(path, rgb, max_color)
    return save_png(path, rgb)


def render_viewport(
    viewport: Viewport,
    width: int,
    height: int,
    max_iterations: int,
    outfile="out.ppm",
    engine: str = "numpy",
    workers: Optional[int] = None,
    max_color: int = PPM_MAX_COLOR,
    verbose: bool = False,
) -> MandelbrotGenerator:
    """
    Generate, colorize and write one viewport.

    Returns the populated generator so callers can inspect the grid.
    """
    generator = MandelbrotGenerator(height, width, viewport)
    iters = generator.load_iteration_map(max_iterations, engine=engine, workers=workers, verbose=verbose)
    out_path = save_image(outfile, colorize(iters), max_color)
    if verbose:
        print(f"[write] {out_path}")
    return generator


def render_zoom(
    center: Complex,
    scale: float,
    upper: Complex,
    lower: Complex,
    width: int,
    height: int,
    max_iterations: int,
    outfile="out.ppm",
    **kwargs,
) -> MandelbrotGenerator:
    """Zoom (offset = center * scale), generate, colorize and write in one call."""
    viewport = zoom_viewport(center, scale, upper, lower)
    return render_viewport(viewport, width, height, max_iterations, outfile, **kwargs)
