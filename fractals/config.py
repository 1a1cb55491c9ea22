"""Default render parameters (deep zoom near the seahorse valley)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from fractals.complex_num import Complex
from fractals.errors import check_budget, check_dimensions
from fractals.generate_mandelbrot import ENGINES


@dataclass
class RenderConfig:
    width: int = 1080
    height: int = 1080
    max_iterations: int = 1000
    scale: float = 3.6e-3
    center: Complex = field(default_factory=lambda: Complex(-0.77568377, 0.136467737))
    upper: Complex = field(default_factory=lambda: Complex(1.0, 1.0))
    lower: Complex = field(default_factory=lambda: Complex(-1.0, -1.0))
    outfile: str = "out.ppm"
    engine: str = "numpy"  # "numpy" | "threads" | "serial"
    workers: Optional[int] = None
    max_color: int = 256  # PPM header literal; 255 is the strict maximum
    scaled_center: bool = False  # offset by center * scale instead of center

    def validate(self) -> None:
        check_dimensions(self.width, self.height)
        check_budget(self.max_iterations)
        if self.engine not in ENGINES:
            raise ValueError(f"Unknown engine: {self.engine}")
