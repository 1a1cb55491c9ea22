import argparse
import os
import sys
from pathlib import Path

# Ensure repository root is on sys.path so `from fractals...` works when running
# this script directly (e.g. `python scripts/make_image.py`).
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from fractals.config import RenderConfig
from fractals.errors import FractalError
from fractals.generate_mandelbrot import ENGINES
from fractals.render import render_viewport, save_figure
from fractals.utils import parse_complex
from fractals.viewport import centered_viewport, zoom_viewport


def build_parser() -> argparse.ArgumentParser:
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(description="Render a Mandelbrot zoom to a PPM (or PNG) image")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--max_iter", type=int, default=defaults.max_iterations)
    parser.add_argument("--scale", type=float, default=defaults.scale)
    parser.add_argument("--center", type=str, default=None,
                        help="zoom center, e.g. '-0.77568377+0.136467737j'")
    parser.add_argument("--scaled-center", action="store_true",
                        help="offset the frame by center*scale instead of center")
    parser.add_argument("--upper", type=str, default="1+1j")
    parser.add_argument("--lower", type=str, default="-1-1j",
                        help="negative values need the --lower=-1-1j form")
    parser.add_argument("--engine", type=str, default=defaults.engine, choices=ENGINES)
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--max_color", type=int, default=defaults.max_color, choices=[255, 256])
    parser.add_argument("--figure", type=str, default=None,
                        help="also save a matplotlib figure of the raw counts")
    parser.add_argument("--outfile", type=str, default=defaults.outfile)
    return parser


def config_from_args(args) -> RenderConfig:
    config = RenderConfig(
        width=args.width,
        height=args.height,
        max_iterations=args.max_iter,
        scale=args.scale,
        upper=parse_complex(args.upper),
        lower=parse_complex(args.lower),
        outfile=args.outfile,
        engine=args.engine,
        workers=args.workers,
        max_color=args.max_color,
        scaled_center=args.scaled_center,
    )
    if args.center is not None:
        config.center = parse_complex(args.center)
    return config


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)

    try:
        config.validate()
    except FractalError as e:
        print(f"[error] {e}")
        return 1

    print(f"[run] center={config.center.to_complex()}, scale={config.scale}, "
          f"{config.width}x{config.height}, max_iter={config.max_iterations}, saving to {config.outfile}")

    frame = zoom_viewport if config.scaled_center else centered_viewport
    viewport = frame(config.center, config.scale, config.upper, config.lower)

    generator = render_viewport(
        viewport,
        config.width,
        config.height,
        config.max_iterations,
        outfile=config.outfile,
        engine=config.engine,
        workers=config.workers,
        max_color=config.max_color,
        verbose=True,
    )

    if args.figure:
        fig_path = Path(args.figure)
        save_figure(fig_path, generator.iteration_map, generator.viewport,
                    title=f"Mandelbrot Set ({config.width}x{config.height})")
        print(f"[write] {fig_path}")

    print("Finished...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
