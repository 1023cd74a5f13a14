#!/usr/bin/env python3
# minotaur command line: carve (or load) a maze and write it out.
# Output format follows the extension: .png image, .mz snapshot, else ASCII.

import argparse
import logging
import os
import sys
from typing import List, Optional

from .colors import parse_hex_color
from .config import DEFAULTS, MazeConfig
from .grid import Grid
from .mapgen.generator import ALGORITHMS, canonical_name, generate_from_config
from .render.image import render_image
from .render.text import render_ascii
from .rng import MASK64
from .snapshot import open_snapshot, save
from .verify import is_perfect

logger = logging.getLogger(__name__)


def _algorithm(value: str) -> str:
    try:
        return canonical_name(value)
    except KeyError as e:
        raise argparse.ArgumentTypeError(e.args[0])


def parse_seed(value: str) -> int:
    try:
        seed = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"seed must be an integer, got {value!r}")
    if not (0 <= seed <= MASK64):
        raise argparse.ArgumentTypeError("seed must fit in 64 unsigned bits")
    return seed


def _positive(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _color(value: str):
    try:
        return parse_hex_color(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="minotaur", description="Generate perfect mazes.")
    p.add_argument("-a", "--algorithm", type=_algorithm, default=DEFAULTS.algorithm,
                   help=f"maze generating algorithm ({', '.join(ALGORITHMS)})")
    p.add_argument("-x", "--width", type=int, default=DEFAULTS.width, help="maze width in cells")
    p.add_argument("-y", "--height", type=int, default=DEFAULTS.height, help="maze height in cells")
    p.add_argument("-o", "--output", default="-",
                   help='".png" for an image, ".mz" to store the maze for later loading, '
                        'anything else (or "-" for stdout) for ASCII art')
    p.add_argument("-i", "--input", help='load a ".mz" file from a previous run instead of generating')
    p.add_argument("-s", "--seed", type=parse_seed, help="seed for the random number generator")
    p.add_argument("--cell-size", type=_positive, default=DEFAULTS.cell_size, help="cell size in pixels (png)")
    p.add_argument("--wall-size", type=_non_negative, default=DEFAULTS.wall_size, help="wall size in pixels (png)")
    p.add_argument("--background-color", type=_color, default=DEFAULTS.background_color,
                   help="background color as #RRGGBB (png)")
    p.add_argument("--wall-color", type=_color, default=DEFAULTS.wall_color,
                   help="wall color as #RRGGBB (png)")
    p.add_argument("--check", action="store_true", help="fail unless the result is a perfect maze")
    p.add_argument("-v", "--verbose", action="count", default=0)
    return p


def write_output(grid: Grid, cfg: MazeConfig, out: str) -> None:
    ext = os.path.splitext(out)[1].lower()
    if ext == ".png":
        img = render_image(grid, cfg.cell_size, cfg.wall_size, cfg.background_color, cfg.wall_color)
        img.save(out)
        logger.info("wrote %s (%dx%d px)", out, img.width, img.height)
    elif ext == ".mz":
        save(grid, out)
    elif out == "-":
        sys.stdout.write(render_ascii(grid))
    else:
        with open(out, "w", encoding="utf-8") as f:
            f.write(render_ascii(grid))
        logger.info("wrote %s", out)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = (logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        cfg = MazeConfig.from_args(args)
        if args.input:
            grid = open_snapshot(args.input)
        else:
            grid = generate_from_config(cfg)
    except (ValueError, OSError) as e:
        # Bad dimensions and corrupt snapshots both surface as ValueError.
        raise SystemExit(f"minotaur: {e}")

    if args.check and not is_perfect(grid):
        raise SystemExit("minotaur: maze is not perfect")

    try:
        write_output(grid, cfg, args.output)
    except (ValueError, OSError) as e:
        raise SystemExit(f"minotaur: cannot write {args.output}: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
