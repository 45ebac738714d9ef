"""
Command line front end for the palette generator.

Usage (after `pip install -e .`):
    huepal --type complementary --base "#3B82F6"
    huepal --type random --count 5 --seed 7 --export json --out exports/
    python -m palette --type monochromatic --base "#10b981" --export css

Notes:
    - Without --base, base-derived strategies use `palette.default_base_color`
      from configs/default.yaml (or #3B82F6).
    - Exit status 2 means the input was rejected (bad hex, unknown type).
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from common import setup_default_logging

from .api import generate_palette
from .color_types import Color, InvalidHexFormat
from .engine import format_hsl, format_rgb
from .harmony import PALETTE_SIZE, PaletteType
from .palette import Palette
from .ui_helpers import ExportFormat, write_palette

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="huepal", description="Generate HSL color palettes.")
    p.add_argument(
        "--type",
        dest="palette_type",
        default=PaletteType.RANDOM.value,
        help="random | harmonious (from base) | complementary | monochromatic",
    )
    p.add_argument("--base", default=None, help="base color as #RRGGBB")
    p.add_argument(
        "--count",
        type=int,
        default=PALETTE_SIZE,
        help="number of colors for random palettes",
    )
    p.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    p.add_argument(
        "--export",
        choices=[fmt.value for fmt in ExportFormat],
        default=None,
        help="also write the palette to a file",
    )
    p.add_argument("--out", type=Path, default=None, help="export directory")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return p


def format_line(index: int, color: Color) -> str:
    return f"{index}  {color.hex}  rgb({format_rgb(color.rgb)})  hsl({format_hsl(color.hsl)})"


def render(palette: Palette) -> str:
    return "\n".join(format_line(i, c) for i, c in enumerate(palette.details(), start=1))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    rng = np.random.default_rng(args.seed) if args.seed is not None else None
    try:
        palette = generate_palette(
            args.palette_type,
            args.base,
            n_colors=args.count,
            rng=rng,
        )
    except InvalidHexFormat as exc:
        logger.error("%s", exc)
        return 2
    except ValueError as exc:
        logger.error("invalid arguments: %s", exc)
        return 2

    print(render(palette))

    if args.export is not None:
        try:
            write_palette(palette, args.export, args.out)
        except FileExistsError as exc:
            logger.error("%s", exc)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
