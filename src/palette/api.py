from __future__ import annotations

"""High-level public API for generating color palettes.

This module provides a single function, :func:`generate_palette`, which
resolves a palette strategy (enum or UI label), validates the base color
and dispatches to the matching generator in :mod:`palette.harmony`.
"""

import logging
from typing import Optional

from .color_types import parse_hex
from .engine import ColorEngine
from .harmony import (
    PALETTE_SIZE,
    PaletteType,
    RandomSource,
    generate_complementary_palette,
    generate_harmonious_palette,
    generate_monochromatic_palette,
    generate_random_palette,
)
from .palette import Palette

logger = logging.getLogger(__name__)

FALLBACK_BASE_COLOR = "#3B82F6"


def default_base_color() -> str:
    """Resolve the default base color from the config file.

    Reads ``palette.default_base_color``; an absent or malformed value
    falls back to ``#3B82F6``.
    """
    from util.utils import load_config

    cfg = load_config()
    section = cfg.get("palette", {}) if isinstance(cfg, dict) else {}
    raw = section.get("default_base_color") if isinstance(section, dict) else None
    if raw is None:
        return parse_hex(FALLBACK_BASE_COLOR)
    try:
        return parse_hex(raw)
    except ValueError:
        logger.warning("ignoring invalid palette.default_base_color in config: %r", raw)
        return parse_hex(FALLBACK_BASE_COLOR)


def generate_palette(
    palette_type: PaletteType | str,
    base_color: Optional[str] = None,
    *,
    n_colors: int = PALETTE_SIZE,
    rng: Optional[RandomSource] = None,
    engine: Optional[ColorEngine] = None,
) -> Palette:
    """Generate a color palette.

    Parameters
    ----------
    palette_type:
        PaletteType or a label understood by :meth:`PaletteType.from_value`
        (e.g. ``"from base"``).
    base_color:
        ``#RRGGBB`` base color. Ignored for RANDOM. When omitted for a
        base-derived strategy, :func:`default_base_color` is used.
    n_colors:
        Size of RANDOM palettes. Base-derived strategies always return 5.
    rng:
        Random source for RANDOM and HARMONIOUS. If None, the process-wide
        generator is used.
    engine:
        Optional ColorEngine for color space conversions.

    Raises
    ------
    InvalidHexFormat
        If ``base_color`` is given but malformed.
    ValueError
        If ``palette_type`` is unknown or ``n_colors`` is not positive.
    """
    ptype = PaletteType.from_value(palette_type)

    if not ptype.needs_base:
        colors = generate_random_palette(n_colors, rng=rng, engine=engine)
        base = None
    else:
        base = parse_hex(base_color) if base_color is not None else default_base_color()
        if ptype is PaletteType.HARMONIOUS:
            colors = generate_harmonious_palette(base, rng=rng, engine=engine)
        elif ptype is PaletteType.COMPLEMENTARY:
            colors = generate_complementary_palette(base, engine=engine)
        else:
            colors = generate_monochromatic_palette(base, engine=engine)

    logger.debug("generated %s palette from %s: %s", ptype.value, base, colors)
    return Palette(palette_type=ptype, base_color=base, colors=tuple(colors), engine=engine)
