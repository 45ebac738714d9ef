from __future__ import annotations

"""Palette strategies and derived-color generation.

This module defines :class:`PaletteType` and the generators that turn
either nothing (random) or a single base color into an ordered list of
``#rrggbb`` strings.

Randomised generators take an explicit random source. Any object with
``random()`` and ``integers(low, high)`` works; a
:class:`numpy.random.Generator` is used when none is given.
"""

from enum import Enum
from typing import List, Optional, Protocol

import numpy as np

from .color_types import parse_hex
from .engine import ColorEngine, default_engine, round_half_up


PALETTE_SIZE = 5

ANALOGOUS_STEP = 30
HARMONIOUS_JITTER = 20.0
MONOCHROMATIC_LIGHTNESS = (20, 35, 50, 65, 80)


class RandomSource(Protocol):
    """Minimal random interface consumed by the generators."""

    def random(self) -> float: ...

    def integers(self, low: int, high: int) -> int: ...


class PaletteType(Enum):
    """Palette construction strategies."""

    RANDOM = "random"
    HARMONIOUS = "harmonious"
    COMPLEMENTARY = "complementary"
    MONOCHROMATIC = "monochromatic"

    @property
    def needs_base(self) -> bool:
        return self is not PaletteType.RANDOM

    @classmethod
    def from_value(cls, value: "PaletteType | str") -> "PaletteType":
        """Resolve an enum, enum name/value, or UI label (case-insensitive)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for pt in cls:
            if key in (pt.value, pt.name.lower()):
                return pt
        alias = _LABEL_ALIASES.get(key)
        if alias is not None:
            return alias
        raise ValueError(f"Unknown palette type: {value}")


_LABEL_ALIASES = {
    "from base": PaletteType.HARMONIOUS,
    "from base color": PaletteType.HARMONIOUS,
    "analogous": PaletteType.HARMONIOUS,
    "generate random": PaletteType.RANDOM,
}


_RNG: Optional[np.random.Generator] = None


def default_rng() -> np.random.Generator:
    """Return the process-wide generator, creating it on first use.

    The seed comes from ``HUEPAL_SEED`` when set.
    """
    global _RNG
    if _RNG is None:
        from common import settings

        _RNG = np.random.default_rng(settings.get().SEED)
    return _RNG


def reset_default_rng() -> None:
    """Drop the process-wide generator so the next call re-reads settings."""
    global _RNG
    _RNG = None


def _resolve(rng: Optional[RandomSource], engine: Optional[ColorEngine]):
    return (rng if rng is not None else default_rng()), (
        engine if engine is not None else default_engine()
    )


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def generate_random_color(
    rng: Optional[RandomSource] = None,
    engine: Optional[ColorEngine] = None,
) -> str:
    """Draw a vivid mid-lightness color.

    Hue is uniform on [0, 360), saturation on [50, 100) and lightness on
    [30, 70), all integers.
    """
    rng, engine = _resolve(rng, engine)
    hue = int(rng.integers(0, 360))
    saturation = int(rng.integers(50, 100))
    lightness = int(rng.integers(30, 70))
    return engine.hsl_to_hex(hue, saturation, lightness)


def generate_random_palette(
    n_colors: int = PALETTE_SIZE,
    rng: Optional[RandomSource] = None,
    engine: Optional[ColorEngine] = None,
) -> List[str]:
    """Generate ``n_colors`` independent random colors."""
    if n_colors <= 0:
        raise ValueError("n_colors must be positive.")
    rng, engine = _resolve(rng, engine)
    return [generate_random_color(rng, engine) for _ in range(n_colors)]


def generate_harmonious_palette(
    base: str,
    rng: Optional[RandomSource] = None,
    engine: Optional[ColorEngine] = None,
) -> List[str]:
    """Analogous palette stepping 30° around the wheel from ``base``.

    Saturation and lightness of each derived color are jittered by up to
    ±10 and clamped to [20, 100] and [20, 80] respectively. Hues are not
    jittered.
    """
    base = parse_hex(base)
    rng, engine = _resolve(rng, engine)
    h0, s0, l0 = engine.hex_to_hsl(base)

    colors = [base]
    for i in range(1, PALETTE_SIZE):
        hue = (h0 + ANALOGOUS_STEP * i) % 360
        sat = _clamp(s0 + (rng.random() - 0.5) * HARMONIOUS_JITTER, 20.0, 100.0)
        light = _clamp(l0 + (rng.random() - 0.5) * HARMONIOUS_JITTER, 20.0, 80.0)
        colors.append(engine.hsl_to_hex(hue, sat, light))
    return colors


def generate_complementary_palette(
    base: str,
    engine: Optional[ColorEngine] = None,
) -> List[str]:
    """Complement, triadic pair and a desaturated neutral around ``base``.

    Order: base, +180°, +120°, +240°, neutral. Scaled lightness may exceed
    100 here; the hex conversion clamps it.
    """
    base = parse_hex(base)
    engine = engine if engine is not None else default_engine()
    h, s, l = engine.hex_to_hsl(base)  # noqa: E741

    tri_s = round_half_up(s * 0.8)
    tri_l = round_half_up(l * 1.1)
    return [
        base,
        engine.hsl_to_hex((h + 180) % 360, s, l),
        engine.hsl_to_hex((h + 120) % 360, tri_s, tri_l),
        engine.hsl_to_hex((h + 240) % 360, tri_s, tri_l),
        engine.hsl_to_hex(h, round_half_up(s * 0.2), round_half_up(l * 0.9)),
    ]


def generate_monochromatic_palette(
    base: str,
    engine: Optional[ColorEngine] = None,
) -> List[str]:
    """Fixed lightness ladder at the base hue and saturation.

    The base itself is only present if its lightness is on the ladder.
    """
    base = parse_hex(base)
    engine = engine if engine is not None else default_engine()
    h, s, _ = engine.hex_to_hsl(base)
    return [engine.hsl_to_hex(h, s, light) for light in MONOCHROMATIC_LIGHTNESS]


__all__ = [
    "PALETTE_SIZE",
    "PaletteType",
    "RandomSource",
    "default_rng",
    "reset_default_rng",
    "generate_random_color",
    "generate_random_palette",
    "generate_harmonious_palette",
    "generate_complementary_palette",
    "generate_monochromatic_palette",
]
