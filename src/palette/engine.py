from __future__ import annotations

"""Color conversion engine for hex, RGB and HSL.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between ``#rrggbb`` strings, 8-bit RGB and
integer HSL, plus the display formatters used by exports.

Rounding follows the half-up convention (``floor(x + 0.5)``) so that
values such as 127.5 always land on 128.
"""

import math
from typing import Protocol

from .color_types import HSL, RGB, parse_hex


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def hex_to_hsl(self, hex_str: str) -> HSL: ...

    def hsl_to_hex(self, h: float, s: float, l: float) -> str: ...  # noqa: E741

    def hex_to_rgb(self, hex_str: str) -> RGB: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation of the HSL/RGB conversions."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        return h % 360.0

    def hex_to_rgb(self, hex_str: str) -> RGB:
        """Decode ``#rrggbb`` into integer channels."""
        s = parse_hex(hex_str)
        return RGB(int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))

    def hex_to_hsl(self, hex_str: str) -> HSL:
        """Convert ``#rrggbb`` into integer HSL.

        Achromatic colors (r == g == b) yield h = s = 0.
        """
        r8, g8, b8 = self.hex_to_rgb(hex_str)
        r, g, b = r8 / 255.0, g8 / 255.0, b8 / 255.0

        c_max = max(r, g, b)
        c_min = min(r, g, b)
        light = (c_max + c_min) / 2.0

        if c_max == c_min:
            hue = sat = 0.0
        else:
            d = c_max - c_min
            sat = d / (2.0 - c_max - c_min) if light > 0.5 else d / (c_max + c_min)
            if c_max == r:
                hue = (g - b) / d + (6.0 if g < b else 0.0)
            elif c_max == g:
                hue = (b - r) / d + 2.0
            else:
                hue = (r - g) / d + 4.0
            hue /= 6.0

        h = round_half_up(hue * 360.0) % 360
        return HSL(h, round_half_up(sat * 100.0), round_half_up(light * 100.0))

    def hsl_to_hex(self, h: float, s: float, l: float) -> str:  # noqa: E741
        """Convert HSL into ``#rrggbb``.

        Hue wraps modulo 360 (negative values included); saturation and
        lightness are clamped into [0, 100] rather than rejected.
        """
        h = self.normalize_hue(h)
        s = _clamp(s, 0.0, 100.0) / 100.0
        l = _clamp(l, 0.0, 100.0) / 100.0  # noqa: E741

        if s == 0:
            r = g = b = l
        else:
            q = l * (1.0 + s) if l < 0.5 else l + s - l * s
            p = 2.0 * l - q
            t = h / 360.0
            r = _hue_to_rgb(p, q, t + 1.0 / 3.0)
            g = _hue_to_rgb(p, q, t)
            b = _hue_to_rgb(p, q, t - 1.0 / 3.0)

        return rgb_to_hex(r * 255.0, g * 255.0, b * 255.0)


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves going up (127.5 -> 128)."""
    return int(math.floor(x + 0.5))


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, float(x)))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    # piecewise-linear over six 1/6-wide sectors
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


_DEFAULT_ENGINE = DefaultColorEngine()


def default_engine() -> DefaultColorEngine:
    """Return the shared stateless engine instance."""
    return _DEFAULT_ENGINE


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Encode channels (clamped to [0, 255], rounded) as lowercase ``#rrggbb``."""
    r_i = round_half_up(_clamp(r, 0.0, 255.0))
    g_i = round_half_up(_clamp(g, 0.0, 255.0))
    b_i = round_half_up(_clamp(b, 0.0, 255.0))
    return f"#{r_i:02x}{g_i:02x}{b_i:02x}"


def hex_to_rgb(hex_str: str) -> RGB:
    return _DEFAULT_ENGINE.hex_to_rgb(hex_str)


def hex_to_hsl(hex_str: str) -> HSL:
    return _DEFAULT_ENGINE.hex_to_hsl(hex_str)


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    return _DEFAULT_ENGINE.hsl_to_hex(h, s, l)


def format_hsl(hsl: HSL) -> str:
    """Render HSL as ``"H°, S%, L%"``."""
    h, s, l = hsl  # noqa: E741
    return f"{h}°, {s}%, {l}%"


def format_rgb(rgb: RGB) -> str:
    """Render RGB as ``"R, G, B"``."""
    r, g, b = rgb
    return f"{r}, {g}, {b}"


__all__ = [
    "ColorEngine",
    "DefaultColorEngine",
    "default_engine",
    "hex_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "rgb_to_hex",
    "round_half_up",
    "format_hsl",
    "format_rgb",
]
