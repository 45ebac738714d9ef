from __future__ import annotations

"""Core color types used by the huepal palette library.

This module defines small immutable value types for hexadecimal, RGB and
HSL colors, plus the boundary validation that turns a user-supplied string
into a canonical ``#rrggbb`` hex color.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Optional

if TYPE_CHECKING:
    from .engine import ColorEngine


_HEX_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")


class InvalidHexFormat(ValueError):
    """Raised when a string is not ``#`` followed by exactly 6 hex digits."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid hex color: {value!r} (expected #RRGGBB)")


class RGB(NamedTuple):
    """sRGB color with integer channels in [0, 255]."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """HSL color with h in [0, 360) and s, l in [0, 100] (all integers)."""

    h: int
    s: int
    l: int  # noqa: E741


def is_valid_hex(value: object) -> bool:
    """Return True if ``value`` is a ``#RRGGBB`` string (either case)."""
    return isinstance(value, str) and _HEX_PATTERN.fullmatch(value) is not None


def parse_hex(value: object) -> str:
    """Validate a hex color string and return it in lowercase ``#rrggbb`` form.

    Raises
    ------
    InvalidHexFormat
        If ``value`` is not a string of the form ``#RRGGBB``.
    """
    if not is_valid_hex(value):
        raise InvalidHexFormat(value)
    return str(value).lower()


@dataclass(frozen=True)
class Color:
    """A palette entry with all of its display representations.

    Attributes
    ----------
    hex:
        Canonical ``#rrggbb`` string.
    rgb:
        Decoded channels as :class:`RGB`.
    hsl:
        Decoded channels as :class:`HSL`.
    """

    hex: str
    rgb: RGB
    hsl: HSL

    @classmethod
    def from_hex(cls, hex_str: str, engine: Optional["ColorEngine"] = None) -> "Color":
        """Build a Color from a hex string, decoding RGB and HSL once."""
        from .engine import default_engine

        if engine is None:
            engine = default_engine()
        canonical = parse_hex(hex_str)
        return cls(
            hex=canonical,
            rgb=engine.hex_to_rgb(canonical),
            hsl=engine.hex_to_hsl(canonical),
        )


__all__ = [
    "InvalidHexFormat",
    "RGB",
    "HSL",
    "Color",
    "is_valid_hex",
    "parse_hex",
]
