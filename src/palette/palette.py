from __future__ import annotations

"""Container type for generated color palettes.

This module defines the :class:`Palette` dataclass, which groups the
strategy, the base color and the ordered list of generated colors.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .color_types import Color
from .engine import ColorEngine
from .harmony import PaletteType


@dataclass(frozen=True)
class Palette:
    """Generated color palette.

    Attributes
    ----------
    palette_type:
        Strategy used to build the palette.
    base_color:
        Canonical base color, or None for random palettes.
    colors:
        Ordered ``#rrggbb`` strings. Position N (1-based) is "color N" in
        every export; for base-derived strategies other than
        MONOCHROMATIC, color 1 is the base itself.
    engine:
        ColorEngine that produced the colors; `details()` decodes with it.
        None means the default engine. Not part of equality.
    """

    palette_type: PaletteType
    base_color: Optional[str]
    colors: Tuple[str, ...]
    engine: Optional[ColorEngine] = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> str:
        return self.colors[index]

    def hex(self) -> List[str]:
        """Return the colors as a plain list of hex strings."""
        return list(self.colors)

    def details(self) -> List[Color]:
        """Decode every color into hex/RGB/HSL triples, in palette order."""
        return [Color.from_hex(c, engine=self.engine) for c in self.colors]
