"""Public entrypoint for the huepal palette library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette`` instead of individual
submodules.
"""

from .color_types import HSL, RGB, Color, InvalidHexFormat, is_valid_hex, parse_hex
from .engine import (
    ColorEngine,
    DefaultColorEngine,
    format_hsl,
    format_rgb,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    rgb_to_hex,
)
from .harmony import (
    PaletteType,
    RandomSource,
    generate_complementary_palette,
    generate_harmonious_palette,
    generate_monochromatic_palette,
    generate_random_color,
    generate_random_palette,
)
from .palette import Palette
from .api import generate_palette
from .ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    PALETTE_TYPE_OPTIONS,
    ExportFormat,
    export_palette,
    write_palette,
)

__all__ = [
    "HSL",
    "RGB",
    "Color",
    "InvalidHexFormat",
    "is_valid_hex",
    "parse_hex",
    "ColorEngine",
    "DefaultColorEngine",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "rgb_to_hex",
    "format_hsl",
    "format_rgb",
    "PaletteType",
    "RandomSource",
    "generate_random_color",
    "generate_random_palette",
    "generate_harmonious_palette",
    "generate_complementary_palette",
    "generate_monochromatic_palette",
    "Palette",
    "generate_palette",
    "ExportFormat",
    "export_palette",
    "write_palette",
    "PALETTE_TYPE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
