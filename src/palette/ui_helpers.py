from __future__ import annotations

"""Helper utilities for integrating huepal into external UIs.

This module exposes label/enum pairs for palette types and export formats,
and provides `export_palette` / `write_palette` to serialise a Palette into
CSS custom properties, SCSS variables or a JSON document. All formats are
order-preserving maps over the palette: entry N is "color N".
"""

import json
import logging
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from .engine import format_hsl, format_rgb
from .harmony import PaletteType
from .palette import Palette

logger = logging.getLogger(__name__)


class ExportFormat(Enum):
    """Supported palette export formats."""

    CSS = "css"
    SCSS = "scss"
    JSON = "json"

    @property
    def extension(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == str(value).strip().lower():
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
PALETTE_TYPE_OPTIONS: List[tuple[str, PaletteType]] = [
    ("Generate Random", PaletteType.RANDOM),
    ("From Base Color", PaletteType.HARMONIOUS),
    ("Complementary", PaletteType.COMPLEMENTARY),
    ("Monochromatic", PaletteType.MONOCHROMATIC),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("CSS", ExportFormat.CSS),
    ("SCSS", ExportFormat.SCSS),
    ("JSON", ExportFormat.JSON),
]

PALETTE_TYPE_LABEL_MAP: Dict[str, PaletteType] = {
    label: value for label, value in PALETTE_TYPE_OPTIONS
}


def _to_css(palette: Palette) -> str:
    lines = [f"  --color-{i}: {c};" for i, c in enumerate(palette.colors, start=1)]
    return ":root {\n" + "\n".join(lines) + "\n}"


def _to_scss(palette: Palette) -> str:
    return "\n".join(f"$color-{i}: {c};" for i, c in enumerate(palette.colors, start=1))


def _to_json(palette: Palette, name: str) -> str:
    entries = []
    for i, color in enumerate(palette.details(), start=1):
        entries.append(
            {
                "name": f"Color {i}",
                "hex": color.hex,
                "rgb": format_rgb(color.rgb),
                "hsl": format_hsl(color.hsl),
            }
        )
    return json.dumps({"name": name, "colors": entries}, indent=2, ensure_ascii=False)


def export_palette(
    palette: Palette,
    fmt: ExportFormat | str,
    *,
    name: Optional[str] = None,
    today: Optional[date] = None,
) -> str:
    """Serialise a Palette into the requested textual format.

    ``name`` only affects JSON and defaults to ``"Palette YYYY-MM-DD"``.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.CSS:
        return _to_css(palette)
    if export_fmt == ExportFormat.SCSS:
        return _to_scss(palette)
    if export_fmt == ExportFormat.JSON:
        stamp = (today or date.today()).isoformat()
        return _to_json(palette, name or f"Palette {stamp}")
    raise ValueError(f"Unsupported export format: {fmt}")


def export_filename(fmt: ExportFormat | str, today: Optional[date] = None) -> str:
    """Return ``palette-YYYY-MM-DD.<ext>``."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    stamp = (today or date.today()).isoformat()
    return f"palette-{stamp}.{export_fmt.extension}"


def write_palette(
    palette: Palette,
    fmt: ExportFormat | str,
    out_dir: Optional[Path] = None,
    *,
    today: Optional[date] = None,
) -> Path:
    """Write the exported palette to ``out_dir`` and return the file path.

    - Without ``out_dir``, `util.paths.ensure_palette_dir()` is used.
    - Existing files with the same name are overwritten unless
      `HUEPAL_EXPORT_OVERWRITE` is disabled, in which case FileExistsError
      is raised.
    """
    from common import settings
    from util.paths import ensure_palette_dir

    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if out_dir is None:
        target_dir = ensure_palette_dir()
    else:
        target_dir = Path(out_dir)
        target_dir.mkdir(parents=True, exist_ok=True)

    content = export_palette(palette, export_fmt, today=today)
    path = target_dir / export_filename(export_fmt, today)
    if path.exists() and not settings.get().EXPORT_OVERWRITE:
        raise FileExistsError(f"refusing to overwrite existing export: {path}")
    path.write_text(content + "\n", encoding="utf-8")
    logger.info("exported %d colors as %s to %s", len(palette), export_fmt.value, path)
    return path


__all__ = [
    "ExportFormat",
    "PALETTE_TYPE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "PALETTE_TYPE_LABEL_MAP",
    "export_palette",
    "export_filename",
    "write_palette",
]
