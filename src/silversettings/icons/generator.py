"""Render the silver and silver-dark system icon sets with Pillow.

Each set holds one application icon per size: a small window whose
titlebar color, corner radius and button shape follow the current
decoration settings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from PIL import Image, ImageColor, ImageDraw

from silversettings.constants import APP_NAME, DARK_ICON_THEME, ICON_SIZES, LIGHT_ICON_THEME
from silversettings.settings.decoration import DecorationSettings
from silversettings.utils.file import atomic_write_text, ensure_directory_exists

logger: Final = logging.getLogger(__name__)

INDEX_THEME_TEMPLATE: Final = """[Icon Theme]
Name={name}
Comment=Generated by {app}
Inherits={inherits}
Directories={directories}
"""


@dataclass(frozen=True)
class IconPalette:
    """Colors for one icon theme variant."""

    theme: str
    inherits: str
    window: str
    glyph: str


LIGHT_PALETTE: Final = IconPalette(LIGHT_ICON_THEME, "breeze", "#fcfcfc", "#232629")
DARK_PALETTE: Final = IconPalette(DARK_ICON_THEME, "breeze-dark", "#2a2e32", "#fcfcfc")


class SystemIconGenerator:
    """Generate the light and dark system icon themes from decoration settings."""

    def __init__(
        self,
        settings: DecorationSettings,
        output_dir: Path,
        sizes: tuple[int, ...] = ICON_SIZES,
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Snapshot of the live settings to draw from
            output_dir: Icon base directory (one sub-directory per theme)
            sizes: Icon sizes in pixels
        """
        self.settings = settings.model_copy()
        self.output_dir = output_dir
        self.sizes = sizes

    def generate(self) -> list[Path]:
        """Write both icon themes.

        Returns:
            Paths of the files written (empty if generation is turned off)
        """
        if not self.settings.system_icon_generation:
            logger.info("System icon generation is disabled; skipping")
            return []

        written: list[Path] = []
        for palette in (LIGHT_PALETTE, DARK_PALETTE):
            written.extend(self._generate_theme(palette))
        logger.info("Generated %d system icon files in %s", len(written), self.output_dir)
        return written

    def _generate_theme(self, palette: IconPalette) -> list[Path]:
        theme_dir = self.output_dir / palette.theme
        written: list[Path] = []
        for size in self.sizes:
            png_path = theme_dir / f"{size}x{size}" / "apps" / f"{APP_NAME}.png"
            ensure_directory_exists(png_path.parent)
            self.render_icon(size, palette).save(png_path, format="PNG")
            written.append(png_path)

        index_path = theme_dir / "index.theme"
        atomic_write_text(
            index_path,
            INDEX_THEME_TEMPLATE.format(
                name=palette.theme,
                app=APP_NAME,
                inherits=palette.inherits,
                directories=",".join(f"{s}x{s}/apps" for s in self.sizes),
            ),
        )
        written.append(index_path)
        return written

    def render_icon(self, size: int, palette: IconPalette) -> Image.Image:
        """Draw one icon.

        Args:
            size: Width and height in pixels
            palette: Theme colors

        Returns:
            RGBA image of ``size`` x ``size``
        """
        s = self.settings
        image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
        draw = ImageDraw.Draw(image)

        scale = size / 48
        radius = min(max(0, round(s.window_corner_radius * scale)), (size - 1) // 2)
        line = max(1, round(s.icon_line_width * scale))
        titlebar_height = max(3, round(size * 0.3))
        box = (0, 0, size - 1, size - 1)

        draw.rounded_rectangle(box, radius=radius, fill=palette.window, outline=palette.glyph, width=line)

        alpha = round(255 * s.titlebar_opacity / 100)
        titlebar = ImageColor.getrgb(s.active_titlebar_color)[:3] + (alpha,)
        # square off the lower corners of the titlebar
        draw.rounded_rectangle(
            (0, 0, size - 1, titlebar_height), radius=min(radius, titlebar_height // 2), fill=titlebar
        )
        draw.rectangle((0, titlebar_height // 2, size - 1, titlebar_height), fill=titlebar)
        if s.draw_titlebar_separator:
            draw.line((0, titlebar_height, size - 1, titlebar_height), fill=palette.glyph, width=1)

        self._draw_buttons(draw, size, titlebar_height, palette)
        return image

    def _draw_buttons(
        self, draw: ImageDraw.ImageDraw, size: int, titlebar_height: int, palette: IconPalette
    ) -> None:
        s = self.settings
        small = s.button_shape.startswith("small_")
        diameter = max(2, round(titlebar_height * (0.45 if small else 0.65)))
        gap = max(1, round(s.button_spacing * size / 48))
        top = (titlebar_height - diameter) // 2
        right = size - 1 - max(1, round(size * 0.06))

        for _ in range(3):
            left = right - diameter
            bounds = (left, top, right, top + diameter)
            if s.button_shape.endswith("circle"):
                draw.ellipse(bounds, fill=palette.glyph)
            else:
                draw.rectangle(bounds, fill=palette.glyph)
            right = left - gap
