"""Design tokens: single source of truth for spacing, sizing, typography.

Color tokens live in theme.py (ThemePalette). Layout tokens live here.

Usage:
    from soundsnacks.ui.tokens import spacing, typography, sizing

    layout.setContentsMargins(spacing.sm, spacing.sm, spacing.sm, spacing.sm)
    header.setStyleSheet(f"font-size: {typography.title}pt;")
    tile.setFixedSize(sizing.tile_width, sizing.tile_height)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SpacingTokens:
    """Spacing scale based on a 4px base unit."""

    xxs: int = 1  # Tight: inner padding
    xs: int = 2  # Default: margins, small gaps
    sm: int = 4  # Comfortable: tile padding, between elements
    md: int = 8  # Loose: between tiles, section gaps
    lg: int = 12  # Spacious: panel padding
    xl: int = 16  # Layout: between major sections


@dataclass(frozen=True)
class TypographyTokens:
    """Font size scale in points and font family stack."""

    font_family: str = "'SF Pro Text', 'Segoe UI', 'Helvetica Neue', sans-serif"
    caption: int = 9  # Category label on tiles
    small: int = 10  # Status text
    body: int = 11  # Default body text
    subtitle: int = 12  # Toolbar, secondary headers
    title: int = 13  # Tile description, panel headers
    heading: int = 15  # Dialog titles


@dataclass(frozen=True)
class SizingTokens:
    """Widget sizing constants in pixels."""

    border_radius_sm: int = 2  # Badges, small elements
    border_radius_md: int = 6  # Buttons, inputs
    border_radius_lg: int = 10  # Tiles, dialogs
    icon_sm: int = 16  # Inline icons
    icon_md: int = 24  # Toolbar icons
    swatch: int = 20  # Category color swatch
    tile_width: int = 160  # Sound tile
    tile_height: int = 110  # Sound tile
    tile_border_active: int = 3  # Border of the playing/paused tile
    drag_threshold: int = 10  # Pixels before a press becomes a drag
    scrollbar_width: int = 8  # Scrollbar track width/height
    scrollbar_min_handle: int = 20  # Min scrollbar handle dimension


# Module-level singletons, import these in widgets
spacing = SpacingTokens()
typography = TypographyTokens()
sizing = SizingTokens()
