"""Hex color helpers for category swatches and tile text contrast."""

from __future__ import annotations

import re

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

# sRGB linearization constants (WCAG 2.x relative luminance)
_SRGB_THRESHOLD = 0.03928
_LUMINANCE_MIDPOINT = 0.179

FALLBACK_COLOR = "#808080"


def normalize_hex(value: str) -> str:
    """Return ``value`` as an upper-case ``#RRGGBB`` string.

    Args:
        value: Color string with or without the leading ``#``.

    Returns:
        Normalized color string.

    Raises:
        ValueError: If the value is not a 6-digit hex color.
    """
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")
    return f"#{match.group(1).upper()}"


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Split a hex color into its 0-255 RGB components."""
    digits = normalize_hex(value)[1:]
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """Build a ``#RRGGBB`` string, clamping each channel to 0-255."""
    channels = (max(0, min(255, c)) for c in (red, green, blue))
    return "#" + "".join(f"{c:02X}" for c in channels)


def _linear(channel: int) -> float:
    c = channel / 255
    if c <= _SRGB_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(value: str) -> float:
    """Return the WCAG relative luminance (0.0 black, 1.0 white)."""
    r, g, b = hex_to_rgb(value)
    return 0.2126 * _linear(r) + 0.7152 * _linear(g) + 0.0722 * _linear(b)


def contrast_ratio(first: str, second: str) -> float:
    """Return the WCAG contrast ratio between two colors (1.0 to 21.0)."""
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def text_color_for(background: str) -> str:
    """Pick black or white text, whichever reads better on ``background``."""
    return "#000000" if relative_luminance(background) > _LUMINANCE_MIDPOINT else "#FFFFFF"


def shade(value: str, factor: float) -> str:
    """Scale a color towards black (factor < 1) or white (factor > 1).

    Used for hover and pressed variants of category tiles.
    """
    r, g, b = hex_to_rgb(value)
    if factor <= 1:
        return rgb_to_hex(int(r * factor), int(g * factor), int(b * factor))
    mix = factor - 1
    return rgb_to_hex(
        int(r + (255 - r) * mix),
        int(g + (255 - g) * mix),
        int(b + (255 - b) * mix),
    )
