"""Deterministic label colors.

Colors are derived from the label value so the same label gets the same color
on every load, and different labels spread around the hue circle.
"""

from __future__ import annotations

import colorsys
import hashlib

from labelkit.config import get_settings

GOLDEN_RATIO_CONJUGATE = 0.618033988749895


def _hue_for(seed: str) -> float:
    """Map a seed onto the hue circle.

    The first 8 bytes of the sha256 digest pick a starting point, which is then
    stepped once along the golden-ratio sequence.
    """
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    start = int.from_bytes(digest[:8], "big") / float(1 << 64)
    return (start + GOLDEN_RATIO_CONJUGATE) % 1.0


def color_for(
    seed: str | None,
    saturation: float | None = None,
    value: float | None = None,
) -> str:
    """Get the color for a seed as ``#rrggbb``.

    Args:
        seed: Seed text, usually the label value. None is treated as "".
        saturation: HSV saturation; defaults to settings.color_saturation.
        value: HSV value; defaults to settings.color_value.

    Returns:
        Lowercase hex color string.
    """
    settings = get_settings()
    if saturation is None:
        saturation = settings.color_saturation
    if value is None:
        value = settings.color_value

    r, g, b = colorsys.hsv_to_rgb(_hue_for(seed or ""), saturation, value)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"
