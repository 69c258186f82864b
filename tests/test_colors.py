"""Tests for deterministic label colors."""

from __future__ import annotations

import re

from labelkit.colors import color_for

HEX = re.compile(r"^#[0-9a-f]{6}$")


class TestColorFor:
    """Tests for color_for."""

    def test_hex_format(self) -> None:
        """Colors should be lowercase #rrggbb strings."""
        for seed in ("Brand", "Product", "", "ünïcødé", "a" * 500):
            assert HEX.match(color_for(seed))

    def test_deterministic(self) -> None:
        """The same seed should always give the same color."""
        assert color_for("Brand") == color_for("Brand")

    def test_distinct_seeds(self) -> None:
        """Different label values should get different colors."""
        colors = {color_for(seed) for seed in ("Brand", "Product", "Person", "Location")}

        assert len(colors) == 4

    def test_none_is_empty_seed(self) -> None:
        """A missing seed should be treated as an empty string."""
        assert color_for(None) == color_for("")

    def test_zero_saturation_is_grey(self) -> None:
        """With no saturation every seed should map to the same grey."""
        assert color_for("Brand", saturation=0.0, value=0.95) == "#f2f2f2"
        assert color_for("Product", saturation=0.0, value=0.95) == "#f2f2f2"

    def test_zero_value_is_black(self) -> None:
        """With no brightness every color should be black."""
        assert color_for("Brand", value=0.0) == "#000000"

    def test_settings_apply(self, monkeypatch) -> None:
        """Saturation and value should default to the settings."""
        monkeypatch.setenv("LABELKIT_COLOR_SATURATION", "0")
        monkeypatch.setenv("LABELKIT_COLOR_VALUE", "1")

        assert color_for("Brand") == "#ffffff"
