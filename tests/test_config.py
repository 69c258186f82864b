"""Tests for label settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from labelkit.config import LabelSettings, get_settings


class TestLabelSettings:
    """Tests for LabelSettings."""

    def test_defaults(self) -> None:
        """Settings should carry the stock label defaults."""
        settings = LabelSettings(_env_file=None)

        assert settings.label_background == "#36B37E"
        assert settings.alias_style == "opacity: 0.6"
        assert settings.size == "medium"
        assert settings.selected_color == "white"
        assert settings.color_saturation == 0.5
        assert settings.color_value == 0.95

    def test_reads_environment(self, monkeypatch) -> None:
        """LABELKIT_* variables should override defaults."""
        monkeypatch.setenv("LABELKIT_LABEL_BACKGROUND", "#ABCDEF")
        monkeypatch.setenv("LABELKIT_ALIAS_STYLE", "opacity: 1")

        settings = LabelSettings(_env_file=None)

        assert settings.label_background == "#ABCDEF"
        assert settings.alias_style == "opacity: 1"

    def test_reads_env_file(self, tmp_path) -> None:
        """Values should be read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("LABELKIT_SIZE=small\n", encoding="utf-8")

        settings = LabelSettings(_env_file=env_file)

        assert settings.size == "small"

    def test_background_must_be_hex(self) -> None:
        """A non-hex placeholder background should be rejected."""
        with pytest.raises(ValidationError):
            LabelSettings(_env_file=None, label_background="green")

    def test_short_hex_background(self) -> None:
        """Three-digit hex colors should be accepted."""
        assert LabelSettings(_env_file=None, label_background=" #fff ").label_background == "#fff"

    @pytest.mark.parametrize("field", ["color_saturation", "color_value"])
    def test_color_bounds(self, field: str) -> None:
        """Color parameters should stay within 0..1."""
        with pytest.raises(ValidationError):
            LabelSettings(_env_file=None, **{field: 1.5})


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_cached(self) -> None:
        """get_settings should return the same instance until cleared."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch) -> None:
        """Clearing the cache should pick up new environment values."""
        first = get_settings()
        monkeypatch.setenv("LABELKIT_SIZE", "large")
        get_settings.cache_clear()

        assert get_settings() is not first
        assert get_settings().size == "large"
