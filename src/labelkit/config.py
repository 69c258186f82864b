"""Settings for label defaults and color derivation.

Loaded with pydantic-settings from ``LABELKIT_*`` environment variables and an
optional ``.env`` file. A host editor that wants different visual defaults for
every label sets them here instead of on each label.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


class LabelSettings(BaseSettings):
    """Defaults applied to labels that don't set the attribute themselves.

    Environment Variables:
        LABELKIT_LABEL_BACKGROUND: Placeholder background of a label whose color
            has not been derived yet (default: #36B37E)
        LABELKIT_ALIAS_STYLE: CSS style of the alias hint (default: opacity: 0.6)
        LABELKIT_SIZE: Text size hint (default: medium)
        LABELKIT_SELECTED_COLOR: Text color of a selected label (default: white)
        LABELKIT_COLOR_SATURATION: Saturation of derived colors, 0.0-1.0 (default: 0.5)
        LABELKIT_COLOR_VALUE: Brightness of derived colors, 0.0-1.0 (default: 0.95)

    Example:
        >>> settings = LabelSettings()
        >>> settings = LabelSettings(_env_file=".env")
    """

    model_config = SettingsConfigDict(
        env_prefix="LABELKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    label_background: str = Field(
        default="#36B37E",
        description="Placeholder background until a color is derived",
    )
    alias_style: str = Field(default="opacity: 0.6", description="Alias CSS style")
    size: str = Field(default="medium", description="Text size hint")
    selected_color: str = Field(default="white", description="Text color when selected")

    color_saturation: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Saturation of colors derived from label values",
    )
    color_value: float = Field(
        default=0.95,
        ge=0.0,
        le=1.0,
        description="Brightness of colors derived from label values",
    )

    @field_validator("label_background")
    @classmethod
    def background_is_hex(cls, v: str) -> str:
        """Validate that the placeholder background is a hex color."""
        v = v.strip()
        if not _HEX_COLOR.match(v):
            raise ValueError(f"label_background must be a hex color, got {v!r}")
        return v


@lru_cache
def get_settings() -> LabelSettings:
    """Get cached settings singleton.

    To reload, call get_settings.cache_clear() first.

    Returns:
        LabelSettings instance with values from the environment.
    """
    settings = LabelSettings()
    logger.debug("Loaded label settings: %s", settings)
    return settings
