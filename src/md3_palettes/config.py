"""Seed color settings via pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from md3_palettes.color import parse_argb

DEFAULT_PRIMARY = 0xFF6750A4
DEFAULT_SECONDARY = 0xFF625B71
DEFAULT_TERTIARY = 0xFF7D5260
DEFAULT_ERROR = 0xFFB3261E
DEFAULT_NEUTRAL = 0xFF787579
DEFAULT_NEUTRAL_VARIANT = 0xFF79747E


class Settings(BaseSettings):
    """Palette configuration, overridable via MD3_ env vars or .env file.

    Seeds accept ints or hex strings such as ``#6750A4`` or ``0xFF6750A4``.
    """

    model_config = SettingsConfigDict(env_prefix="MD3_", env_file=".env")

    primary: int = DEFAULT_PRIMARY
    secondary: int = DEFAULT_SECONDARY
    tertiary: int = DEFAULT_TERTIARY
    neutral: int = DEFAULT_NEUTRAL
    neutral_variant: int = DEFAULT_NEUTRAL_VARIANT
    error: int = DEFAULT_ERROR
    custom: int | None = None
    dark: bool = False

    @field_validator(
        "primary",
        "secondary",
        "tertiary",
        "neutral",
        "neutral_variant",
        "error",
        "custom",
        mode="before",
    )
    @classmethod
    def _parse_seed(cls, value: object) -> object:
        """Turn hex strings into ARGB ints; leave other values to pydantic."""
        if value is None or value == "":
            return None
        if isinstance(value, str | int) and not isinstance(value, bool):
            return parse_argb(value)
        return value


settings = Settings()
