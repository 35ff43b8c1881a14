"""
Configuration management for ShadowScore library.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the SHADOWSCORE_ prefix.
"""

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ShadowScoreSettings(BaseSettings):
    """
    Configuration settings for ShadowScore library.

    All settings can be overridden via environment variables with SHADOWSCORE_ prefix.

    Example:
        export SHADOWSCORE_STORE_PATH="~/.shadowscore/sessions.json"
        export SHADOWSCORE_GOOD_THRESHOLD="75"
    """

    model_config = SettingsConfigDict(
        env_prefix="SHADOWSCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Storage Settings ============

    store_path: Path = Field(
        default=Path("practice_sessions.json"),
        description="JSON document holding every saved practice session",
    )

    store_indent: int = Field(
        default=2,
        description="Indentation used when rewriting the session store",
        ge=0,
        le=8,
    )

    # ============ Feedback Settings ============

    excellent_threshold: float = Field(
        default=90.0,
        description="Minimum accuracy (percent) for the excellent tier",
        ge=0.0,
        le=100.0,
    )

    good_threshold: float = Field(
        default=70.0,
        description="Minimum accuracy (percent) for the good tier",
        ge=0.0,
        le=100.0,
    )

    fair_threshold: float = Field(
        default=50.0,
        description="Minimum accuracy (percent) for the fair tier",
        ge=0.0,
        le=100.0,
    )

    # ============ Validators ============

    @field_validator("store_path", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects, expanding ``~``."""
        if isinstance(v, str):
            v = Path(v)
        return v.expanduser()

    @model_validator(mode="after")
    def thresholds_descending(self) -> "ShadowScoreSettings":
        """Tier thresholds must not overlap."""
        if not (self.excellent_threshold >= self.good_threshold >= self.fair_threshold):
            raise ValueError(
                "thresholds must satisfy excellent >= good >= fair"
            )
        return self


# Default settings instance
_default_settings: ShadowScoreSettings | None = None


def get_settings() -> ShadowScoreSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        ShadowScoreSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = ShadowScoreSettings()
    return _default_settings


def configure(**kwargs) -> ShadowScoreSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        ShadowScoreSettings: The new settings instance
    """
    global _default_settings
    _default_settings = ShadowScoreSettings(**kwargs)
    return _default_settings
