"""Application configuration via pydantic-settings."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from launchpilot.models.catalog import HeroLayout


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LAUNCHPILOT_",
        extra="ignore",
    )

    # Composition defaults (empty id -> catalog default)
    default_tone_id: str = ""
    default_theme_id: str = ""
    default_hero_layout: HeroLayout = HeroLayout.SPLIT

    # Export
    output_dir: Path = Path("./exports")

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000
