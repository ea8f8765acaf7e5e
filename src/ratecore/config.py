"""Configuration system using pydantic-settings with environment variable loading.

Settings only shape the outer surfaces (logging, CLI output). Nothing here
changes the fixed-point arithmetic, which is fixed by the on-chain engine.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class CliSettings(BaseSettings):
    """Command-line output settings."""

    model_config = SettingsConfigDict(env_prefix="RATECORE_CLI_")

    indent: int | None = 2  # None prints compact single-line JSON
    default_payoff_decimals: int = 0  # decimal_shift exponent when a payload omits it


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_prefix="RATECORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"
    cli: CliSettings = CliSettings()
