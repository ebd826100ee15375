"""Application settings using pydantic-settings.

Settings can be overridden via environment variables with the
``PROOFREADER_`` prefix.

Environment Variables:
    PROOFREADER_LANG: Default document language
    PROOFREADER_VARIANT: Default language variant
    PROOFREADER_ENTRY_POINT_GROUP: Entry-point group scanned for plugin validators
    PROOFREADER_LOAD_ENTRY_POINTS: Whether to scan that group at all
    PROOFREADER_VERBOSE: Debug logging for the CLI
    PROOFREADER_JSON_LOGS: JSON log output for the CLI
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from proofreader.config.defaults import (
    DEFAULT_ENTRY_POINT_GROUP,
    DEFAULT_LANG,
    DEFAULT_VARIANT,
)

__all__ = [
    "ProofreaderSettings",
    "get_settings",
]


class ProofreaderSettings(BaseSettings):
    """Process-wide settings.

    Attributes:
        lang: Default language code used when no configuration names one.
        variant: Default language variant.
        entry_point_group: Entry-point group scanned for plugin validators.
        load_entry_points: Whether discovery scans installed entry points.
        verbose: Enable debug logging in the CLI.
        json_logs: Emit JSON logs in the CLI.

    """

    model_config = SettingsConfigDict(
        env_prefix="PROOFREADER_",
        extra="ignore",
    )

    lang: str = Field(
        default=DEFAULT_LANG,
        min_length=1,
        description="Default language code",
    )
    variant: str = Field(
        default=DEFAULT_VARIANT,
        description="Default language variant",
    )
    entry_point_group: str = Field(
        default=DEFAULT_ENTRY_POINT_GROUP,
        min_length=1,
        description="Entry-point group scanned for plugin validators",
    )
    load_entry_points: bool = Field(
        default=True,
        description="Whether discovery loads validators from installed entry points",
    )
    verbose: bool = Field(
        default=False,
        description="Enable debug logging",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit logs as JSON",
    )


@lru_cache(maxsize=1)
def get_settings() -> ProofreaderSettings:
    """Get the cached settings singleton.

    Returns:
        The ProofreaderSettings instance with values from environment variables.

    """
    return ProofreaderSettings()
