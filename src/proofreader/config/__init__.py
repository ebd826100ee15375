"""Configuration records, settings and the YAML loader.

Validators receive a ``ValidatorConfiguration`` (their own overrides) and a
``Configuration`` (global settings) at construction time. Process-wide
defaults come from pydantic-settings.
"""

from proofreader.config.exceptions import ConfigurationError
from proofreader.config.loader import load_configuration, parse_configuration
from proofreader.config.models import (
    Configuration,
    Severity,
    ValidatorConfiguration,
    format_property_value,
)
from proofreader.config.settings import ProofreaderSettings, get_settings

__all__ = [
    "Configuration",
    "ConfigurationError",
    "ProofreaderSettings",
    "Severity",
    "ValidatorConfiguration",
    "format_property_value",
    "get_settings",
    "load_configuration",
    "parse_configuration",
]
