"""Configuration records consumed by validators.

``ValidatorConfiguration`` names one validator and carries its property
overrides; ``Configuration`` holds the global settings (language, variant)
together with the list of validator configurations.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from proofreader.config.defaults import PROPERTY_LIST_SEPARATOR
from proofreader.config.settings import get_settings
from proofreader.models.base import BaseSchema

__all__ = [
    "Configuration",
    "Severity",
    "ValidatorConfiguration",
    "format_property_value",
]


class Severity(str, Enum):
    """Severity attached to issues reported by a validator."""

    error = "error"
    warning = "warning"
    info = "info"


def format_property_value(value: Any) -> str:
    """Render a property value the way configuration files spell it.

    Sequences become a single comma-joined string; booleans are lower-case;
    everything else uses ``str()``.

    Args:
        value: Scalar or iterable of scalars.

    Returns:
        The string form of the value.

    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (set, frozenset)):
        return PROPERTY_LIST_SEPARATOR.join(sorted(format_property_value(v) for v in value))
    if isinstance(value, Iterable):
        return PROPERTY_LIST_SEPARATOR.join(format_property_value(v) for v in value)
    return str(value)


class ValidatorConfiguration(BaseSchema):
    """Configuration for a single validator.

    Attributes:
        name: Canonical short name of the validator (e.g. ``SentenceLength``).
        properties: Property overrides, as strings.
        level: Severity of the issues this validator reports.

    """

    # Property values such as " " are meaningful
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=False, extra="forbid")

    name: str = Field(
        ...,
        min_length=1,
        description="Canonical short name of the validator",
    )
    properties: dict[str, str] = Field(
        default_factory=dict,
        description="Property overrides keyed by property name",
    )
    level: Severity = Field(
        default=Severity.error,
        description="Severity of reported issues",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names with surrounding whitespace or dots."""
        if v != v.strip() or "." in v:
            raise ValueError(f"Invalid validator name: {v!r}")
        return v

    @field_validator("properties", mode="before")
    @classmethod
    def stringify_properties(cls, v: Any) -> Any:
        """Accept scalar and list values, storing their string form."""
        if isinstance(v, dict):
            return {str(key): format_property_value(value) for key, value in v.items()}
        return v

    def get_property(self, name: str, default: str | None = None) -> str | None:
        """Return the override for *name*, or *default* when absent."""
        return self.properties.get(name, default)


def _default_lang() -> str:
    return get_settings().lang


def _default_variant() -> str:
    return get_settings().variant


class Configuration(BaseSchema):
    """Global settings shared by every validator in a run.

    Attributes:
        lang: Language code of the documents being checked.
        variant: Optional language variant (e.g. ``zenkaku``).
        validator_configs: Validators enabled for the run, in order.

    """

    lang: str = Field(
        default_factory=_default_lang,
        min_length=1,
        description="Language code of the documents being checked",
    )
    variant: str = Field(
        default_factory=_default_variant,
        description="Language variant",
    )
    validator_configs: list[ValidatorConfiguration] = Field(
        default_factory=list,
        description="Validators enabled for the run",
    )

    @classmethod
    def for_validator(cls, name: str) -> Configuration:
        """Build the minimal configuration holding a single validator.

        Args:
            name: Canonical short name of the validator.

        Returns:
            Configuration with default global settings and one validator
            configuration without overrides.

        """
        return cls(validator_configs=[ValidatorConfiguration(name=name)])

    def get_validator_config(self, name: str) -> ValidatorConfiguration | None:
        """Find the configuration for *name*, if the run enables it."""
        for config in self.validator_configs:
            if config.name == name:
                return config
        return None
