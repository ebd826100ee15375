"""Base abstractions for validators.

Every pluggable validator subclasses :class:`Validator`. A subclass declares
the languages it applies to and its configurable properties with their
defaults, and implements :meth:`Validator.validate`. The factory builds
validators with no arguments and then calls :meth:`Validator.pre_init` once
to bind configuration overrides.
"""

import copy
from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import Field

from proofreader.config.defaults import PROPERTY_LIST_SEPARATOR
from proofreader.config.exceptions import ConfigurationError
from proofreader.config.models import Configuration, Severity, ValidatorConfiguration
from proofreader.config.settings import get_settings
from proofreader.models.base import BaseSchema
from proofreader.validator.naming import validator_name

__all__ = [
    "PropertyValue",
    "ValidationIssue",
    "Validator",
]

PropertyValue = str | int | float | bool | list[str] | set[str] | frozenset[str]

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}


class ValidationIssue(BaseSchema):
    """A problem reported by a validator.

    Attributes:
        validator: Short name of the reporting validator.
        message: Human-readable description of the problem.
        level: Severity configured for the validator.
        start: Offset of the first offending character, if known.
        end: Offset just past the offending text, if known.

    """

    validator: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    level: Severity = Severity.error
    start: int | None = Field(default=None, ge=0)
    end: int | None = Field(default=None, ge=0)


def _split_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(PROPERTY_LIST_SEPARATOR) if item.strip()]


def _convert_property(owner: str, name: str, raw: str, default: PropertyValue) -> PropertyValue:
    """Convert a string override to the type of the property's default.

    Raises:
        ConfigurationError: If *raw* cannot be read as that type.

    """
    # bool before int: bool is an int subclass
    if isinstance(default, bool):
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"{owner}: property '{name}' expects a boolean, got {raw!r}")
    if isinstance(default, int):
        try:
            return int(raw.strip())
        except ValueError:
            raise ConfigurationError(
                f"{owner}: property '{name}' expects an integer, got {raw!r}"
            ) from None
    if isinstance(default, float):
        try:
            return float(raw.strip())
        except ValueError:
            raise ConfigurationError(
                f"{owner}: property '{name}' expects a number, got {raw!r}"
            ) from None
    if isinstance(default, str):
        return raw
    if isinstance(default, (set, frozenset)):
        return set(_split_list(raw))
    if isinstance(default, list):
        return _split_list(raw)
    raise ConfigurationError(
        f"{owner}: property '{name}' has unsupported default type {type(default).__name__}"
    )


class Validator(ABC):
    """Abstract base class for all validators.

    Subclasses must be constructible without arguments and should define
    these class variables:

    - ``supported_languages``: language codes the validator applies to;
      empty means every language.
    - ``default_properties``: configurable properties and their defaults.
      Values are scalars or lists/sets of strings.

    """

    supported_languages: ClassVar[frozenset[str]] = frozenset()
    default_properties: ClassVar[dict[str, PropertyValue]] = {}

    def __init__(self) -> None:
        """Initialize the validator with its default properties."""
        self._properties: dict[str, PropertyValue] = copy.deepcopy(dict(self.default_properties))
        self._config: ValidatorConfiguration | None = None
        self._global_config: Configuration | None = None

    @property
    def name(self) -> str:
        """Canonical short name of this validator."""
        return validator_name(type(self))

    @property
    def properties(self) -> dict[str, PropertyValue]:
        """Current property values (the defaults until ``pre_init`` runs)."""
        return copy.deepcopy(self._properties)

    @property
    def config(self) -> ValidatorConfiguration | None:
        """Configuration bound by ``pre_init``, if any."""
        return self._config

    @property
    def global_config(self) -> Configuration | None:
        """Global configuration bound by ``pre_init``, if any."""
        return self._global_config

    @property
    def lang(self) -> str:
        """Language of the current run."""
        if self._global_config is not None:
            return self._global_config.lang
        return get_settings().lang

    @property
    def level(self) -> Severity:
        """Severity attached to reported issues."""
        if self._config is not None:
            return self._config.level
        return Severity.error

    def supports_language(self, lang: str) -> bool:
        """Check if this validator applies to documents in *lang*."""
        supported = self.supported_languages
        return not supported or lang in supported

    def pre_init(self, config: ValidatorConfiguration, global_config: Configuration) -> None:
        """Bind configuration overrides onto this instance.

        Called once by the factory, right after construction. The records are
        copied, so later changes to them do not reach this instance.

        Args:
            config: This validator's configuration record.
            global_config: Global settings for the run.

        Raises:
            ConfigurationError: If an override names an unknown property,
                cannot be converted, or ``init`` rejects the combination.

        """
        self._config = config.model_copy(deep=True)
        self._global_config = global_config.model_copy(deep=True)

        properties = copy.deepcopy(dict(self.default_properties))
        for key, raw in self._config.properties.items():
            if key not in properties:
                raise ConfigurationError(f"{self.name}: unknown property '{key}'")
            properties[key] = _convert_property(self.name, key, raw, properties[key])
        self._properties = properties

        self.init()

    def init(self) -> None:
        """Hook for subclasses to check their bound properties.

        Raise :class:`ConfigurationError` for unsupported values.
        """

    def get_int(self, name: str) -> int:
        return int(self._properties[name])

    def get_float(self, name: str) -> float:
        return float(self._properties[name])

    def get_boolean(self, name: str) -> bool:
        return bool(self._properties[name])

    def get_string(self, name: str) -> str:
        return str(self._properties[name])

    def get_list(self, name: str) -> list[str]:
        return list(self._properties[name])

    def get_set(self, name: str) -> set[str]:
        return set(self._properties[name])

    def issue(
        self,
        message: str,
        start: int | None = None,
        end: int | None = None,
    ) -> ValidationIssue:
        """Build an issue attributed to this validator."""
        return ValidationIssue(
            validator=self.name,
            message=message,
            level=self.level,
            start=start,
            end=end,
        )

    @abstractmethod
    def validate(self, sentence: str) -> list[ValidationIssue]:
        """Check a piece of text.

        Args:
            sentence: The text to check.

        Returns:
            List of issues found, empty when the text passes.

        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(properties={self._properties!r})"
