"""Base command class for CLI commands.

This module defines the abstract base class for CLI commands
following the Command pattern.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

from pydantic import ValidationError

from proofreader.config.exceptions import ConfigurationError
from proofreader.config.loader import load_configuration
from proofreader.config.models import Configuration, Severity, ValidatorConfiguration
from proofreader.models.base import BaseSchema
from proofreader.validator.exceptions import NoSuchValidatorError

__all__ = [
    "BaseCommand",
    "CommandResult",
    "build_configuration",
    "build_validator_configuration",
]


class CommandResult(BaseSchema):
    """Result of a command execution.

    Attributes:
        exit_code: Exit code for the CLI (0 for success).
        output: Text to print on stdout.
        message: Optional message to display.

    """

    exit_code: int
    output: str = ""
    message: str | None = None


def build_configuration(args: Namespace) -> Configuration:
    """Build the global configuration from ``--config`` and ``--lang``.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The configuration file's contents (or defaults), with ``--lang``
        taking precedence over the file's language.

    Raises:
        ConfigurationError: If the file is invalid or ``--lang`` is blank.

    """
    config_path = getattr(args, "config", None)
    configuration = load_configuration(config_path) if config_path else Configuration()

    lang = getattr(args, "lang", None)
    if lang is not None:
        try:
            configuration = Configuration.model_validate(
                {**configuration.model_dump(), "lang": lang}
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid language {lang!r}: {e}") from e
    return configuration


def build_validator_configuration(
    name: str,
    properties: dict[str, str] | None = None,
    level: Severity = Severity.error,
) -> ValidatorConfiguration:
    """Build a validator configuration from user input.

    Args:
        name: Validator name as typed by the user.
        properties: Property overrides.
        level: Severity of reported issues.

    Returns:
        The validated configuration record.

    Raises:
        NoSuchValidatorError: If *name* cannot be a validator name.
        ConfigurationError: If the overrides are invalid.

    """
    try:
        return ValidatorConfiguration(name=name, properties=properties or {}, level=level)
    except ValidationError as e:
        if any(error["loc"][:1] == ("name",) for error in e.errors()):
            raise NoSuchValidatorError(name) from None
        raise ConfigurationError(f"Invalid configuration for validator '{name}': {e}") from e


class BaseCommand(ABC):
    """Abstract base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the command name for logging and display."""
        pass

    @abstractmethod
    def execute(self, args: Namespace) -> CommandResult:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            CommandResult with exit code and output.

        """
        pass
