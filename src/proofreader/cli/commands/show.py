"""Show validator command implementation."""

from argparse import Namespace

from proofreader.cli.commands.base import (
    BaseCommand,
    CommandResult,
    build_configuration,
    build_validator_configuration,
)
from proofreader.cli.formatters import format_validator
from proofreader.cli.validators import parse_overrides
from proofreader.config.models import Severity
from proofreader.validator.factory import get_instance

__all__ = ["ShowValidatorCommand"]


class ShowValidatorCommand(BaseCommand):
    """Command to build one validator and print its bound properties."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "show"

    def execute(self, args: Namespace) -> CommandResult:
        """Execute the show command.

        Overrides from the configuration file apply first, then ``--set``.

        Args:
            args: Parsed arguments with the validator name and overrides.

        Returns:
            CommandResult with the formatted validator.

        """
        configuration = build_configuration(args)

        existing = configuration.get_validator_config(args.show)
        properties = dict(existing.properties) if existing else {}
        properties.update(parse_overrides(getattr(args, "overrides", [])))

        config = build_validator_configuration(
            args.show,
            properties,
            existing.level if existing else Severity.error,
        )
        validator = get_instance(config, configuration)

        return CommandResult(
            exit_code=0,
            output=format_validator(validator, json_output=getattr(args, "json_output", False)),
        )
