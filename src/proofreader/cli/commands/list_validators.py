"""List validators command implementation."""

from argparse import Namespace

from proofreader.cli.commands.base import BaseCommand, CommandResult, build_configuration
from proofreader.cli.formatters import format_configurations
from proofreader.validator.factory import get_configurations

__all__ = ["ListValidatorsCommand"]


class ListValidatorsCommand(BaseCommand):
    """Command to list the default configuration of applicable validators."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "list"

    def execute(self, args: Namespace) -> CommandResult:
        """Execute the list command.

        Args:
            args: Parsed arguments with optional lang and config.

        Returns:
            CommandResult with the formatted listing.

        """
        lang = build_configuration(args).lang
        configs = get_configurations(lang)
        return CommandResult(
            exit_code=0,
            output=format_configurations(
                configs, lang, json_output=getattr(args, "json_output", False)
            ),
        )
