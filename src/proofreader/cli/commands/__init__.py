"""CLI command implementations.

This module exports the command classes for the CLI.
"""

from proofreader.cli.commands.base import (
    BaseCommand,
    CommandResult,
    build_configuration,
    build_validator_configuration,
)
from proofreader.cli.commands.check import CheckTextCommand
from proofreader.cli.commands.list_validators import ListValidatorsCommand
from proofreader.cli.commands.show import ShowValidatorCommand

__all__ = [
    "BaseCommand",
    "CheckTextCommand",
    "CommandResult",
    "ListValidatorsCommand",
    "ShowValidatorCommand",
    "build_configuration",
    "build_validator_configuration",
]
