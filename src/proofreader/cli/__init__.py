"""CLI package for proofreader.

This package provides the command-line interface for listing, inspecting
and running validators. It implements the Command pattern for the
different operations (list, show, check).
"""

from proofreader.cli.commands import (
    BaseCommand,
    CheckTextCommand,
    CommandResult,
    ListValidatorsCommand,
    ShowValidatorCommand,
)
from proofreader.cli.formatters import format_configurations, format_issues, format_validator
from proofreader.cli.main import CommandDispatcher, main
from proofreader.cli.parser import create_parser
from proofreader.cli.validators import parse_overrides, validate_args

__all__ = [
    "BaseCommand",
    "CheckTextCommand",
    "CommandDispatcher",
    "CommandResult",
    "ListValidatorsCommand",
    "ShowValidatorCommand",
    "create_parser",
    "format_configurations",
    "format_issues",
    "format_validator",
    "main",
    "parse_overrides",
    "validate_args",
]
