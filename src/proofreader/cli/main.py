"""CLI main entry point.

This module provides the main entry point for the proofreader CLI.
"""

import argparse
import sys
import traceback

from proofreader.cli.commands import (
    CheckTextCommand,
    CommandResult,
    ListValidatorsCommand,
    ShowValidatorCommand,
)
from proofreader.cli.parser import create_parser
from proofreader.cli.validators import validate_args
from proofreader.config.settings import get_settings
from proofreader.exceptions import ProofreaderError
from proofreader.logging_config import configure_logging, get_logger

__all__ = ["main", "CommandDispatcher"]

logger = get_logger(__name__)


class CommandDispatcher:
    """Dispatches CLI commands to appropriate handlers.

    Attributes:
        _list_cmd: Command handler for listing validators.
        _show_cmd: Command handler for showing one validator.
        _check_cmd: Command handler for checking text.

    """

    def __init__(self) -> None:
        """Initialize the command dispatcher with all command handlers."""
        self._list_cmd = ListValidatorsCommand()
        self._show_cmd = ShowValidatorCommand()
        self._check_cmd = CheckTextCommand()

    def dispatch(self, args: argparse.Namespace) -> CommandResult:
        """Dispatch to the appropriate command based on arguments.

        Args:
            args: Parsed command-line arguments.

        Returns:
            The command's result.

        """
        if getattr(args, "list_validators", False):
            return self._list_cmd.execute(args)
        if getattr(args, "show", None) is not None:
            return self._show_cmd.execute(args)
        if getattr(args, "check", None) is not None:
            return self._check_cmd.execute(args)

        # Should not reach here if validation passes
        return CommandResult(exit_code=1, message="No command given")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    verbose = getattr(args, "verbose", False) or settings.verbose
    configure_logging(verbose=verbose, json_output=settings.json_logs)

    error = validate_args(args)
    if error:
        print(error, file=sys.stderr)
        return 1

    try:
        result = CommandDispatcher().dispatch(args)

    except ProofreaderError as e:
        logger.debug("command_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130

    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        if verbose:
            traceback.print_exc()
        return 1

    if result.output:
        print(result.output)
    if result.message:
        print(result.message, file=sys.stderr)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
