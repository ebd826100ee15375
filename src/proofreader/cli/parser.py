"""CLI argument parser configuration.

This module provides the argument parser for the proofreader CLI.
"""

import argparse

from proofreader import __version__

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="proofreader",
        description="Proofreader - list, configure and run pluggable text validators.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List validators applicable to Japanese, with their default properties
  proofreader --list --lang ja

  # Show one validator with an overridden property
  proofreader --show SentenceLength --set max_len=80

  # Check text with every validator applicable to English
  proofreader --check "This is is a sentence."

  # Check text with the validators enabled in a configuration file
  proofreader --check "Some text" --config proofreader.yaml
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Operations
    parser.add_argument(
        "--list",
        action="store_true",
        dest="list_validators",
        help="List validators applicable to the language with their default properties",
    )
    parser.add_argument(
        "--show",
        type=str,
        metavar="NAME",
        help="Build the named validator and print its bound properties",
    )
    parser.add_argument(
        "--check",
        type=str,
        metavar="TEXT",
        help="Run validators over TEXT and print the issues found",
    )

    # Options
    parser.add_argument(
        "--lang",
        type=str,
        default=None,
        help="Document language (default: from --config or PROOFREADER_LANG)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--set",
        action="append",
        dest="overrides",
        default=[],
        metavar="KEY=VALUE",
        help="Property override for --show (repeatable)",
    )
    parser.add_argument(
        "--validator",
        action="append",
        dest="validators",
        default=[],
        metavar="NAME",
        help="Validator to run with --check (repeatable; default: all applicable)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Print output as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser
