"""Validation utilities for CLI arguments."""

import argparse
from pathlib import Path

__all__ = [
    "parse_overrides",
    "validate_args",
]


def parse_overrides(overrides: list[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a mapping.

    Args:
        overrides: Raw ``--set`` values.

    Returns:
        Property name to value mapping; later keys win.

    Raises:
        ValueError: If an entry has no ``=`` or an empty key.

    """
    result: dict[str, str] = {}
    for override in overrides:
        key, sep, value = override.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid property override '{override}': expected KEY=VALUE")
        result[key.strip()] = value
    return result


def validate_args(args: argparse.Namespace) -> str | None:
    """Validate CLI arguments for consistency.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Error message if validation fails, None if valid.

    """
    operations = [
        getattr(args, "list_validators", False),
        getattr(args, "show", None) is not None,
        getattr(args, "check", None) is not None,
    ]
    if sum(operations) != 1:
        return "Error: exactly one of --list, --show or --check is required"

    overrides = getattr(args, "overrides", [])
    if overrides:
        if getattr(args, "show", None) is None:
            return "Error: --set can only be used with --show"
        try:
            parse_overrides(overrides)
        except ValueError as e:
            return f"Error: {e}"

    if getattr(args, "validators", []) and getattr(args, "check", None) is None:
        return "Error: --validator can only be used with --check"

    config = getattr(args, "config", None)
    if config is not None and not Path(config).is_file():
        return f"Error: Configuration file not found: {config}"

    return None
