"""Output formatting utilities for CLI."""

import json

from proofreader.config.models import ValidatorConfiguration
from proofreader.validator.base import ValidationIssue, Validator
from proofreader.validator.factory import to_strings

__all__ = [
    "format_configurations",
    "format_issues",
    "format_validator",
]


def format_configurations(
    configs: list[ValidatorConfiguration],
    lang: str,
    json_output: bool = False,
) -> str:
    """Format default validator configurations.

    Args:
        configs: Configurations returned by ``get_configurations``.
        lang: Language the list was built for.
        json_output: Whether to format as JSON.

    Returns:
        Formatted string output.

    """
    if json_output:
        return json.dumps(
            {"lang": lang, "validators": [c.model_dump(mode="json") for c in configs]},
            indent=2,
            ensure_ascii=False,
        )

    lines = [f"Validators for '{lang}' ({len(configs)}):"]
    for config in configs:
        lines.append(f"  {config.name}")
        for key, value in config.properties.items():
            lines.append(f"    {key} = {value!r}")
    return "\n".join(lines)


def format_validator(validator: Validator, json_output: bool = False) -> str:
    """Format a configured validator and its bound properties."""
    properties = to_strings(validator.properties)
    languages = sorted(validator.supported_languages)

    if json_output:
        return json.dumps(
            {
                "name": validator.name,
                "class": f"{type(validator).__module__}.{type(validator).__qualname__}",
                "level": validator.level.value,
                "languages": languages,
                "properties": properties,
            },
            indent=2,
            ensure_ascii=False,
        )

    lines = [
        f"{validator.name} ({type(validator).__module__}.{type(validator).__qualname__})",
        f"  Level: {validator.level.value}",
        f"  Languages: {', '.join(languages) if languages else 'all'}",
    ]
    if properties:
        lines.append("  Properties:")
        lines.extend(f"    {key} = {value!r}" for key, value in properties.items())
    return "\n".join(lines)


def format_issues(issues: list[ValidationIssue], json_output: bool = False) -> str:
    """Format issues found by ``--check``."""
    if json_output:
        return json.dumps(
            [issue.model_dump(mode="json") for issue in issues],
            indent=2,
            ensure_ascii=False,
        )

    if not issues:
        return "No issues found."

    lines = []
    for issue in issues:
        location = ""
        if issue.start is not None:
            location = f" [{issue.start}:{issue.end if issue.end is not None else ''}]"
        lines.append(f"{issue.level.value.upper()} {issue.validator}{location}: {issue.message}")
    lines.append(f"\n{len(issues)} issue(s) found.")
    return "\n".join(lines)
