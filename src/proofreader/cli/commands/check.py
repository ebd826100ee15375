"""Check text command implementation."""

from argparse import Namespace

from proofreader.cli.commands.base import (
    BaseCommand,
    CommandResult,
    build_configuration,
    build_validator_configuration,
)
from proofreader.cli.formatters import format_issues
from proofreader.config.models import Configuration, Severity, ValidatorConfiguration
from proofreader.logging_config import get_logger
from proofreader.validator.base import ValidationIssue
from proofreader.validator.factory import get_configurations, get_instance

__all__ = ["CheckTextCommand"]

logger = get_logger(__name__)


class CheckTextCommand(BaseCommand):
    """Command to run validators over a piece of text."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "check"

    def execute(self, args: Namespace) -> CommandResult:
        """Execute the check command.

        Args:
            args: Parsed arguments with the text and validator selection.

        Returns:
            CommandResult with exit code 1 when an error-level issue is found.

        """
        configuration = build_configuration(args)
        validator_configs = self.select_validators(configuration, getattr(args, "validators", []))

        issues: list[ValidationIssue] = []
        for config in validator_configs:
            validator = get_instance(config, configuration)
            found = validator.validate(args.check)
            logger.debug("validator_ran", validator=config.name, issue_count=len(found))
            issues.extend(found)

        has_errors = any(issue.level == Severity.error for issue in issues)
        return CommandResult(
            exit_code=1 if has_errors else 0,
            output=format_issues(issues, json_output=getattr(args, "json_output", False)),
        )

    def select_validators(
        self,
        configuration: Configuration,
        names: list[str],
    ) -> list[ValidatorConfiguration]:
        """Pick the validator configurations to run.

        Explicit names win; otherwise the configuration file's validators;
        otherwise every validator applicable to the language, with defaults.

        Args:
            configuration: Global configuration.
            names: Validator names given with ``--validator``.

        Returns:
            Validator configurations in run order.

        """
        if names:
            return [
                configuration.get_validator_config(name) or build_validator_configuration(name)
                for name in names
            ]
        if configuration.validator_configs:
            return list(configuration.validator_configs)
        return get_configurations(configuration.lang)
