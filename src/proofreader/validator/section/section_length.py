"""Section length check."""

from proofreader.config.exceptions import ConfigurationError
from proofreader.validator.base import ValidationIssue, Validator

__all__ = ["SectionLengthValidator"]


class SectionLengthValidator(Validator):
    """Reports sections with more than ``max_num`` characters."""

    default_properties = {"max_num": 1000}

    def init(self) -> None:
        if self.get_int("max_num") < 1:
            raise ConfigurationError(f"{self.name}: max_num must be positive")

    def validate(self, sentence: str) -> list[ValidationIssue]:
        max_num = self.get_int("max_num")
        if len(sentence) <= max_num:
            return []
        return [self.issue(f"Section is longer than {max_num} characters (length {len(sentence)})")]
