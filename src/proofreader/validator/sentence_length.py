"""Sentence length check."""

from proofreader.config.exceptions import ConfigurationError
from proofreader.validator.base import ValidationIssue, Validator

__all__ = ["SentenceLengthValidator"]


class SentenceLengthValidator(Validator):
    """Reports sentences longer than ``max_len`` characters."""

    default_properties = {"max_len": 120}

    def init(self) -> None:
        if self.get_int("max_len") < 1:
            raise ConfigurationError(f"{self.name}: max_len must be positive")

    def validate(self, sentence: str) -> list[ValidationIssue]:
        max_len = self.get_int("max_len")
        if len(sentence) <= max_len:
            return []
        return [
            self.issue(
                f"Sentence is longer than {max_len} characters (length {len(sentence)})",
                start=max_len,
                end=len(sentence),
            )
        ]
