"""Repeated word check."""

from proofreader.config.exceptions import ConfigurationError
from proofreader.validator.base import ValidationIssue, Validator
from proofreader.validator.sentence._words import iter_words

__all__ = ["DoubledWordValidator"]


class DoubledWordValidator(Validator):
    """Reports words used more than once in the same sentence.

    Words shorter than ``min_len`` and words in ``list`` are ignored.
    """

    default_properties = {"list": [], "min_len": 3}

    def init(self) -> None:
        if self.get_int("min_len") < 1:
            raise ConfigurationError(f"{self.name}: min_len must be positive")

    def validate(self, sentence: str) -> list[ValidationIssue]:
        ignored = {word.lower() for word in self.get_list("list")}
        min_len = self.get_int("min_len")

        seen: set[str] = set()
        issues: list[ValidationIssue] = []
        for match in iter_words(sentence):
            word = match.group().lower()
            if len(word) < min_len or word in ignored:
                continue
            if word in seen:
                issues.append(
                    self.issue(f"Found repeated word \"{match.group()}\"", match.start(), match.end())
                )
            seen.add(word)
        return issues
