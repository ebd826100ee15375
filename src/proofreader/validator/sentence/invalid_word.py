"""Forbidden word check for English text."""

from proofreader.validator.base import ValidationIssue, Validator
from proofreader.validator.sentence._words import iter_words

__all__ = ["InvalidWordValidator"]


class InvalidWordValidator(Validator):
    """Reports words listed in the ``list`` property (case-insensitive)."""

    supported_languages = frozenset({"en"})
    default_properties = {"list": []}

    def validate(self, sentence: str) -> list[ValidationIssue]:
        invalid = {word.lower() for word in self.get_list("list")}
        if not invalid:
            return []

        return [
            self.issue(f"Found invalid word \"{match.group()}\"", match.start(), match.end())
            for match in iter_words(sentence)
            if match.group().lower() in invalid
        ]
