"""Half-width katakana check for Japanese text."""

import re

from proofreader.validator.base import ValidationIssue, Validator

__all__ = ["HankakuKanaValidator"]

_HANKAKU_KANA_RE = re.compile(r"[\uff61-\uff9f]+")


class HankakuKanaValidator(Validator):
    """Reports runs of half-width katakana."""

    supported_languages = frozenset({"ja"})

    def validate(self, sentence: str) -> list[ValidationIssue]:
        return [
            self.issue(f"Found half-width katakana \"{match.group()}\"", match.start(), match.end())
            for match in _HANKAKU_KANA_RE.finditer(sentence)
        ]
