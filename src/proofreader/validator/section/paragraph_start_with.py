"""Paragraph indentation check."""

import re

from proofreader.validator.base import ValidationIssue, Validator

__all__ = ["ParagraphStartWithValidator"]

_PARAGRAPH_BREAK_RE = re.compile(r"\n[ \t]*\n")


class ParagraphStartWithValidator(Validator):
    """Reports paragraphs that do not begin with ``start_from``.

    Paragraphs are separated by blank lines.
    """

    default_properties = {"start_from": " "}

    def validate(self, sentence: str) -> list[ValidationIssue]:
        prefix = self.get_string("start_from")
        issues: list[ValidationIssue] = []

        offset = 0
        for paragraph in _PARAGRAPH_BREAK_RE.split(sentence):
            start = sentence.index(paragraph, offset) if paragraph else offset
            if paragraph.strip() and not paragraph.startswith(prefix):
                issues.append(
                    self.issue(f"Paragraph does not start with {prefix!r}", start, start + len(paragraph))
                )
            offset = start + len(paragraph)
        return issues
