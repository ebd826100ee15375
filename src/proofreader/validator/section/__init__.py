"""Validators that inspect a whole section of a document."""

from proofreader.validator.section.paragraph_start_with import ParagraphStartWithValidator
from proofreader.validator.section.section_length import SectionLengthValidator

__all__ = [
    "ParagraphStartWithValidator",
    "SectionLengthValidator",
]
