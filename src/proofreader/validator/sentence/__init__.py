"""Validators that inspect a single sentence."""

from proofreader.validator.sentence.doubled_word import DoubledWordValidator
from proofreader.validator.sentence.hankaku_kana import HankakuKanaValidator
from proofreader.validator.sentence.invalid_word import InvalidWordValidator

__all__ = [
    "DoubledWordValidator",
    "HankakuKanaValidator",
    "InvalidWordValidator",
]
