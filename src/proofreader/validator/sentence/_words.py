"""Word tokenizing shared by sentence validators."""

import re
from collections.abc import Iterator

__all__ = ["iter_words"]

_WORD_RE = re.compile(r"[^\W_]+(?:['-][^\W_]+)*")


def iter_words(sentence: str) -> Iterator[re.Match[str]]:
    """Yield a match per word in *sentence*."""
    return _WORD_RE.finditer(sentence)
