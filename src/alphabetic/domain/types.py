"""Letter case enum."""

from __future__ import annotations

from enum import StrEnum


class LetterCase(StrEnum):
    """Whether a letter is stored and rendered as lowercase or uppercase."""

    LOWERCASE = "lowercase"  # e.g. 'a', 'b'
    UPPERCASE = "uppercase"  # e.g. 'A', 'B'


DEFAULT_CASE = LetterCase.LOWERCASE
