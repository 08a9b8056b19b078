"""alphabetic — a Latin-script letter value type with wrap-around shifting."""

from __future__ import annotations

from alphabetic.domain.errors import NotAlphabeticError
from alphabetic.domain.letter import ALPHABET_SIZE, AlphabeticLetter, to_string
from alphabetic.domain.types import DEFAULT_CASE, LetterCase

__version__ = "0.1.0"

__all__ = [
    "ALPHABET_SIZE",
    "DEFAULT_CASE",
    "AlphabeticLetter",
    "LetterCase",
    "NotAlphabeticError",
    "__version__",
    "to_string",
]
