"""The ``[letters]`` section of alphabetic.toml.

Every field has a default, so a config file only lists what it changes.
"""

from __future__ import annotations

from pydantic import BaseModel

from alphabetic.domain.types import DEFAULT_CASE, LetterCase


class LettersConfig(BaseModel):
    """Defaults applied when a command leaves case or shift unspecified."""

    model_config = {"frozen": True}

    default_case: LetterCase = DEFAULT_CASE
    default_shift: int = 13
