"""LetterService — letter operations wrapped in ServiceResult.

Domain errors are converted to structured ServiceErrors here so callers
(the CLI, scripts) branch on ``result.ok`` instead of catching exceptions.

Error codes:
- ``NOT_ALPHABETIC``: input is not an ASCII letter.
- ``INVALID_POSITION``: position outside 0-25 or an unknown case name.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from alphabetic.domain.errors import NotAlphabeticError
from alphabetic.domain.letter import ALPHABET_SIZE, AlphabeticLetter
from alphabetic.domain.types import LetterCase
from alphabetic.services.result import ServiceResult

if TYPE_CHECKING:
    from alphabetic.config.settings import AlphabeticSettings

logger = logging.getLogger(__name__)


def _letter_payload(letter: AlphabeticLetter) -> dict[str, Any]:
    return {
        "char": letter.to_char(),
        "position": letter.position,
        "case": str(letter.case),
    }


def _not_alphabetic(op: str, exc: NotAlphabeticError) -> ServiceResult:
    return ServiceResult.failure(
        op,
        "NOT_ALPHABETIC",
        str(exc),
        value=exc.value,
        offset=exc.offset,
    )


class LetterService:
    """Letter construction, inspection, and shifting.

    Defaults for the shift amount and the letter case come from
    ``settings.letters``.
    """

    def __init__(self, settings: AlphabeticSettings) -> None:
        self._settings = settings

    def describe(self, text: str) -> ServiceResult:
        """Report position and case for every letter of *text*.

        Fails as a whole on the first non-letter character.
        """
        op = "describe"
        try:
            letters = AlphabeticLetter.from_string(text)
        except NotAlphabeticError as exc:
            logger.debug("Rejected %r: %s", text, exc)
            return _not_alphabetic(op, exc)

        logger.debug("Described %d letters", len(letters))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "text": text,
                "count": len(letters),
                "letters": [_letter_payload(letter) for letter in letters],
            },
        )

    def shift(self, letter: str, amount: int | None = None) -> ServiceResult:
        """Shift a single letter by *amount* (default from settings)."""
        op = "shift"
        if amount is None:
            amount = self._settings.letters.default_shift
        try:
            parsed = AlphabeticLetter.from_char(letter)
        except NotAlphabeticError as exc:
            logger.debug("Rejected %r: %s", letter, exc)
            return _not_alphabetic(op, exc)

        shifted = parsed.shifted(amount)
        logger.debug("Shifted %s by %d to %s", parsed, amount, shifted)

        warnings: list[str] = []
        if amount % ALPHABET_SIZE == 0:
            warnings.append(f"Shift by {amount} is a whole rotation; letter unchanged")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "input": letter,
                "amount": amount,
                "output": shifted.to_char(),
                "position": shifted.position,
                "case": str(shifted.case),
            },
            warnings=warnings,
        )

    def from_index(
        self,
        position: int,
        case: LetterCase | str | None = None,
    ) -> ServiceResult:
        """Build a letter from its alphabet position (case default from settings)."""
        op = "letter"
        if case is None:
            case = self._settings.letters.default_case
        try:
            letter = AlphabeticLetter.from_index(position, case)
        except (TypeError, ValueError) as exc:
            logger.debug("Invalid letter position %r / case %r: %s", position, case, exc)
            return ServiceResult.failure(
                op,
                "INVALID_POSITION",
                str(exc),
                position=position,
                case=str(case),
            )
        return ServiceResult(ok=True, op=op, data=_letter_payload(letter))
