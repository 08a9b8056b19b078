"""Conversion errors for the letter domain."""

from __future__ import annotations

_DEFAULT_MESSAGE = "invalid parameter (doesn't represent ASCII letter characters)"


class NotAlphabeticError(ValueError):
    """Input cannot be interpreted as an ASCII letter.

    Raised by every character/byte to letter conversion, single or batch.
    Batch conversions raise on the first offending element.

    Attributes:
        value: The offending character or byte, when known.
        offset: Index of the offending element within a batch input,
            or None for single-value conversions.
    """

    def __init__(
        self,
        value: str | int | bytes | None = None,
        *,
        offset: int | None = None,
    ) -> None:
        self.value = value
        self.offset = offset
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.value is None:
            return _DEFAULT_MESSAGE
        msg = f"{_DEFAULT_MESSAGE}: {self.value!r}"
        if self.offset is not None:
            msg += f" at offset {self.offset}"
        return msg
