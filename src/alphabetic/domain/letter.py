"""AlphabeticLetter — a letter of the Latin-script alphabet.

A letter is a (position, case) pair. Position is the zero-based offset
in the alphabet (0 = 'a'/'A', 25 = 'z'/'Z') and never depends on case.

INVARIANT: 0 <= position < ALPHABET_SIZE for every instance. The
constructor validates it and ``shift`` preserves it via non-negative
modulo, so no instance can be observed out of range.

Conversions are explicit and named:

- Fallible (raise :class:`NotAlphabeticError`): ``from_char``,
  ``from_byte``, ``from_string``, ``from_bytes``.
- Total: ``to_char``, ``to_byte``, ``str()``, ``bytes()``.

Examples:
    >>> letter = AlphabeticLetter.from_char("A")
    >>> letter.shift(5).to_char()
    'F'
    >>> letters = AlphabeticLetter.from_string("Rust")
    >>> _ = letters[0].shift(-5)
    >>> to_string(letters)
    'Must'
"""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Self

from alphabetic.domain.errors import NotAlphabeticError
from alphabetic.domain.types import DEFAULT_CASE, LetterCase

ALPHABET_SIZE = 26

_BASE_CODE: dict[LetterCase, int] = {
    LetterCase.LOWERCASE: ord("a"),
    LetterCase.UPPERCASE: ord("A"),
}


def _case_of_code(code: int) -> LetterCase | None:
    """Return the case of an ASCII letter code point, or None for anything else."""
    for case, base in _BASE_CODE.items():
        if base <= code < base + ALPHABET_SIZE:
            return case
    return None


class AlphabeticLetter:
    """A single Latin-script letter with a case tag.

    Equality and hashing are structural over ``(position, case)``.
    The only mutating operation is :meth:`shift`.
    """

    __slots__ = ("_case", "_position")

    ALPHABET_SIZE = ALPHABET_SIZE

    def __init__(self, position: int, case: LetterCase | str = DEFAULT_CASE) -> None:
        if isinstance(position, bool):
            msg = f"Letter position must be an int, got {position!r}"
            raise TypeError(msg)
        position = operator.index(position)
        if not 0 <= position < ALPHABET_SIZE:
            msg = f"Letter position must be 0-{ALPHABET_SIZE - 1}, got {position}"
            raise ValueError(msg)
        self._position = position
        self._case = LetterCase(case)

    # --- Construction ---

    @classmethod
    def from_index(cls, position: int, case: LetterCase | str = DEFAULT_CASE) -> Self:
        """Build a letter from its alphabet position and case.

        Raises:
            ValueError: *position* is outside ``[0, 25]`` or *case* is unknown.
            TypeError: *position* is not an integer.
        """
        return cls(position, case)

    @classmethod
    def from_char(cls, value: str) -> Self:
        """Build a letter from a single ASCII alphabetic character.

        Raises:
            NotAlphabeticError: *value* is not exactly one character in
                ``a``-``z`` or ``A``-``Z``.
            TypeError: *value* is not a str.
        """
        if not isinstance(value, str):
            msg = f"Expected a str character, got {type(value).__name__}"
            raise TypeError(msg)
        if len(value) != 1:
            raise NotAlphabeticError(value)
        code = ord(value)
        case = _case_of_code(code)
        if case is None:
            raise NotAlphabeticError(value)
        return cls(code - _BASE_CODE[case], case)

    @classmethod
    def from_byte(cls, value: int | bytes | bytearray) -> Self:
        """Build a letter from one ASCII byte (an int or a length-1 bytes).

        Raises:
            NotAlphabeticError: the byte is not an ASCII letter.
        """
        if isinstance(value, (bytes, bytearray)):
            if len(value) != 1:
                raise NotAlphabeticError(bytes(value))
            code = value[0]
        else:
            code = operator.index(value)
        case = _case_of_code(code)
        if case is None:
            raise NotAlphabeticError(value)
        return cls(code - _BASE_CODE[case], case)

    @classmethod
    def from_string(cls, text: str) -> list[Self]:
        """Convert every character of *text*, in order.

        Atomic: raises on the first non-alphabetic character and returns
        nothing. An empty string yields an empty list.

        Examples:
            >>> [str(letter) for letter in AlphabeticLetter.from_string("Hi")]
            ['H', 'i']
        """
        if not isinstance(text, str):
            msg = f"Expected str, got {type(text).__name__}"
            raise TypeError(msg)
        letters: list[Self] = []
        for offset, char in enumerate(text):
            try:
                letters.append(cls.from_char(char))
            except NotAlphabeticError as exc:
                raise NotAlphabeticError(char, offset=offset) from exc
        return letters

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> list[Self]:
        """Byte-oriented counterpart of :meth:`from_string`."""
        letters: list[Self] = []
        for offset, code in enumerate(data):
            try:
                letters.append(cls.from_byte(code))
            except NotAlphabeticError as exc:
                raise NotAlphabeticError(code, offset=offset) from exc
        return letters

    # --- Accessors ---

    @property
    def position(self) -> int:
        """Zero-based offset in the alphabet, independent of case."""
        return self._position

    @property
    def case(self) -> LetterCase:
        return self._case

    # --- Shifting ---

    def shift(self, amount: int) -> Self:
        """Move *amount* places forward (positive) or backward (negative).

        Wraps around at either end of the alphabet. Case is preserved.
        Mutates in place and returns ``self`` so calls can be chained.

        Examples:
            >>> AlphabeticLetter.from_char("z").shift(2).to_char()
            'b'
            >>> AlphabeticLetter.from_char("o").shift(-3).to_char()
            'l'
        """
        self._position = _wrap(self._position, amount)
        return self

    def shifted(self, amount: int) -> Self:
        """Return a shifted copy, leaving this letter unchanged."""
        return type(self)(_wrap(self._position, amount), self._case)

    # --- Conversion back ---

    def to_byte(self) -> int:
        """ASCII code of the letter."""
        return _BASE_CODE[self._case] + self._position

    def to_char(self) -> str:
        return chr(self.to_byte())

    def __bytes__(self) -> bytes:
        return bytes((self.to_byte(),))

    def __str__(self) -> str:
        return self.to_char()

    def __format__(self, format_spec: str) -> str:
        return format(self.to_char(), format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._position}, LetterCase.{self._case.name})"

    # --- Structural identity ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlphabeticLetter):
            return NotImplemented
        return self._position == other._position and self._case == other._case

    def __hash__(self) -> int:
        return hash((self._position, self._case))


def _wrap(position: int, amount: int) -> int:
    """Non-negative modular addition on alphabet positions."""
    if isinstance(amount, bool):
        msg = f"Shift amount must be an int, got {amount!r}"
        raise TypeError(msg)
    amount = operator.index(amount)
    return (position + amount) % ALPHABET_SIZE


def to_string(letters: Iterable[AlphabeticLetter]) -> str:
    """Join *letters* back into a string, preserving order and case."""
    return "".join(letter.to_char() for letter in letters)
