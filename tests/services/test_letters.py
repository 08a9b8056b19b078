"""Tests for LetterService."""

from __future__ import annotations

import pytest

from alphabetic.config.models import LettersConfig
from alphabetic.config.settings import AlphabeticSettings
from alphabetic.domain.types import LetterCase
from alphabetic.services.letters import LetterService


@pytest.fixture
def service(settings: AlphabeticSettings) -> LetterService:
    return LetterService(settings)


class TestDescribe:
    def test_describe_word(self, service: LetterService) -> None:
        result = service.describe("Hi")
        assert result.ok
        assert result.op == "describe"
        assert result.data["text"] == "Hi"
        assert result.data["count"] == 2
        assert result.data["letters"] == [
            {"char": "H", "position": 7, "case": "uppercase"},
            {"char": "i", "position": 8, "case": "lowercase"},
        ]

    def test_describe_empty(self, service: LetterService) -> None:
        result = service.describe("")
        assert result.ok
        assert result.data["count"] == 0
        assert result.data["letters"] == []

    def test_describe_rejects_whole_input(self, service: LetterService) -> None:
        result = service.describe("H1")
        assert not result.ok
        assert result.data == {}
        assert result.error is not None
        assert result.error.code == "NOT_ALPHABETIC"
        assert result.error.detail == {"value": "1", "offset": 1}


class TestShift:
    @pytest.mark.parametrize(
        "letter,amount,expected",
        [("A", 5, "F"), ("z", 2, "b"), ("o", -3, "l")],
    )
    def test_shift(self, service: LetterService, letter: str, amount: int, expected: str) -> None:
        result = service.shift(letter, amount)
        assert result.ok
        assert result.data["input"] == letter
        assert result.data["amount"] == amount
        assert result.data["output"] == expected
        assert result.warnings == []

    def test_preserves_case(self, service: LetterService) -> None:
        result = service.shift("Q", 100)
        assert result.data["case"] == "uppercase"

    def test_default_amount_from_settings(self, service: LetterService) -> None:
        result = service.shift("a")
        assert result.data["amount"] == 13
        assert result.data["output"] == "n"

    def test_configured_default_amount(self, settings: AlphabeticSettings) -> None:
        custom = settings.model_copy(update={"letters": LettersConfig(default_shift=3)})
        result = LetterService(custom).shift("x")
        assert result.data["output"] == "a"

    def test_whole_rotation_warns(self, service: LetterService) -> None:
        result = service.shift("k", -52)
        assert result.ok
        assert result.data["output"] == "k"
        assert len(result.warnings) == 1
        assert "whole rotation" in result.warnings[0]

    @pytest.mark.parametrize("letter", ["5", "", "ab", "é"])
    def test_rejects_non_letter(self, service: LetterService, letter: str) -> None:
        result = service.shift(letter, 1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_ALPHABETIC"
        assert result.error.detail["value"] == letter


class TestFromIndex:
    def test_builds_letter(self, service: LetterService) -> None:
        result = service.from_index(2, LetterCase.UPPERCASE)
        assert result.ok
        assert result.op == "letter"
        assert result.data == {"char": "C", "position": 2, "case": "uppercase"}

    def test_default_case_from_settings(self, service: LetterService) -> None:
        assert service.from_index(25).data["char"] == "z"

    def test_configured_default_case(self, settings: AlphabeticSettings) -> None:
        custom = settings.model_copy(
            update={"letters": LettersConfig(default_case=LetterCase.UPPERCASE)}
        )
        assert LetterService(custom).from_index(0).data["char"] == "A"

    @pytest.mark.parametrize("position", [-1, 26])
    def test_out_of_range(self, service: LetterService, position: int) -> None:
        result = service.from_index(position)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_POSITION"
        assert result.error.detail["position"] == position

    def test_unknown_case(self, service: LetterService) -> None:
        result = service.from_index(1, "sideways")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_POSITION"
