"""Tests for chore.core.result module."""

from __future__ import annotations

import pytest

from chore.core.result import Err, Ok, Result


def _parse_status(text: str) -> Result[int, str]:
    if not text.isdigit():
        return Err(f"not a status: {text}")
    return Ok(int(text))


class TestOk:
    def test_repr(self) -> None:
        assert repr(Ok(0)) == "Ok(0)"

    def test_equality(self) -> None:
        assert Ok("lint") == Ok("lint")
        assert Ok("lint") != Err("lint")

    def test_frozen(self) -> None:
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]


class TestErr:
    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"

    def test_frozen(self) -> None:
        result = Err("boom")
        with pytest.raises(AttributeError):
            result.error = "other"  # type: ignore[misc]


class TestPatternMatching:
    def test_match_ok(self) -> None:
        match _parse_status("3"):
            case Ok(value):
                assert value == 3
            case Err(_):
                pytest.fail("expected Ok")

    def test_match_err(self) -> None:
        match _parse_status("x"):
            case Ok(_):
                pytest.fail("expected Err")
            case Err(error):
                assert "not a status" in error

    def test_isinstance_narrowing(self) -> None:
        result = _parse_status("x")
        assert isinstance(result, Err)
        assert result.error == "not a status: x"
