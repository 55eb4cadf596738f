"""Tests for thrust.core.result."""

from __future__ import annotations

import pytest

from thrust.core.result import Err, Ok, Result


def _parse_status(text: str) -> Result[int, str]:
    if not text.isdigit():
        return Err(f"not a status code: {text}")
    return Ok(int(text))


class TestOk:
    def test_value_access(self) -> None:
        assert Ok("abc123").value == "abc123"

    def test_map(self) -> None:
        assert Ok(" abc\n").map(str.strip) == Ok("abc")

    def test_map_err_is_noop(self) -> None:
        ok: Ok[int] = Ok(1)
        assert ok.map_err(lambda e: f"wrapped {e}") == ok

    def test_frozen(self) -> None:
        result = Ok(1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]


class TestErr:
    def test_error_access(self) -> None:
        assert Err("boom").error == "boom"

    def test_map_err(self) -> None:
        assert Err(401).map_err(lambda code: f"HTTP {code}") == Err("HTTP 401")

    def test_map_is_noop(self) -> None:
        err: Err[str] = Err("boom")
        assert err.map(lambda v: v) == err


def test_chained_map_then_map_err() -> None:
    assert _parse_status("200").map(str).map_err(len) == Ok("200")
    assert _parse_status("abc").map(str).map_err(len) == Err(len("not a status code: abc"))


def test_pattern_matching() -> None:
    match _parse_status("200"):
        case Ok(value):
            assert value == 200
        case Err(_):
            pytest.fail("expected Ok")
