"""Tests for lei.core.result — Ok / Err parse outcomes."""

from __future__ import annotations

import dataclasses

import pytest

from lei.core.result import Err, Ok, sequence, unwrap

# ---------------------------------------------------------------------------
# Ok and Err hold values, are frozen, support pattern matching
# ---------------------------------------------------------------------------


class TestVariants:
    def test_ok_holds_value(self) -> None:
        assert Ok("YZ83").value == "YZ83"

    def test_err_holds_error(self) -> None:
        assert Err("fail").error == "fail"

    def test_ok_is_frozen(self) -> None:
        ok = Ok(42)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ok.value = 99  # type: ignore[misc]

    def test_err_is_frozen(self) -> None:
        err = Err("fail")
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.error = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Ok(42) == Ok(42)
        assert Ok(42) != Ok(99)
        assert Ok(42) != Err(42)

    def test_pattern_match(self) -> None:
        match Err("boom"):
            case Ok(_):
                pytest.fail("Should match Err")
            case Err(e):
                assert e == "boom"


# ---------------------------------------------------------------------------
# unwrap
# ---------------------------------------------------------------------------


class TestUnwrap:
    def test_unwrap_ok(self) -> None:
        assert unwrap(Ok("v")) == "v"

    def test_unwrap_err_raises_with_reason(self) -> None:
        with pytest.raises(RuntimeError, match="unwrap on Err: bad"):
            unwrap(Err("bad"))

    def test_unwrap_non_result_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            unwrap("not a result")  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# sequence
# ---------------------------------------------------------------------------


class TestSequence:
    def test_all_ok(self) -> None:
        assert sequence([Ok(1), Ok(2), Ok(3)]) == Ok((1, 2, 3))

    def test_empty(self) -> None:
        assert sequence([]) == Ok(())

    def test_first_err_wins(self) -> None:
        assert sequence([Ok(1), Err("a"), Err("b")]) == Err("a")

    def test_stops_consuming_at_first_err(self) -> None:
        seen: list[int] = []

        def gen():  # type: ignore[no-untyped-def]
            for i, r in enumerate([Ok(0), Err("x"), Ok(2)]):
                seen.append(i)
                yield r

        assert sequence(gen()) == Err("x")
        assert seen == [0, 1]
