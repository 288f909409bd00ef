"""Tests for lei.core.config — LEI field layout."""

from __future__ import annotations

import dataclasses

import pytest

from lei.core.config import (
    CHECK_DIGITS,
    ENTITY_ID,
    LEI_FIELDS,
    LEI_LENGTH,
    LOU_ID,
    PAYLOAD,
    PAYLOAD_LENGTH,
    FieldLayout,
)


class TestFieldLayout:
    def test_lengths(self) -> None:
        assert (LOU_ID.length, ENTITY_ID.length, CHECK_DIGITS.length) == (4, 14, 2)
        assert PAYLOAD.length == PAYLOAD_LENGTH == 18

    def test_fields_tile_the_whole_lei(self) -> None:
        assert LEI_FIELDS[0].start == 0
        for prev, nxt in zip(LEI_FIELDS, LEI_FIELDS[1:], strict=False):
            assert prev.stop == nxt.start
        assert LEI_FIELDS[-1].stop == LEI_LENGTH

    def test_slice_of(self) -> None:
        raw = "YZ83GD8L7GG84979J516"
        assert [f.slice_of(raw) for f in LEI_FIELDS] == ["YZ83", "GD8L7GG84979J5", "16"]
        assert PAYLOAD.slice_of(raw) == "YZ83GD8L7GG84979J5"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            LOU_ID.start = 1  # type: ignore[misc]

    def test_custom_layout(self) -> None:
        fl = FieldLayout(name="x", start=2, stop=5)
        assert fl.length == 3
        assert fl.slice_of("abcdefg") == "cde"
