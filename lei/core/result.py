"""Result[T, E] — parse outcomes as values.

Every LEI operation that can reject its input returns Ok[T] or Err[E]
instead of raising. Callers branch with structural pattern matching
(``case Ok(lei):`` / ``case Err(error):``); unwrap() is for tests and
boundaries where a rejection is a bug.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Accepted input."""

    value: T


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Rejected input, with the reason."""

    error: E


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise RuntimeError carrying the rejection reason."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise RuntimeError(f"unwrap on Err: {error}")
        case _:
            raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def sequence[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[tuple[T, ...]] | Err[E]:
    """Collect a batch of Results into one. The first Err rejects the batch."""
    values: list[T] = []
    for r in results:
        if isinstance(r, Err):
            return r
        values.append(r.value)
    return Ok(tuple(values))
