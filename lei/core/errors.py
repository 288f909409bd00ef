"""Error values for LEI parsing and building — nothing here is raised.

Each rejection reason is a frozen dataclass carrying the detail that
explains it (a length, an offending position, a computed remainder).
Base class LEIError, seven @final subclasses, one per reason.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, final

from lei.core.config import ENTITY_ID, LEI_LENGTH, LOU_ID, PAYLOAD_LENGTH


@dataclass(frozen=True, slots=True)
class LEIError:
    """Base error value. NOT @final — has subclasses."""

    code: ClassVar[str] = "LEI_ERROR"

    context: str = field(default="", kw_only=True)

    def describe(self) -> str:
        return "invalid LEI"

    @property
    def message(self) -> str:
        """Human-readable description, prefixed by any attached context."""
        if self.context:
            return f"{self.context}: {self.describe()}"
        return self.describe()

    def with_context(self, context: str) -> LEIError:
        """Return a copy with context prepended to the message."""
        if self.context:
            context = f"{context}: {self.context}"
        return replace(self, context=context)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict with stable keys."""
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return self.message


@final
@dataclass(frozen=True, slots=True)
class InvalidLength(LEIError):
    """Input is not exactly 20 characters long."""

    code: ClassVar[str] = "LEI_INVALID_LENGTH"

    was: int

    def describe(self) -> str:
        return f"invalid length {self.was} characters when expecting {LEI_LENGTH}"

    def to_dict(self) -> dict[str, object]:
        return {**LEIError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidCharacter(LEIError):
    """A character outside A-Z / 0-9 (lowercase, punctuation, whitespace, non-ASCII)."""

    code: ClassVar[str] = "LEI_INVALID_CHARACTER"

    index: int
    char: str

    def describe(self) -> str:
        return (
            f"character {self.char!r} at index {self.index} is not "
            "an uppercase ASCII letter or digit"
        )

    def to_dict(self) -> dict[str, object]:
        return {**LEIError.to_dict(self), "index": self.index, "char": self.char}


@final
@dataclass(frozen=True, slots=True)
class InvalidCheckDigitFormat(LEIError):
    """One of the last two characters is a letter."""

    code: ClassVar[str] = "LEI_INVALID_CHECK_DIGIT_FORMAT"

    index: int
    char: str

    def describe(self) -> str:
        return (
            f"check digit character {self.char!r} at index {self.index} "
            "is not an ASCII decimal digit"
        )

    def to_dict(self) -> dict[str, object]:
        return {**LEIError.to_dict(self), "index": self.index, "char": self.char}


@final
@dataclass(frozen=True, slots=True)
class InvalidCheckDigits(LEIError):
    """Well-formed input whose MOD 97-10 remainder is not 1."""

    code: ClassVar[str] = "LEI_INVALID_CHECK_DIGITS"

    remainder: int
    was: str       # check digits found in the input
    expected: str  # check digits the payload requires

    def describe(self) -> str:
        return (
            f"incorrect check digits {self.was!r} when expecting {self.expected!r} "
            f"(MOD 97-10 remainder {self.remainder})"
        )

    def to_dict(self) -> dict[str, object]:
        return {
            **LEIError.to_dict(self),
            "remainder": self.remainder,
            "was": self.was,
            "expected": self.expected,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidPayloadLength(LEIError):
    """Payload passed to build_from_payload is not 18 characters."""

    code: ClassVar[str] = "LEI_INVALID_PAYLOAD_LENGTH"

    was: int

    def describe(self) -> str:
        return f"invalid payload length {self.was} characters when expecting {PAYLOAD_LENGTH}"

    def to_dict(self) -> dict[str, object]:
        return {**LEIError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidLouIdLength(LEIError):
    """LOU ID passed to build_from_parts is not 4 characters."""

    code: ClassVar[str] = "LEI_INVALID_LOU_ID_LENGTH"

    was: int

    def describe(self) -> str:
        return f"invalid LOU ID length {self.was} characters when expecting {LOU_ID.length}"

    def to_dict(self) -> dict[str, object]:
        return {**LEIError.to_dict(self), "was": self.was}


@final
@dataclass(frozen=True, slots=True)
class InvalidEntityIdLength(LEIError):
    """Entity ID passed to build_from_parts is not 14 characters."""

    code: ClassVar[str] = "LEI_INVALID_ENTITY_ID_LENGTH"

    was: int

    def describe(self) -> str:
        return (
            f"invalid entity ID length {self.was} characters "
            f"when expecting {ENTITY_ID.length}"
        )

    def to_dict(self) -> dict[str, object]:
        return {**LEIError.to_dict(self), "was": self.was}
