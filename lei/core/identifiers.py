"""The LEI value type and the operations that produce it.

An LEI exists only in validated form: parse() and the build_* functions
are the sole ways to obtain one, and each returns Ok(LEI) or Err(LEIError).
Validation order for parse(): length, alphabet, check-digit format,
MOD 97-10 remainder. The first failure wins.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from typing import final

from lei.core.checksum import compute_check_digits, is_lei_char, mod97
from lei.core.config import (
    CHECK_DIGITS,
    ENTITY_ID,
    LEI_LENGTH,
    LOU_ID,
    MOD97_VALID_REMAINDER,
    PAYLOAD,
    PAYLOAD_LENGTH,
)
from lei.core.errors import (
    InvalidCharacter,
    InvalidCheckDigitFormat,
    InvalidCheckDigits,
    InvalidEntityIdLength,
    InvalidLength,
    InvalidLouIdLength,
    InvalidPayloadLength,
    LEIError,
)
from lei.core.result import Err, Ok

logger = logging.getLogger(__name__)

_FACTORY_TOKEN = object()
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


@final
@dataclass(frozen=True, slots=True, order=True, repr=False)
class LEI:
    """Legal Entity Identifier (ISO 17442) — 20 characters, MOD 97-10 checked.

    Layout: 4-character LOU ID, 14-character entity ID, 2 check digits.
    Equality, hashing and ordering compare the string value only.
    """

    value: str
    _token: object = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self._token is not _FACTORY_TOKEN:
            raise TypeError("LEI cannot be constructed directly, use LEI.parse()")
        # dataclasses.replace() carries the token over, so the value is checked too
        if not isinstance(self.value, str):
            raise TypeError(f"LEI requires str, got {type(self.value).__name__}")
        error = _check(self.value)
        if error is not None:
            raise TypeError(f"LEI requires a valid LEI string, got {self.value!r}: {error}")

    @staticmethod
    def parse(raw: str) -> Ok[LEI] | Err[LEIError]:
        return parse(raw)

    @property
    def canonical_string(self) -> str:
        return self.value

    @property
    def lou_id(self) -> str:
        """Prefix of the Local Operating Unit that issued the LEI."""
        return LOU_ID.slice_of(self.value)

    @property
    def entity_id(self) -> str:
        """Issuer-assigned identifier of the legal entity."""
        return ENTITY_ID.slice_of(self.value)

    @property
    def check_digits(self) -> str:
        return CHECK_DIGITS.slice_of(self.value)

    @property
    def payload(self) -> str:
        """Everything except the check digits (LOU ID + entity ID)."""
        return PAYLOAD.slice_of(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"LEI({self.value!r})"


def _new(raw: str) -> LEI:
    return LEI(value=raw, _token=_FACTORY_TOKEN)


def _find_invalid_char(raw: str, offset: int = 0) -> InvalidCharacter | None:
    """First character outside A-Z / 0-9; index reported relative to the full LEI."""
    for i, c in enumerate(raw):
        if not is_lei_char(c):
            return InvalidCharacter(index=offset + i, char=c)
    return None


def _check(raw: str) -> LEIError | None:
    """First failed rule for raw, in order: length, alphabet, check-digit format, MOD 97-10."""
    if len(raw) != LEI_LENGTH:
        return InvalidLength(was=len(raw))

    bad_char = _find_invalid_char(raw)
    if bad_char is not None:
        return bad_char

    for i in range(CHECK_DIGITS.start, CHECK_DIGITS.stop):
        if raw[i] not in string.digits:
            return InvalidCheckDigitFormat(index=i, char=raw[i])

    remainder = mod97(raw)
    if remainder != MOD97_VALID_REMAINDER:
        return InvalidCheckDigits(
            remainder=remainder,
            was=CHECK_DIGITS.slice_of(raw),
            expected=compute_check_digits(PAYLOAD.slice_of(raw)),
        )
    return None


def parse(raw: str) -> Ok[LEI] | Err[LEIError]:
    """Strictly validate raw as an LEI. No trimming, no case folding."""
    error = _check(raw)
    if error is not None:
        return Err(error)
    return Ok(_new(raw))


def parse_loose(raw: str) -> Ok[LEI] | Err[LEIError]:
    """Uppercase ASCII letters and trim surrounding whitespace, then parse()."""
    normalized = raw.strip().translate(_ASCII_UPPER)
    if normalized != raw:
        logger.debug("normalized LEI input %r to %r", raw, normalized)
    return parse(normalized)


def validate(raw: str) -> bool:
    """True iff raw is a valid LEI under the strict rules of parse()."""
    return _check(raw) is None


def build_from_payload(payload: str) -> Ok[LEI] | Err[LEIError]:
    """Build an LEI from LOU ID + entity ID, computing the check digits."""
    if len(payload) != PAYLOAD_LENGTH:
        return Err(InvalidPayloadLength(was=len(payload)))

    bad_char = _find_invalid_char(payload)
    if bad_char is not None:
        return Err(bad_char)

    return Ok(_new(payload + compute_check_digits(payload)))


def build_from_parts(lou_id: str, entity_id: str) -> Ok[LEI] | Err[LEIError]:
    """Build an LEI from its LOU ID and entity ID, computing the check digits."""
    if len(lou_id) != LOU_ID.length:
        return Err(InvalidLouIdLength(was=len(lou_id)))
    bad_char = _find_invalid_char(lou_id, offset=LOU_ID.start)
    if bad_char is not None:
        return Err(bad_char)

    if len(entity_id) != ENTITY_ID.length:
        return Err(InvalidEntityIdLength(was=len(entity_id)))
    bad_char = _find_invalid_char(entity_id, offset=ENTITY_ID.start)
    if bad_char is not None:
        return Err(bad_char)

    return build_from_payload(lou_id + entity_id)
