"""Field layout of an ISO 17442 LEI.

Pure configuration data: lengths, offsets and the MOD 97-10 constants.
Nothing here is read from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Lengths and checksum constants
# ---------------------------------------------------------------------------

LEI_LENGTH: int = 20
PAYLOAD_LENGTH: int = 18

MOD97_MODULUS: int = 97
MOD97_VALID_REMAINDER: int = 1


# ---------------------------------------------------------------------------
# Field layout
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class FieldLayout:
    """A fixed-offset field within the 20-character LEI (0-based, stop exclusive)."""

    name: str
    start: int
    stop: int

    @property
    def length(self) -> int:
        return self.stop - self.start

    def slice_of(self, raw: str) -> str:
        """Return this field's characters from a full-length LEI string."""
        return raw[self.start:self.stop]


LOU_ID = FieldLayout(name="lou_id", start=0, stop=4)
ENTITY_ID = FieldLayout(name="entity_id", start=4, stop=18)
CHECK_DIGITS = FieldLayout(name="check_digits", start=18, stop=20)
PAYLOAD = FieldLayout(name="payload", start=0, stop=PAYLOAD_LENGTH)

LEI_FIELDS: tuple[FieldLayout, ...] = (LOU_ID, ENTITY_ID, CHECK_DIGITS)
