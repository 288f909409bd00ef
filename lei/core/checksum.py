"""ISO/IEC 7064 MOD 97-10 over the LEI alphabet.

Letters expand to two-digit numerals (A=10, B=11, ..., Z=35), digits stand
for themselves. The expanded numeral is reduced modulo 97 one character at
a time, so no big integer is ever built.
"""

from __future__ import annotations

import string

from lei.core.config import MOD97_MODULUS

_DIGIT_VALUES: dict[str, int] = {c: int(c) for c in string.digits}
_LETTER_VALUES: dict[str, int] = {
    c: i + 10 for i, c in enumerate(string.ascii_uppercase)
}


def is_lei_char(c: str) -> bool:
    """True for an uppercase ASCII letter or an ASCII digit."""
    return c in _DIGIT_VALUES or c in _LETTER_VALUES


def mod97(chars: str) -> int:
    """Remainder of the letter-expanded numeral of chars modulo 97.

    Raises ValueError on a character outside A-Z / 0-9; callers check the
    alphabet first.
    """
    remainder = 0
    for c in chars:
        if c in _DIGIT_VALUES:
            remainder = (remainder * 10 + _DIGIT_VALUES[c]) % MOD97_MODULUS
        elif c in _LETTER_VALUES:
            # two expanded digits folded in one step
            remainder = (remainder * 100 + _LETTER_VALUES[c]) % MOD97_MODULUS
        else:
            raise ValueError(f"{c!r} is not an uppercase ASCII letter or digit")
    return remainder


def compute_check_digits(payload: str) -> str:
    """Check-digit pair for a payload: 98 - (payload * 100 mod 97), two digits.

    No length check is made; the result always lies in 02..98.
    """
    remainder = (mod97(payload) * 100) % MOD97_MODULUS
    return f"{MOD97_MODULUS + 1 - remainder:02d}"
