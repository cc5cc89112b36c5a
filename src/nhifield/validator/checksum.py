"""Check-value arithmetic for both NHI formats.

Both take the first six characters, weight them 7, 6, 5, 4, 3, 2 and reduce
modulo 11 (legacy) or 24 (current). Callers must pass identifiers that
already matched the corresponding pattern.
"""

from __future__ import annotations

from typing import Optional

from nhifield.validator.alphabet import letter_value

WEIGHTS = (7, 6, 5, 4, 3, 2)
LEGACY_MODULUS = 11
CURRENT_MODULUS = 24


def _weighted_sum(values: list[int]) -> int:
    return sum(v * w for v, w in zip(values, WEIGHTS))


def legacy_check_digit(identifier: str) -> Optional[int]:
    """Expected fourth digit of a legacy NHI, or None if no digit can be valid.

    A remainder of 0 has no valid check digit. A check digit of 10 is
    written as 0.
    """
    values = [letter_value(c) for c in identifier[:3]] + [int(d) for d in identifier[3:6]]
    remainder = _weighted_sum(values) % LEGACY_MODULUS
    if remainder == 0:
        return None
    check = LEGACY_MODULUS - remainder
    return 0 if check == 10 else check


def current_check_value(identifier: str) -> Optional[int]:
    """Expected letter value of the last character of a current NHI.

    Returns None when the remainder is 0: no valid identifier carries a zero
    check value.
    """
    values = (
        [letter_value(c) for c in identifier[:3]]
        + [int(d) for d in identifier[3:5]]
        + [letter_value(identifier[5])]
    )
    remainder = _weighted_sum(values) % CURRENT_MODULUS
    if remainder == 0:
        return None
    return CURRENT_MODULUS - remainder
