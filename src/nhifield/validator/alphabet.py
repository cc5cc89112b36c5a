"""NHI alphabet conversion table.

I and O are left out of the NHI alphabet so they cannot be confused with
1 and 0. The remaining 24 letters are numbered A=1 ... Z=24.
"""

from __future__ import annotations

import string

from nhifield.core.exceptions import UnknownLetterError

EXCLUDED_LETTERS = frozenset("IO")
NHI_ALPHABET = "".join(c for c in string.ascii_uppercase if c not in EXCLUDED_LETTERS)

_LETTER_VALUES: dict[str, int] = {c: i for i, c in enumerate(NHI_ALPHABET, start=1)}


def letter_value(char: str) -> int:
    """Return the checksum value of a letter (case-insensitive).

    Positions after I shift down by one and positions after O by two, so
    H=8, J=9, N=13, P=14 and Z=24.

    Raises:
        UnknownLetterError: ``char`` is not a single letter of the NHI alphabet.
    """
    try:
        return _LETTER_VALUES[char.upper()]
    except (KeyError, AttributeError):
        raise UnknownLetterError(char) from None
