"""Format detection and pattern matching for the two NHI layouts."""

from __future__ import annotations

import re
import string

from nhifield.core.exceptions import InvalidLengthError
from nhifield.models.nhi import FormatKind

NHI_LENGTH = 7
DISCRIMINATOR_INDEX = 5

# Hint patterns for client-side input checks, published as-is.
LEGACY_REGEX_PATTERN = "^[a-zA-Z]{3}[0-9]{4}$"
REGEX_PATTERN = "^[a-zA-Z]{3}[0-9]{2}[a-zA-Z]{2}$"

_HINT_PATTERNS: dict[FormatKind, str] = {
    FormatKind.LEGACY: LEGACY_REGEX_PATTERN,
    FormatKind.CURRENT: REGEX_PATTERN,
}

# Server-side patterns also reject I and O, which have no checksum value.
# They run on normalised values, so only uppercase ASCII is accepted.
_LETTER = "[A-HJ-NP-Z]"
_STRICT_PATTERNS: dict[FormatKind, re.Pattern[str]] = {
    FormatKind.LEGACY: re.compile(rf"{_LETTER}{{3}}[0-9]{{4}}", re.ASCII),
    FormatKind.CURRENT: re.compile(rf"{_LETTER}{{3}}[0-9]{{2}}{_LETTER}{{2}}", re.ASCII),
}

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize(identifier: str) -> str:
    """Uppercase the ASCII letters of an identifier. Idempotent.

    Other characters are left alone so the length never changes.
    """
    return identifier.translate(_ASCII_UPPER)


def detect_format(identifier: str) -> FormatKind:
    """Pick the tentative format from the character at index 5.

    A digit there means the legacy LLLDDDD layout, anything else the current
    LLLDDLL layout. This only chooses which validator runs; acceptance is
    decided by that validator's full pattern.

    Raises:
        InvalidLengthError: fewer than 6 characters, so index 5 does not exist.
    """
    if len(identifier) <= DISCRIMINATOR_INDEX:
        raise InvalidLengthError(identifier, DISCRIMINATOR_INDEX + 1)
    if identifier[DISCRIMINATOR_INDEX] in string.digits:
        return FormatKind.LEGACY
    return FormatKind.CURRENT


def hint_format(identifier: str | None) -> FormatKind:
    """Format to report for a possibly short or empty value.

    Values too short to classify count as current, since that is what new
    identifiers look like.
    """
    if not identifier or len(identifier) <= DISCRIMINATOR_INDEX:
        return FormatKind.CURRENT
    return detect_format(identifier)


def pattern_for(kind: FormatKind) -> str:
    """Client-side regular expression for a format."""
    return _HINT_PATTERNS[kind]


def pattern_hint(identifier: str | None) -> str:
    """Client-side pattern for a possibly empty value."""
    return pattern_for(hint_format(identifier))


def matches(identifier: str, kind: FormatKind) -> bool:
    """Full structural check against one format (case-insensitive)."""
    return _STRICT_PATTERNS[kind].fullmatch(normalize(identifier)) is not None
