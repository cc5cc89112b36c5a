"""User-facing message templates, keyed by translation key."""

from __future__ import annotations

from typing import Any

from nhifield.models.nhi import ValidationResult

MESSAGE_TEMPLATES: dict[str, str] = {
    "NHIField.VALIDATEPATTERN": (
        "The value for {name} must be a sequence of 3 letters followed by 2 digits then 2 more letters."
    ),
    "NHIField.LEGACYVALIDATEPATTERN": (
        "The value for {name} must be a sequence of 3 letters followed by 4 digits."
    ),
    "NHIField.VALIDATECHECKSUM": "The value for {name} is not a valid NHI number.",
    "TextField.VALIDATEMAXLENGTH": (
        "The value for {name} must not exceed {maxLength} characters in length"
    ),
}


def render(key: str, **params: Any) -> str:
    """Fill a template. Unknown keys render as the key itself."""
    template = MESSAGE_TEMPLATES.get(key)
    if template is None:
        return key
    return template.format(**params)


def render_result(result: ValidationResult, name: str = "NHI") -> str:
    """Message for a failed result, empty string for a valid one."""
    if result.valid or result.message_key is None:
        return ""
    return render(result.message_key, name=name)
