"""Form-field adapters composing the NHI validator."""

from __future__ import annotations

from nhifield.forms.nhi_field import NHIField, name_to_label

__all__ = ["NHIField", "name_to_label"]
