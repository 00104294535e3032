"""Shared pydantic base for data coming back from the model."""

from __future__ import annotations

import math
import uuid
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Fresh opaque identifier for a list item."""
    return str(uuid.uuid4())


def _to_score(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return value
    if isinstance(value, float) and not math.isfinite(value):
        # inf and nan fail int validation, so the field default applies
        return None
    if isinstance(value, (int, float)):
        return max(0, min(100, round(value)))
    return value


# 0-100 integer; floats and "82%" strings are accepted and clamped.
Score = Annotated[int, BeforeValidator(_to_score)]


class LenientModel(BaseModel):
    """camelCase on the wire; bad optional fields fall back to their defaults.

    A field that is missing, null, or of the wrong type takes its declared
    default. Required fields still fail validation.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_on_invalid(cls, value: Any, handler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            field = cls.model_fields[info.field_name]
            if field.is_required():
                raise
            return field.get_default(call_default_factory=True)

    def to_wire(self) -> dict:
        """Dump with camelCase keys, as the application stores it."""
        return self.model_dump(by_alias=True)
