"""Shared Pydantic configuration for the public data contracts."""

from __future__ import annotations

from typing import Any, get_origin

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

__all__ = ["CamelModel"]


class CamelModel(BaseModel):
    """Frozen model that reads and writes camelCase JSON keys.

    Python code uses snake_case attributes; the wire format follows the
    camelCase names the browser wizard sends.  An explicit ``null`` is
    replaced by the field's default (``""``, ``[]``, ``0``...) so that
    downstream rendering never sees a missing value.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields.get(info.field_name)
        if field is None:
            return value
        if not field.is_required():
            return field.get_default(call_default_factory=True)
        if field.annotation is str:
            return ""
        if get_origin(field.annotation) is list:
            return []
        return value

    def to_json_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict using camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
