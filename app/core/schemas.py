from typing import Any, Optional

from pydantic import BaseModel, field_validator


class FormPayload(BaseModel):
    """Form values as typed into a catalog form (edit shape).

    Every field travels as text; numbers sent by JSON clients are accepted and
    stringified so the catalog repository applies one set of rules.
    """

    class Config:
        extra = "forbid"

    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        return value


class DropdownItem(BaseModel):
    label: str
    value: int


class NamedRef(BaseModel):
    """Embedded foreign row carrying only its key and display name."""

    id: int
    name: Optional[str] = None
