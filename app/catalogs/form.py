from enum import Enum
from typing import Any, Dict, Mapping, Optional

from app.catalogs.repository import CatalogRepository
from app.core.exceptions import ValidationFailure


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class EntityForm:
    """Draft record bound to one catalog. Closing discards the draft without confirmation."""

    def __init__(self, repository: CatalogRepository) -> None:
        self.repository = repository
        self.is_open = False
        self.mode = FormMode.CREATE
        self.editing_row: Optional[Mapping[str, Any]] = None
        self.values: Dict[str, str] = {}
        self.error: Optional[str] = None
        self.submitting = False

    @property
    def title(self) -> str:
        prefix = "Edit" if self.mode is FormMode.EDIT else "New"
        return f"{prefix} {self.repository.noun}"

    def open_create(self) -> None:
        self.mode = FormMode.CREATE
        self.editing_row = None
        self.values = self.repository.blank_form()
        self.error = None
        self.is_open = True

    def open_edit(self, row: Mapping[str, Any]) -> None:
        self.mode = FormMode.EDIT
        self.editing_row = row
        self.values = self.repository.to_edit_shape(row)
        self.error = None
        self.is_open = True

    def set_value(self, name: str, value: Any) -> None:
        if name not in self.values:
            raise KeyError(f"{self.repository.noun} form has no field '{name}'")
        self.values[name] = value

    def update(self, **values: Any) -> None:
        for name, value in values.items():
            self.set_value(name, value)

    def submit(self) -> Dict[str, Any]:
        """Validate the draft and return the persist-shape payload."""
        if not self.is_open:
            raise RuntimeError("Form is not open")
        if self.submitting:
            raise RuntimeError("A save is already in progress")
        try:
            payload = self.repository.to_persist_shape(self.values)
        except ValidationFailure as e:
            self.error = e.message
            raise
        self.error = None
        return payload

    def close(self) -> None:
        self.is_open = False
        self.mode = FormMode.CREATE
        self.editing_row = None
        self.values = {}
        self.error = None
        self.submitting = False
