"""Shared machinery for catalog repositories.

A repository translates between the wire shape returned by the data service
(rows with embedded foreign rows) and the flat, string-valued edit shape a
form binds to, and re-words data service errors for its entity.
"""

import logging
import math
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import EmailStr, TypeAdapter, ValidationError

from app.catalogs.filtering import FilterColumn
from app.core.enums import ErrorKind
from app.core.exceptions import DataServiceError, ValidationFailure
from app.db.data_service import DataServiceClient, Embed

logger = logging.getLogger(__name__)

TEXT = "text"
EMAIL = "email"
INTEGER = "integer"
DECIMAL = "decimal"
DATE = "date"
REFERENCE = "reference"
CHOICE = "choice"

NUMERIC_KINDS = (INTEGER, DECIMAL)

_EMAIL_ADAPTER = TypeAdapter(EmailStr)
_INTEGER_TEXT = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_TEXT = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: str = TEXT
    required: bool = False
    choices: Tuple[str, ...] = ()
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_minimum: bool = False
    # Edit-shape text used when the row (or a blank submission) has no value.
    default: Optional[str] = None
    # Alias of the embedded row that carries this reference, for flattening.
    embed_alias: Optional[str] = None


@dataclass(frozen=True)
class Dependent:
    """Another relation whose rows point at this one through ``foreign_key``."""

    relation: str
    foreign_key: str
    singular: str
    plural: str


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _clean(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    return _to_text(value).strip()


def person_full_name(row: Mapping[str, Any]) -> str:
    parts = (row.get("first_name"), row.get("last_name_paternal"), row.get("last_name_maternal"))
    return " ".join(p for p in parts if p)


class CatalogRepository:
    relation: str = ""
    noun: str = ""
    plural: str = ""
    fields: Tuple[FieldSpec, ...] = ()
    embeds: Tuple[Embed, ...] = ()
    order_by: str = "id"
    ascending: bool = True
    search_fields: Tuple[str, ...] = ("id",)
    filter_columns: Tuple[FilterColumn, ...] = ()
    dependents: Tuple[Dependent, ...] = ()
    uniqueness_hint: str = "a record with the same values already exists."
    dropdown_order: str = "id"

    # ----- shapes -----

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> FieldSpec:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    def decorate(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Hook for computed read-only values (e.g. full names) on fetched rows."""
        return row

    def label(self, row: Mapping[str, Any]) -> str:
        return str(row.get("name") or row.get("id"))

    def blank_form(self) -> Dict[str, str]:
        return {f.name: f.default or "" for f in self.fields}

    def to_edit_shape(self, row: Mapping[str, Any]) -> Dict[str, str]:
        shape: Dict[str, str] = {}
        for f in self.fields:
            value = row.get(f.name)
            if value is None and f.embed_alias:
                embedded = row.get(f.embed_alias) or {}
                value = embedded.get("id")
            shape[f.name] = _to_text(value) if value is not None else (f.default or "")
        return shape

    def to_persist_shape(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        """Normalize and validate form values. The first failing check raises ValidationFailure."""
        raw = {f.name: _clean(values.get(f.name)) for f in self.fields}

        for f in self.fields:
            if f.required and raw[f.name] == "":
                raise ValidationFailure(f"{f.label} is required.", f.name)

        for f in self.fields:
            if raw[f.name] == "" and f.default is not None:
                raw[f.name] = f.default

        payload: Dict[str, Any] = {}
        for f in self.fields:
            if f.kind in NUMERIC_KINDS:
                payload[f.name] = self._parse_number(f, raw[f.name])

        for f in self.fields:
            if f.kind in NUMERIC_KINDS:
                continue
            text = raw[f.name]
            if text == "":
                payload[f.name] = None
            elif f.kind == REFERENCE:
                payload[f.name] = self._parse_reference(f, text)
            elif f.kind == CHOICE:
                if text not in f.choices:
                    raise ValidationFailure(f"{f.label} must be one of: {', '.join(f.choices)}.", f.name)
                payload[f.name] = text
            elif f.kind == DATE:
                try:
                    payload[f.name] = date.fromisoformat(text)
                except ValueError:
                    raise ValidationFailure(f"{f.label} must be a date (YYYY-MM-DD).", f.name)
            elif f.kind == EMAIL:
                try:
                    _EMAIL_ADAPTER.validate_python(text)
                except ValidationError:
                    raise ValidationFailure(f"{f.label} is not a valid email address.", f.name)
                payload[f.name] = text
            else:
                payload[f.name] = text

        return {name: payload[name] for name in self.field_names}

    @staticmethod
    def _parse_number(f: FieldSpec, text: str):
        if text == "":
            return None
        # Plain decimal notation only: no "_" separators, no inf/nan.
        if f.kind == INTEGER and _INTEGER_TEXT.fullmatch(text):
            number = int(text)
        elif _DECIMAL_TEXT.fullmatch(text):
            if f.kind == INTEGER:
                raise ValidationFailure(f"{f.label} must be a whole number.", f.name)
            number = float(text)
            if not math.isfinite(number):
                raise ValidationFailure(f"{f.label} must be a number.", f.name)
        else:
            raise ValidationFailure(f"{f.label} must be a number.", f.name)
        if f.minimum is not None and f.maximum is not None and not (f.minimum <= number <= f.maximum):
            raise ValidationFailure(f"{f.label} must be between {f.minimum:g} and {f.maximum:g}.", f.name)
        if f.minimum is not None:
            if f.exclusive_minimum and number <= f.minimum:
                raise ValidationFailure(f"{f.label} must be greater than {f.minimum:g}.", f.name)
            if not f.exclusive_minimum and number < f.minimum:
                raise ValidationFailure(f"{f.label} must be at least {f.minimum:g}.", f.name)
        if f.maximum is not None and number > f.maximum:
            raise ValidationFailure(f"{f.label} must be at most {f.maximum:g}.", f.name)
        return number

    @staticmethod
    def _parse_reference(f: FieldSpec, text: str) -> int:
        if not _INTEGER_TEXT.fullmatch(text):
            raise ValidationFailure(f"Select a valid {f.label.lower()}.", f.name)
        key = int(text)
        if key <= 0:
            raise ValidationFailure(f"Select a valid {f.label.lower()}.", f.name)
        return key

    # ----- reads -----

    async def fetch_all(self, client: DataServiceClient) -> List[Dict[str, Any]]:
        rows = await client.list(
            self.relation,
            embed=self.embeds,
            order_by=self.order_by,
            ascending=self.ascending,
        )
        return [self.decorate(row) for row in rows]

    async def fetch_one(self, client: DataServiceClient, key: int) -> Dict[str, Any]:
        rows = await client.list(self.relation, embed=self.embeds, filters={"id": key})
        if not rows:
            raise DataServiceError(ErrorKind.NOT_FOUND, f"{self.noun.capitalize()} not found")
        return self.decorate(rows[0])

    async def dropdown(self, client: DataServiceClient) -> List[Dict[str, Any]]:
        rows = await client.list(self.relation, order_by=self.dropdown_order, ascending=True)
        return [{"label": self.label(self.decorate(row)), "value": row["id"]} for row in rows]

    # ----- writes -----

    async def create(self, client: DataServiceClient, payload: Mapping[str, Any]) -> Dict[str, Any]:
        try:
            return await client.insert(self.relation, payload)
        except DataServiceError as e:
            raise self._reword(e, "create")

    async def update(self, client: DataServiceClient, key: int, payload: Mapping[str, Any]) -> Dict[str, Any]:
        try:
            return await client.update(self.relation, key, payload)
        except DataServiceError as e:
            raise self._reword(e, "update")

    async def remove(self, client: DataServiceClient, key: int) -> None:
        try:
            await client.delete(self.relation, key)
        except DataServiceError as e:
            if e.error_kind is ErrorKind.REFERENTIAL_CONFLICT:
                raise DataServiceError(e.error_kind, await self._dependents_message(client, key))
            raise self._reword(e, "delete")

    def _reword(self, error: DataServiceError, action: str) -> DataServiceError:
        kind = error.error_kind
        if kind is ErrorKind.UNIQUENESS_CONFLICT:
            message = f"Could not {action} {self.noun}: {self.uniqueness_hint}"
        elif kind is ErrorKind.REFERENTIAL_CONFLICT:
            message = (
                f"Could not {action} {self.noun}: a selected reference no longer exists. "
                "Reload the options and choose again."
            )
        elif kind is ErrorKind.NOT_FOUND:
            message = f"{self.noun.capitalize()} not found"
        else:
            message = f"Could not {action} {self.noun}: {error.message}"
        return DataServiceError(kind, message)

    async def _dependents_message(self, client: DataServiceClient, key: int) -> str:
        parts = []
        for dep in self.dependents:
            try:
                n = await client.count(dep.relation, {dep.foreign_key: key})
            except DataServiceError:
                logger.exception("Counting %s dependents of %s %s failed", dep.relation, self.relation, key)
                continue
            if n:
                parts.append(f"{n} {dep.singular if n == 1 else dep.plural}")
        if not parts:
            return f"Cannot delete {self.noun}: other records still reference it. Reassign or remove them first."
        verb = "references" if len(parts) == 1 and parts[0].startswith("1 ") else "reference"
        listed = parts[0] if len(parts) == 1 else f"{', '.join(parts[:-1])} and {parts[-1]}"
        return (
            f"Cannot delete {self.noun}: {listed} {verb} this {self.noun}. "
            "Reassign or remove them first."
        )

