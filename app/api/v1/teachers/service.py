from typing import Any, Dict, List, Mapping, Optional

from app.catalogs.filtering import FilterColumn, filter_rows
from app.catalogs.repository import (
    CHOICE,
    DATE,
    EMAIL,
    REFERENCE,
    CatalogRepository,
    Dependent,
    FieldSpec,
    person_full_name,
)
from app.core.enums import AcademicLevel, values
from app.db.data_service import DataServiceClient, Embed


class TeacherRepository(CatalogRepository):
    relation = "teacher"
    noun = "teacher"
    plural = "teachers"
    fields = (
        FieldSpec("first_name", "First name", required=True),
        FieldSpec("last_name_paternal", "Paternal last name", required=True),
        FieldSpec("last_name_maternal", "Maternal last name"),
        FieldSpec("email", "Email", kind=EMAIL, required=True),
        FieldSpec("phone", "Phone"),
        FieldSpec("hire_date", "Hire date", kind=DATE),
        FieldSpec("area_id", "Academic area", kind=REFERENCE, required=True, embed_alias="area"),
        FieldSpec(
            "academic_level",
            "Academic level",
            kind=CHOICE,
            required=True,
            choices=values(AcademicLevel),
            default=AcademicLevel.BACHELOR.value,
        ),
    )
    embeds = (Embed("academic_area", "area_id", "area", ("id", "name")),)
    search_fields = ("full_name", "email", "area.name", "id")
    filter_columns = (
        FilterColumn("area", "area.name"),
        FilterColumn("academic_level", "academic_level"),
    )
    dependents = (Dependent("course", "teacher_id", "course", "courses"),)
    dropdown_order = "last_name_paternal"

    def decorate(self, row: Dict[str, Any]) -> Dict[str, Any]:
        row["full_name"] = person_full_name(row)
        return row

    def label(self, row: Mapping[str, Any]) -> str:
        return row.get("full_name") or person_full_name(row)


repository = TeacherRepository()


async def list_teachers(
    client: DataServiceClient,
    search: str = "",
    filters: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    rows = await repository.fetch_all(client)
    return filter_rows(rows, search, filters, repository.search_fields, repository.filter_columns)


async def get_teacher(client: DataServiceClient, teacher_id: int) -> Dict[str, Any]:
    return await repository.fetch_one(client, teacher_id)


async def get_teacher_form(client: DataServiceClient, teacher_id: int) -> Dict[str, str]:
    return repository.to_edit_shape(await repository.fetch_one(client, teacher_id))


async def create_teacher(client: DataServiceClient, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    row = await repository.create(client, payload)
    return await repository.fetch_one(client, row["id"])


async def update_teacher(client: DataServiceClient, teacher_id: int, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    await repository.update(client, teacher_id, payload)
    return await repository.fetch_one(client, teacher_id)


async def delete_teacher(client: DataServiceClient, teacher_id: int) -> None:
    await repository.remove(client, teacher_id)


async def get_teacher_dropdown(client: DataServiceClient) -> List[Dict[str, Any]]:
    return await repository.dropdown(client)
