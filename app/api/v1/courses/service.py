from typing import Any, Dict, List, Mapping, Optional

from app.catalogs.filtering import FilterColumn, filter_rows
from app.catalogs.repository import (
    CHOICE,
    INTEGER,
    REFERENCE,
    CatalogRepository,
    Dependent,
    FieldSpec,
    person_full_name,
)
from app.core.enums import CourseLevel, CourseModality, CourseStatus, values
from app.db.data_service import DataServiceClient, Embed

TEACHER_NAME_COLUMNS = ("id", "first_name", "last_name_paternal", "last_name_maternal")


class CourseRepository(CatalogRepository):
    relation = "course"
    noun = "course"
    plural = "courses"
    fields = (
        FieldSpec("name", "Course name", required=True),
        FieldSpec("level", "Level", kind=CHOICE, choices=values(CourseLevel), default=CourseLevel.BACHELOR.value),
        FieldSpec(
            "modality",
            "Modality",
            kind=CHOICE,
            choices=values(CourseModality),
            default=CourseModality.IN_PERSON.value,
        ),
        FieldSpec("duration_weeks", "Duration in weeks", kind=INTEGER, minimum=0, exclusive_minimum=True),
        FieldSpec("credits", "Credits", kind=INTEGER, minimum=0, exclusive_minimum=True),
        FieldSpec("max_capacity", "Maximum capacity", kind=INTEGER, minimum=0, exclusive_minimum=True),
        FieldSpec("status", "Status", kind=CHOICE, choices=values(CourseStatus), default=CourseStatus.ACTIVE.value),
        FieldSpec("area_id", "Academic area", kind=REFERENCE, embed_alias="area"),
        FieldSpec("teacher_id", "Teacher", kind=REFERENCE, embed_alias="teacher"),
    )
    embeds = (
        Embed("academic_area", "area_id", "area", ("id", "name")),
        Embed("teacher", "teacher_id", "teacher", TEACHER_NAME_COLUMNS),
    )
    search_fields = ("name", "id", "teacher.full_name", "area.name")
    filter_columns = (
        FilterColumn("level", "level"),
        FilterColumn("modality", "modality"),
        FilterColumn("status", "status"),
    )
    dependents = (Dependent("student", "course_id", "student", "students"),)
    dropdown_order = "name"

    def decorate(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if row.get("teacher"):
            row["teacher"]["full_name"] = person_full_name(row["teacher"])
        return row


repository = CourseRepository()


async def list_courses(
    client: DataServiceClient,
    search: str = "",
    filters: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    rows = await repository.fetch_all(client)
    return filter_rows(rows, search, filters, repository.search_fields, repository.filter_columns)


async def list_recent_courses(client: DataServiceClient, limit: int = 5) -> List[Dict[str, Any]]:
    """Newest courses first (highest id), with their area embedded."""
    rows = await client.list(
        repository.relation,
        embed=repository.embeds,
        order_by="id",
        ascending=False,
        limit=limit,
    )
    return [repository.decorate(row) for row in rows]


async def get_course(client: DataServiceClient, course_id: int) -> Dict[str, Any]:
    return await repository.fetch_one(client, course_id)


async def get_course_form(client: DataServiceClient, course_id: int) -> Dict[str, str]:
    return repository.to_edit_shape(await repository.fetch_one(client, course_id))


async def create_course(client: DataServiceClient, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    row = await repository.create(client, payload)
    return await repository.fetch_one(client, row["id"])


async def update_course(client: DataServiceClient, course_id: int, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    await repository.update(client, course_id, payload)
    return await repository.fetch_one(client, course_id)


async def delete_course(client: DataServiceClient, course_id: int) -> None:
    await repository.remove(client, course_id)


async def get_course_dropdown(client: DataServiceClient) -> List[Dict[str, Any]]:
    return await repository.dropdown(client)
