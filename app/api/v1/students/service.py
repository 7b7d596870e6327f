from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from app.catalogs.filtering import FilterColumn, filter_rows
from app.catalogs.repository import (
    CHOICE,
    DATE,
    DECIMAL,
    EMAIL,
    INTEGER,
    REFERENCE,
    CatalogRepository,
    FieldSpec,
    person_full_name,
)
from app.core.enums import StudentStatus, values
from app.db.data_service import DataServiceClient, Embed


class StudentRepository(CatalogRepository):
    relation = "student"
    noun = "student"
    plural = "students"
    fields = (
        FieldSpec("student_number", "Student number", required=True),
        FieldSpec("first_name", "First name", required=True),
        FieldSpec("last_name_paternal", "Paternal last name", required=True),
        FieldSpec("last_name_maternal", "Maternal last name"),
        FieldSpec("email", "Institutional email", kind=EMAIL, required=True),
        FieldSpec("phone", "Phone"),
        FieldSpec("birth_date", "Birth date", kind=DATE, required=True),
        FieldSpec("enrollment_date", "Enrollment date", kind=DATE, required=True),
        FieldSpec("career_id", "Career", kind=REFERENCE, required=True, embed_alias="career"),
        FieldSpec("course_id", "Current course", kind=REFERENCE, required=True, embed_alias="course"),
        FieldSpec("current_semester", "Current semester", kind=INTEGER, minimum=1, default="1"),
        FieldSpec("average_grade", "Average grade", kind=DECIMAL, minimum=0, maximum=100),
        FieldSpec("status", "Status", kind=CHOICE, choices=values(StudentStatus), default=StudentStatus.ACTIVE.value),
    )
    embeds = (
        Embed("career", "career_id", "career", ("id", "name")),
        Embed("course", "course_id", "course", ("id", "name")),
    )
    search_fields = ("full_name", "career.name", "course.name", "email", "student_number")
    filter_columns = (
        FilterColumn("status", "status", default=StudentStatus.ACTIVE.value),
        FilterColumn("career", "career.name"),
    )
    uniqueness_hint = "the student number or email is already registered. Check both for duplicates."
    dropdown_order = "last_name_paternal"

    def decorate(self, row: Dict[str, Any]) -> Dict[str, Any]:
        row["full_name"] = person_full_name(row)
        return row

    def label(self, row: Mapping[str, Any]) -> str:
        name = row.get("full_name") or person_full_name(row)
        return f"{name} ({row.get('student_number')})"

    def blank_form(self) -> Dict[str, str]:
        form = super().blank_form()
        form["enrollment_date"] = date.today().isoformat()
        return form


repository = StudentRepository()


async def list_students(
    client: DataServiceClient,
    search: str = "",
    filters: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    rows = await repository.fetch_all(client)
    return filter_rows(rows, search, filters, repository.search_fields, repository.filter_columns)


async def list_students_for_charts(client: DataServiceClient) -> List[Dict[str, Any]]:
    """Status, course and embedded career of every student; the dashboard's only input rows."""
    return await client.list(
        repository.relation,
        select=("id", "status", "course_id"),
        embed=(Embed("career", "career_id", "career", ("id", "name")),),
    )


async def get_student(client: DataServiceClient, student_id: int) -> Dict[str, Any]:
    return await repository.fetch_one(client, student_id)


async def get_student_form(client: DataServiceClient, student_id: int) -> Dict[str, str]:
    return repository.to_edit_shape(await repository.fetch_one(client, student_id))


async def create_student(client: DataServiceClient, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    row = await repository.create(client, payload)
    return await repository.fetch_one(client, row["id"])


async def update_student(client: DataServiceClient, student_id: int, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    await repository.update(client, student_id, payload)
    return await repository.fetch_one(client, student_id)


async def delete_student(client: DataServiceClient, student_id: int) -> None:
    await repository.remove(client, student_id)


async def get_student_dropdown(client: DataServiceClient) -> List[Dict[str, Any]]:
    return await repository.dropdown(client)


def blank_student_form() -> Dict[str, str]:
    return repository.blank_form()
