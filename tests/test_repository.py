from datetime import date

import pytest

from app.api.v1.areas.service import repository as areas
from app.api.v1.careers.service import repository as careers
from app.api.v1.courses.service import repository as courses
from app.api.v1.students.service import repository as students
from app.api.v1.teachers.service import repository as teachers
from app.core.enums import ErrorKind
from app.core.exceptions import DataServiceError, ValidationFailure
from app.db.data_service import DataServiceClient


def _student_values(**overrides) -> dict:
    values = students.blank_form()
    values.update(
        student_number="B0100",
        first_name="Katherine",
        last_name_paternal="Johnson",
        email="katherine.johnson@campus.edu",
        birth_date="2003-08-26",
        enrollment_date="2024-02-01",
        career_id="1",
        course_id="1",
    )
    values.update(overrides)
    return values


# ----- persist shape (no data service involved) -----


def test_required_field_is_reported_first() -> None:
    with pytest.raises(ValidationFailure) as exc:
        careers.to_persist_shape(careers.blank_form())
    assert exc.value.message == "Career name is required."
    assert exc.value.field == "name"


def test_optional_choice_falls_back_to_default() -> None:
    payload = careers.to_persist_shape(
        {"name": "Physics", "academic_level": "Master", "duration_semesters": "4",
         "total_credits": "90", "area_id": "1", "status": ""}
    )
    assert payload == {
        "name": "Physics",
        "academic_level": "Master",
        "duration_semesters": 4,
        "total_credits": 90,
        "area_id": 1,
        "status": "Active",
    }


@pytest.mark.parametrize(
    "duration, message",
    [
        ("0", "Duration in semesters must be greater than 0."),
        ("abc", "Duration in semesters must be a number."),
        ("8.5", "Duration in semesters must be a whole number."),
    ],
)
def test_career_duration_rules(duration: str, message: str) -> None:
    values = {"name": "Physics", "academic_level": "Bachelor", "duration_semesters": duration,
              "total_credits": "90", "area_id": "1"}
    with pytest.raises(ValidationFailure) as exc:
        careers.to_persist_shape(values)
    assert exc.value.message == message


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"average_grade": "101"}, "Average grade must be between 0 and 100."),
        ({"current_semester": "0"}, "Current semester must be at least 1."),
        ({"email": "not-an-email"}, "Institutional email is not a valid email address."),
        ({"birth_date": "26/08/2003"}, "Birth date must be a date (YYYY-MM-DD)."),
        ({"career_id": "software"}, "Select a valid career."),
        ({"status": "Expelled"}, "Status must be one of: Active, TemporaryLeave, Graduated, PermanentLeave."),
    ],
)
def test_student_field_rules(overrides: dict, message: str) -> None:
    with pytest.raises(ValidationFailure) as exc:
        students.to_persist_shape(_student_values(**overrides))
    assert exc.value.message == message


def test_large_integers_keep_every_digit() -> None:
    payload = careers.to_persist_shape(
        {"name": "Physics", "academic_level": "Bachelor", "duration_semesters": "+8",
         "total_credits": "9007199254740993", "area_id": "1"}
    )
    assert payload["duration_semesters"] == 8
    assert payload["total_credits"] == 9007199254740993


@pytest.mark.parametrize(
    "repository, overrides, message",
    [
        (careers, {"duration_semesters": "1_000"}, "Duration in semesters must be a number."),
        (careers, {"duration_semesters": "1e3"}, "Duration in semesters must be a whole number."),
        (careers, {"total_credits": "٣"}, "Total credits must be a number."),
        (careers, {"area_id": "1_0"}, "Select a valid academic area."),
        (students, {"average_grade": "8_5"}, "Average grade must be a number."),
        (students, {"average_grade": "nan"}, "Average grade must be a number."),
        (students, {"average_grade": "1e999"}, "Average grade must be a number."),
    ],
)
def test_only_plain_numbers_are_accepted(repository, overrides: dict, message: str) -> None:
    if repository is careers:
        values = {"name": "Physics", "academic_level": "Bachelor", "duration_semesters": "8",
                  "total_credits": "90", "area_id": "1"}
        values.update(overrides)
    else:
        values = _student_values(**overrides)
    with pytest.raises(ValidationFailure) as exc:
        repository.to_persist_shape(values)
    assert exc.value.message == message


def test_student_persist_shape_converts_types() -> None:
    payload = students.to_persist_shape(_student_values(average_grade=" 87.5 ", last_name_maternal="  "))
    assert payload["birth_date"] == date(2003, 8, 26)
    assert payload["career_id"] == 1
    assert payload["current_semester"] == 1
    assert payload["average_grade"] == 87.5
    assert payload["last_name_maternal"] is None
    assert payload["status"] == "Active"


def test_blank_student_form_defaults() -> None:
    form = students.blank_form()
    assert form["enrollment_date"] == date.today().isoformat()
    assert form["current_semester"] == "1"
    assert form["status"] == "Active"
    assert form["student_number"] == ""


# ----- against the data service -----


async def test_edit_shape_of_student(demo_campus: DataServiceClient) -> None:
    shape = students.to_edit_shape(await students.fetch_one(demo_campus, 1))
    assert shape["career_id"] == "1"
    assert shape["birth_date"] == "2004-05-17"
    assert shape["average_grade"] == ""
    assert all(isinstance(v, str) for v in shape.values())


@pytest.mark.parametrize(
    "repository",
    [areas, careers, courses, teachers, students],
    ids=lambda repository: repository.relation,
)
async def test_every_row_survives_edit_and_persist(demo_campus: DataServiceClient, repository) -> None:
    # A course with every optional column empty, plus a graded student.
    await courses.create(demo_campus, courses.to_persist_shape({"name": "Open Seminar"}))
    await students.update(demo_campus, 2, {"average_grade": 91.25, "last_name_maternal": "Mathison"})

    rows = await repository.fetch_all(demo_campus)
    assert rows
    for row in rows:
        shape = repository.to_edit_shape(row)
        persisted = repository.to_persist_shape(shape)
        assert persisted == {name: row[name] for name in repository.field_names}, row["id"]

        again = repository.to_edit_shape(persisted)
        assert again == shape
        assert repository.to_persist_shape(again) == persisted


async def test_fetch_all_embeds_and_decorates(demo_campus: DataServiceClient) -> None:
    rows = await students.fetch_all(demo_campus)
    assert [r["id"] for r in rows] == [1, 2, 3]
    assert rows[0]["full_name"] == "Grace Hopper"
    assert rows[0]["career"] == {"id": 1, "name": "Software Engineering"}
    assert rows[2]["course"]["name"] == "Anatomy I"

    course_rows = await courses.fetch_all(demo_campus)
    assert course_rows[0]["teacher"]["full_name"] == "Ada Lovelace"


async def test_dropdowns_are_labelled_and_ordered(demo_campus: DataServiceClient) -> None:
    assert await areas.dropdown(demo_campus) == [
        {"label": "Engineering", "value": 1},
        {"label": "Health Sciences", "value": 2},
    ]
    assert [item["label"] for item in await students.dropdown(demo_campus)] == [
        "Grace Hopper (A0001)",
        "Mary Seacole (A0003)",
        "Alan Turing (A0002)",
    ]


async def test_duplicate_student_number_is_a_uniqueness_conflict(demo_campus: DataServiceClient) -> None:
    payload = students.to_persist_shape(_student_values(student_number="A0001"))
    with pytest.raises(DataServiceError) as exc:
        await students.create(demo_campus, payload)
    assert exc.value.error_kind is ErrorKind.UNIQUENESS_CONFLICT
    assert exc.value.message == (
        "Could not create student: the student number or email is already registered. "
        "Check both for duplicates."
    )
    assert await demo_campus.count("student") == 3


async def test_missing_reference_on_create(demo_campus: DataServiceClient) -> None:
    payload = careers.to_persist_shape(
        {"name": "Physics", "academic_level": "Bachelor", "duration_semesters": "8",
         "total_credits": "200", "area_id": "99"}
    )
    with pytest.raises(DataServiceError) as exc:
        await careers.create(demo_campus, payload)
    assert exc.value.error_kind is ErrorKind.REFERENTIAL_CONFLICT
    assert exc.value.message.startswith("Could not create career: a selected reference no longer exists.")


async def test_delete_referenced_career_names_its_students(demo_campus: DataServiceClient) -> None:
    with pytest.raises(DataServiceError) as exc:
        await careers.remove(demo_campus, 1)
    assert exc.value.error_kind is ErrorKind.REFERENTIAL_CONFLICT
    assert exc.value.message == (
        "Cannot delete career: 2 students reference this career. Reassign or remove them first."
    )
    assert await demo_campus.count("career") == 2


async def test_delete_referenced_teacher_counts_courses(demo_campus: DataServiceClient) -> None:
    await courses.create(
        demo_campus, courses.to_persist_shape({"name": "Compilers", "teacher_id": "1", "area_id": "1"})
    )
    with pytest.raises(DataServiceError) as exc:
        await teachers.remove(demo_campus, 1)
    assert exc.value.message == (
        "Cannot delete teacher: 2 courses reference this teacher. Reassign or remove them first."
    )


async def test_delete_referenced_area_lists_every_dependent(demo_campus: DataServiceClient) -> None:
    with pytest.raises(DataServiceError) as exc:
        await areas.remove(demo_campus, 1)
    assert exc.value.message == (
        "Cannot delete academic area: 1 career, 1 course and 1 teacher reference this academic area. "
        "Reassign or remove them first."
    )


async def test_unreferenced_row_is_deleted(demo_campus: DataServiceClient) -> None:
    area = await areas.create(demo_campus, areas.to_persist_shape({"name": "Humanities"}))
    await areas.remove(demo_campus, area["id"])
    assert await demo_campus.count("academic_area") == 2


async def test_missing_rows_are_not_found(demo_campus: DataServiceClient) -> None:
    with pytest.raises(DataServiceError) as exc:
        await courses.fetch_one(demo_campus, 999)
    assert exc.value.error_kind is ErrorKind.NOT_FOUND
    assert exc.value.message == "Course not found"

    with pytest.raises(DataServiceError) as exc:
        await students.update(demo_campus, 999, {"first_name": "Nobody"})
    assert exc.value.message == "Student not found"
