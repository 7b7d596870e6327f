import asyncio

import pytest

from app.core.enums import ErrorKind
from app.core.exceptions import DataServiceError
from app.db.data_service import DataServiceClient, Embed


async def test_list_with_select_filters_and_order(demo_campus: DataServiceClient) -> None:
    rows = await demo_campus.list(
        "student",
        select=("id", "student_number"),
        filters={"status": ["Active", "Graduated"]},
        order_by="id",
        ascending=False,
    )
    assert rows == [{"id": 2, "student_number": "A0002"}, {"id": 1, "student_number": "A0001"}]


async def test_embed_adds_foreign_key_to_selection(demo_campus: DataServiceClient) -> None:
    rows = await demo_campus.list(
        "course",
        select=("id",),
        embed=(Embed("teacher", "teacher_id", "teacher", ("first_name",)),),
        limit=1,
    )
    assert rows == [{"id": 1, "teacher_id": 1, "teacher": {"id": 1, "first_name": "Ada"}}]


async def test_embed_of_null_reference_is_none(demo_campus: DataServiceClient) -> None:
    row = await demo_campus.insert("course", {"name": "Seminar", "level": "Diploma", "modality": "Online", "status": "Active"})
    rows = await demo_campus.list(
        "course", embed=(Embed("academic_area", "area_id", "area"),), filters={"area_id": None}
    )
    assert [r["id"] for r in rows] == [row["id"]]
    assert rows[0]["area"] is None


async def test_count_with_filters(demo_campus: DataServiceClient) -> None:
    assert await demo_campus.count("student") == 3
    assert await demo_campus.count("student", {"career_id": 1}) == 2


async def test_concurrent_calls_use_independent_sessions(demo_campus: DataServiceClient) -> None:
    counts = await asyncio.gather(*(demo_campus.count(r) for r in ("academic_area", "career", "teacher", "course", "student")))
    assert counts == [2, 2, 2, 2, 3]


async def test_update_patches_only_given_columns(demo_campus: DataServiceClient) -> None:
    row = await demo_campus.update("student", 3, {"status": "Graduated"})
    assert row["status"] == "Graduated"
    assert row["first_name"] == "Mary"


async def test_unknown_relation_and_column(data_service: DataServiceClient) -> None:
    with pytest.raises(DataServiceError) as exc:
        await data_service.list("classroom")
    assert exc.value.error_kind is ErrorKind.GENERIC

    with pytest.raises(DataServiceError) as exc:
        await data_service.insert("academic_area", {"name": "Arts", "color": "red"})
    assert "Unknown column 'color'" in exc.value.message


async def test_delete_missing_row_is_not_found(data_service: DataServiceClient) -> None:
    with pytest.raises(DataServiceError) as exc:
        await data_service.delete("career", 7)
    assert exc.value.error_kind is ErrorKind.NOT_FOUND
    assert exc.value.status_code == 404


async def test_raw_uniqueness_and_referential_kinds(demo_campus: DataServiceClient) -> None:
    existing = (await demo_campus.list("student", filters={"id": 1}))[0]
    duplicate = {k: v for k, v in existing.items() if k != "id"}
    with pytest.raises(DataServiceError) as exc:
        await demo_campus.insert("student", duplicate)
    assert exc.value.error_kind is ErrorKind.UNIQUENESS_CONFLICT
    assert exc.value.status_code == 409

    with pytest.raises(DataServiceError) as exc:
        await demo_campus.delete("academic_area", 1)
    assert exc.value.error_kind is ErrorKind.REFERENTIAL_CONFLICT
