from typing import Any, Dict, List, Mapping, Optional

from app.catalogs.filtering import FilterColumn, filter_rows
from app.catalogs.repository import (
    CHOICE,
    INTEGER,
    REFERENCE,
    CatalogRepository,
    Dependent,
    FieldSpec,
)
from app.core.enums import AcademicLevel, CareerStatus, values
from app.db.data_service import DataServiceClient, Embed


class CareerRepository(CatalogRepository):
    relation = "career"
    noun = "career"
    plural = "careers"
    fields = (
        FieldSpec("name", "Career name", required=True),
        FieldSpec(
            "academic_level",
            "Academic level",
            kind=CHOICE,
            required=True,
            choices=values(AcademicLevel),
            default=AcademicLevel.BACHELOR.value,
        ),
        FieldSpec("duration_semesters", "Duration in semesters", kind=INTEGER, required=True, minimum=0, exclusive_minimum=True),
        FieldSpec("total_credits", "Total credits", kind=INTEGER, required=True, minimum=0, exclusive_minimum=True),
        FieldSpec("area_id", "Academic area", kind=REFERENCE, required=True, embed_alias="area"),
        FieldSpec("status", "Status", kind=CHOICE, choices=values(CareerStatus), default=CareerStatus.ACTIVE.value),
    )
    embeds = (Embed("academic_area", "area_id", "area", ("id", "name")),)
    search_fields = ("name", "id", "area.name", "status")
    filter_columns = (
        FilterColumn("academic_level", "academic_level"),
        FilterColumn("status", "status", default=CareerStatus.ACTIVE.value),
    )
    dependents = (Dependent("student", "career_id", "student", "students"),)
    dropdown_order = "name"


repository = CareerRepository()


async def list_careers(
    client: DataServiceClient,
    search: str = "",
    filters: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    rows = await repository.fetch_all(client)
    return filter_rows(rows, search, filters, repository.search_fields, repository.filter_columns)


async def get_career(client: DataServiceClient, career_id: int) -> Dict[str, Any]:
    return await repository.fetch_one(client, career_id)


async def get_career_form(client: DataServiceClient, career_id: int) -> Dict[str, str]:
    return repository.to_edit_shape(await repository.fetch_one(client, career_id))


async def create_career(client: DataServiceClient, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    row = await repository.create(client, payload)
    return await repository.fetch_one(client, row["id"])


async def update_career(client: DataServiceClient, career_id: int, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    await repository.update(client, career_id, payload)
    return await repository.fetch_one(client, career_id)


async def delete_career(client: DataServiceClient, career_id: int) -> None:
    await repository.remove(client, career_id)


async def get_career_dropdown(client: DataServiceClient) -> List[Dict[str, Any]]:
    return await repository.dropdown(client)
