from typing import Any, Dict, List, Mapping

from app.catalogs.filtering import filter_rows
from app.catalogs.repository import CatalogRepository, Dependent, FieldSpec
from app.db.data_service import DataServiceClient


class AreaRepository(CatalogRepository):
    relation = "academic_area"
    noun = "academic area"
    plural = "academic areas"
    fields = (FieldSpec("name", "Area name", required=True),)
    search_fields = ("name", "id")
    dropdown_order = "name"
    dependents = (
        Dependent("career", "area_id", "career", "careers"),
        Dependent("course", "area_id", "course", "courses"),
        Dependent("teacher", "area_id", "teacher", "teachers"),
    )


repository = AreaRepository()


async def list_areas(client: DataServiceClient, search: str = "") -> List[Dict[str, Any]]:
    rows = await repository.fetch_all(client)
    return filter_rows(rows, search, search_fields=repository.search_fields)


async def get_area(client: DataServiceClient, area_id: int) -> Dict[str, Any]:
    return await repository.fetch_one(client, area_id)


async def get_area_form(client: DataServiceClient, area_id: int) -> Dict[str, str]:
    return repository.to_edit_shape(await repository.fetch_one(client, area_id))


async def create_area(client: DataServiceClient, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    row = await repository.create(client, payload)
    return await repository.fetch_one(client, row["id"])


async def update_area(client: DataServiceClient, area_id: int, values: Mapping[str, Any]) -> Dict[str, Any]:
    payload = repository.to_persist_shape(values)
    await repository.update(client, area_id, payload)
    return await repository.fetch_one(client, area_id)


async def delete_area(client: DataServiceClient, area_id: int) -> None:
    await repository.remove(client, area_id)


async def get_area_dropdown(client: DataServiceClient) -> List[Dict[str, Any]]:
    return await repository.dropdown(client)
