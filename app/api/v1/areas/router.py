from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.core.exceptions import ServiceError, to_http_exception
from app.core.schemas import DropdownItem
from app.db.data_service import DataServiceClient, get_data_service

from .schemas import AreaForm, AreaResponse
from . import service

router = APIRouter(prefix="/api/v1/areas", tags=["areas"])


@router.get("", response_model=List[AreaResponse])
async def list_areas(
    q: str = Query("", description="Case-insensitive match on name or id"),
    client: DataServiceClient = Depends(get_data_service),
) -> List[AreaResponse]:
    try:
        return await service.list_areas(client, q)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/dropdown", response_model=List[DropdownItem])
async def area_dropdown(client: DataServiceClient = Depends(get_data_service)) -> List[DropdownItem]:
    try:
        return await service.get_area_dropdown(client)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{area_id}", response_model=AreaResponse)
async def get_area(area_id: int, client: DataServiceClient = Depends(get_data_service)) -> AreaResponse:
    try:
        return await service.get_area(client, area_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{area_id}/edit", response_model=AreaForm)
async def get_area_form(area_id: int, client: DataServiceClient = Depends(get_data_service)) -> AreaForm:
    try:
        return await service.get_area_form(client, area_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.post("", response_model=AreaResponse, status_code=status.HTTP_201_CREATED)
async def create_area(
    payload: AreaForm,
    client: DataServiceClient = Depends(get_data_service),
) -> AreaResponse:
    try:
        return await service.create_area(client, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.put("/{area_id}", response_model=AreaResponse)
async def update_area(
    area_id: int,
    payload: AreaForm,
    client: DataServiceClient = Depends(get_data_service),
) -> AreaResponse:
    try:
        return await service.update_area(client, area_id, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.delete("/{area_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_area(area_id: int, client: DataServiceClient = Depends(get_data_service)) -> None:
    try:
        await service.delete_area(client, area_id)
    except ServiceError as e:
        raise to_http_exception(e)
