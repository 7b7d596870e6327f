from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.catalogs.filtering import ALL
from app.core.exceptions import ServiceError, to_http_exception
from app.core.schemas import DropdownItem
from app.db.data_service import DataServiceClient, get_data_service

from .schemas import CareerForm, CareerResponse
from . import service

router = APIRouter(prefix="/api/v1/careers", tags=["careers"])


@router.get("", response_model=List[CareerResponse])
async def list_careers(
    q: str = Query("", description="Match on name, id, area name or status"),
    academic_level: str = Query(ALL),
    status_filter: str = Query(ALL, alias="status"),
    client: DataServiceClient = Depends(get_data_service),
) -> List[CareerResponse]:
    try:
        return await service.list_careers(
            client, q, {"academic_level": academic_level, "status": status_filter}
        )
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/dropdown", response_model=List[DropdownItem])
async def career_dropdown(client: DataServiceClient = Depends(get_data_service)) -> List[DropdownItem]:
    try:
        return await service.get_career_dropdown(client)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{career_id}", response_model=CareerResponse)
async def get_career(career_id: int, client: DataServiceClient = Depends(get_data_service)) -> CareerResponse:
    try:
        return await service.get_career(client, career_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{career_id}/edit", response_model=CareerForm)
async def get_career_form(career_id: int, client: DataServiceClient = Depends(get_data_service)) -> CareerForm:
    try:
        return await service.get_career_form(client, career_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.post("", response_model=CareerResponse, status_code=status.HTTP_201_CREATED)
async def create_career(
    payload: CareerForm,
    client: DataServiceClient = Depends(get_data_service),
) -> CareerResponse:
    try:
        return await service.create_career(client, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.put("/{career_id}", response_model=CareerResponse)
async def update_career(
    career_id: int,
    payload: CareerForm,
    client: DataServiceClient = Depends(get_data_service),
) -> CareerResponse:
    try:
        return await service.update_career(client, career_id, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.delete("/{career_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_career(career_id: int, client: DataServiceClient = Depends(get_data_service)) -> None:
    try:
        await service.delete_career(client, career_id)
    except ServiceError as e:
        raise to_http_exception(e)
