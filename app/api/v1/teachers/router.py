from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.catalogs.filtering import ALL
from app.core.exceptions import ServiceError, to_http_exception
from app.core.schemas import DropdownItem
from app.db.data_service import DataServiceClient, get_data_service

from .schemas import TeacherForm, TeacherResponse
from . import service

router = APIRouter(prefix="/api/v1/teachers", tags=["teachers"])


@router.get("", response_model=List[TeacherResponse])
async def list_teachers(
    q: str = Query("", description="Match on full name, email, area name or id"),
    area: str = Query(ALL, description="Exact area name"),
    academic_level: str = Query(ALL),
    client: DataServiceClient = Depends(get_data_service),
) -> List[TeacherResponse]:
    try:
        return await service.list_teachers(
            client, q, {"area": area, "academic_level": academic_level}
        )
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/dropdown", response_model=List[DropdownItem])
async def teacher_dropdown(client: DataServiceClient = Depends(get_data_service)) -> List[DropdownItem]:
    try:
        return await service.get_teacher_dropdown(client)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{teacher_id}", response_model=TeacherResponse)
async def get_teacher(teacher_id: int, client: DataServiceClient = Depends(get_data_service)) -> TeacherResponse:
    try:
        return await service.get_teacher(client, teacher_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{teacher_id}/edit", response_model=TeacherForm)
async def get_teacher_form(teacher_id: int, client: DataServiceClient = Depends(get_data_service)) -> TeacherForm:
    try:
        return await service.get_teacher_form(client, teacher_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.post("", response_model=TeacherResponse, status_code=status.HTTP_201_CREATED)
async def create_teacher(
    payload: TeacherForm,
    client: DataServiceClient = Depends(get_data_service),
) -> TeacherResponse:
    try:
        return await service.create_teacher(client, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.put("/{teacher_id}", response_model=TeacherResponse)
async def update_teacher(
    teacher_id: int,
    payload: TeacherForm,
    client: DataServiceClient = Depends(get_data_service),
) -> TeacherResponse:
    try:
        return await service.update_teacher(client, teacher_id, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.delete("/{teacher_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_teacher(teacher_id: int, client: DataServiceClient = Depends(get_data_service)) -> None:
    try:
        await service.delete_teacher(client, teacher_id)
    except ServiceError as e:
        raise to_http_exception(e)
