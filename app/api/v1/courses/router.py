from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.catalogs.filtering import ALL
from app.core.exceptions import ServiceError, to_http_exception
from app.core.schemas import DropdownItem
from app.db.data_service import DataServiceClient, get_data_service

from .schemas import CourseForm, CourseResponse
from . import service

router = APIRouter(prefix="/api/v1/courses", tags=["courses"])


@router.get("", response_model=List[CourseResponse])
async def list_courses(
    q: str = Query("", description="Match on name, id, teacher name or area name"),
    level: str = Query(ALL),
    modality: str = Query(ALL),
    status_filter: str = Query(ALL, alias="status"),
    client: DataServiceClient = Depends(get_data_service),
) -> List[CourseResponse]:
    try:
        return await service.list_courses(
            client, q, {"level": level, "modality": modality, "status": status_filter}
        )
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/dropdown", response_model=List[DropdownItem])
async def course_dropdown(client: DataServiceClient = Depends(get_data_service)) -> List[DropdownItem]:
    try:
        return await service.get_course_dropdown(client)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(course_id: int, client: DataServiceClient = Depends(get_data_service)) -> CourseResponse:
    try:
        return await service.get_course(client, course_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{course_id}/edit", response_model=CourseForm)
async def get_course_form(course_id: int, client: DataServiceClient = Depends(get_data_service)) -> CourseForm:
    try:
        return await service.get_course_form(client, course_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
    payload: CourseForm,
    client: DataServiceClient = Depends(get_data_service),
) -> CourseResponse:
    try:
        return await service.create_course(client, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.put("/{course_id}", response_model=CourseResponse)
async def update_course(
    course_id: int,
    payload: CourseForm,
    client: DataServiceClient = Depends(get_data_service),
) -> CourseResponse:
    try:
        return await service.update_course(client, course_id, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_course(course_id: int, client: DataServiceClient = Depends(get_data_service)) -> None:
    try:
        await service.delete_course(client, course_id)
    except ServiceError as e:
        raise to_http_exception(e)
