from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.catalogs.filtering import ALL
from app.core.exceptions import ServiceError, to_http_exception
from app.core.schemas import DropdownItem
from app.db.data_service import DataServiceClient, get_data_service

from .schemas import StudentForm, StudentResponse
from . import service

router = APIRouter(prefix="/api/v1/students", tags=["students"])


@router.get("", response_model=List[StudentResponse])
async def list_students(
    q: str = Query("", description="Match on full name, career, course, email or student number"),
    status_filter: str = Query(ALL, alias="status"),
    career: str = Query(ALL, description="Exact career name"),
    client: DataServiceClient = Depends(get_data_service),
) -> List[StudentResponse]:
    try:
        return await service.list_students(
            client, q, {"status": status_filter, "career": career}
        )
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/new", response_model=StudentForm)
async def new_student_form() -> StudentForm:
    """Blank create-mode form; enrollment date defaults to today."""
    return service.blank_student_form()


@router.get("/dropdown", response_model=List[DropdownItem])
async def student_dropdown(client: DataServiceClient = Depends(get_data_service)) -> List[DropdownItem]:
    try:
        return await service.get_student_dropdown(client)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(student_id: int, client: DataServiceClient = Depends(get_data_service)) -> StudentResponse:
    try:
        return await service.get_student(client, student_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.get("/{student_id}/edit", response_model=StudentForm)
async def get_student_form(student_id: int, client: DataServiceClient = Depends(get_data_service)) -> StudentForm:
    try:
        return await service.get_student_form(client, student_id)
    except ServiceError as e:
        raise to_http_exception(e)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
async def create_student(
    payload: StudentForm,
    client: DataServiceClient = Depends(get_data_service),
) -> StudentResponse:
    try:
        return await service.create_student(client, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.put("/{student_id}", response_model=StudentResponse)
async def update_student(
    student_id: int,
    payload: StudentForm,
    client: DataServiceClient = Depends(get_data_service),
) -> StudentResponse:
    try:
        return await service.update_student(client, student_id, payload.model_dump())
    except ServiceError as e:
        raise to_http_exception(e)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(student_id: int, client: DataServiceClient = Depends(get_data_service)) -> None:
    try:
        await service.delete_student(client, student_id)
    except ServiceError as e:
        raise to_http_exception(e)
