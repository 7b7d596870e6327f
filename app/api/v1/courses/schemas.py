from typing import Optional

from pydantic import BaseModel

from app.core.schemas import FormPayload, NamedRef


class CourseForm(FormPayload):
    name: str = ""
    level: str = ""
    modality: str = ""
    duration_weeks: str = ""
    credits: str = ""
    max_capacity: str = ""
    status: str = ""
    area_id: str = ""
    teacher_id: str = ""


class CourseTeacherRef(BaseModel):
    id: int
    full_name: str


class CourseResponse(BaseModel):
    id: int
    name: str
    level: str
    modality: str
    duration_weeks: Optional[int] = None
    credits: Optional[int] = None
    max_capacity: Optional[int] = None
    status: str
    area_id: Optional[int] = None
    teacher_id: Optional[int] = None
    area: Optional[NamedRef] = None
    teacher: Optional[CourseTeacherRef] = None

    class Config:
        from_attributes = True
