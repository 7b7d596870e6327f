from datetime import date
from typing import Optional

from pydantic import BaseModel

from app.core.schemas import FormPayload, NamedRef


class StudentForm(FormPayload):
    student_number: str = ""
    first_name: str = ""
    last_name_paternal: str = ""
    last_name_maternal: str = ""
    email: str = ""
    phone: str = ""
    birth_date: str = ""
    enrollment_date: str = ""
    career_id: str = ""
    course_id: str = ""
    current_semester: str = ""
    average_grade: str = ""
    status: str = ""


class StudentResponse(BaseModel):
    id: int
    student_number: str
    first_name: str
    last_name_paternal: str
    last_name_maternal: Optional[str] = None
    full_name: str
    email: str
    phone: Optional[str] = None
    birth_date: date
    enrollment_date: date
    career_id: int
    course_id: int
    current_semester: int
    average_grade: Optional[float] = None
    status: str
    career: Optional[NamedRef] = None
    course: Optional[NamedRef] = None

    class Config:
        from_attributes = True
