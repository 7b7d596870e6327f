from datetime import date
from typing import Optional

from pydantic import BaseModel

from app.core.schemas import FormPayload, NamedRef


class TeacherForm(FormPayload):
    first_name: str = ""
    last_name_paternal: str = ""
    last_name_maternal: str = ""
    email: str = ""
    phone: str = ""
    hire_date: str = ""
    area_id: str = ""
    academic_level: str = ""


class TeacherResponse(BaseModel):
    id: int
    first_name: str
    last_name_paternal: str
    last_name_maternal: Optional[str] = None
    full_name: str
    email: str
    phone: Optional[str] = None
    hire_date: Optional[date] = None
    area_id: int
    academic_level: str
    area: Optional[NamedRef] = None

    class Config:
        from_attributes = True
