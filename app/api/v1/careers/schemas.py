from typing import Optional

from pydantic import BaseModel

from app.core.schemas import FormPayload, NamedRef


class CareerForm(FormPayload):
    name: str = ""
    academic_level: str = ""
    duration_semesters: str = ""
    total_credits: str = ""
    area_id: str = ""
    status: str = ""


class CareerResponse(BaseModel):
    id: int
    name: str
    academic_level: str
    duration_semesters: int
    total_credits: int
    status: Optional[str] = None
    area_id: int
    area: Optional[NamedRef] = None

    class Config:
        from_attributes = True
