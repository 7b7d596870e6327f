from pydantic import BaseModel

from app.core.schemas import FormPayload


class AreaForm(FormPayload):
    name: str = ""


class AreaResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
