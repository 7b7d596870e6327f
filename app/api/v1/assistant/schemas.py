from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    question: str = Field(..., max_length=2000)


class AskResponse(BaseModel):
    answer: str
