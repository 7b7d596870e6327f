from typing import AsyncGenerator, Optional

import httpx
from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.exceptions import ServiceError, to_http_exception

from .schemas import AskRequest, AskResponse
from . import service

router = APIRouter(prefix="/api/v1/assistant", tags=["assistant"])


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(timeout=settings.assistant_timeout_seconds) as client:
        yield client


def get_webhook_url() -> Optional[str]:
    return settings.assistant_webhook_url


@router.post("/ask", response_model=AskResponse)
async def ask(
    payload: AskRequest,
    http: httpx.AsyncClient = Depends(get_http_client),
    webhook_url: Optional[str] = Depends(get_webhook_url),
) -> AskResponse:
    try:
        answer = await service.ask_question(http, webhook_url, payload.question)
    except ServiceError as e:
        raise to_http_exception(e)
    return AskResponse(answer=answer)
