"""Optional "ask a question" affordance backed by an external webhook."""

import logging
from typing import Optional

import httpx
from fastapi import status

from app.core.exceptions import ServiceError, ValidationFailure

logger = logging.getLogger(__name__)


async def ask_question(http: httpx.AsyncClient, webhook_url: Optional[str], question: str) -> str:
    """POST ``{"question": ...}`` to the webhook and return its ``answer`` field. No retry."""
    question = (question or "").strip()
    if not question:
        raise ValidationFailure("Question is required.", "question")
    if not webhook_url:
        raise ServiceError("The assistant is not configured", status.HTTP_503_SERVICE_UNAVAILABLE)
    try:
        response = await http.post(webhook_url, json={"question": question})
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.warning("Assistant webhook answered %s", e.response.status_code)
        raise ServiceError(
            f"The assistant failed to answer (HTTP {e.response.status_code})", status.HTTP_502_BAD_GATEWAY
        )
    except httpx.HTTPError as e:
        logger.warning("Assistant webhook unreachable: %s", e)
        raise ServiceError(f"The assistant is unreachable: {e}", status.HTTP_502_BAD_GATEWAY)
    except ValueError:
        raise ServiceError("The assistant returned a malformed response", status.HTTP_502_BAD_GATEWAY)
    answer = data.get("answer") if isinstance(data, dict) else None
    if not isinstance(answer, str):
        raise ServiceError("The assistant response has no answer", status.HTTP_502_BAD_GATEWAY)
    return answer
