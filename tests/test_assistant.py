import json
from typing import AsyncGenerator

import httpx
import pytest
from httpx import AsyncClient

from app.api.v1.assistant.router import get_http_client, get_webhook_url
from app.main import app

WEBHOOK = "https://hooks.campus.test/assistant"


def _use_webhook(handler, url: str = WEBHOOK) -> list:
    """Route the assistant through an in-process transport; returns the list of captured requests."""
    seen = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    async def http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(record)) as http:
            yield http

    app.dependency_overrides[get_http_client] = http_client
    app.dependency_overrides[get_webhook_url] = lambda: url
    return seen


async def test_answer_is_relayed(client: AsyncClient) -> None:
    seen = _use_webhook(lambda request: httpx.Response(200, json={"answer": "There are 3 students."}))

    response = await client.post("/api/v1/assistant/ask", json={"question": "  How many students?  "})

    assert response.status_code == 200
    assert response.json() == {"answer": "There are 3 students."}
    assert len(seen) == 1
    assert str(seen[0].url) == WEBHOOK
    assert json.loads(seen[0].content) == {"question": "How many students?"}


async def test_blank_question_is_not_sent(client: AsyncClient) -> None:
    seen = _use_webhook(lambda request: httpx.Response(200, json={"answer": "unused"}))

    response = await client.post("/api/v1/assistant/ask", json={"question": "   "})

    assert response.status_code == 422
    assert response.headers["X-Error-Kind"] == "validation"
    assert seen == []


async def test_unconfigured_assistant_is_503(client: AsyncClient) -> None:
    _use_webhook(lambda request: httpx.Response(200, json={"answer": "unused"}), url=None)

    response = await client.post("/api/v1/assistant/ask", json={"question": "Hello?"})

    assert response.status_code == 503


@pytest.mark.parametrize(
    "webhook_response",
    [
        httpx.Response(500, text="boom"),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"reply": "wrong field"}),
    ],
)
async def test_webhook_failures_are_502(client: AsyncClient, webhook_response: httpx.Response) -> None:
    seen = _use_webhook(lambda request: webhook_response)

    response = await client.post("/api/v1/assistant/ask", json={"question": "Hello?"})

    assert response.status_code == 502
    assert len(seen) == 1


async def test_unreachable_webhook_is_502(client: AsyncClient) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _use_webhook(refuse)

    response = await client.post("/api/v1/assistant/ask", json={"question": "Hello?"})

    assert response.status_code == 502
    assert "unreachable" in response.json()["detail"]
