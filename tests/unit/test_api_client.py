"""Unit tests for the backend API client over a mocked transport."""

import json

import httpx
import pytest

from domain.models import Language, SubmissionRequest
from infrastructure.api_client import ChallengeApiClient, error_message
from infrastructure.errors import QuestionNotFoundError, TransportError
from infrastructure.http_client import AsyncHTTPClient

QUESTION = {
    "_id": "q-1",
    "title": "Reverse",
    "description": "Reverse a string.",
    "topic": "Strings",
    "difficulty": "Medium",
    "testCases": [{"input": "abc", "expectedOutput": "cba"}],
}


def make_client(handler) -> ChallengeApiClient:
    transport = httpx.MockTransport(handler)
    http = httpx.AsyncClient(transport=transport, base_url="http://backend.test")
    return ChallengeApiClient(AsyncHTTPClient(client=http))


@pytest.mark.asyncio
async def test_fetch_question_hits_question_endpoint():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"question": QUESTION})

    client = make_client(handler)
    question = await client.fetch_question("q-1")

    assert question.identifier == "q-1"
    assert question.test_cases[0].expected_output == "cba"
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api/v1/questions/q-1"
    await client.close()


@pytest.mark.asyncio
async def test_fetch_question_404_is_not_found():
    client = make_client(lambda request: httpx.Response(404, json={"message": "Not found"}))

    with pytest.raises(QuestionNotFoundError) as exc_info:
        await client.fetch_question("q-404")

    assert exc_info.value.question_id == "q-404"


@pytest.mark.asyncio
async def test_fetch_question_with_wrong_shape_is_not_found():
    client = make_client(lambda request: httpx.Response(200, json={"data": QUESTION}))

    with pytest.raises(QuestionNotFoundError):
        await client.fetch_question("q-1")


@pytest.mark.asyncio
async def test_fetch_question_non_json_body_is_transport_error():
    client = make_client(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))

    with pytest.raises(TransportError):
        await client.fetch_question("q-1")


@pytest.mark.asyncio
async def test_network_failure_is_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    with pytest.raises(TransportError):
        await client.fetch_question("q-1")


@pytest.mark.asyncio
async def test_submit_posts_json_with_bearer_header():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"submission": {"id": "1"}})

    client = make_client(handler)
    request = SubmissionRequest(code="print(1)", language=Language.PYTHON, token="abc")

    response = await client.submit_solution("q-1", request)

    assert response.status_code == 201
    sent = seen[0]
    assert sent.method == "POST"
    assert sent.url.path == "/api/v1/submissions/q-1"
    assert sent.headers["authorization"] == "Bearer abc"
    assert sent.headers["content-type"] == "application/json"
    assert json.loads(sent.content) == {"code": "print(1)", "language": "python"}


@pytest.mark.asyncio
async def test_submit_returns_error_responses_unraised():
    client = make_client(lambda request: httpx.Response(422, json={"message": "Bad language"}))
    request = SubmissionRequest(code="", language=Language.CPP)

    response = await client.submit_solution("q-1", request)

    assert response.status_code == 422
    assert error_message(response) == "Bad language"
