"""Unit tests for the submission lifecycle."""

import asyncio

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from domain.models import Language, SubmissionRequest, SubmissionStatus
from infrastructure.credentials import SessionStorage, StaticCredentialProvider, StorageCredentialProvider
from infrastructure.errors import TransportError, UnsupportedLanguageError
from services.submission import (
    ERROR_MESSAGE,
    REJECTED_FALLBACK,
    TIMEOUT_MESSAGE,
    SubmissionController,
)


def make_controller(api_client=None, credentials=None, **kwargs):
    return SubmissionController(
        "q-1",
        api_client=api_client or AsyncMock(),
        credentials=credentials or StaticCredentialProvider("secret"),
        navigator=MagicMock(),
        alerts=MagicMock(),
        **kwargs,
    )


def sent_request(api_client) -> SubmissionRequest:
    question_id, request = api_client.submit_solution.call_args.args
    assert question_id == "q-1"
    return request


def test_draft_defaults():
    controller = make_controller()

    assert controller.code == ""
    assert controller.language is Language.CPP
    assert controller.submitting is False


def test_language_change_keeps_code():
    """Test that switching language never touches the code buffer."""
    controller = make_controller()
    controller.code = "int main() { return 0; }"

    controller.language = "python"
    assert controller.language is Language.PYTHON
    controller.language = Language.JAVA

    assert controller.language is Language.JAVA
    assert controller.code == "int main() { return 0; }"


def test_unsupported_language_is_rejected():
    controller = make_controller()

    with pytest.raises(UnsupportedLanguageError):
        controller.language = "rust"
    assert controller.language is Language.CPP


def test_editor_binding_tracks_draft():
    """Test the props handed to the editor widget."""
    controller = make_controller()
    controller.language = "java"

    binding = controller.editor_binding()
    assert binding.language == "java"
    assert binding.value == ""

    binding.on_change("class Main {}")
    assert controller.code == "class Main {}"

    binding.on_change(None)
    assert controller.code == ""


@pytest.mark.asyncio
async def test_successful_submit_navigates_once():
    """Test that java + non-empty code + HTTP 201 navigates to the results page."""
    api_client = AsyncMock()
    api_client.submit_solution.return_value = httpx.Response(201, json={"submission": {"id": "1"}})

    controller = make_controller(api_client)
    controller.language = "java"
    controller.code = "class Main { public static void main(String[] a) {} }"

    result = await controller.submit()

    assert result.status is SubmissionStatus.ACCEPTED
    assert result.destination == "/my-submissions/q-1"
    assert controller.submitting is False
    controller.navigator.navigate.assert_called_once_with("/my-submissions/q-1")
    controller.alerts.alert.assert_not_called()

    request = sent_request(api_client)
    assert request.language is Language.JAVA
    assert request.to_payload() == {"code": controller.code, "language": "java"}
    assert request.authorization == "Bearer secret"


@pytest.mark.asyncio
async def test_success_is_decided_by_status_alone():
    """Test that a 2xx with a non-JSON body still counts as accepted."""
    api_client = AsyncMock()
    api_client.submit_solution.return_value = httpx.Response(200, text="ok")

    controller = make_controller(api_client, results_path="/results/{question_id}")
    result = await controller.submit()

    assert result.succeeded
    controller.navigator.navigate.assert_called_once_with("/results/q-1")


@pytest.mark.asyncio
async def test_rejected_submit_alerts_server_message():
    """Test that a non-2xx response surfaces the server message and keeps the draft."""
    api_client = AsyncMock()
    api_client.submit_solution.return_value = httpx.Response(
        400, json={"message": "Code must not be empty"}
    )

    controller = make_controller(api_client)
    controller.language = "python"
    controller.code = "print(input())"

    result = await controller.submit()

    assert result.status is SubmissionStatus.REJECTED
    assert result.status_code == 400
    assert controller.submitting is False
    assert controller.code == "print(input())"
    assert controller.language is Language.PYTHON
    controller.alerts.alert.assert_called_once_with("Code must not be empty")
    controller.navigator.navigate.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="Internal Server Error"),
        httpx.Response(401, json={"error": "no message field"}),
        httpx.Response(403, json={"message": "   "}),
    ],
)
async def test_rejected_submit_falls_back_to_generic_message(response):
    api_client = AsyncMock()
    api_client.submit_solution.return_value = response

    controller = make_controller(api_client)
    result = await controller.submit()

    assert result.status is SubmissionStatus.REJECTED
    controller.alerts.alert.assert_called_once_with(REJECTED_FALLBACK)


@pytest.mark.asyncio
async def test_transport_failure_alerts_and_keeps_draft():
    """Test that a network failure is caught and reported."""
    api_client = AsyncMock()
    api_client.submit_solution.side_effect = TransportError("connection reset")

    controller = make_controller(api_client)
    controller.code = "x = 1"
    controller.language = "python"

    result = await controller.submit()

    assert result.status is SubmissionStatus.FAILED
    assert controller.submitting is False
    assert controller.code == "x = 1"
    assert controller.language is Language.PYTHON
    controller.alerts.alert.assert_called_once_with(ERROR_MESSAGE)
    controller.navigator.navigate.assert_not_called()


@pytest.mark.asyncio
async def test_hung_submit_times_out():
    """Test that the deadline resets the submitting flag."""

    async def hang(question_id, request):
        await asyncio.sleep(10)

    api_client = AsyncMock()
    api_client.submit_solution.side_effect = hang

    controller = make_controller(api_client, submit_timeout=0.01)
    result = await controller.submit()

    assert result.status is SubmissionStatus.TIMED_OUT
    assert controller.submitting is False
    controller.alerts.alert.assert_called_once_with(TIMEOUT_MESSAGE)


@pytest.mark.asyncio
async def test_submit_is_not_reentrant():
    """Test that a second submit while one is in flight sends nothing."""
    release = asyncio.Event()

    async def slow_submit(question_id, request):
        await release.wait()
        return httpx.Response(201, json={})

    api_client = AsyncMock()
    api_client.submit_solution.side_effect = slow_submit

    controller = make_controller(api_client)
    in_flight = asyncio.create_task(controller.submit())
    await asyncio.sleep(0)

    assert controller.submitting is True
    second = await controller.submit()
    assert second.status is SubmissionStatus.IGNORED

    release.set()
    first = await in_flight

    assert first.status is SubmissionStatus.ACCEPTED
    assert api_client.submit_solution.await_count == 1
    controller.navigator.navigate.assert_called_once()


@pytest.mark.asyncio
async def test_credential_is_read_on_every_submit():
    """Test that a token stored between submits is picked up."""
    api_client = AsyncMock()
    api_client.submit_solution.return_value = httpx.Response(401, json={"message": "Unauthorized"})

    storage = SessionStorage()
    controller = make_controller(api_client, credentials=StorageCredentialProvider(storage))

    await controller.submit()
    assert sent_request(api_client).authorization == "Bearer "

    storage.set_item("token", "fresh")
    await controller.submit()
    assert sent_request(api_client).authorization == "Bearer fresh"


@pytest.mark.asyncio
async def test_empty_code_is_submitted():
    api_client = AsyncMock()
    api_client.submit_solution.return_value = httpx.Response(201, json={})

    controller = make_controller(api_client)
    result = await controller.submit()

    assert result.succeeded
    assert sent_request(api_client).to_payload() == {"code": "", "language": "cpp"}
