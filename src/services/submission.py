"""Service that owns the solution draft and drives submissions."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass

import httpx
from loguru import logger

from domain.models import (
    SUBMISSION,
    Language,
    SubmissionDraft,
    SubmissionRequest,
    SubmissionResult,
    SubmissionStatus,
    TaskKey,
)
from infrastructure.api_client import error_message
from infrastructure.credentials import CredentialProvider
from infrastructure.errors import SubmissionRejectedError, UnsupportedLanguageError
from infrastructure.parsers import QuestionAPIClientProtocol

from .interfaces import AlertSink, Navigator

REJECTED_FALLBACK = "Submission failed"
ERROR_MESSAGE = "An error occurred while submitting your code."
TIMEOUT_MESSAGE = "Submission timed out. Please try again."


@dataclass(frozen=True)
class EditorBinding:
    """Controlled-value props handed to the code editor widget."""

    language: str
    value: str
    on_change: Callable[[str | None], None]


class SubmissionController:
    """Holds the code/language draft for one question and submits it."""

    def __init__(
        self,
        question_id: str,
        *,
        api_client: QuestionAPIClientProtocol,
        credentials: CredentialProvider,
        navigator: Navigator,
        alerts: AlertSink,
        results_path: str = "/my-submissions/{question_id}",
        submit_timeout: float | None = 30.0,
    ):
        """
        Initialize controller with its collaborators.

        Args:
            question_id: Question the draft belongs to
            api_client: Client for the submission endpoint
            credentials: Source of the bearer token, consulted on every submit
            navigator: Receives the results destination after a successful submit
            alerts: Receives user-visible failure messages
            results_path: Destination template with a `{question_id}` placeholder
            submit_timeout: Deadline in seconds for one submit, None for no deadline
        """
        self.question_id = question_id
        self.api_client = api_client
        self.credentials = credentials
        self.navigator = navigator
        self.alerts = alerts
        self.results_path = results_path
        self.submit_timeout = submit_timeout
        self.draft = SubmissionDraft()
        self._submitting = False

    @property
    def code(self) -> str:
        return self.draft.code

    @code.setter
    def code(self, value: str | None) -> None:
        self.draft.code = value or ""

    @property
    def language(self) -> Language:
        return self.draft.language

    @language.setter
    def language(self, value: Language | str) -> None:
        try:
            language = Language(value)
        except ValueError as e:
            raise UnsupportedLanguageError(f"Unsupported language: {value!r}") from e
        # Switching language never touches the code buffer
        self.draft.language = language

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def task_key(self) -> TaskKey:
        return TaskKey(SUBMISSION, self.question_id)

    @property
    def destination(self) -> str:
        return self.destination_for(self.question_id)

    def destination_for(self, question_id: str) -> str:
        return self.results_path.format(question_id=question_id)

    def editor_binding(self) -> EditorBinding:
        """Props for the editor: current language mode, buffer and change handler."""

        def on_change(value: str | None) -> None:
            self.code = value

        return EditorBinding(
            language=self.language.editor_mode,
            value=self.code,
            on_change=on_change,
        )

    async def submit(self) -> SubmissionResult:
        """
        Submit the current draft.

        Never raises for request failures: rejections, transport errors and
        deadline expiry are reported through the alert sink and the returned
        result. A call made while a submission is in flight is ignored.
        """
        if self._submitting:
            logger.warning(f"Submission {self.task_key} already in flight, ignoring")
            return SubmissionResult(SubmissionStatus.IGNORED)

        # The page may switch questions mid-flight; results follow the submitted one
        question_id = self.question_id
        self._submitting = True
        try:
            if self.submit_timeout is None:
                response = await self._send(question_id)
            else:
                response = await asyncio.wait_for(
                    self._send(question_id), timeout=self.submit_timeout
                )

            logger.info(f"Submission for {question_id} accepted (HTTP {response.status_code})")
            destination = self.destination_for(question_id)
            self.navigator.navigate(destination)
            return SubmissionResult(
                SubmissionStatus.ACCEPTED,
                destination=destination,
                status_code=response.status_code,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Submission for {question_id} exceeded {self.submit_timeout}s deadline"
            )
            return self._fail(SubmissionStatus.TIMED_OUT, TIMEOUT_MESSAGE)
        except SubmissionRejectedError as e:
            logger.warning(f"Submission for {question_id} rejected: {e}")
            return self._fail(
                SubmissionStatus.REJECTED,
                e.message or REJECTED_FALLBACK,
                status_code=e.status_code,
            )
        except Exception as e:
            logger.opt(exception=e).error(f"Submission error for {question_id}")
            return self._fail(SubmissionStatus.FAILED, ERROR_MESSAGE)
        finally:
            self._submitting = False

    async def _send(self, question_id: str) -> httpx.Response:
        """Build the request from the draft and send it; non-2xx raises."""
        request = SubmissionRequest.from_draft(self.draft, self.credentials.get_token())
        response = await self.api_client.submit_solution(question_id, request)
        if not response.is_success:
            raise SubmissionRejectedError(response.status_code, error_message(response))
        return response

    def _fail(
        self,
        status: SubmissionStatus,
        message: str,
        status_code: int | None = None,
    ) -> SubmissionResult:
        self.alerts.alert(message)
        return SubmissionResult(status, message=message, status_code=status_code)
