"""Protocol interfaces for parsers and backend clients."""

from typing import Any, Protocol

import httpx

from domain.models import Question, SubmissionRequest


class QuestionParserProtocol(Protocol):
    """Protocol for turning a question response body into a Question."""

    @classmethod
    def parse(cls, payload: Any) -> Question:
        """Parse decoded JSON body and extract the question."""
        ...


class ParsingError(ValueError):
    """Response body does not have the expected shape."""

    pass


class QuestionAPIClientProtocol(Protocol):
    """Protocol for the question and submission endpoints."""

    async def fetch_question(self, question_id: str) -> Question:
        """Get a question by identifier."""
        ...

    async def submit_solution(
        self, question_id: str, request: SubmissionRequest
    ) -> httpx.Response:
        """Send a solution for grading."""
        ...

    async def close(self) -> None:
        """Release the underlying connection."""
        ...


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get(self, path: str) -> httpx.Response:
        """Issue a GET request."""
        ...

    async def post_json(
        self,
        path: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Issue a POST request with a JSON body."""
        ...

    async def close(self) -> None:
        ...
