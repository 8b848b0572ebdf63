"""Client for the question and submission endpoints."""

import json

import httpx
from loguru import logger

from domain.models import Question, SubmissionRequest

from .errors import QuestionNotFoundError, TransportError
from .parsers import HTTPClientProtocol, ParsingError, QuestionParser, QuestionParserProtocol


class ChallengeApiClient:
    """Client for the coding-challenge backend API."""

    QUESTIONS_PATH = "/api/v1/questions/{question_id}"
    SUBMISSIONS_PATH = "/api/v1/submissions/{question_id}"

    def __init__(
        self,
        http_client: HTTPClientProtocol,
        parser: type[QuestionParserProtocol] = QuestionParser,
    ):
        self.http_client = http_client
        self.parser = parser

    async def fetch_question(self, question_id: str) -> Question:
        """
        Get a question by identifier.

        Raises:
            QuestionNotFoundError: Body has no well-formed question (404 included)
            TransportError: Network failure or a body that is not JSON
        """
        path = self.QUESTIONS_PATH.format(question_id=question_id)
        response = await self.http_client.get(path)
        payload = decode_json(response)

        try:
            return self.parser.parse(payload)
        except ParsingError as e:
            logger.debug(f"No question in response for {question_id} (HTTP {response.status_code}): {e}")
            raise QuestionNotFoundError(question_id, str(e)) from e

    async def submit_solution(
        self, question_id: str, request: SubmissionRequest
    ) -> httpx.Response:
        """
        Send a solution for grading.

        The raw response is returned; deciding success from the status code is
        left to the caller.
        """
        path = self.SUBMISSIONS_PATH.format(question_id=question_id)
        logger.debug(f"Submitting {request.language.value} solution for {question_id}")
        return await self.http_client.post_json(
            path,
            request.to_payload(),
            headers={"authorization": request.authorization},
        )

    async def close(self) -> None:
        await self.http_client.close()


def decode_json(response: httpx.Response):
    """Decode a JSON body, raising TransportError if it is not JSON."""
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise TransportError(f"Undecodable response body (HTTP {response.status_code})") from e


def error_message(response: httpx.Response) -> str | None:
    """Server-provided `message` field of an error body, if any."""
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return None
