"""API routes for submissions."""

from typing import Any

from litestar import Controller, Request, Response, post
from litestar.exceptions import SerializationException
from litestar.status_codes import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
)
from loguru import logger
from pydantic import ValidationError

from api.repository import InMemoryQuestionRepository
from api.schemas.question import MessageResponse
from api.schemas.submission import SubmissionPayload, SubmissionResponse, SubmissionSchema


def bearer_token(request: Request) -> str | None:
    """Token from an `authorization: Bearer <token>` header."""
    header = request.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def message(text: str, status_code: int) -> Response:
    return Response(content=MessageResponse(message=text).model_dump(), status_code=status_code)


class SubmissionApiController(Controller):
    """Controller for submission endpoints."""

    path = "/api/v1/submissions"

    @post("/{question_id:str}", status_code=HTTP_201_CREATED)
    async def create_submission(
        self,
        question_id: str,
        request: Request,
        repository: InMemoryQuestionRepository,
        tokens: frozenset[str] | None,
    ) -> Response[dict[str, Any]]:
        """
        Accept a solution for grading.

        Path parameters:
        - question_id: Question identifier

        Body: {"code": str, "language": "cpp" | "python" | "java"}

        The body is decoded only after the token and question checks, so an
        unauthenticated request gets 401 whatever its body.
        """
        logger.debug(f"API request to submit: question_id={question_id}")

        if tokens is not None and bearer_token(request) not in tokens:
            logger.warning(f"Unauthorized submission for {question_id}")
            return message("Unauthorized", HTTP_401_UNAUTHORIZED)

        if repository.get_question(question_id) is None:
            return message("Question not found", HTTP_404_NOT_FOUND)

        try:
            data = await request.json()
        except SerializationException:
            return message("Invalid submission: body is not JSON", HTTP_400_BAD_REQUEST)

        try:
            payload = SubmissionPayload.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            return message(f"Invalid submission: {fields or 'body'}", HTTP_400_BAD_REQUEST)

        record = repository.record_submission(question_id, payload.code, payload.language)
        body = SubmissionResponse(submission=SubmissionSchema.model_validate(record))
        return Response(
            content=body.model_dump(mode="json", by_alias=True),
            status_code=HTTP_201_CREATED,
        )
