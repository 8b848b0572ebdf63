"""API routes for questions."""

from typing import Any

from litestar import Controller, Response, get
from litestar.status_codes import HTTP_200_OK, HTTP_404_NOT_FOUND
from loguru import logger

from api.repository import InMemoryQuestionRepository
from api.schemas.question import MessageResponse, QuestionResponse, QuestionSchema


class QuestionApiController(Controller):
    """Controller for question endpoints."""

    path = "/api/v1/questions"

    @get("/{question_id:str}", status_code=HTTP_200_OK)
    async def get_question(
        self,
        question_id: str,
        repository: InMemoryQuestionRepository,
    ) -> Response[dict[str, Any]]:
        """
        Get a single question.

        Path parameters:
        - question_id: Question identifier (e.g., "two-sum")
        """
        logger.debug(f"API request for question: question_id={question_id}")

        question = repository.get_question(question_id)
        if question is None:
            body = MessageResponse(message="Question not found")
            return Response(content=body.model_dump(), status_code=HTTP_404_NOT_FOUND)

        body = QuestionResponse(question=QuestionSchema.from_domain(question))
        return Response(content=body.model_dump(mode="json", by_alias=True), status_code=HTTP_200_OK)
