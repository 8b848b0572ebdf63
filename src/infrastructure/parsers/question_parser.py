"""Parser for question resource response bodies."""

from typing import Any

from loguru import logger
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from domain.models import Difficulty, Question, TestCase

from .interfaces import ParsingError, QuestionParserProtocol


class TestCasePayload(BaseModel):
    """Wire shape of a sample test case."""

    model_config = ConfigDict(populate_by_name=True)

    input: str
    expected_output: str = Field(alias="expectedOutput")


class QuestionPayload(BaseModel):
    """Wire shape of the `question` field."""

    model_config = ConfigDict(populate_by_name=True)

    identifier: str = Field(validation_alias=AliasChoices("_id", "id", "identifier"))
    title: str
    description: str
    topic: str
    difficulty: Difficulty
    test_cases: list[TestCasePayload] = Field(
        validation_alias=AliasChoices("testCases", "test_cases")
    )

    def to_domain(self) -> Question:
        return Question(
            identifier=self.identifier,
            title=self.title,
            description=self.description,
            topic=self.topic,
            difficulty=self.difficulty,
            test_cases=tuple(
                TestCase(input=tc.input, expected_output=tc.expected_output)
                for tc in self.test_cases
            ),
        )


class QuestionParser(QuestionParserProtocol):
    """Validates `{"question": {...}}` bodies."""

    @classmethod
    def parse(cls, payload: Any) -> Question:
        """
        Parse decoded JSON body and extract the question.

        Raises:
            ParsingError: If the body has no well-formed `question` field
        """
        if not isinstance(payload, dict):
            raise ParsingError(f"Expected a JSON object, got {type(payload).__name__}")

        raw_question = payload.get("question")
        if raw_question is None:
            raise ParsingError("Response has no question field")

        try:
            question = QuestionPayload.model_validate(raw_question).to_domain()
        except ValidationError as e:
            raise ParsingError(f"Malformed question payload: {e.error_count()} error(s)") from e

        logger.debug(f"Parsed question {question.identifier}")
        return question
