"""Pydantic schemas for question API endpoints."""

from pydantic import BaseModel, Field

from domain.models import Difficulty, Question


class TestCaseSchema(BaseModel):
    """Sample test case as sent to clients."""

    input: str
    expected_output: str = Field(serialization_alias="expectedOutput")


class QuestionSchema(BaseModel):
    """Question as sent to clients."""

    identifier: str = Field(serialization_alias="_id")
    title: str
    description: str
    topic: str
    difficulty: Difficulty
    test_cases: list[TestCaseSchema] = Field(serialization_alias="testCases")

    @classmethod
    def from_domain(cls, question: Question) -> "QuestionSchema":
        return cls(
            identifier=question.identifier,
            title=question.title,
            description=question.description,
            topic=question.topic,
            difficulty=question.difficulty,
            test_cases=[
                TestCaseSchema(input=tc.input, expected_output=tc.expected_output)
                for tc in question.test_cases
            ],
        )


class QuestionResponse(BaseModel):
    """Response wrapping a single question."""

    question: QuestionSchema


class MessageResponse(BaseModel):
    """Error body carrying a human-readable message."""

    message: str
