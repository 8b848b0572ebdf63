"""Pydantic schemas for submission API endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from domain.models import Language


class SubmissionPayload(BaseModel):
    """Request body of a submission."""

    code: str
    language: Language


class SubmissionSchema(BaseModel):
    """A recorded submission."""

    id: str
    question_id: str = Field(serialization_alias="questionId")
    language: Language
    status: str
    created_at: datetime = Field(serialization_alias="createdAt")

    class Config:
        from_attributes = True


class SubmissionResponse(BaseModel):
    """Response to an accepted submission."""

    submission: SubmissionSchema
