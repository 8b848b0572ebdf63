"""Domain models package."""

from .discussion import Comment
from .identifiers import QUESTION_FETCH, SUBMISSION, TaskKey
from .question import Difficulty, Question, TestCase
from .state import LoadState
from .submission import (
    DEFAULT_LANGUAGE,
    Language,
    SubmissionDraft,
    SubmissionRequest,
    SubmissionResult,
    SubmissionStatus,
)

__all__ = [
    "Comment",
    "DEFAULT_LANGUAGE",
    "Difficulty",
    "Language",
    "LoadState",
    "QUESTION_FETCH",
    "Question",
    "SUBMISSION",
    "SubmissionDraft",
    "SubmissionRequest",
    "SubmissionResult",
    "SubmissionStatus",
    "TaskKey",
    "TestCase",
]
