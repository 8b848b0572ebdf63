from api.schemas.question import MessageResponse, QuestionResponse, QuestionSchema, TestCaseSchema
from api.schemas.submission import SubmissionPayload, SubmissionResponse, SubmissionSchema

__all__ = [
    "MessageResponse",
    "QuestionResponse",
    "QuestionSchema",
    "SubmissionPayload",
    "SubmissionResponse",
    "SubmissionSchema",
    "TestCaseSchema",
]
