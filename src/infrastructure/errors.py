"""Exceptions raised by the infrastructure layer."""


class ChallengeClientError(Exception):
    """Base error for question and submission requests."""

    pass


class TransportError(ChallengeClientError):
    """Network failure or a response body that could not be decoded."""

    pass


class QuestionNotFoundError(ChallengeClientError):
    """Question identifier does not resolve to a well-formed question."""

    def __init__(self, question_id: str, reason: str | None = None):
        self.question_id = question_id
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Question not found: {question_id}{detail}")


class SubmissionRejectedError(ChallengeClientError):
    """Grading service answered a submission with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        self.message = message
        super().__init__(f"Submission rejected with HTTP {status_code}: {message}")


class UnsupportedLanguageError(ChallengeClientError, ValueError):
    """Language outside the supported set."""

    pass
