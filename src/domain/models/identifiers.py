"""Value objects for identifying in-flight operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskKey:
    """Identifies an asynchronous operation by its kind and target question."""

    kind: str
    identifier: str

    def __str__(self) -> str:
        """String representation."""
        return f"{self.kind}/{self.identifier}"


QUESTION_FETCH = "question"
SUBMISSION = "submission"
