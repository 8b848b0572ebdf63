"""In-memory storage behind the development backend."""

import itertools
from dataclasses import dataclass, field
from datetime import datetime, timezone

from loguru import logger

from domain.models import Difficulty, Language, Question, TestCase


@dataclass(frozen=True)
class SubmissionRecord:
    """A submission accepted by the backend; grading happens elsewhere."""

    id: str
    question_id: str
    code: str
    language: Language
    status: str = "Pending"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InMemoryQuestionRepository:
    """Questions and received submissions, kept in process memory."""

    def __init__(self, questions: list[Question] | None = None):
        self._questions: dict[str, Question] = {}
        self._submissions: list[SubmissionRecord] = []
        self._ids = itertools.count(1)
        for question in questions or []:
            self.add_question(question)

    def add_question(self, question: Question) -> None:
        self._questions[question.identifier] = question

    def get_question(self, question_id: str) -> Question | None:
        return self._questions.get(question_id)

    def record_submission(
        self, question_id: str, code: str, language: Language
    ) -> SubmissionRecord:
        record = SubmissionRecord(
            id=str(next(self._ids)),
            question_id=question_id,
            code=code,
            language=language,
        )
        self._submissions.append(record)
        logger.info(f"Recorded submission {record.id} for {question_id} ({language.value})")
        return record

    def submissions_for(self, question_id: str) -> list[SubmissionRecord]:
        return [s for s in self._submissions if s.question_id == question_id]


SAMPLE_QUESTIONS = [
    Question(
        identifier="two-sum",
        title="Two Sum",
        description=(
            "Given an array of integers and a target, print the indices of the two "
            "numbers that add up to the target."
        ),
        topic="Arrays",
        difficulty=Difficulty.EASY,
        test_cases=(
            TestCase(input="4 9\n2 7 11 15", expected_output="0 1"),
            TestCase(input="3 6\n3 2 4", expected_output="1 2"),
        ),
    ),
    Question(
        identifier="lis",
        title="Longest Increasing Subsequence",
        description="Print the length of the longest strictly increasing subsequence.",
        topic="Dynamic Programming",
        difficulty=Difficulty.MEDIUM,
        test_cases=(TestCase(input="8\n10 9 2 5 3 7 101 18", expected_output="4"),),
    ),
]


def create_sample_repository() -> InMemoryQuestionRepository:
    return InMemoryQuestionRepository(list(SAMPLE_QUESTIONS))
