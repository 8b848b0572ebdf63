"""Domain model for a coding-challenge question."""

from dataclasses import dataclass, field
from enum import Enum


class Difficulty(str, Enum):
    """Closed set of question difficulties."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


@dataclass(frozen=True)
class TestCase:
    """Sample input/expected-output pair shown alongside a question."""

    input: str
    expected_output: str


@dataclass(frozen=True)
class Question:
    """Read-only snapshot of a question record."""

    identifier: str
    title: str
    description: str
    topic: str
    difficulty: Difficulty
    test_cases: tuple[TestCase, ...] = field(default_factory=tuple)

    @property
    def has_test_cases(self) -> bool:
        return len(self.test_cases) > 0
