"""Domain models for solution drafts and submission outcomes."""

from dataclasses import dataclass
from enum import Enum


class Language(str, Enum):
    """Languages a solution can be written in."""

    CPP = "cpp"
    PYTHON = "python"
    JAVA = "java"

    @property
    def editor_mode(self) -> str:
        """Syntax mode name understood by the editor widget."""
        return EDITOR_MODES[self]


EDITOR_MODES: dict[Language, str] = {
    Language.CPP: "cpp",
    Language.PYTHON: "python",
    Language.JAVA: "java",
}

DEFAULT_LANGUAGE = Language.CPP


@dataclass
class SubmissionDraft:
    """In-progress solution held by the editor."""

    code: str = ""
    language: Language = DEFAULT_LANGUAGE


@dataclass(frozen=True)
class SubmissionRequest:
    """Solution snapshot sent for grading, built at submit time."""

    code: str
    language: Language
    token: str = ""

    @classmethod
    def from_draft(cls, draft: SubmissionDraft, token: str | None) -> "SubmissionRequest":
        return cls(code=draft.code, language=draft.language, token=token or "")

    def to_payload(self) -> dict[str, str]:
        return {"code": self.code, "language": self.language.value}

    @property
    def authorization(self) -> str:
        return f"Bearer {self.token}"


class SubmissionStatus(str, Enum):
    """Outcome of a single submit attempt."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FAILED = "failed"
    TIMED_OUT = "timed_out"
    IGNORED = "ignored"


@dataclass(frozen=True)
class SubmissionResult:
    """What happened when the user pressed submit."""

    status: SubmissionStatus
    message: str | None = None
    destination: str | None = None
    status_code: int | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is SubmissionStatus.ACCEPTED
