"""Domain model for discussion comments."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Comment:
    """A single entry in a question's discussion thread."""

    id: str
    author: str
    text: str
    created_at: datetime
