"""In-memory discussion thread attached to a question page."""

import uuid
from datetime import datetime, timezone

from loguru import logger

from domain.models import Comment

GUEST_AUTHOR = "Guest"

SEED_COMMENTS = (
    ("1", "Alice", "This problem reminds me of binary search applications!"),
    ("2", "Bob", "Does anyone know if this works for edge cases with empty inputs?"),
)


def new_comment_id() -> str:
    # Unique within one page session only; comments are never persisted
    return uuid.uuid4().hex[:9]


class DiscussionThread:
    """Newest-first list of comments plus the panel's visibility flag."""

    def __init__(self, seed: bool = True):
        now = datetime.now(timezone.utc)
        self._comments: list[Comment] = []
        if seed:
            self._comments = [
                Comment(id=comment_id, author=author, text=text, created_at=now)
                for comment_id, author, text in SEED_COMMENTS
            ]
        self.visible = False
        self.draft = ""

    @property
    def comments(self) -> tuple[Comment, ...]:
        return tuple(self._comments)

    def __len__(self) -> int:
        return len(self._comments)

    @property
    def can_post(self) -> bool:
        return self.draft.strip() != ""

    def add_comment(self, text: str) -> Comment | None:
        """Prepend a guest comment; blank text is ignored."""
        text = text.strip()
        if not text:
            return None

        comment = Comment(
            id=new_comment_id(),
            author=GUEST_AUTHOR,
            text=text,
            created_at=datetime.now(timezone.utc),
        )
        self._comments.insert(0, comment)
        logger.debug(f"Added comment {comment.id} ({len(self._comments)} total)")
        return comment

    def post_draft(self) -> Comment | None:
        """Add the draft as a comment and clear it if it was accepted."""
        comment = self.add_comment(self.draft)
        if comment is not None:
            self.draft = ""
        return comment

    def toggle_visibility(self) -> bool:
        self.visible = not self.visible
        return self.visible
