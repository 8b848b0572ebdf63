"""Development backend serving questions and accepting submissions."""

from collections.abc import Iterable

from litestar import Litestar
from litestar.datastructures import State
from litestar.di import Provide

from api.dependencies import provide_repository, provide_tokens
from api.repository import InMemoryQuestionRepository, create_sample_repository
from api.routes import QuestionApiController, SubmissionApiController
from infrastructure.config import settings
from infrastructure.logging_config import setup_logging


def create_app(
    repository: InMemoryQuestionRepository | None = None,
    tokens: Iterable[str] | None = None,
) -> Litestar:
    """
    Build the ASGI app.

    Args:
        repository: Question storage; sample questions when omitted
        tokens: Accepted bearer tokens; None accepts any request
    """
    state = State(
        {
            "repository": repository or create_sample_repository(),
            "tokens": frozenset(tokens) if tokens is not None else None,
        }
    )
    return Litestar(
        route_handlers=[QuestionApiController, SubmissionApiController],
        dependencies={
            "repository": Provide(provide_repository, sync_to_thread=False),
            "tokens": Provide(provide_tokens, sync_to_thread=False),
        },
        state=state,
        on_startup=[lambda: setup_logging(settings.LOG_LEVEL)],
    )
