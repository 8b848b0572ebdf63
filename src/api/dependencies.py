from litestar.datastructures import State
from loguru import logger

from api.repository import InMemoryQuestionRepository


def provide_repository(state: State) -> InMemoryQuestionRepository:
    return state.repository


def provide_tokens(state: State) -> frozenset[str] | None:
    tokens = state.tokens
    if tokens is None:
        logger.debug("Token check disabled for this backend")
    return tokens
