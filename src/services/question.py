"""Service that loads and holds the question shown on a page."""

import asyncio

from loguru import logger

from domain.models import QUESTION_FETCH, LoadState, Question, TaskKey
from infrastructure.errors import QuestionNotFoundError
from infrastructure.parsers import QuestionAPIClientProtocol


class QuestionStore:
    """
    Fetches the question for an identifier and tracks the fetch lifecycle.

    States move IDLE -> LOADING -> LOADED | NOT_FOUND | FAILED. A fetch for a
    new identifier supersedes the one in flight: the old task is cancelled and
    its result, should it still arrive, is discarded.
    """

    def __init__(self, *, api_client: QuestionAPIClientProtocol):
        """Initialize store with its API client."""
        self.api_client = api_client
        self._state = LoadState.IDLE
        self._question: Question | None = None
        self._question_id: str | None = None
        self._error: Exception | None = None
        self._task: asyncio.Task | None = None
        self._task_key: TaskKey | None = None

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def question(self) -> Question | None:
        return self._question

    @property
    def question_id(self) -> str | None:
        return self._question_id

    @property
    def error(self) -> Exception | None:
        """Failure behind a NOT_FOUND or FAILED state."""
        return self._error

    @property
    def in_flight(self) -> TaskKey | None:
        if self._task is not None and not self._task.done():
            return self._task_key
        return None

    def request(self, question_id: str) -> asyncio.Task:
        """
        Start fetching a question and return the task driving the fetch.

        Must be called from a running event loop. Asking again for the
        identifier already in flight returns the existing task.
        """
        key = TaskKey(QUESTION_FETCH, question_id)
        if self._task is not None and not self._task.done():
            if self._task_key == key:
                return self._task
            logger.debug(f"Superseding fetch {self._task_key} with {key}")
            self._task.cancel()

        self._question_id = question_id
        self._question = None
        self._error = None
        self._state = LoadState.LOADING

        self._task_key = key
        self._task = asyncio.create_task(self._fetch(key), name=str(key))
        return self._task

    async def load(self, question_id: str) -> LoadState:
        """Fetch a question and wait for the fetch to settle."""
        task = self.request(question_id)
        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            # Superseded by a newer request; report whatever is current
            if not task.cancelled():
                raise
        return self._state

    async def reload(self) -> LoadState:
        """Re-issue the fetch for the current identifier."""
        if self._question_id is None:
            logger.warning("Reload requested before any question was requested")
            return self._state
        return await self.load(self._question_id)

    def cancel(self) -> None:
        """Drop the in-flight fetch, if any; state is left as is."""
        if self._task is not None and not self._task.done():
            logger.debug(f"Cancelling fetch {self._task_key}")
            self._task.cancel()

    async def _fetch(self, key: TaskKey) -> None:
        logger.debug(f"Fetching question {key.identifier}")

        try:
            question = await self.api_client.fetch_question(key.identifier)
        except asyncio.CancelledError:
            logger.debug(f"Fetch {key} cancelled")
            raise
        except QuestionNotFoundError as e:
            if self._is_current(key):
                logger.info(f"Question {key.identifier} not found")
                self._settle(LoadState.NOT_FOUND, error=e)
            return
        except Exception as e:
            if self._is_current(key):
                logger.opt(exception=e).error(f"Failed to load question {key.identifier}")
                self._settle(LoadState.FAILED, error=e)
            return

        if not self._is_current(key):
            logger.warning(f"Discarding stale result for {key}")
            return

        self._settle(LoadState.LOADED, question=question)
        logger.info(f"Loaded question {key.identifier}: {question.title}")

    def _is_current(self, key: TaskKey) -> bool:
        return self._task_key == key

    def _settle(
        self,
        state: LoadState,
        *,
        question: Question | None = None,
        error: Exception | None = None,
    ) -> None:
        self._state = state
        self._question = question
        self._error = error
