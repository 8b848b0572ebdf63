"""Question page: composes the question store, editor and discussion thread."""

from dataclasses import dataclass

from loguru import logger

from domain.models import Comment, Language, LoadState, Question, SubmissionResult
from infrastructure.config import Settings, settings as default_settings
from infrastructure.credentials import CredentialProvider
from infrastructure.parsers import QuestionAPIClientProtocol
from services import create_submission_controller
from services.discussion import DiscussionThread
from services.interfaces import AlertSink, Navigator
from services.question import QuestionStore
from services.submission import EditorBinding, SubmissionController

LOADING_MESSAGE = "Loading question..."
NOT_FOUND_MESSAGE = "Question not found."
EMPTY_THREAD_MESSAGE = "No comments yet. Be the first to comment!"
SUBMIT_LABEL = "Submit"
SUBMITTING_LABEL = "Submitting..."


@dataclass(frozen=True)
class DiscussionView:
    visible: bool
    comments: tuple[Comment, ...]
    can_post: bool
    empty_message: str | None = None


@dataclass(frozen=True)
class QuestionView:
    question: Question
    languages: tuple[str, ...]
    editor: EditorBinding
    submit_label: str
    submit_disabled: bool
    discussion: DiscussionView


@dataclass(frozen=True)
class PageView:
    """What the page shows right now: a status message or the question content."""

    state: LoadState
    message: str | None = None
    content: QuestionView | None = None


class QuestionPage:
    """
    One mounted question view.

    The store, the submission controller and the discussion thread are
    independent after the question loads; they share nothing but the
    question identifier.
    """

    def __init__(
        self,
        *,
        api_client: QuestionAPIClientProtocol,
        credentials: CredentialProvider,
        navigator: Navigator,
        alerts: AlertSink,
        settings: Settings | None = None,
    ):
        self.api_client = api_client
        self.credentials = credentials
        self.navigator = navigator
        self.alerts = alerts
        self.settings = settings or default_settings

        self.store = QuestionStore(api_client=api_client)
        self.discussion = DiscussionThread()
        self.editor: SubmissionController | None = None

    @property
    def question_id(self) -> str | None:
        return self.store.question_id

    def open(self, question_id: str) -> None:
        """Mount the page for a question, or switch it to another one."""
        logger.debug(f"Opening question page for {question_id}")
        self.store.request(question_id)

        if self.editor is None:
            self.editor = create_submission_controller(
                question_id,
                api_client=self.api_client,
                credentials=self.credentials,
                navigator=self.navigator,
                alerts=self.alerts,
                settings=self.settings,
            )
        else:
            # The draft carries over; only the target question changes
            self.editor.question_id = question_id

    async def load(self, question_id: str) -> LoadState:
        self.open(question_id)
        return await self.store.load(question_id)

    async def retry(self) -> LoadState:
        return await self.store.reload()

    def close(self) -> None:
        """Unmount: in-flight fetch results are no longer wanted."""
        self.store.cancel()

    async def aclose(self) -> None:
        """Unmount and release the backend connection."""
        self.close()
        await self.api_client.close()

    async def __aenter__(self) -> "QuestionPage":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def select_language(self, language: Language | str) -> None:
        self._require_editor().language = language

    def set_code(self, code: str | None) -> None:
        self._require_editor().code = code

    async def submit(self) -> SubmissionResult:
        return await self._require_editor().submit()

    def toggle_discussion(self) -> bool:
        return self.discussion.toggle_visibility()

    def add_comment(self, text: str) -> Comment | None:
        return self.discussion.add_comment(text)

    def render(self) -> PageView:
        state = self.store.state
        if state in (LoadState.IDLE, LoadState.LOADING):
            return PageView(state=state, message=LOADING_MESSAGE)

        question = self.store.question
        if state is not LoadState.LOADED or question is None:
            # Load failures are presented exactly like a missing question
            return PageView(state=state, message=NOT_FOUND_MESSAGE)

        editor = self._require_editor()
        return PageView(
            state=state,
            content=QuestionView(
                question=question,
                languages=tuple(language.value for language in Language),
                editor=editor.editor_binding(),
                submit_label=SUBMITTING_LABEL if editor.submitting else SUBMIT_LABEL,
                submit_disabled=editor.submitting,
                discussion=self._render_discussion(),
            ),
        )

    def _render_discussion(self) -> DiscussionView:
        comments = self.discussion.comments
        return DiscussionView(
            visible=self.discussion.visible,
            comments=comments,
            can_post=self.discussion.can_post,
            empty_message=None if comments else EMPTY_THREAD_MESSAGE,
        )

    def _require_editor(self) -> SubmissionController:
        if self.editor is None:
            raise RuntimeError("Question page has not been opened")
        return self.editor
