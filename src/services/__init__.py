from infrastructure.config import Settings, settings as default_settings
from services.discussion import DiscussionThread
from services.interfaces import AlertSink, Navigator, RecordingAlertSink, RecordingNavigator
from services.question import QuestionStore
from services.submission import EditorBinding, SubmissionController


def create_submission_controller(
    question_id: str,
    *,
    api_client,
    credentials,
    navigator: Navigator,
    alerts: AlertSink,
    settings: Settings | None = None,
) -> SubmissionController:
    """Factory function to create a submission controller configured from settings."""
    settings = settings or default_settings
    return SubmissionController(
        question_id,
        api_client=api_client,
        credentials=credentials,
        navigator=navigator,
        alerts=alerts,
        results_path=settings.RESULTS_PATH,
        submit_timeout=settings.SUBMIT_TIMEOUT,
    )


__all__ = [
    "AlertSink",
    "DiscussionThread",
    "EditorBinding",
    "Navigator",
    "QuestionStore",
    "RecordingAlertSink",
    "RecordingNavigator",
    "SubmissionController",
    "create_submission_controller",
]
