"""Application layer: assembles a question page from its dependencies."""

from application.question_page import PageView, QuestionPage, QuestionView
from infrastructure.api_client import ChallengeApiClient
from infrastructure.config import Settings, settings as default_settings
from infrastructure.credentials import (
    CredentialProvider,
    SessionStorage,
    StaticCredentialProvider,
    StorageCredentialProvider,
)
from infrastructure.http_client import AsyncHTTPClient
from services.interfaces import AlertSink, Navigator, RecordingAlertSink, RecordingNavigator


def create_question_page(
    *,
    credentials: CredentialProvider | None = None,
    storage: SessionStorage | None = None,
    navigator: Navigator | None = None,
    alerts: AlertSink | None = None,
    http_client: AsyncHTTPClient | None = None,
    settings: Settings | None = None,
) -> QuestionPage:
    """
    Factory function to create a question page with all dependencies.

    The bearer token comes from `credentials` when given, else from `storage`
    under the configured key, else from the CHALLENGE_API_TOKEN setting.
    """
    settings = settings or default_settings

    if credentials is None:
        if storage is not None:
            credentials = StorageCredentialProvider(storage, key=settings.TOKEN_KEY)
        else:
            credentials = StaticCredentialProvider(settings.API_TOKEN)

    http_client = http_client or AsyncHTTPClient(
        base_url=settings.API_BASE_URL, timeout=settings.HTTP_TIMEOUT
    )
    api_client = ChallengeApiClient(http_client)

    return QuestionPage(
        api_client=api_client,
        credentials=credentials,
        navigator=navigator or RecordingNavigator(),
        alerts=alerts or RecordingAlertSink(),
        settings=settings,
    )


__all__ = ["PageView", "QuestionPage", "QuestionView", "create_question_page"]
