from .api_client import ChallengeApiClient
from .config import Settings, settings
from .credentials import (
    CredentialProvider,
    SessionStorage,
    StaticCredentialProvider,
    StorageCredentialProvider,
)
from .errors import (
    ChallengeClientError,
    QuestionNotFoundError,
    SubmissionRejectedError,
    TransportError,
    UnsupportedLanguageError,
)
from .http_client import AsyncHTTPClient

__all__ = [
    "AsyncHTTPClient",
    "ChallengeApiClient",
    "ChallengeClientError",
    "CredentialProvider",
    "QuestionNotFoundError",
    "SessionStorage",
    "Settings",
    "StaticCredentialProvider",
    "StorageCredentialProvider",
    "SubmissionRejectedError",
    "TransportError",
    "UnsupportedLanguageError",
    "settings",
]
