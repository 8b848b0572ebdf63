"""Runtime settings for the question page client."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

DISABLED_VALUES = ("none", "off", "")


def env_float(name: str, default: float) -> float:
    """Float from the environment; unparsable values fall back to the default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


def env_timeout(name: str, default: float | None) -> float | None:
    """Like env_float, but `none`, `off` or an empty value disables the deadline."""
    raw = os.getenv(name)
    if raw is not None and raw.strip().lower() in DISABLED_VALUES:
        return None
    return env_float(name, default)


@dataclass
class Settings:
    """Settings read from environment variables (and a local .env file)."""

    API_BASE_URL: str = "http://localhost:8000"
    HTTP_TIMEOUT: float = 10.0
    # Deadline for a whole submit round-trip, None for no deadline
    SUBMIT_TIMEOUT: float | None = 30.0
    TOKEN_KEY: str = "token"
    RESULTS_PATH: str = "/my-submissions/{question_id}"
    LOG_LEVEL: str = "INFO"
    API_TOKEN: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        defaults = cls()
        return cls(
            API_BASE_URL=os.getenv("CHALLENGE_API_BASE_URL", defaults.API_BASE_URL),
            HTTP_TIMEOUT=env_float("CHALLENGE_HTTP_TIMEOUT", defaults.HTTP_TIMEOUT),
            SUBMIT_TIMEOUT=env_timeout("CHALLENGE_SUBMIT_TIMEOUT", defaults.SUBMIT_TIMEOUT),
            TOKEN_KEY=os.getenv("CHALLENGE_TOKEN_KEY", defaults.TOKEN_KEY),
            RESULTS_PATH=os.getenv("CHALLENGE_RESULTS_PATH", defaults.RESULTS_PATH),
            LOG_LEVEL=os.getenv("CHALLENGE_LOG_LEVEL", defaults.LOG_LEVEL),
            API_TOKEN=os.getenv("CHALLENGE_API_TOKEN", defaults.API_TOKEN),
        )

    def results_path(self, question_id: str) -> str:
        return self.RESULTS_PATH.format(question_id=question_id)


settings = Settings.from_env()
