"""Protocols for the page's outward collaborators."""

from typing import Protocol

from loguru import logger


class Navigator(Protocol):
    """Hands control to another view."""

    def navigate(self, path: str) -> None:
        ...


class AlertSink(Protocol):
    """Shows a blocking, user-visible alert."""

    def alert(self, message: str) -> None:
        ...


class RecordingNavigator:
    """Navigator that remembers every destination it was sent to."""

    def __init__(self):
        self.history: list[str] = []

    def navigate(self, path: str) -> None:
        logger.info(f"Navigating to {path}")
        self.history.append(path)


class RecordingAlertSink:
    """Alert sink that keeps alerts for the embedding UI to display."""

    def __init__(self):
        self.messages: list[str] = []

    def alert(self, message: str) -> None:
        logger.warning(f"Alert: {message}")
        self.messages.append(message)
