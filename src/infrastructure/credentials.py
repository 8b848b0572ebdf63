"""Credential providers for authenticated submissions."""

from typing import Protocol

from loguru import logger


class CredentialProvider(Protocol):
    """Supplies the bearer token; read again on every submit."""

    def get_token(self) -> str | None:
        ...


class SessionStorage:
    """Key/value store standing in for the browser session storage."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def clear(self) -> None:
        self._items.clear()


class StorageCredentialProvider:
    """Reads the token from session storage under a fixed key."""

    def __init__(self, storage: SessionStorage, key: str = "token"):
        self.storage = storage
        self.key = key

    def get_token(self) -> str | None:
        token = self.storage.get_item(self.key)
        if token is None:
            logger.debug(f"No credential stored under '{self.key}'")
        return token


class StaticCredentialProvider:
    """Always returns the same token (scripts, tests)."""

    def __init__(self, token: str | None):
        self.token = token

    def get_token(self) -> str | None:
        return self.token
