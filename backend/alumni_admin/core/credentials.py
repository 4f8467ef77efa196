"""Bearer token sources handed to the gateway client."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, Protocol, Sequence

from loguru import logger

from .config import Settings


class CredentialProvider(Protocol):
    """Interface implemented by token sources."""

    def get_token(self) -> str | None:
        """Return the current bearer token, or ``None`` when unauthenticated."""


class StaticTokenProvider:
    def __init__(self, token: str | None) -> None:
        self._token = token or None

    def get_token(self) -> str | None:
        return self._token


class EnvTokenProvider:
    def __init__(self, variable: str = "ALUMNI_ADMIN_TOKEN") -> None:
        self.variable = variable

    def get_token(self) -> str | None:
        value = os.getenv(self.variable, "").strip()
        return value or None


class StorageTokenProvider:
    """Read the token from a JSON key/value storage file.

    The file is re-read on every call so a token written by another process
    (a login helper, a browser export) is picked up without a restart.
    Missing or malformed files count as "no token".
    """

    def __init__(self, path: str | Path, key: str = "token") -> None:
        self.path = Path(path).expanduser()
        self.key = key

    def get_token(self) -> str | None:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Unable to read token storage {}: {}", self.path, exc)
            return None
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed token storage file {}", self.path)
            return None
        if not isinstance(payload, dict):
            return None
        token = payload.get(self.key)
        if isinstance(token, str) and token.strip():
            return token.strip()
        return None


class ChainedTokenProvider:
    """Return the first token any of the wrapped providers yields."""

    def __init__(self, providers: Iterable[CredentialProvider]) -> None:
        self.providers: Sequence[CredentialProvider] = tuple(providers)

    def get_token(self) -> str | None:
        for provider in self.providers:
            token = provider.get_token()
            if token:
                return token
        return None


def provider_from_settings(settings: Settings) -> CredentialProvider:
    """Build the default token chain: static token, environment, storage files."""

    providers: list[CredentialProvider] = []
    if settings.api_token:
        providers.append(StaticTokenProvider(settings.api_token))
    providers.append(EnvTokenProvider(settings.token_env_var))
    providers.extend(StorageTokenProvider(path) for path in settings.token_storage_paths)
    return ChainedTokenProvider(providers)


__all__ = [
    "ChainedTokenProvider",
    "CredentialProvider",
    "EnvTokenProvider",
    "StaticTokenProvider",
    "StorageTokenProvider",
    "provider_from_settings",
]
