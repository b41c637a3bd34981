# src/taskboard/api/credentials.py

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _load_json(path: Path) -> dict[str, Any]:
    raw = path.read_text("utf-8")
    val = json.loads(raw)
    if isinstance(val, dict):
        return val
    raise ValueError("Expected JSON object")


class JsonFileCredentialStore:
    """
    Read-only view of a local key-value JSON file holding the bearer token.

    The token is looked up on every call, so a token written by another tool
    is picked up by the next request. Writing or clearing the token is left
    to whoever owns the file.
    """

    def __init__(self, path: str | Path, *, key: str = "authToken") -> None:
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def get_token(self) -> str | None:
        if not self._path.exists():
            return None
        data = _load_json(self._path)
        token = data.get(self._key)
        if token is None:
            return None
        token = str(token).strip()
        return token or None


class NoCredentials:
    """Credential provider for anonymous use."""

    def get_token(self) -> str | None:
        return None
