# src/taskboard/api/errors.py

"""
Error taxonomy for API calls.

Every failed call surfaces as exactly one of three kinds:
- SERVER:  the server answered with an error status (has a response),
- NETWORK: the request went out but no response came back (has a request),
- SETUP:   the request could not be built or sent at all (neither).

Callers can branch on the exception class or on `err.kind`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

import httpx


def _body_message(body: Any) -> str | None:
    if isinstance(body, dict):
        msg = body.get("message")
        if isinstance(msg, str) and msg.strip():
            return msg
    return None


class ErrorKind(StrEnum):
    SERVER = "server"
    NETWORK = "network"
    SETUP = "setup"


class ApiError(Exception):
    kind: ErrorKind

    def __init__(self, message: str, *, method: str | None = None, path: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.method = method
        self.path = path


class ServerRejectedError(ApiError):
    kind = ErrorKind.SERVER

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reason: str = "",
        body: Any = None,
        method: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message, method=method, path=path)
        self.status_code = status_code
        self.reason = reason
        self.body = body

    @property
    def body_message(self) -> str | None:
        """The `message` field of a JSON error body, if the server sent one."""
        return _body_message(self.body)

    @classmethod
    def from_response(cls, response: httpx.Response) -> ServerRejectedError:
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text or None

        reason = response.reason_phrase or ""
        return cls(
            _body_message(body) or reason or f"HTTP {response.status_code}",
            status_code=response.status_code,
            reason=reason,
            body=body,
            method=response.request.method,
            path=response.request.url.path,
        )


class NetworkError(ApiError):
    kind = ErrorKind.NETWORK


class RequestSetupError(ApiError):
    kind = ErrorKind.SETUP


def describe_error(err: BaseException) -> str:
    """Turn any caught error into one line suitable for showing to the end user."""
    if isinstance(err, ServerRejectedError):
        return err.body_message or f"Error {err.status_code}"
    if isinstance(err, NetworkError):
        return "Network error - please check your connection"
    msg = str(err).strip()
    return msg or "An unexpected error occurred"
