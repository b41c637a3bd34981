# src/taskboard/api/client.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from ..core.ports import CredentialProvider
from .credentials import NoCredentials
from .errors import ApiError, NetworkError, RequestSetupError, ServerRejectedError


def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    out = {k: v for k, v in params.items() if v is not None and v != ""}
    return out or None


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class ApiClient:
    """
    The single configured HTTP client every resource module talks through.

    Interceptors:
    - outbound (httpx request hook): attach `Authorization: Bearer <token>` when the
      credential provider has one, and log method + path.
    - inbound (httpx response hook + failure classification in `request`): log the
      status, and on failure classify into server / network / setup, log it and
      re-raise. Nothing is retried. Redirects are followed, as a browser would.

    Credentials and the logger are injected so nothing here reads global state.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        credentials: CredentialProvider | None = None,
        logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = float(timeout)
        self._credentials: CredentialProvider = credentials or NoCredentials()
        self._log = logger or logging.getLogger(__name__)
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            transport=transport,
            event_hooks={
                "request": [self._on_request],
                "response": [self._on_response],
            },
        )

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ---- interceptors ----

    async def _on_request(self, request: httpx.Request) -> None:
        try:
            token = self._credentials.get_token()
        except Exception as e:
            raise RequestSetupError(
                f"Credential lookup failed: {e}",
                method=request.method,
                path=request.url.path,
            ) from e

        if token:
            request.headers["Authorization"] = f"Bearer {token}"

        self._log.info("[API] %s %s", request.method, request.url.path)

    async def _on_response(self, response: httpx.Response) -> None:
        self._log.info("[API] Response: %s", response.status_code)

    def _log_failure(self, err: ApiError) -> None:
        if isinstance(err, ServerRejectedError):
            status = err.status_code
            if status == 401:
                self._log.error("Unauthorized - please log in")
            elif status == 403:
                self._log.error("Forbidden - insufficient permissions")
            elif status == 404:
                self._log.error("Resource not found")
            elif status == 500:
                self._log.error("Server error: %s", err.message)
            else:
                self._log.error("Error %s: %s", status, err.message)
        elif isinstance(err, NetworkError):
            self._log.error("Network error - no response received")
        else:
            self._log.error("Request setup error: %s", err.message)

    # ---- requests ----

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body (None for an empty body).

        Raises ServerRejectedError, NetworkError or RequestSetupError.
        """
        method = method.upper()
        try:
            request = self._http.build_request(
                method,
                path,
                params=_clean_params(params),
                json=json,
                data=data,
                files=files,
                headers=headers,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            err: ApiError = RequestSetupError(str(e) or e.__class__.__name__, method=method, path=path)
            self._log_failure(err)
            raise err from e

        try:
            response = await self._http.send(request)
        except RequestSetupError as e:
            self._log_failure(e)
            raise
        except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
            err = RequestSetupError(str(e) or e.__class__.__name__, method=method, path=path)
            self._log_failure(err)
            raise err from e
        except httpx.RequestError as e:
            err = NetworkError(str(e) or e.__class__.__name__, method=method, path=path)
            self._log_failure(err)
            raise err from e

        # Redirects are followed; a 3xx that is left over (no Location) is still a rejection.
        if not response.is_success:
            err = ServerRejectedError.from_response(response)
            self._log_failure(err)
            raise err

        return _decode_body(response)

    async def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str, json: Any = None) -> Any:
        return await self.request("DELETE", path, json=json)
