"""Thin JSON client for the workshop backend.

Adds the bearer token, applies the configured timeout and turns HTTP
failures into domain exceptions:

- 403 -> PermissionDeniedError
- 404 -> EntityNotFoundError
- any other status >= 400, or no response at all -> GatewayError

No retries and no caching happen here.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from taller.domain.exceptions import (
    EntityNotFoundError,
    GatewayError,
    PermissionDeniedError,
)


class ApiClient:

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        self._logger = logging.getLogger(__name__)

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, payload: Any) -> Any:
        return self._request("POST", path, json=payload)

    def put(self, path: str, payload: Any) -> Any:
        return self._request("PUT", path, json=payload)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def close(self) -> None:
        self._client.close()

    # --- Internal helpers -----------------------------------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            self._logger.error("Backend unreachable: %s %s (%s)", method, path, exc)
            raise GatewayError(f"Backend unreachable: {exc}") from exc

        if resp.status_code >= 400:
            self._raise_for_status(method, path, resp)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise GatewayError(
                f"Invalid JSON from {method} {path}", status_code=resp.status_code
            ) from exc

    def _raise_for_status(self, method: str, path: str, resp: httpx.Response) -> None:
        message = self._error_message(resp)
        status = resp.status_code

        if status == 403:
            self._logger.error("Permission denied: %s %s", method, path)
            raise PermissionDeniedError(message or "Permission denied")
        if status == 404:
            self._logger.warning("Resource not found: %s %s", method, path)
            raise EntityNotFoundError(message or f"Not found: {path}")

        self._logger.error("Backend error %s: %s %s", status, method, path)
        raise GatewayError(message or f"Backend error {status}", status_code=status)

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        try:
            body = resp.json()
        except ValueError:
            return resp.text.strip()
        if isinstance(body, dict):
            return str(body.get("message") or body.get("error") or "")
        return ""
