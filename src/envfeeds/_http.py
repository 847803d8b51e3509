"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from envfeeds.exceptions import (
    EnvFeedsAPIError,
    EnvFeedsConnectionError,
    EnvFeedsTimeoutError,
)

DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise EnvFeedsAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    return response.json()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json", **(headers or {})},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise EnvFeedsConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise EnvFeedsTimeoutError(str(exc)) from exc
        try:
            return _handle_response(response)
        except ValueError as exc:
            # Body was not JSON
            raise EnvFeedsAPIError(
                status_code=response.status_code,
                message=f"Invalid JSON body: {exc}",
            ) from exc

    async def close(self) -> None:
        await self._client.aclose()
