"""
HTTP client utilities for watsonx-gateway.

A thin wrapper over ``httpx.AsyncClient`` with a bounded timeout and one
log line per outbound call. Transport failures surface as RemoteCallError;
there are no automatic retries.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Mapping, Optional

import httpx

from ..core import (
    get_logger,
    get_settings,
    RemoteCallError,
    log_api_call,
)


class HTTPClient:
    """Async HTTP client with an explicit timeout and call logging."""

    def __init__(
        self,
        base_url: str = "",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.logger = get_logger(__name__)
        self.base_url = base_url
        self.timeout = timeout or settings.api.request_timeout

        # No default Content-Type: httpx picks it from json= or data=
        self.client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(self.timeout),
            headers={
                "User-Agent": f"{settings.app_name}/{settings.app_version}",
                "Accept": "application/json",
            },
            follow_redirects=True,
            transport=transport,
        )

    async def post(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """
        Send one POST and return the response whatever its status.

        Raises:
            RemoteCallError: If the request times out or cannot be sent
        """
        started = time.perf_counter()
        try:
            response = await self.client.post(
                url, headers=headers, params=params, json=json, data=data
            )
        except httpx.TimeoutException as e:
            self.logger.warning("Request timed out", url=url, timeout=self.timeout)
            raise RemoteCallError(
                f"Request to {url} timed out after {self.timeout}s",
                error_code="timeout",
                status_code=504,
                details={"url": url, "timeout": self.timeout},
            ) from e
        except httpx.RequestError as e:
            self.logger.warning("Request error", url=url, error=str(e))
            raise RemoteCallError(
                f"Request to {url} failed: {e}",
                error_code="upstream_error",
                details={"url": url, "error": str(e)},
            ) from e

        log_api_call(
            self.logger,
            service=self.base_url or "external",
            endpoint=url,
            method="POST",
            status_code=response.status_code,
            duration_ms=(time.perf_counter() - started) * 1000,
            request_size=len(response.request.content),
            response_size=len(response.content),
        )
        return response

    async def close(self) -> None:
        await self.client.aclose()


class WatsonxHTTPClient(HTTPClient):
    """HTTP client rooted at the watsonx.ai endpoint."""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            base_url=endpoint or get_settings().watsonx.endpoint,
            timeout=timeout,
            transport=transport,
        )
