"""
watsonx client for watsonx-gateway.

This module is the only place that talks to IBM Cloud: the IAM token
exchange and the watsonx.ai text generation call. TokenCache and
AgentGateway depend on it, and tests swap it for a fake.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..core import (
    get_logger,
    get_settings,
    AuthenticationError,
    RemoteCallError,
    bearer_header,
)
from ..models import TokenResponse
from ..utils.http_client import WatsonxHTTPClient

IAM_GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"
GENERATION_PATH = "/ml/v1/text/generation"
GENERATION_API_VERSION = "2023-05-29"


class WatsonxClient:
    """Client for the IBM Cloud IAM and watsonx.ai generation endpoints."""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        iam_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.logger = get_logger(__name__)
        self.iam_url = iam_url or settings.watsonx.iam_url
        self.http_client = WatsonxHTTPClient(endpoint, timeout=timeout, transport=transport)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def fetch_token(self, api_key: str) -> TokenResponse:
        """
        Exchange an API key for an IAM access token.

        Args:
            api_key: IBM Cloud API key

        Returns:
            Parsed token payload

        Raises:
            AuthenticationError: If IAM is unreachable, rejects the key,
                or answers without a token
        """
        try:
            response = await self.http_client.post(
                self.iam_url,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                data={"grant_type": IAM_GRANT_TYPE, "apikey": api_key},
            )
        except RemoteCallError as e:
            raise AuthenticationError(
                f"Failed to authenticate with IBM Cloud: {e.message}",
                error_code="iam_unreachable",
                details={"status_code": None, "body": None},
            ) from e

        if response.is_error:
            self.logger.error(
                "Failed to get IAM token",
                status_code=response.status_code,
                body=response.text,
            )
            raise AuthenticationError(
                f"Failed to authenticate with IBM Cloud: {response.status_code} {response.text}",
                error_code="iam_rejected",
                details={"status_code": response.status_code, "body": response.text},
            )

        try:
            return TokenResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise AuthenticationError(
                "Failed to obtain IAM access token - no token in response",
                error_code="missing_token",
                details={"status_code": response.status_code, "body": response.text},
            ) from e

    async def generate(self, token: str, payload: Dict[str, Any]) -> Any:
        """
        Run a text generation request.

        Args:
            token: IAM bearer token
            payload: Generation body (input, model_id, space_id, parameters)

        Returns:
            Decoded JSON response, shape unchecked

        Raises:
            RemoteCallError: On timeout, network failure, non-2xx status
                or a body that is not JSON
        """
        response = await self.http_client.post(
            GENERATION_PATH,
            headers=bearer_header(token),
            params={"version": GENERATION_API_VERSION},
            json=payload,
        )

        if response.is_error:
            raise RemoteCallError(
                f"watsonx generation failed: {response.status_code} {response.text}",
                error_code="upstream_error",
                status_code=response.status_code,
                details={"body": response.text},
            )

        try:
            return response.json()
        except ValueError as e:
            raise RemoteCallError(
                f"watsonx generation returned a non-JSON body: {e}",
                error_code="upstream_error",
                details={"body": response.text},
            ) from e

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.close()


# Global client instance
_watsonx_client: Optional[WatsonxClient] = None


def get_watsonx_client() -> WatsonxClient:
    """Get the global watsonx client instance."""
    global _watsonx_client
    if _watsonx_client is None:
        _watsonx_client = WatsonxClient()
    return _watsonx_client


async def close_watsonx_client() -> None:
    """Close and forget the global watsonx client."""
    global _watsonx_client
    if _watsonx_client is not None:
        await _watsonx_client.close()
        _watsonx_client = None
