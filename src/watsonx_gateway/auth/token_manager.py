"""
IAM token management for watsonx-gateway.

This module keeps the single process-wide IAM bearer token and refreshes
it against IBM Cloud when it is missing or close to expiry.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Callable, Optional

from ..core import (
    get_logger,
    get_settings,
    ConfigurationError,
    WatsonxConfig,
    log_auth_event,
    mask_sensitive_data,
)
from ..models import Credential

if TYPE_CHECKING:
    from ..services.watsonx_client import WatsonxClient

# Refresh this long before the reported expiry
SAFETY_MARGIN = timedelta(seconds=300)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenCache:
    """Caches one IAM bearer token and refreshes it on demand."""

    def __init__(
        self,
        client: WatsonxClient,
        config: Optional[WatsonxConfig] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.config = config or get_settings().watsonx
        self.logger = get_logger(__name__)
        self.client = client
        self._clock = clock

        self._credential: Optional[Credential] = None
        self._inflight: Optional[asyncio.Task[Credential]] = None

    @property
    def credential(self) -> Optional[Credential]:
        """Currently cached credential, if any."""
        return self._credential

    def _cached_token(self) -> Optional[str]:
        credential = self._credential
        if credential is not None and credential.is_valid(self._clock()):
            return credential.token
        return None

    async def get_token(self) -> str:
        """
        Get a valid IAM access token, refreshing it if needed.

        Returns:
            Bearer token

        Raises:
            ConfigurationError: If no API key is configured
            AuthenticationError: If the IAM exchange fails
        """
        token = self._cached_token()
        if token is not None:
            self.logger.debug("Using cached IAM token")
            return token

        # Concurrent callers share one refresh and see its outcome together
        if self._inflight is None:
            self._inflight = asyncio.create_task(self._refresh())
            self._inflight.add_done_callback(self._clear_inflight)

        credential = await asyncio.shield(self._inflight)
        return credential.token

    def _clear_inflight(self, task: asyncio.Task[Credential]) -> None:
        if self._inflight is task:
            self._inflight = None
        # Waiters may all have been cancelled; mark the failure as retrieved
        if not task.cancelled():
            task.exception()

    async def _refresh(self) -> Credential:
        """Fetch a new token from IAM and cache it."""
        api_key = self.config.api_key
        if not api_key:
            raise ConfigurationError(
                "watsonx API key is not configured",
                error_code="missing_api_key",
            )

        self.logger.info(
            "Fetching new IAM access token from IBM Cloud",
            key_hint=mask_sensitive_data(api_key),
        )

        try:
            token_response = await self.client.fetch_token(api_key)
        except Exception as e:
            log_auth_event(
                self.logger,
                "token_refresh_failed",
                success=False,
                details={"error": str(e)},
            )
            raise

        credential = Credential(
            token=token_response.access_token,
            expires_at=(
                self._clock()
                + timedelta(seconds=token_response.expires_in)
                - SAFETY_MARGIN
            ),
        )
        # Token and expiry are published together
        self._credential = credential

        log_auth_event(
            self.logger,
            "token_refreshed",
            success=True,
            details={"expires_in": token_response.expires_in},
        )
        return credential

    def invalidate(self) -> None:
        """Drop the cached token so the next call refreshes."""
        self._credential = None


# Global token cache instance
_token_cache: Optional[TokenCache] = None


def get_token_cache() -> TokenCache:
    """Get the global token cache instance."""
    global _token_cache
    if _token_cache is None:
        from ..services.watsonx_client import get_watsonx_client

        _token_cache = TokenCache(get_watsonx_client())
    return _token_cache


def reset_token_cache() -> None:
    """Forget the global token cache."""
    global _token_cache
    _token_cache = None
