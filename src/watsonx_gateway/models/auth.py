"""
IAM credential models for watsonx-gateway.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """
    Payload returned by the IBM Cloud IAM token endpoint.
    """

    model_config = ConfigDict(extra="ignore")

    access_token: str = Field(..., description="Bearer token", min_length=1)
    expires_in: int = Field(3600, description="Token lifetime in seconds")


class Credential(BaseModel):
    """
    Cached bearer token. Replaced as a whole on refresh, never mutated.
    """

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., description="Bearer token", min_length=1)
    expires_at: datetime = Field(..., description="Instant after which the token is refreshed")

    def is_valid(self, now: datetime) -> bool:
        """Usable strictly before ``expires_at``."""
        return now < self.expires_at
