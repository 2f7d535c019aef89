"""
Custom exceptions for watsonx-gateway.

TokenCache and WatsonxClient raise these; AgentGateway turns every one of
them into a failed ChatResponse. The HTTP layer renders any that escape
with ``to_dict()``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Base exception for all watsonx-gateway errors."""

    error_type = "gateway_error"
    default_message = "Gateway error"
    status_code = 500

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.error_code = error_code
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Render as the JSON error body returned to HTTP callers."""
        body: Dict[str, Any] = {"message": self.message, "type": self.error_type}
        if self.error_code:
            body["code"] = self.error_code
        body.update(self.details)
        return {"error": body}


class ConfigurationError(GatewayError):
    """The watsonx API key is not configured."""

    error_type = "configuration_error"
    default_message = "Configuration error"


class AuthenticationError(GatewayError):
    """IAM token exchange failed."""

    error_type = "authentication_error"
    default_message = "Authentication failed"
    status_code = 401


class RemoteCallError(GatewayError):
    """Generation endpoint transport failure (timeout, network, non-2xx)."""

    error_type = "remote_call_error"
    default_message = "Remote call failed"
    status_code = 502


class MalformedResponseError(GatewayError):
    """Generation succeeded but the payload has an unexpected shape."""

    error_type = "malformed_response"
    default_message = "Unexpected response structure"
    status_code = 502

    def __init__(self, message: Optional[str] = None, payload: Any = None) -> None:
        super().__init__(message, error_code="malformed_response")
        self.payload = payload
