"""
Core modules for watsonx-gateway.

This package contains the core infrastructure components including
configuration, exceptions, logging, and security utilities.
"""

from __future__ import annotations

from .config import Settings, WatsonxConfig, get_settings
from .exceptions import (
    GatewayError,
    ConfigurationError,
    AuthenticationError,
    RemoteCallError,
    MalformedResponseError,
)
from .logging import (
    get_logger,
    setup_logging,
    log_auth_event,
    log_api_call,
    log_error,
)
from .security import (
    generate_request_id,
    mask_sensitive_data,
    bearer_header,
)

__all__ = [
    # Configuration
    "Settings",
    "WatsonxConfig",
    "get_settings",
    # Exceptions
    "GatewayError",
    "ConfigurationError",
    "AuthenticationError",
    "RemoteCallError",
    "MalformedResponseError",
    # Logging
    "get_logger",
    "setup_logging",
    "log_auth_event",
    "log_api_call",
    "log_error",
    # Security
    "generate_request_id",
    "mask_sensitive_data",
    "bearer_header",
]
