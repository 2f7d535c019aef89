"""
Authentication modules for watsonx-gateway.

This package owns the IBM Cloud IAM token lifecycle.
"""

from __future__ import annotations

from .token_manager import (
    SAFETY_MARGIN,
    TokenCache,
    get_token_cache,
    reset_token_cache,
)

__all__ = [
    "SAFETY_MARGIN",
    "TokenCache",
    "get_token_cache",
    "reset_token_cache",
]
