"""
Security helpers for watsonx-gateway.
"""

from __future__ import annotations

import secrets
from typing import Dict


def generate_request_id() -> str:
    """
    Generate a unique request ID for tracing.

    Returns:
        Random request ID string
    """
    return secrets.token_urlsafe(16)


def mask_sensitive_data(data: str, visible_chars: int = 4) -> str:
    """
    Mask sensitive data for logging.

    Args:
        data: Sensitive data to mask
        visible_chars: Number of characters to show at the end

    Returns:
        Masked string
    """
    if len(data) <= visible_chars:
        return "*" * len(data)

    return "*" * (len(data) - visible_chars) + data[-visible_chars:]


def bearer_header(token: str) -> Dict[str, str]:
    """Authorization header for an IAM access token."""
    return {"Authorization": f"Bearer {token}"}
