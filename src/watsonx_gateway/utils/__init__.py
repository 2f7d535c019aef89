"""
Utility modules for watsonx-gateway.
"""

from __future__ import annotations

from .http_client import HTTPClient, WatsonxHTTPClient

__all__ = [
    "HTTPClient",
    "WatsonxHTTPClient",
]
