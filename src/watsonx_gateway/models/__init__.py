"""
watsonx-gateway data models.

This module provides all Pydantic models for IAM credentials, chat
requests, and responses.
"""

from __future__ import annotations

# Credential models
from .auth import Credential, TokenResponse

# Request models
from .requests import ChatRequest, FileContext

# Response models
from .responses import (
    AgentInfo,
    ChatResponse,
    ErrorResponse,
    HealthStatus,
    ToolCall,
)

__all__ = [
    # Credential models
    "Credential",
    "TokenResponse",
    # Request models
    "ChatRequest",
    "FileContext",
    # Response models
    "AgentInfo",
    "ChatResponse",
    "ErrorResponse",
    "HealthStatus",
    "ToolCall",
]
