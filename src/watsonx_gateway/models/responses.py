"""
API response models for watsonx-gateway.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ToolCall(BaseModel):
    """
    Structured tool invocation reported by an agent.

    The generation endpoint never returns these today, so responses carry
    an empty list.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    tool_name: str = Field(..., description="Name of the invoked tool")
    parameters: Dict[str, Any] = Field(default_factory=dict, description="Tool arguments")
    result: Optional[str] = Field(None, description="Tool output")


class ChatResponse(BaseModel):
    """
    Result of one chat request. Failures are values, not exceptions:
    ``success`` is false and ``error_message`` says why.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique response identifier")
    agent_id: Optional[str] = Field(None, description="Agent the request was addressed to")
    response: Optional[str] = Field(None, description="Generated text")
    tool_calls: List[ToolCall] = Field(default_factory=list, description="Tool calls made by the agent")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Response metadata")
    timestamp: datetime = Field(default_factory=_utcnow, description="Creation time")
    success: bool = Field(..., description="Whether the request succeeded")
    error_message: Optional[str] = Field(None, description="Failure reason when success is false")

    @classmethod
    def ok(cls, agent_id: str, text: str) -> ChatResponse:
        """Successful response carrying generated text."""
        return cls(agent_id=agent_id, response=text, success=True)

    @classmethod
    def error(cls, agent_id: Optional[str], message: str) -> ChatResponse:
        """Failed response; the agent id is kept so callers can tell requests apart."""
        return cls(agent_id=agent_id, success=False, error_message=message or "Unknown error")


class AgentInfo(BaseModel):
    """
    One entry of the agent catalogue.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Agent identifier")
    name: str = Field(..., description="Display name")


class HealthStatus(BaseModel):
    """
    watsonx connectivity report.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    configured: bool = Field(..., description="Whether an API key is set")
    space_id: Optional[str] = Field(None, description="Configured deployment space")
    endpoint: Optional[str] = Field(None, description="Generation endpoint base URL")
    authenticated: bool = Field(..., description="Whether an IAM token could be obtained")
    error: Optional[str] = Field(None, description="Authentication failure reason")


class ErrorResponse(BaseModel):
    """
    Standard error response model.
    """

    model_config = ConfigDict(extra="forbid")

    error: Dict[str, Any] = Field(..., description="Error details")
