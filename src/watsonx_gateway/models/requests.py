"""
API request models for watsonx-gateway.

Field names are snake_case in Python and camelCase on the wire; both are
accepted on input.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FileContext(BaseModel):
    """
    A source file attached to a chat request as context.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    path: str = Field(..., description="Workspace-relative file path")
    content: str = Field(..., description="Raw file content")
    language: Optional[str] = Field(None, description="Language tag, e.g. python")


class ChatRequest(BaseModel):
    """
    Normalized chat request addressed to one agent.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    agent_id: str = Field(..., description="Agent identifier selecting the system prompt", min_length=1)
    message: str = Field(..., description="User message", min_length=1)
    files: List[FileContext] = Field(default_factory=list, description="Files given as code context")
    metadata: Optional[Dict[str, Any]] = Field(None, description="Opaque caller metadata")

    @field_validator("agent_id", "message")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def with_agent(self, agent_id: str) -> ChatRequest:
        """Copy of this request addressed to a different agent."""
        return self.model_copy(update={"agent_id": agent_id})
