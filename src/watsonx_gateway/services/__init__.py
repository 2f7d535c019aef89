"""
Service modules for watsonx-gateway.

This package contains the watsonx client, the agent catalogue, and the
gateway that ties them together.
"""

from __future__ import annotations

from .watsonx_client import WatsonxClient, close_watsonx_client, get_watsonx_client
from .agent_gateway import (
    GENERATION_PARAMETERS,
    MODEL_ID,
    AgentGateway,
    extract_generated_text,
    get_agent_gateway,
    reset_agent_gateway,
)
from .prompts import (
    AGENT_NAMES,
    DEFAULT_SYSTEM_PROMPT,
    SYSTEM_PROMPTS,
    build_generation_input,
    build_prompt_body,
    get_system_prompt,
)

__all__ = [
    # watsonx client
    "WatsonxClient",
    "get_watsonx_client",
    "close_watsonx_client",
    # Gateway
    "AgentGateway",
    "GENERATION_PARAMETERS",
    "MODEL_ID",
    "extract_generated_text",
    "get_agent_gateway",
    "reset_agent_gateway",
    # Agent catalogue
    "AGENT_NAMES",
    "DEFAULT_SYSTEM_PROMPT",
    "SYSTEM_PROMPTS",
    "build_generation_input",
    "build_prompt_body",
    "get_system_prompt",
]
