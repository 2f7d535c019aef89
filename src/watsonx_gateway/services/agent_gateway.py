"""
Agent gateway for watsonx-gateway.

This module turns a ChatRequest into a watsonx.ai generation call and the
result, or any failure, into a ChatResponse. Nothing raised below this
layer reaches the caller.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..auth import TokenCache, get_token_cache
from ..core import (
    get_logger,
    get_settings,
    GatewayError,
    MalformedResponseError,
    WatsonxConfig,
    log_error,
)
from ..models import AgentInfo, ChatRequest, ChatResponse, HealthStatus
from . import prompts
from .watsonx_client import WatsonxClient, get_watsonx_client

MODEL_ID = "ibm/granite-3-8b-instruct"

GENERATION_PARAMETERS: Dict[str, Any] = {
    "max_new_tokens": 4096,
    "temperature": 0.7,
    "top_p": 0.9,
    "repetition_penalty": 1.1,
}

NO_RESPONSE_TEXT = "No response received from watsonx"
UNPARSEABLE_PREFIX = "Received response but could not parse it: "


def extract_generated_text(payload: Any) -> str:
    """
    Pull ``results[0].generated_text`` out of a generation response.

    Raises:
        MalformedResponseError: If the payload has any other shape
    """
    if payload is None:
        return NO_RESPONSE_TEXT

    if isinstance(payload, dict):
        results = payload.get("results")
        if isinstance(results, list) and results and isinstance(results[0], dict):
            generated_text = results[0].get("generated_text")
            if generated_text is not None:
                return str(generated_text)

    raise MalformedResponseError(payload=payload)


class AgentGateway:
    """Routes chat requests to watsonx agents."""

    def __init__(
        self,
        token_cache: TokenCache,
        client: WatsonxClient,
        config: Optional[WatsonxConfig] = None,
    ):
        self.config = config or get_settings().watsonx
        self.logger = get_logger(__name__)
        self.token_cache = token_cache
        self.client = client

    def build_payload(self, request: ChatRequest) -> Dict[str, Any]:
        """Generation body for a request."""
        return {
            "input": prompts.build_generation_input(
                request.agent_id, request.message, request.files
            ),
            "model_id": MODEL_ID,
            "space_id": self.config.space_id,
            "parameters": dict(GENERATION_PARAMETERS),
        }

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """
        Send a chat request to its agent.

        Args:
            request: Chat request

        Returns:
            ChatResponse; ``success`` is false on any failure
        """
        agent_id = getattr(request, "agent_id", None)
        message = getattr(request, "message", None)

        if not agent_id or not agent_id.strip():
            return ChatResponse.error(agent_id, "Agent ID is required")
        if not message or not message.strip():
            return ChatResponse.error(agent_id, "Message is required")

        self.logger.info("Sending chat to agent", agent_id=agent_id, files=len(request.files or []))

        try:
            token = await self.token_cache.get_token()
            raw = await self.client.generate(token, self.build_payload(request))
            text = self._parse(raw)
        except GatewayError as e:
            self.logger.error(
                "Error calling watsonx agent",
                agent_id=agent_id,
                error_type=e.error_type,
                error=e.message,
            )
            return ChatResponse.error(agent_id, e.message)
        except Exception as e:
            log_error(self.logger, e, context={"agent_id": agent_id})
            return ChatResponse.error(agent_id, str(e) or type(e).__name__)

        return ChatResponse.ok(agent_id, text)

    def _parse(self, raw: Any) -> str:
        try:
            return extract_generated_text(raw)
        except MalformedResponseError as e:
            self.logger.warning("Unexpected response structure", response=str(e.payload))
            return f"{UNPARSEABLE_PREFIX}{e.payload}"

    # Fixed-agent entry points

    async def analyze(self, request: ChatRequest) -> ChatResponse:
        """Codebase analysis."""
        return await self.chat(request.with_agent(prompts.CODEBASE_ANALYSIS))

    async def review(self, request: ChatRequest) -> ChatResponse:
        """Code review."""
        return await self.chat(request.with_agent(prompts.CODE_REVIEW))

    async def document(self, request: ChatRequest) -> ChatResponse:
        """Documentation generation."""
        return await self.chat(request.with_agent(prompts.DOCUMENTATION))

    async def ask(self, request: ChatRequest) -> ChatResponse:
        """Questions about the code."""
        return await self.chat(request.with_agent(prompts.QA_AGENT))

    async def modify(self, request: ChatRequest) -> ChatResponse:
        """Code modification."""
        return await self.chat(request.with_agent(prompts.CODE_MODIFIER))

    async def dependencies(self, request: ChatRequest) -> ChatResponse:
        """Dependency analysis."""
        return await self.chat(request.with_agent(prompts.DEPENDENCY_GRAPH))

    async def git_help(self, request: ChatRequest) -> ChatResponse:
        """Git workflow help."""
        return await self.chat(request.with_agent(prompts.PUSHING_AGENT))

    def list_agents(self) -> List[AgentInfo]:
        """Available agents in catalogue order."""
        return [AgentInfo(id=agent_id, name=name) for agent_id, name in prompts.AGENT_NAMES.items()]

    async def check_health(self) -> HealthStatus:
        """Report configuration and whether an IAM token can be obtained."""
        authenticated = True
        error: Optional[str] = None

        try:
            await self.token_cache.get_token()
        except Exception as e:
            authenticated = False
            error = str(e) or type(e).__name__

        return HealthStatus(
            configured=self.config.is_configured,
            space_id=self.config.space_id,
            endpoint=self.config.endpoint,
            authenticated=authenticated,
            error=error,
        )


# Global gateway instance
_agent_gateway: Optional[AgentGateway] = None


def get_agent_gateway() -> AgentGateway:
    """Get the global agent gateway instance."""
    global _agent_gateway
    if _agent_gateway is None:
        _agent_gateway = AgentGateway(get_token_cache(), get_watsonx_client())
    return _agent_gateway


def reset_agent_gateway() -> None:
    """Forget the global agent gateway."""
    global _agent_gateway
    _agent_gateway = None
