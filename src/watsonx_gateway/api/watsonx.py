"""
watsonx agent API endpoints.

Every chat route answers 200 with a ChatResponse; failures are reported
through ``success`` and ``errorMessage`` in the body.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..core import get_logger
from ..models import AgentInfo, ChatRequest, ChatResponse, ErrorResponse, HealthStatus
from ..services import AgentGateway, get_agent_gateway

router = APIRouter(prefix="/api/watsonx", tags=["watsonx"])
logger = get_logger(__name__)

_responses = {500: {"model": ErrorResponse, "description": "Internal Server Error"}}


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses=_responses,
    summary="Chat with AI agent",
    description="Send a message to a specific watsonx AI agent",
)
async def chat(
    request: ChatRequest,
    gateway: AgentGateway = Depends(get_agent_gateway),
) -> ChatResponse:
    logger.info("Chat request", agent_id=request.agent_id)
    return await gateway.chat(request)


@router.get(
    "/agents",
    response_model=List[AgentInfo],
    summary="List available agents",
    description="Get list of all available AI agents",
)
async def list_agents(gateway: AgentGateway = Depends(get_agent_gateway)) -> List[AgentInfo]:
    return gateway.list_agents()


@router.get(
    "/health",
    response_model=HealthStatus,
    response_model_exclude_none=True,
    summary="Check watsonx health",
    description="Check if watsonx is configured and accessible",
)
async def check_health(gateway: AgentGateway = Depends(get_agent_gateway)) -> HealthStatus:
    return await gateway.check_health()


@router.post(
    "/analyze",
    response_model=ChatResponse,
    responses=_responses,
    summary="Analyze codebase",
    description="Perform full codebase analysis using AI",
)
async def analyze_codebase(
    request: ChatRequest,
    gateway: AgentGateway = Depends(get_agent_gateway),
) -> ChatResponse:
    logger.info("Codebase analysis request")
    return await gateway.analyze(request)


@router.post(
    "/review",
    response_model=ChatResponse,
    responses=_responses,
    summary="Review code changes",
    description="Review code changes using AI",
)
async def review_code(
    request: ChatRequest,
    gateway: AgentGateway = Depends(get_agent_gateway),
) -> ChatResponse:
    logger.info("Code review request")
    return await gateway.review(request)


@router.post(
    "/document",
    response_model=ChatResponse,
    responses=_responses,
    summary="Generate documentation",
    description="Generate documentation for code using AI",
)
async def generate_documentation(
    request: ChatRequest,
    gateway: AgentGateway = Depends(get_agent_gateway),
) -> ChatResponse:
    logger.info("Documentation generation request")
    return await gateway.document(request)


@router.post(
    "/ask",
    response_model=ChatResponse,
    responses=_responses,
    summary="Ask about code",
    description="Ask questions about the codebase",
)
async def ask_question(
    request: ChatRequest,
    gateway: AgentGateway = Depends(get_agent_gateway),
) -> ChatResponse:
    logger.info("Q&A request")
    return await gateway.ask(request)


@router.post(
    "/modify",
    response_model=ChatResponse,
    responses=_responses,
    summary="Modify code",
    description="Request code modifications using AI",
)
async def modify_code(
    request: ChatRequest,
    gateway: AgentGateway = Depends(get_agent_gateway),
) -> ChatResponse:
    logger.info("Code modification request")
    return await gateway.modify(request)


@router.post(
    "/dependencies",
    response_model=ChatResponse,
    responses=_responses,
    summary="Analyze dependencies",
    description="Analyze code dependencies and generate graph data",
)
async def analyze_dependencies(
    request: ChatRequest,
    gateway: AgentGateway = Depends(get_agent_gateway),
) -> ChatResponse:
    logger.info("Dependency analysis request")
    return await gateway.dependencies(request)


@router.post(
    "/git-help",
    response_model=ChatResponse,
    responses=_responses,
    summary="Git assistance",
    description="Get help with Git operations",
)
async def git_help(
    request: ChatRequest,
    gateway: AgentGateway = Depends(get_agent_gateway),
) -> ChatResponse:
    logger.info("Git help request")
    return await gateway.git_help(request)
