"""
Agent catalogue for watsonx-gateway.

Each agent is a system prompt framing the remote model. The tables are
read-only mappings built at import time.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Sequence

from ..models import FileContext

CODEBASE_ANALYSIS = "codebase-analysis"
DEPENDENCY_GRAPH = "dependency-graph"
QA_AGENT = "qa-agent"
CODE_MODIFIER = "code-modifier"
CODE_REVIEW = "code-review"
DOCUMENTATION = "documentation"
PUSHING_AGENT = "pushing-agent"


AGENT_NAMES: Mapping[str, str] = MappingProxyType({
    CODEBASE_ANALYSIS: "Codebase Analysis Agent",
    DEPENDENCY_GRAPH: "Dependency Graph Agent",
    QA_AGENT: "Q&A Agent",
    CODE_MODIFIER: "Code Modifier Agent",
    CODE_REVIEW: "Code Review Agent",
    DOCUMENTATION: "Documentation Agent",
    PUSHING_AGENT: "Pushing Agent",
})


SYSTEM_PROMPTS: Mapping[str, str] = MappingProxyType({
    CODEBASE_ANALYSIS: (
        "You are an expert code analyzer. Your task is to:\n"
        "- Analyze code structure and identify patterns\n"
        "- Detect potential bugs, logic errors, and code smells\n"
        "- Identify security vulnerabilities\n"
        "- Suggest improvements with clear explanations\n"
        "- Consider cross-file dependencies\n"
        "Be thorough but concise in your analysis.\n"
    ),
    DEPENDENCY_GRAPH: (
        "You are a dependency analysis expert. Your task is to:\n"
        "- Parse and explain import/export relationships\n"
        "- Identify module dependencies\n"
        "- Detect circular dependencies\n"
        "- Explain the architecture and module relationships\n"
        "Format dependencies clearly for visualization.\n"
    ),
    QA_AGENT: (
        "You are a helpful code assistant. Your task is to:\n"
        "- Answer questions about the code clearly and accurately\n"
        "- Explain how functions and classes work\n"
        "- Help developers understand the codebase\n"
        "- Provide code examples when helpful\n"
        "Be friendly and educational in your responses.\n"
    ),
    CODE_MODIFIER: (
        "You are an expert code modifier. Your task is to:\n"
        "- Understand the user's modification request precisely\n"
        "- Generate clean, working code changes\n"
        "- Maintain existing code style and conventions\n"
        "- Preserve functionality when refactoring\n"
        "- Provide before/after comparisons\n"
        "Always show the complete modified code.\n"
    ),
    CODE_REVIEW: (
        "You are an expert code reviewer. Your task is to:\n"
        "- Review code changes thoroughly\n"
        "- Check for security vulnerabilities\n"
        "- Verify logic correctness\n"
        "- Suggest performance improvements\n"
        "- Follow best practices for code review\n"
        "Provide constructive feedback with specific suggestions.\n"
    ),
    DOCUMENTATION: (
        "You are a documentation expert. Your task is to:\n"
        "- Generate comprehensive README files\n"
        "- Create clear API documentation\n"
        "- Add meaningful code comments\n"
        "- Generate usage examples\n"
        "- Follow documentation best practices\n"
        "Write documentation that is clear and helpful for developers.\n"
    ),
    PUSHING_AGENT: (
        "You are a Git workflow assistant. Your task is to:\n"
        "- Generate meaningful commit messages\n"
        "- Suggest branch naming conventions\n"
        "- Guide through Git operations\n"
        "- Create pull request descriptions\n"
        "- Explain Git concepts when needed\n"
        "Help users follow Git best practices.\n"
    ),
})

DEFAULT_SYSTEM_PROMPT = (
    "You are an AI assistant for code analysis and development.\n"
    "Help the user with their request clearly and accurately.\n"
)


def get_system_prompt(agent_id: str) -> str:
    """System prompt for an agent; unknown ids get the generic assistant."""
    return SYSTEM_PROMPTS.get(agent_id, DEFAULT_SYSTEM_PROMPT)


def build_prompt_body(message: str, files: Sequence[FileContext] = ()) -> str:
    """
    Render the user part of the prompt.

    Files, when present, come first inside a delimited code context block,
    followed by the ``User Request:`` line.
    """
    parts = []

    if files:
        parts.append("=== CODE CONTEXT ===\n\n")
        for file in files:
            header = f"--- File: {file.path}"
            if file.language is not None:
                header += f" ({file.language})"
            parts.append(f"{header} ---\n{file.content}\n\n")
        parts.append("=== END CODE CONTEXT ===\n\n")

    parts.append(f"User Request: {message}")
    return "".join(parts)


def build_generation_input(agent_id: str, message: str, files: Sequence[FileContext] = ()) -> str:
    """System prompt, a blank line, then the prompt body."""
    return f"{get_system_prompt(agent_id)}\n\n{build_prompt_body(message, files)}"
