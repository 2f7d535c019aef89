"""
Tool endpoints called by watsonx Orchestrate agents.

These are placeholders with fixed response shapes. They perform no file
or Git I/O.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body

from ..core import get_logger

router = APIRouter(prefix="/api/watsonx/tools", tags=["watsonx-tools"])
logger = get_logger(__name__)

ToolRequest = Dict[str, Optional[str]]


@router.post("/read-file", summary="Read file content")
async def read_file(request: ToolRequest = Body(default_factory=dict)) -> Dict[str, Any]:
    path = request.get("path")
    logger.info("Tool: read-file called", path=path)
    return {
        "path": path,
        "success": True,
        "content": "// This is a placeholder. File reading requires workspace context.",
        "message": "File read operation placeholder",
    }


@router.post("/write-file", summary="Write file content")
async def write_file(request: ToolRequest = Body(default_factory=dict)) -> Dict[str, Any]:
    path = request.get("path")
    content = request.get("content")
    logger.info("Tool: write-file called", path=path)
    return {
        "path": path,
        "success": True,
        "message": f"File write operation placeholder - content length: {len(content or '')}",
    }


@router.post("/list-files", summary="List files in directory")
async def list_files(request: ToolRequest = Body(default_factory=dict)) -> Dict[str, Any]:
    directory = request.get("directory") or "/"
    logger.info("Tool: list-files called", directory=directory)
    return {
        "directory": directory,
        "success": True,
        "files": ["src/", "package.json", "README.md"],
        "message": "File listing placeholder",
    }


@router.post("/analyze-file", summary="Analyze a file")
async def analyze_file(request: ToolRequest = Body(default_factory=dict)) -> Dict[str, Any]:
    path = request.get("path")
    logger.info("Tool: analyze-file called", path=path)
    return {
        "path": path,
        "success": True,
        "issues": [],
        "metrics": {"lines": 100, "functions": 5, "complexity": "low"},
    }


@router.post("/git-status", summary="Get git status")
async def git_status(request: ToolRequest = Body(default_factory=dict)) -> Dict[str, Any]:
    logger.info("Tool: git-status called")
    return {
        "success": True,
        "branch": "main",
        "clean": True,
        "changes": [],
        "ahead": 0,
        "behind": 0,
    }


@router.post("/git-commit", summary="Create git commit")
async def git_commit(request: ToolRequest = Body(default_factory=dict)) -> Dict[str, Any]:
    message = request.get("message")
    logger.info("Tool: git-commit called", commit_message=message)
    return {
        "success": True,
        "commitId": "placeholder-commit-id",
        "message": message,
        "note": "Git commit placeholder - requires git integration",
    }


@router.post("/git-push", summary="Push to remote")
async def git_push(request: ToolRequest = Body(default_factory=dict)) -> Dict[str, Any]:
    remote = request.get("remote") or "origin"
    branch = request.get("branch") or "main"
    logger.info("Tool: git-push called", remote=remote, branch=branch)
    return {
        "success": True,
        "remote": remote,
        "branch": branch,
        "note": "Git push placeholder - requires git integration",
    }


@router.post("/search-code", summary="Search code")
async def search_code(request: ToolRequest = Body(default_factory=dict)) -> Dict[str, Any]:
    query = request.get("query")
    file_pattern = request.get("filePattern") or "*"
    logger.info("Tool: search-code called", query=query, file_pattern=file_pattern)
    return {
        "query": query,
        "success": True,
        "matches": [{"file": "src/index.ts", "line": 10, "content": "// matching line"}],
    }
