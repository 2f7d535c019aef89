"""
API modules for watsonx-gateway.

This package contains all API endpoints and routing logic.
"""

from __future__ import annotations

from .tools import router as tools_router
from .watsonx import router as watsonx_router

__all__ = ["watsonx_router", "tools_router"]
