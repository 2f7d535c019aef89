"""
watsonx-gateway - relay for IBM watsonx hosted coding agents.

This package forwards chat requests to watsonx.ai under one of several
agent system prompts, managing the IBM Cloud IAM token on the way.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "Relay for IBM watsonx hosted coding agents"

# Core exports
from .core import get_settings, get_logger
from .main import create_app

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "get_settings",
    "get_logger",
    "create_app",
]
