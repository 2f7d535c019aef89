"""
structlog setup for watsonx-gateway.

Events go through the standard library root logger, so the console and
optional rotating file handlers both receive them. ``request_id`` bound by
the request middleware is merged from contextvars into every event.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor

from .config import LoggingConfig, get_settings


REDACTED = "[REDACTED]"

SENSITIVE_KEYS = frozenset({
    "api_key", "apikey", "token", "access_token", "refresh_token",
    "authorization", "bearer", "password", "secret",
})


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: REDACTED if str(key).lower() in SENSITIVE_KEYS else _redact(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [_redact(item) for item in value]
    # IAM form bodies carry the raw key
    if isinstance(value, str) and "apikey=" in value:
        return REDACTED
    return value


def redact_credentials(
    logger: FilteringBoundLogger,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """structlog processor that masks API keys and bearer tokens."""
    return _redact(event_dict)


def _handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            filename=path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        ))
    return handlers


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure stdlib handlers and the structlog processor chain."""
    config = config or get_settings().logging
    level = logging.getLevelName(config.level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=_handlers(config),
        force=True,
    )

    renderer: Processor = (
        structlog.processors.JSONRenderer() if config.format == "json"
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            redact_credentials,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> FilteringBoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def log_auth_event(
    logger: FilteringBoundLogger,
    event_type: str,
    success: bool = True,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """Log an IAM token refresh outcome."""
    log = logger.info if success else logger.warning
    log("IAM token event", event_type=event_type, success=success, **(details or {}))


def log_api_call(
    logger: FilteringBoundLogger,
    service: str,
    endpoint: str,
    method: str,
    status_code: int,
    duration_ms: float,
    request_size: Optional[int] = None,
    response_size: Optional[int] = None
) -> None:
    """Log one outbound HTTP call."""
    logger.info(
        "External API call",
        service=service,
        endpoint=endpoint,
        method=method,
        status_code=status_code,
        duration_ms=round(duration_ms, 2),
        request_size=request_size,
        response_size=response_size,
    )


def log_error(
    logger: FilteringBoundLogger,
    error: Exception,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """Log an unexpected exception with its traceback."""
    logger.error(
        "Unexpected error",
        error_type=type(error).__name__,
        error_message=str(error),
        exc_info=True,
        **(context or {}),
    )


setup_logging()
