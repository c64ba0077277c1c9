"""
Structured JSON logging: timestamp, assessment_id, event_type.

structlog with ISO timestamps, log level, and consistent keys for
aggregation. All modules should use get_logger() and pass event_type
(and assessment_id / domain where relevant).

Loggers are lazy proxies that resolve the current configuration on every
call, so configure_from_settings() at startup also reaches module-level
loggers created at import. Only python-dotenv and structlog are imported
here; no domain_assessor imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import structlog
from structlog._config import BoundLoggerLazyProxy
from dotenv import load_dotenv

# Same .env as domain_assessor.config.env: project root, 2 levels up
_ENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"
load_dotenv(_ENV_PATH, override=False)

# Default log level from env
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# JSON output for production (LOG_FORMAT=json); human-readable for local
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def configure_structlog(level: int = LOG_LEVEL_VALUE, fmt: str = LOG_FORMAT) -> None:
    """Configure structlog: JSON when fmt is "json", console renderer otherwise; drop events below level."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
    ]
    if fmt == "json":
        processors.append(_normalize_event)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # ConsoleRenderer leads each line with the "event" key
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # No file argument: each logger writes to sys.stdout as it is when the logger is built
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_from_settings(settings: Any) -> None:
    """Apply log_level / log_format from a domain_assessor.config.Settings."""
    level = getattr(logging, str(settings.log_level).upper(), logging.INFO)
    configure_structlog(level, str(settings.log_format).lower())


# One-time configuration on first import
if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    """
    Return a structured logger for the given module name.

    Log with event_type (first arg) and optional assessment_id, domain, etc.:
        logger = get_logger(__name__)
        logger.info("assessment_created", assessment_id=aid, domain="example.com")
    Output (JSON): {"event_type": "assessment_created", "assessment_id": "...", "domain": "...", "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    return BoundLoggerLazyProxy(None, initial_values={"logger": name}, logger_factory_args=(name,))


def bind_assessment(assessment_id: str) -> Any:
    """Return a logger with assessment_id bound to all subsequent log calls."""
    return BoundLoggerLazyProxy(
        None,
        initial_values={"logger": "domain_assessor", "assessment_id": assessment_id},
        logger_factory_args=("domain_assessor",),
    )
