"""
Environment variable loading for Domain Assessor.

- API_HOST / API_PORT: bind address for the HTTP API (default 0.0.0.0:8000)
- LOG_LEVEL / LOG_FORMAT: structlog level and renderer (INFO, json)
- ASSESSOR_RECOMPUTE_OVERALL: 1 | true | yes | on to recompute overallRiskLevel
  on create/update (default: off, overallRiskLevel stays "low")
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is domain_assessor/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

_TRUTHY = ("1", "true", "yes", "on")


def load_assessor_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides the process env."""
    load_dotenv(_ENV_PATH, override=False)


def get_api_host() -> str:
    load_assessor_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    """Return API_PORT as int; falls back to the default when unset or not a number."""
    load_assessor_env()
    raw = (os.getenv("API_PORT") or "").strip()
    if not raw:
        return DEFAULT_API_PORT
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_API_PORT


def get_log_level() -> str:
    load_assessor_env()
    return ((os.getenv("LOG_LEVEL") or "").strip() or DEFAULT_LOG_LEVEL).upper()


def get_log_format() -> str:
    load_assessor_env()
    return ((os.getenv("LOG_FORMAT") or "").strip() or DEFAULT_LOG_FORMAT).lower()


def recompute_overall_risk_enabled() -> bool:
    """
    Return True when ASSESSOR_RECOMPUTE_OVERALL is set to a truthy value.
    Default: False (overallRiskLevel is set once at creation and left alone).
    """
    load_assessor_env()
    raw = (os.getenv("ASSESSOR_RECOMPUTE_OVERALL") or "").strip().lower()
    return raw in _TRUTHY
