"""
Application settings and environment configuration.

Responsibilities:
- Load configuration from environment variables and .env files.
- Provide defaults for optional settings.
- Expose typed settings (API host/port, log level/format, overall-risk
  recomputation) for use across the store, API server, and CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

from domain_assessor.config import env


@dataclass(frozen=True)
class Settings:
    """Typed view over the process environment."""

    api_host: str = env.DEFAULT_API_HOST
    api_port: int = env.DEFAULT_API_PORT
    log_level: str = env.DEFAULT_LOG_LEVEL
    log_format: str = env.DEFAULT_LOG_FORMAT
    recompute_overall_risk: bool = False


def get_settings() -> Settings:
    """
    Return the current application settings.

    Read fresh from the environment on every call, so tests can
    monkeypatch variables without resetting a cache.
    """
    return Settings(
        api_host=env.get_api_host(),
        api_port=env.get_api_port(),
        log_level=env.get_log_level(),
        log_format=env.get_log_format(),
        recompute_overall_risk=env.recompute_overall_risk_enabled(),
    )
