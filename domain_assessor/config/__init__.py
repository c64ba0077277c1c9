"""
Configuration management for Domain Assessor.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for service configuration.
"""

from domain_assessor.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
