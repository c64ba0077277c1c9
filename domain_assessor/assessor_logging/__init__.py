"""
Structured logging for Domain Assessor.

JSON logs with timestamp, assessment_id, event_type.
Use get_logger() in all modules for aggregation-friendly output.
"""

from domain_assessor.assessor_logging.logger import (
    bind_assessment,
    configure_from_settings,
    configure_structlog,
    get_logger,
)

__all__ = ["bind_assessment", "configure_from_settings", "configure_structlog", "get_logger"]
