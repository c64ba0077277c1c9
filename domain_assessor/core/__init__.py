"""
Core utilities — shared exceptions used across the store, API server, and CLI.
"""

from domain_assessor.core.exceptions import AssessmentError, AssessmentNotFoundError

__all__ = ["AssessmentError", "AssessmentNotFoundError"]
