"""
Application-level exceptions.

AssessmentNotFoundError is the only error the store raises; the API
server maps it to HTTP 404.
"""

from __future__ import annotations


class AssessmentError(Exception):
    """Base class for Domain Assessor errors."""


class AssessmentNotFoundError(AssessmentError, KeyError):
    """Raised when an operation references an assessment id the store does not hold."""

    def __init__(self, assessment_id: str) -> None:
        self.assessment_id = assessment_id
        super().__init__(assessment_id)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the key
        return f"Assessment not found: {self.assessment_id}"
