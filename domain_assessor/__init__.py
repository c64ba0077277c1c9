"""
Domain Assessor — security assessment records for domains.

Keeps technical and cognitive risk signals per assessed domain in an
in-memory store, classifies them into low/medium/high risk levels, and
exposes the store over a small FastAPI surface and a CLI.
"""

__version__ = "0.1.0"
