"""
API server — FastAPI app exposing the assessment store over HTTP.
"""

from domain_assessor.api_server.server import create_app

__all__ = ["create_app"]
