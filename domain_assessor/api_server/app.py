"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn domain_assessor.api_server.app:app --host 0.0.0.0 --port 8000
"""

from domain_assessor.api_server.server import app

__all__ = ["app"]
