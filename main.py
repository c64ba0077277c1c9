"""
Main entrypoint: FastAPI server over a fresh in-memory assessment store.

Env: API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT, ASSESSOR_RECOMPUTE_OVERALL (see domain_assessor.config.env).

Equivalent: uvicorn domain_assessor.api_server.app:app --host 0.0.0.0 --port 8000
"""

# Configure structured JSON logging before other imports that may log
from domain_assessor.assessor_logging import configure_from_settings, get_logger

logger = get_logger("main")


def main() -> None:
    """Build the app around a store configured from settings and run it with uvicorn."""
    import uvicorn

    from domain_assessor.analysis_engine.store import AssessmentStore
    from domain_assessor.api_server.server import create_app
    from domain_assessor.config import get_settings

    settings = get_settings()
    configure_from_settings(settings)
    store = AssessmentStore(recompute_overall_risk=settings.recompute_overall_risk)
    app = create_app(store)

    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        recompute_overall_risk=settings.recompute_overall_risk,
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
