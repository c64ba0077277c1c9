"""
FastAPI server — HTTP surface over an AssessmentStore.

create_app() builds an app around a caller-supplied store (or a fresh one
configured from settings). Risk levels under /assessments/{id}/risk are
computed on demand and never written back to the record.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from domain_assessor import __version__
from domain_assessor.analysis_engine.scorer import (
    analyze_cognitive_risk,
    analyze_technical_risk,
)
from domain_assessor.analysis_engine.store import AssessmentStore
from domain_assessor.assessor_logging import configure_from_settings, get_logger
from domain_assessor.config import get_settings
from domain_assessor.core.exceptions import AssessmentNotFoundError

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------

class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RiskMetricsBody(_CamelModel):
    anomaly_score: float = Field(0.0, alias="anomalyScore")
    trust_score: float = Field(0.0, alias="trustScore")
    behavior_score: float = Field(0.0, alias="behaviorScore")


class TechnicalIndicatorsBody(_CamelModel):
    """Full technical indicators; replaces the stored sub-record wholesale."""

    domain_behavior: str = Field("template_patterns", alias="domainBehavior")
    content_delivery: str = Field("standard", alias="contentDelivery")
    dns_patterns: str = Field("standard_resolution", alias="dnsPatterns")
    last_analysis: datetime | None = Field(None, alias="lastAnalysis")
    risk_metrics: RiskMetricsBody = Field(default_factory=RiskMetricsBody, alias="riskMetrics")


class CognitiveRiskFactorsBody(_CamelModel):
    """Full cognitive risk factors; replaces the stored sub-record wholesale."""

    user_expectation: str = Field("standard", alias="userExpectation")
    interaction_pattern: str = Field("normal", alias="interactionPattern")
    trust_establishment: str = Field("pending", alias="trustEstablishment")
    cognitive_load: float = Field(0.0, alias="cognitiveLoad")
    risk_perception: str = Field("low", alias="riskPerception")


class CreateAssessmentRequest(_CamelModel):
    """POST /assessments body."""

    domain_name: str = Field(..., min_length=1, max_length=253, alias="domainName")


class UpdateAssessmentRequest(_CamelModel):
    """PATCH /assessments/{id} body. Omitted fields are left unchanged."""

    technical_indicators: TechnicalIndicatorsBody | None = Field(None, alias="technicalIndicators")
    cognitive_risk_factors: CognitiveRiskFactorsBody | None = Field(None, alias="cognitiveRiskFactors")
    overall_risk_level: str | None = Field(None, alias="overallRiskLevel")


class RiskResponse(_CamelModel):
    """GET /assessments/{id}/risk response."""

    id: str
    technical_risk: str = Field(..., alias="technicalRisk")
    cognitive_risk: str = Field(..., alias="cognitiveRisk")
    overall_risk_level: str = Field(..., alias="overallRiskLevel")


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------

def get_store(request: Request) -> AssessmentStore:
    """Dependency: the app-scoped store."""
    return request.app.state.store


def _require(store: AssessmentStore, assessment_id: str):
    assessment = store.get(assessment_id)
    if assessment is None:
        raise AssessmentNotFoundError(assessment_id)
    return assessment


# -----------------------------------------------------------------------------
# App factory and routes
# -----------------------------------------------------------------------------

def create_app(store: AssessmentStore | None = None) -> FastAPI:
    """Build the FastAPI app. Without a store, one is created from settings at startup."""
    configure_from_settings(get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "store", None) is None:
            settings = get_settings()
            app.state.store = AssessmentStore(recompute_overall_risk=settings.recompute_overall_risk)
        logger.info(
            "api_started",
            recompute_overall_risk=app.state.store.recompute_overall_risk,
        )
        yield
        logger.info("api_stopped", assessment_count=len(app.state.store))

    app = FastAPI(
        title="Domain Assessor API",
        description="In-memory security assessments for domains (technical and cognitive risk).",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    @app.get("/health")
    def health() -> dict[str, str]:
        """Liveness probe: API is up."""
        return {"status": "ok"}

    @app.post("/assessments")
    def create_assessment(
        body: CreateAssessmentRequest,
        store: AssessmentStore = Depends(get_store),
    ) -> JSONResponse:
        """Create an assessment with default indicators. Returns 201 and the record."""
        domain = body.domain_name.strip()
        if not domain:
            raise HTTPException(status_code=400, detail="domainName must be non-empty")
        assessment = store.create(domain)
        return JSONResponse(status_code=201, content=assessment.to_dict())

    @app.get("/assessments")
    def list_assessments(store: AssessmentStore = Depends(get_store)) -> list[dict[str, Any]]:
        return [a.to_dict() for a in store.list()]

    @app.get("/assessments/{assessment_id}")
    def get_assessment(assessment_id: str, store: AssessmentStore = Depends(get_store)) -> dict[str, Any]:
        """Return one assessment; 404 if unknown."""
        return _require(store, assessment_id).to_dict()

    @app.patch("/assessments/{assessment_id}")
    def update_assessment(
        assessment_id: str,
        body: UpdateAssessmentRequest,
        store: AssessmentStore = Depends(get_store),
    ) -> dict[str, Any]:
        """
        Shallow-merge the supplied fields into the assessment and return the result.
        Sub-records in the body replace the stored ones wholesale.
        """
        partial = body.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)
        store.update(assessment_id, partial)
        return _require(store, assessment_id).to_dict()

    @app.get("/assessments/{assessment_id}/risk", response_model=RiskResponse)
    def get_assessment_risk(assessment_id: str, store: AssessmentStore = Depends(get_store)) -> JSONResponse:
        """Technical and cognitive risk levels computed on demand; the record is not modified."""
        assessment = _require(store, assessment_id)
        overall = assessment.overall_risk_level
        resp = RiskResponse(
            id=assessment.id,
            technical_risk=analyze_technical_risk(assessment).value,
            cognitive_risk=analyze_cognitive_risk(assessment).value,
            overall_risk_level=getattr(overall, "value", overall),
        )
        return JSONResponse(status_code=200, content=resp.model_dump(by_alias=True))

    @app.exception_handler(AssessmentNotFoundError)
    def not_found_handler(request: Request, exc: AssessmentNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(HTTPException)
    def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        """Consistent JSON error response for HTTPException."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    return app


app = create_app()
