"""
Analysis engine package — assessment records, store, and risk scoring.

Holds technical and cognitive risk signals per domain and classifies them
into low/medium/high risk levels with fixed thresholds.
"""

from domain_assessor.analysis_engine.models import (
    Assessment,
    CognitiveRiskFactors,
    ContentDelivery,
    DomainBehavior,
    RiskLevel,
    RiskMetrics,
    TechnicalIndicators,
)
from domain_assessor.analysis_engine.scorer import (
    analyze_cognitive_risk,
    analyze_technical_risk,
    overall_risk_level,
    technical_risk_score,
)
from domain_assessor.analysis_engine.store import AssessmentStore

__all__ = [
    "Assessment",
    "CognitiveRiskFactors",
    "ContentDelivery",
    "DomainBehavior",
    "RiskLevel",
    "RiskMetrics",
    "TechnicalIndicators",
    "analyze_cognitive_risk",
    "analyze_technical_risk",
    "overall_risk_level",
    "technical_risk_score",
    "AssessmentStore",
]
