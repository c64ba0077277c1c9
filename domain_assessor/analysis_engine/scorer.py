"""
Risk scoring — fixed-threshold classification of technical and cognitive signals.

Technical: averages anomaly, inverted trust, and behavior scores.
Cognitive: thresholds cognitive load (strict greater-than).
Pure functions of the assessment; they never mutate it or the store.
"""

from __future__ import annotations

from domain_assessor.analysis_engine.models import (
    RISK_LEVEL_ORDER,
    Assessment,
    RiskLevel,
    RiskMetrics,
)
from domain_assessor.assessor_logging import get_logger

logger = get_logger(__name__)

# Technical risk score thresholds (inclusive)
TECHNICAL_HIGH_THRESHOLD = 0.7
TECHNICAL_MEDIUM_THRESHOLD = 0.4

# Cognitive load thresholds (exclusive)
COGNITIVE_HIGH_THRESHOLD = 0.8
COGNITIVE_MEDIUM_THRESHOLD = 0.5


def technical_risk_score(metrics: RiskMetrics) -> float:
    """Return (anomaly + (1 - trust) + behavior) / 3. Inputs are not range-checked."""
    return (metrics.anomaly_score + (1 - metrics.trust_score) + metrics.behavior_score) / 3


def analyze_technical_risk(assessment: Assessment) -> RiskLevel:
    """
    Classify the technical indicators of an assessment.

    high if score >= 0.7, medium if score >= 0.4, else low.
    """
    score = technical_risk_score(assessment.technical_indicators.risk_metrics)
    if score >= TECHNICAL_HIGH_THRESHOLD:
        level = RiskLevel.HIGH
    elif score >= TECHNICAL_MEDIUM_THRESHOLD:
        level = RiskLevel.MEDIUM
    else:
        level = RiskLevel.LOW
    logger.debug(
        "technical_risk_scored",
        assessment_id=assessment.id,
        risk_score=round(score, 4),
        risk_level=level.value,
    )
    return level


def analyze_cognitive_risk(assessment: Assessment) -> RiskLevel:
    """
    Classify the cognitive risk factors of an assessment.

    high if cognitive_load > 0.8, medium if > 0.5, else low.
    Exactly 0.8 is medium and exactly 0.5 is low.
    """
    load = assessment.cognitive_risk_factors.cognitive_load
    if load > COGNITIVE_HIGH_THRESHOLD:
        level = RiskLevel.HIGH
    elif load > COGNITIVE_MEDIUM_THRESHOLD:
        level = RiskLevel.MEDIUM
    else:
        level = RiskLevel.LOW
    logger.debug(
        "cognitive_risk_scored",
        assessment_id=assessment.id,
        cognitive_load=load,
        risk_level=level.value,
    )
    return level


def overall_risk_level(assessment: Assessment) -> RiskLevel:
    """Higher of the technical and cognitive risk levels."""
    technical = analyze_technical_risk(assessment)
    cognitive = analyze_cognitive_risk(assessment)
    return max(technical, cognitive, key=RISK_LEVEL_ORDER.index)
