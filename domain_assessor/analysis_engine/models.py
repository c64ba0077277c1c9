"""
Assessment data model: enums and dataclasses for technical and cognitive risk signals.

to_dict/from_dict use the camelCase JSON interchange keys
(technicalIndicators, overallRiskLevel, ...). Enum fields and numeric
ranges are not validated: an unknown enum string is kept as the raw string.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, TypeVar


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DomainBehavior(str, Enum):
    TEMPLATE_PATTERNS = "template_patterns"
    DYNAMIC_CONTENT = "dynamic_content"
    STATIC_CONTENT = "static_content"
    HYBRID_PATTERNS = "hybrid_patterns"


class ContentDelivery(str, Enum):
    STANDARD = "standard"
    NON_STANDARD = "non_standard"
    CDN_BASED = "cdn_based"
    DIRECT_SERVER = "direct_server"


# Ordinal position for comparing risk levels
RISK_LEVEL_ORDER = (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)

_E = TypeVar("_E", bound=Enum)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _enum_or_raw(enum_cls: type[_E], value: Any) -> _E | Any:
    """Coerce to enum_cls when value is a member value; otherwise return value unchanged."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _parse_timestamp(value: Any) -> Any:
    """Accept datetime or ISO 8601 string; anything else is returned as-is."""
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return value


def _format_timestamp(value: Any) -> Any:
    return value.isoformat() if isinstance(value, datetime) else value


@dataclass
class RiskMetrics:
    """
    Numeric technical risk metrics, nominally in [0, 1].

    anomaly_score: Higher = more anomalous domain behavior.
    trust_score: Higher = more trusted (inverted when scoring risk).
    behavior_score: Higher = riskier observed behavior.
    """

    anomaly_score: float = 0.0
    trust_score: float = 0.0
    behavior_score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "anomalyScore": self.anomaly_score,
            "trustScore": self.trust_score,
            "behaviorScore": self.behavior_score,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RiskMetrics:
        return cls(
            anomaly_score=data.get("anomalyScore", 0.0),
            trust_score=data.get("trustScore", 0.0),
            behavior_score=data.get("behaviorScore", 0.0),
        )


@dataclass
class TechnicalIndicators:
    """Machine-observable signals for a domain."""

    domain_behavior: DomainBehavior = DomainBehavior.TEMPLATE_PATTERNS
    content_delivery: ContentDelivery = ContentDelivery.STANDARD
    dns_patterns: str = "standard_resolution"
    last_analysis: datetime = field(default_factory=utc_now)
    risk_metrics: RiskMetrics = field(default_factory=RiskMetrics)

    def to_dict(self) -> dict[str, Any]:
        return {
            "domainBehavior": _enum_value(self.domain_behavior),
            "contentDelivery": _enum_value(self.content_delivery),
            "dnsPatterns": self.dns_patterns,
            "lastAnalysis": _format_timestamp(self.last_analysis),
            "riskMetrics": self.risk_metrics.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TechnicalIndicators:
        metrics = data.get("riskMetrics")
        if metrics is None:
            metrics = RiskMetrics()
        elif not isinstance(metrics, RiskMetrics):
            metrics = RiskMetrics.from_dict(metrics)
        last_analysis = data.get("lastAnalysis")
        return cls(
            domain_behavior=_enum_or_raw(
                DomainBehavior, data.get("domainBehavior", DomainBehavior.TEMPLATE_PATTERNS)
            ),
            content_delivery=_enum_or_raw(
                ContentDelivery, data.get("contentDelivery", ContentDelivery.STANDARD)
            ),
            dns_patterns=data.get("dnsPatterns", "standard_resolution"),
            last_analysis=_parse_timestamp(last_analysis) if last_analysis is not None else utc_now(),
            risk_metrics=metrics,
        )


@dataclass
class CognitiveRiskFactors:
    """Human-perception signals: expectation mismatch, interaction pattern, perceived risk."""

    user_expectation: str = "standard"
    interaction_pattern: str = "normal"
    trust_establishment: str = "pending"
    cognitive_load: float = 0.0
    risk_perception: RiskLevel = RiskLevel.LOW

    def to_dict(self) -> dict[str, Any]:
        return {
            "userExpectation": self.user_expectation,
            "interactionPattern": self.interaction_pattern,
            "trustEstablishment": self.trust_establishment,
            "cognitiveLoad": self.cognitive_load,
            "riskPerception": _enum_value(self.risk_perception),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CognitiveRiskFactors:
        return cls(
            user_expectation=data.get("userExpectation", "standard"),
            interaction_pattern=data.get("interactionPattern", "normal"),
            trust_establishment=data.get("trustEstablishment", "pending"),
            cognitive_load=data.get("cognitiveLoad", 0.0),
            risk_perception=_enum_or_raw(RiskLevel, data.get("riskPerception", RiskLevel.LOW)),
        )


@dataclass
class Assessment:
    """
    One security assessment record for a domain.

    id: Store key, "<domain>-<epoch_ms>-<seq>".
    timestamp: Creation time, refreshed on every update.
    technical_indicators: Replaced wholesale on update.
    cognitive_risk_factors: Replaced wholesale on update.
    overall_risk_level: "low" at creation; only recomputed when the store is
        configured to do so.
    """

    id: str
    timestamp: datetime
    technical_indicators: TechnicalIndicators
    cognitive_risk_factors: CognitiveRiskFactors
    overall_risk_level: RiskLevel = RiskLevel.LOW

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": _format_timestamp(self.timestamp),
            "technicalIndicators": self.technical_indicators.to_dict(),
            "cognitiveRiskFactors": self.cognitive_risk_factors.to_dict(),
            "overallRiskLevel": _enum_value(self.overall_risk_level),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Assessment:
        timestamp = data.get("timestamp")
        return cls(
            id=data["id"],
            timestamp=_parse_timestamp(timestamp) if timestamp is not None else utc_now(),
            technical_indicators=coerce_technical_indicators(data.get("technicalIndicators") or {}),
            cognitive_risk_factors=coerce_cognitive_risk_factors(data.get("cognitiveRiskFactors") or {}),
            overall_risk_level=_enum_or_raw(RiskLevel, data.get("overallRiskLevel", RiskLevel.LOW)),
        )


def coerce_technical_indicators(value: TechnicalIndicators | Mapping[str, Any]) -> TechnicalIndicators:
    if isinstance(value, TechnicalIndicators):
        return value
    return TechnicalIndicators.from_dict(value)


def coerce_cognitive_risk_factors(value: CognitiveRiskFactors | Mapping[str, Any]) -> CognitiveRiskFactors:
    if isinstance(value, CognitiveRiskFactors):
        return value
    return CognitiveRiskFactors.from_dict(value)


def coerce_risk_level(value: Any) -> RiskLevel | Any:
    return _enum_or_raw(RiskLevel, value)
