"""
Assessment store: in-memory mapping of assessment id -> Assessment.

Owned by the caller (no module-level singleton). create() fills fixed
defaults; update() shallow-merges top-level fields, replacing nested
sub-records wholesale, and refreshes the timestamp. All operations are
guarded by one lock so the store can be shared by API worker threads.
"""

from __future__ import annotations

import dataclasses
import itertools
import threading
import time
from typing import Any, Callable, Mapping

from domain_assessor.analysis_engine.models import (
    Assessment,
    CognitiveRiskFactors,
    RiskLevel,
    TechnicalIndicators,
    coerce_cognitive_risk_factors,
    coerce_risk_level,
    coerce_technical_indicators,
    utc_now,
)
from domain_assessor.analysis_engine.scorer import (
    analyze_cognitive_risk,
    analyze_technical_risk,
    overall_risk_level,
)
from domain_assessor.assessor_logging import get_logger
from domain_assessor.core.exceptions import AssessmentNotFoundError

logger = get_logger(__name__)

# Top-level fields update() may replace. id and timestamp are managed by the store:
# an id in the partial is dropped rather than overwriting the record id, so the
# stored record always matches its key.
UPDATABLE_FIELDS: dict[str, Callable[[Any], Any]] = {
    "technical_indicators": coerce_technical_indicators,
    "cognitive_risk_factors": coerce_cognitive_risk_factors,
    "overall_risk_level": coerce_risk_level,
}

# camelCase interchange names accepted as aliases in update()
FIELD_ALIASES = {
    "technicalIndicators": "technical_indicators",
    "cognitiveRiskFactors": "cognitive_risk_factors",
    "overallRiskLevel": "overall_risk_level",
}


class AssessmentStore:
    """
    Holds assessment records keyed by id.

    recompute_overall_risk: When True, create() and update() set
        overall_risk_level to the higher of the technical and cognitive levels.
        Default False keeps overall_risk_level at its creation value ("low")
        unless a caller supplies it explicitly.
    """

    def __init__(self, recompute_overall_risk: bool = False) -> None:
        self.recompute_overall_risk = recompute_overall_risk
        self._assessments: dict[str, Assessment] = {}
        self._seq = itertools.count(1)
        self._lock = threading.Lock()

    def _generate_assessment_id(self, domain_name: str) -> str:
        """<domain>-<epoch_ms>-<seq>; seq is per-store monotonic so ids never collide."""
        return f"{domain_name}-{int(time.time() * 1000)}-{next(self._seq)}"

    def create(self, domain_name: str) -> Assessment:
        """Create, store, and return a new assessment with default indicators and factors."""
        now = utc_now()
        with self._lock:
            assessment = Assessment(
                id=self._generate_assessment_id(domain_name),
                timestamp=now,
                technical_indicators=TechnicalIndicators(last_analysis=now),
                cognitive_risk_factors=CognitiveRiskFactors(),
                overall_risk_level=RiskLevel.LOW,
            )
            if self.recompute_overall_risk:
                assessment.overall_risk_level = overall_risk_level(assessment)
            self._assessments[assessment.id] = assessment
        logger.info(
            "assessment_created",
            assessment_id=assessment.id,
            domain=domain_name,
            overall_risk_level=assessment.overall_risk_level.value,
        )
        return assessment

    def update(
        self,
        assessment_id: str,
        partial: Mapping[str, Any] | None = None,
        **fields: Any,
    ) -> None:
        """
        Shallow-merge fields over an existing assessment and refresh its timestamp.

        Fields may be passed as a mapping, as keyword arguments, or both
        (keywords win). Sub-records are replaced wholesale, never deep-merged;
        they may be dataclass instances or camelCase mappings.

        Raises:
            AssessmentNotFoundError: assessment_id is not in the store. The store is left unmodified.
        """
        with self._lock:
            existing = self._assessments.get(assessment_id)
            if existing is None:
                logger.warning("assessment_update_not_found", assessment_id=assessment_id)
                raise AssessmentNotFoundError(assessment_id)
            changes = self._normalize_changes({**(partial or {}), **fields}, assessment_id)
            updated = dataclasses.replace(existing, **changes, timestamp=utc_now())
            if self.recompute_overall_risk and "overall_risk_level" not in changes:
                updated.overall_risk_level = overall_risk_level(updated)
            self._assessments[assessment_id] = updated
        logger.info(
            "assessment_updated",
            assessment_id=assessment_id,
            fields=sorted(changes),
            overall_risk_level=getattr(updated.overall_risk_level, "value", updated.overall_risk_level),
        )

    @staticmethod
    def _normalize_changes(raw: Mapping[str, Any], assessment_id: str) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        for key, value in raw.items():
            name = FIELD_ALIASES.get(key, key)
            coerce = UPDATABLE_FIELDS.get(name)
            if coerce is None:
                logger.warning("assessment_update_field_ignored", assessment_id=assessment_id, field=key)
                continue
            changes[name] = coerce(value)
        return changes

    def get(self, assessment_id: str) -> Assessment | None:
        """Return the assessment for assessment_id, or None if absent."""
        with self._lock:
            return self._assessments.get(assessment_id)

    def list(self) -> list[Assessment]:
        """All assessments in creation order."""
        with self._lock:
            return list(self._assessments.values())

    def analyze_technical_risk(self, assessment: Assessment) -> RiskLevel:
        return analyze_technical_risk(assessment)

    def analyze_cognitive_risk(self, assessment: Assessment) -> RiskLevel:
        return analyze_cognitive_risk(assessment)

    def __contains__(self, assessment_id: object) -> bool:
        with self._lock:
            return assessment_id in self._assessments

    def __len__(self) -> int:
        with self._lock:
            return len(self._assessments)
