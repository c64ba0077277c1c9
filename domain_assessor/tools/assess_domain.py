#!/usr/bin/env python3
"""
Assess a domain from the command line.

Creates an assessment, replaces its technical indicators with the given
metrics, replaces its cognitive risk factors, then prints the record and
the computed technical/cognitive risk levels as JSON.

Usage:
  python -m domain_assessor.tools.assess_domain example.com \
      --anomaly-score 0.6 --trust-score 0.4 --behavior-score 0.7 \
      --content-delivery non_standard --cognitive-load 0.75
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys

from domain_assessor.analysis_engine.models import ContentDelivery, DomainBehavior, RiskMetrics
from domain_assessor.analysis_engine.scorer import analyze_cognitive_risk, analyze_technical_risk
from domain_assessor.analysis_engine.store import AssessmentStore
from domain_assessor.assessor_logging import configure_from_settings, get_logger
from domain_assessor.config import get_settings

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create a security assessment for a domain and print its risk levels.",
    )
    parser.add_argument("domain", help="Domain name to assess (e.g. example.com)")
    parser.add_argument("--domain-behavior", default=DomainBehavior.TEMPLATE_PATTERNS.value,
                        choices=[d.value for d in DomainBehavior], help="Observed domain behavior")
    parser.add_argument("--content-delivery", default=ContentDelivery.STANDARD.value,
                        choices=[c.value for c in ContentDelivery], help="Content delivery pattern")
    parser.add_argument("--anomaly-score", type=float, default=0.0, help="Anomaly score (default: 0.0)")
    parser.add_argument("--trust-score", type=float, default=0.0, help="Trust score (default: 0.0)")
    parser.add_argument("--behavior-score", type=float, default=0.0, help="Behavior score (default: 0.0)")
    parser.add_argument("--user-expectation", default=None, help="User expectation (e.g. mismatch)")
    parser.add_argument("--interaction-pattern", default=None, help="Interaction pattern (e.g. unexpected)")
    parser.add_argument("--cognitive-load", type=float, default=None, help="Cognitive load")
    parser.add_argument("--recompute", action="store_true",
                        help="Recompute overallRiskLevel from the scores (overrides ASSESSOR_RECOMPUTE_OVERALL)")
    return parser


def run(args: argparse.Namespace) -> dict:
    """Create and update an assessment per args; return the JSON-ready result."""
    recompute = args.recompute or get_settings().recompute_overall_risk
    store = AssessmentStore(recompute_overall_risk=recompute)
    assessment = store.create(args.domain)

    technical = dataclasses.replace(
        assessment.technical_indicators,
        domain_behavior=DomainBehavior(args.domain_behavior),
        content_delivery=ContentDelivery(args.content_delivery),
        risk_metrics=RiskMetrics(
            anomaly_score=args.anomaly_score,
            trust_score=args.trust_score,
            behavior_score=args.behavior_score,
        ),
    )
    store.update(assessment.id, technical_indicators=technical)

    cognitive_changes = {
        name: value
        for name, value in (
            ("user_expectation", args.user_expectation),
            ("interaction_pattern", args.interaction_pattern),
            ("cognitive_load", args.cognitive_load),
        )
        if value is not None
    }
    if cognitive_changes:
        cognitive = dataclasses.replace(assessment.cognitive_risk_factors, **cognitive_changes)
        store.update(assessment.id, cognitive_risk_factors=cognitive)

    current = store.get(assessment.id)
    return {
        "assessment": current.to_dict(),
        "technicalRisk": analyze_technical_risk(current).value,
        "cognitiveRisk": analyze_cognitive_risk(current).value,
    }


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_from_settings(get_settings())
    try:
        result = run(args)
    except Exception as e:
        logger.exception("assess_domain_failed", domain=args.domain, error=str(e))
        print("ERROR:", e, file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
