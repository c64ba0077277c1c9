"""
Pytest tests for the assess_domain CLI.
"""

from __future__ import annotations

import pytest

from domain_assessor.tools.assess_domain import build_parser, main, run


def test_run_example_walkthrough(monkeypatch):
    """Replace technical indicators then cognitive factors, as in the usage example."""
    monkeypatch.delenv("ASSESSOR_RECOMPUTE_OVERALL", raising=False)
    args = build_parser().parse_args([
        "supermaven.com",
        "--content-delivery", "non_standard",
        "--anomaly-score", "0.6",
        "--trust-score", "0.4",
        "--behavior-score", "0.7",
        "--user-expectation", "mismatch",
        "--interaction-pattern", "unexpected",
        "--cognitive-load", "0.75",
    ])
    result = run(args)
    assessment = result["assessment"]
    assert assessment["id"].startswith("supermaven.com-")
    assert assessment["technicalIndicators"]["contentDelivery"] == "non_standard"
    assert assessment["cognitiveRiskFactors"]["userExpectation"] == "mismatch"
    assert assessment["cognitiveRiskFactors"]["interactionPattern"] == "unexpected"
    assert assessment["cognitiveRiskFactors"]["trustEstablishment"] == "pending"
    assert result["technicalRisk"] == "medium"
    assert result["cognitiveRisk"] == "medium"
    assert assessment["overallRiskLevel"] == "low"


def test_run_recompute():
    args = build_parser().parse_args([
        "example.com", "--anomaly-score", "1", "--behavior-score", "1", "--recompute",
    ])
    result = run(args)
    assert result["technicalRisk"] == "high"
    assert result["assessment"]["overallRiskLevel"] == "high"


def test_main_prints_json(capsys):
    assert main(["example.com", "--cognitive-load", "0.9"]) == 0
    out = capsys.readouterr().out
    assert '"cognitiveRisk": "high"' in out
    assert '"technicalRisk": "low"' in out


def test_invalid_choice_exits():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["example.com", "--content-delivery", "carrier_pigeon"])
