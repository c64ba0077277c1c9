"""
Pytest tests for the FastAPI assessment endpoints. Uses the store/client fixtures from conftest.
"""

from __future__ import annotations


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_create_and_get(client, store):
    """POST /assessments creates a record with defaults; GET returns it."""
    r = client.post("/assessments", json={"domainName": "supermaven.com"})
    assert r.status_code == 201
    created = r.json()
    assert created["id"].startswith("supermaven.com-")
    assert created["overallRiskLevel"] == "low"
    assert created["id"] in store

    r2 = client.get(f"/assessments/{created['id']}")
    assert r2.status_code == 200
    assert r2.json() == created


def test_create_rejects_blank_domain(client, store):
    r = client.post("/assessments", json={"domainName": "   "})
    assert r.status_code == 400
    assert len(store) == 0


def test_get_unknown_404(client):
    r = client.get("/assessments/nope")
    assert r.status_code == 404
    assert r.json() == {"detail": "Assessment not found: nope"}


def test_list(client):
    client.post("/assessments", json={"domainName": "a.example"})
    client.post("/assessments", json={"domainName": "b.example"})
    r = client.get("/assessments")
    assert r.status_code == 200
    assert [a["id"].split("-")[0] for a in r.json()] == ["a.example", "b.example"]


def test_patch_replaces_sub_record(client):
    """PATCH replaces technicalIndicators wholesale and leaves cognitiveRiskFactors alone."""
    created = client.post("/assessments", json={"domainName": "example.com"}).json()
    body = {
        "technicalIndicators": {
            "contentDelivery": "non_standard",
            "riskMetrics": {"anomalyScore": 0.6, "trustScore": 0.4, "behaviorScore": 0.7},
        }
    }
    r = client.patch(f"/assessments/{created['id']}", json=body)
    assert r.status_code == 200
    updated = r.json()
    ti = updated["technicalIndicators"]
    assert ti["contentDelivery"] == "non_standard"
    assert ti["domainBehavior"] == "template_patterns"
    assert ti["riskMetrics"] == {"anomalyScore": 0.6, "trustScore": 0.4, "behaviorScore": 0.7}
    assert updated["cognitiveRiskFactors"] == created["cognitiveRiskFactors"]
    assert updated["overallRiskLevel"] == "low"


def test_patch_unknown_404(client, store):
    r = client.patch("/assessments/missing", json={"overallRiskLevel": "high"})
    assert r.status_code == 404
    assert len(store) == 0


def test_risk_endpoint(client):
    """Risk levels are computed on demand and not written back."""
    created = client.post("/assessments", json={"domainName": "example.com"}).json()
    aid = created["id"]
    client.patch(
        f"/assessments/{aid}",
        json={
            "technicalIndicators": {"riskMetrics": {"anomalyScore": 0.6, "trustScore": 0.4, "behaviorScore": 0.7}},
            "cognitiveRiskFactors": {"userExpectation": "mismatch", "cognitiveLoad": 0.85},
        },
    )
    r = client.get(f"/assessments/{aid}/risk")
    assert r.status_code == 200
    assert r.json() == {
        "id": aid,
        "technicalRisk": "medium",
        "cognitiveRisk": "high",
        "overallRiskLevel": "low",
    }
