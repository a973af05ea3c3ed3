"""Tests for the HTTP API layer.

Covers:
  - Health / root / schema / defaults endpoints
  - /simulate with partial overrides, report text, invalid input
  - Deep merge utility
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from evtol_simulator.api.server import _build_scenario, _deep_merge, app
from evtol_simulator.config.scenario import Scenario

client = TestClient(app)

FAST = {
    "companies": [{"company_name": "Alpha Company"}],
    "station": {"charging_bays": 1},
    "simulation": {"total_vehicles": 3, "total_minutes": 0.5, "time_compression": 6_000, "random_seed": 2},
}


class TestInfoEndpoints:

    def test_health(self):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "ok"}

    def test_root(self):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["name"] == "eVTOL Charging Simulator API"

    def test_schema(self):
        schema = client.get("/schema").json()
        assert set(schema["properties"]) == {"companies", "station", "simulation"}

    def test_defaults(self):
        data = client.get("/scenario/defaults").json()
        assert data == Scenario().model_dump()
        assert len(data["companies"]) == 5


class TestSimulate:

    def test_simulate_fast_scenario(self):
        r = client.post("/simulate", json={"scenario": FAST})
        assert r.status_code == 200
        body = r.json()
        result = body["result"]
        assert result["parameters"]["total_vehicles"] == 3
        assert result["parameters"]["charging_bays"] == 1
        assert len(result["vehicles"]) == 3
        assert [c["company_name"] for c in result["companies"]] == ["Alpha Company"]
        assert "Company Stats" in body["report"]

    def test_invalid_override_is_422(self):
        bad = {"simulation": {"timestep_ms": 0}}
        r = client.post("/simulate", json={"scenario": bad})
        assert r.status_code == 422

    def test_blank_company_is_422(self):
        r = client.post("/simulate", json={"scenario": {"companies": [{"company_name": ""}]}})
        assert r.status_code == 422


class TestHelpers:

    def test_deep_merge_nested(self):
        base = {"a": {"b": 1, "c": 2}, "d": 3}
        _deep_merge(base, {"a": {"c": 20}, "e": 5})
        assert base == {"a": {"b": 1, "c": 20}, "d": 3, "e": 5}

    def test_deep_merge_replaces_lists(self):
        base = {"companies": [1, 2, 3]}
        _deep_merge(base, {"companies": [9]})
        assert base["companies"] == [9]

    def test_build_scenario_keeps_defaults(self):
        s = _build_scenario({"station": {"charging_bays": 7}})
        assert s.station.charging_bays == 7
        assert s.simulation.total_vehicles == 20
