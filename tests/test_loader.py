"""Tests for config/loader.py — YAML scenario files."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from evtol_simulator.config import Scenario, load_scenario

BASE_CASE = Path(__file__).parent.parent / "scenarios" / "base_case.yaml"


class TestLoadScenario:

    def test_base_case_matches_defaults(self):
        scenario = load_scenario(BASE_CASE)
        assert scenario == Scenario()

    def test_partial_file_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "small.yaml"
        path.write_text("station:\n  charging_bays: 1\nsimulation:\n  total_vehicles: 5\n")
        scenario = load_scenario(path)
        assert scenario.station.charging_bays == 1
        assert scenario.simulation.total_vehicles == 5
        assert scenario.simulation.time_compression == 60
        assert len(scenario.companies) == 5

    def test_empty_file_is_default(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_scenario(path) == Scenario()

    def test_invalid_values_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("companies:\n  - company_name: ''\n")
        with pytest.raises(ValidationError):
            load_scenario(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_scenario(tmp_path / "nope.yaml")
