"""YAML scenario files."""

from __future__ import annotations

from pathlib import Path

import yaml

from evtol_simulator.config.scenario import Scenario


def load_scenario(path: str | Path) -> Scenario:
    """Load a scenario from YAML.  Missing sections fall back to defaults."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return Scenario.model_validate(data)
