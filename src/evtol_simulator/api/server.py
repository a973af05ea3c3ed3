"""FastAPI server — run eVTOL charging simulations over HTTP.

Run with:
    uvicorn evtol_simulator.api.server:app --reload --port 8000

Or:
    python -m evtol_simulator.api.server

Endpoints:
    GET  /                   — banner
    GET  /health             — liveness probe
    GET  /schema             — full JSON Schema for Scenario inputs
    GET  /scenario/defaults  — complete default scenario as JSON
    POST /simulate           — run a simulation (partial or full Scenario)

A run is paced against the wall clock, so a request blocks for roughly
``total_minutes / time_compression`` real minutes.  Raise
``simulation.time_compression`` for quick answers.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from evtol_simulator.api.report import format_report
from evtol_simulator.config.scenario import Scenario
from evtol_simulator.engine.orchestrator import run_simulation

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="eVTOL Charging Simulator API",
    version="1.0",
    description=(
        "Discrete-time simulation of eVTOL fleets sharing a charging station. "
        "Configure companies, bays and the virtual clock, then run."
    ),
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /simulate. All fields optional — defaults used for missing."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'station': {'charging_bays': 2}, "
                    "'simulation': {'total_minutes': 60, 'time_compression': 3600}}",
    )


class SimulateResponse(BaseModel):
    """Response from /simulate."""
    result: dict[str, Any]
    report: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def get_default_scenario() -> dict[str, Any]:
    return Scenario().model_dump()


def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    defaults = get_default_scenario()
    _deep_merge(defaults, overrides)
    return Scenario(**defaults)


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict.  Lists are replaced whole."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "eVTOL Charging Simulator API",
        "version": "1.0",
        "start_here": "GET /scenario/defaults",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario — all input parameters with types, defaults, constraints."""
    return Scenario.model_json_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return get_default_scenario()


@app.post("/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest):
    """Run one simulation and return the result plus a text report.

    Example minimal request:
    ```json
    {"scenario": {"simulation": {"total_minutes": 30, "time_compression": 36000}}}
    ```
    """
    try:
        scenario = _build_scenario(req.scenario)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=json.loads(exc.json())) from exc
    logger.info("POST /simulate: %d vehicles", scenario.simulation.total_vehicles)
    result = run_simulation(scenario)
    return SimulateResponse(
        result=result.model_dump(),
        report=format_report(result),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "evtol_simulator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
