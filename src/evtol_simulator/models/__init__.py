"""Result models — simulation output contracts."""

from evtol_simulator.models.results import (
    CompanySummary,
    SimulationParameters,
    SimulationResult,
    StationSummary,
    VehicleResult,
)

__all__ = [
    "CompanySummary",
    "SimulationParameters",
    "SimulationResult",
    "StationSummary",
    "VehicleResult",
]
