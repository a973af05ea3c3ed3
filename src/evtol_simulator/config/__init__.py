"""Configuration models — all run inputs."""

from evtol_simulator.config.vehicle import VehicleConfig, default_companies
from evtol_simulator.config.station import StationConfig
from evtol_simulator.config.scenario import Scenario, SimulationConfig
from evtol_simulator.config.loader import load_scenario

__all__ = [
    "VehicleConfig",
    "StationConfig",
    "SimulationConfig",
    "Scenario",
    "default_companies",
    "load_scenario",
]
