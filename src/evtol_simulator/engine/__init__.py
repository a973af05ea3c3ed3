"""Engine — simulation core (station, vehicles, scheduler) and run orchestration."""

from evtol_simulator.engine.contracts import Chargeable, Tickable
from evtol_simulator.engine.charging_station import ChargingStation
from evtol_simulator.engine.vehicle import LOW_CHARGE_THRESHOLD_PCT, Vehicle, VehicleState
from evtol_simulator.engine.factory import VehicleFactory
from evtol_simulator.engine.scheduler import SimulationScheduler
from evtol_simulator.engine.summary import summarize_companies, summarize_station, summarize_vehicle
from evtol_simulator.engine.orchestrator import Simulation, run_simulation

__all__ = [
    "Chargeable",
    "Tickable",
    "ChargingStation",
    "LOW_CHARGE_THRESHOLD_PCT",
    "Vehicle",
    "VehicleState",
    "VehicleFactory",
    "SimulationScheduler",
    "summarize_vehicle",
    "summarize_companies",
    "summarize_station",
    "Simulation",
    "run_simulation",
]
