"""Result types — the contract between the engine, the report and the API."""

from __future__ import annotations

from pydantic import BaseModel


class SimulationParameters(BaseModel):
    """Echo of the run-level inputs, for display."""

    total_vehicles: int
    charging_bays: int
    total_minutes: float
    time_compression: float
    timestep_ms: int


class VehicleResult(BaseModel):
    """End-of-run snapshot of one vehicle."""

    company_name: str
    flight_minutes: float
    charge_minutes: float
    wait_minutes: float
    faults: int
    ending_state: str
    percent_charge_remaining: float
    current_charge_kwh: float
    passenger_miles: float
    """flight_hours × cruise_speed × passenger_count."""


class CompanySummary(BaseModel):
    """Aggregate over every vehicle of one company."""

    company_name: str
    vehicle_count: int
    avg_flight_minutes: float
    avg_charge_minutes: float
    avg_wait_minutes: float
    max_faults: int
    total_passenger_miles: float


class StationSummary(BaseModel):
    """Charging station state at the end of the run."""

    charging_bays: int
    devices_charging: int
    devices_waiting: int
    peak_queue_length: int
    energy_offered_kwh: float


class SimulationResult(BaseModel):
    """Full output of one run."""

    parameters: SimulationParameters
    ticks: int
    """Ticks actually fired by the scheduler."""
    wall_seconds: float
    vehicles: list[VehicleResult]
    companies: list[CompanySummary]
    station: StationSummary
