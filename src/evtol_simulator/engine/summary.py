"""Per-vehicle and per-company statistics, read after a run finishes.

  flight_minutes         = total_flight_time_ms / 60_000
  passenger_miles        = flight_hours × cruise_speed × passenger_count
  avg_*_minutes          = mean over the company's vehicles
  max_faults             = max over the company's vehicles
"""

from __future__ import annotations

from collections.abc import Sequence

from evtol_simulator.engine.charging_station import ChargingStation
from evtol_simulator.engine.vehicle import Vehicle
from evtol_simulator.models.results import CompanySummary, StationSummary, VehicleResult

_MS_PER_MINUTE = 60_000.0


def summarize_vehicle(vehicle: Vehicle) -> VehicleResult:
    cfg = vehicle.config
    flight_hours = vehicle.total_flight_time_ms / (_MS_PER_MINUTE * 60)
    return VehicleResult(
        company_name=vehicle.company_name,
        flight_minutes=round(vehicle.total_flight_time_ms / _MS_PER_MINUTE, 2),
        charge_minutes=round(vehicle.total_charge_time_ms / _MS_PER_MINUTE, 2),
        wait_minutes=round(vehicle.total_wait_time_ms / _MS_PER_MINUTE, 2),
        faults=vehicle.number_of_faults,
        ending_state=vehicle.state.value,
        percent_charge_remaining=round(vehicle.percent_charge_remaining, 2),
        current_charge_kwh=round(vehicle.current_charge_kwh, 4),
        passenger_miles=round(flight_hours * cfg.cruise_speed_mph * cfg.passenger_count, 2),
    )


def summarize_companies(vehicles: Sequence[Vehicle]) -> list[CompanySummary]:
    """One row per company present in ``vehicles``, sorted by name."""
    by_company: dict[str, list[Vehicle]] = {}
    for v in vehicles:
        by_company.setdefault(v.company_name, []).append(v)

    summaries: list[CompanySummary] = []
    for name in sorted(by_company):
        group = by_company[name]
        n = len(group)
        passenger_miles = sum(
            v.total_flight_time_ms / (_MS_PER_MINUTE * 60)
            * v.config.cruise_speed_mph * v.config.passenger_count
            for v in group
        )
        summaries.append(CompanySummary(
            company_name=name,
            vehicle_count=n,
            avg_flight_minutes=round(sum(v.total_flight_time_ms for v in group) / n / _MS_PER_MINUTE, 2),
            avg_charge_minutes=round(sum(v.total_charge_time_ms for v in group) / n / _MS_PER_MINUTE, 2),
            avg_wait_minutes=round(sum(v.total_wait_time_ms for v in group) / n / _MS_PER_MINUTE, 2),
            max_faults=max(v.number_of_faults for v in group),
            total_passenger_miles=round(passenger_miles, 2),
        ))
    return summaries


def summarize_station(station: ChargingStation) -> StationSummary:
    return StationSummary(
        charging_bays=station.capacity,
        devices_charging=len(station.charging_devices),
        devices_waiting=len(station.waiting_devices),
        peak_queue_length=station.peak_queue_length,
        energy_offered_kwh=round(station.energy_offered_kwh, 4),
    )
