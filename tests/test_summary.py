"""Tests for engine/summary.py — per-vehicle and per-company statistics.

Hand-calculated against vehicles whose counters are set directly.
"""

from __future__ import annotations

import pytest

from evtol_simulator.config.vehicle import VehicleConfig
from evtol_simulator.engine.charging_station import ChargingStation
from evtol_simulator.engine.summary import summarize_companies, summarize_station, summarize_vehicle
from evtol_simulator.engine.vehicle import Vehicle


def flown(cfg: VehicleConfig, flight_ms: int, charge_ms: int = 0, wait_ms: int = 0, faults: int = 0) -> Vehicle:
    v = Vehicle(cfg)
    v.begin()
    v._total_flight_time_ms = flight_ms
    v._total_charge_time_ms = charge_ms
    v._total_wait_time_ms = wait_ms
    v._number_of_faults = faults
    return v


@pytest.fixture
def beta() -> VehicleConfig:
    return VehicleConfig(
        company_name="Beta Company", cruise_speed_mph=100, battery_capacity_kwh=100,
        time_to_charge_hours=0.2, energy_use_kwh_per_mile=1.5, passenger_count=5,
        fault_probability_per_hour=0.1,
    )


class TestSummarizeVehicle:

    def test_minutes_and_passenger_miles(self, alpha: VehicleConfig):
        v = flown(alpha, flight_ms=3_600_000, charge_ms=600_000, wait_ms=90_000, faults=2)
        r = summarize_vehicle(v)
        assert r.company_name == "Alpha Company"
        assert r.flight_minutes == 60.0
        assert r.charge_minutes == 10.0
        assert r.wait_minutes == 1.5
        assert r.faults == 2
        assert r.ending_state == "FLYING"
        # 1 h × 120 mph × 4 passengers
        assert r.passenger_miles == pytest.approx(480.0)
        assert r.percent_charge_remaining == 100.0


class TestSummarizeCompanies:

    def test_groups_sorted_by_name(self, alpha: VehicleConfig, beta: VehicleConfig):
        fleet = [flown(beta, 0), flown(alpha, 0), flown(beta, 0)]
        rows = summarize_companies(fleet)
        assert [r.company_name for r in rows] == ["Alpha Company", "Beta Company"]
        assert [r.vehicle_count for r in rows] == [1, 2]

    def test_averages_and_max(self, beta: VehicleConfig):
        fleet = [
            flown(beta, flight_ms=60_000, charge_ms=120_000, wait_ms=0, faults=1),
            flown(beta, flight_ms=180_000, charge_ms=0, wait_ms=60_000, faults=4),
        ]
        (row,) = summarize_companies(fleet)
        assert row.avg_flight_minutes == 2.0
        assert row.avg_charge_minutes == 1.0
        assert row.avg_wait_minutes == 0.5
        assert row.max_faults == 4

    def test_total_passenger_miles(self, beta: VehicleConfig):
        # 0.5 h + 1.5 h of flight × 100 mph × 5 passengers = 1000
        fleet = [flown(beta, 1_800_000), flown(beta, 5_400_000)]
        (row,) = summarize_companies(fleet)
        assert row.total_passenger_miles == pytest.approx(1_000.0)

    def test_empty_population(self):
        assert summarize_companies([]) == []


class TestSummarizeStation:

    def test_station_snapshot(self, make_device):
        station = ChargingStation(1)
        for name in ("a", "b", "c"):
            station.add_device(make_device(name, rate=2, capacity=100))
        station.tick(0, 5)
        s = summarize_station(station)
        assert s.charging_bays == 1
        assert s.devices_charging == 1
        assert s.devices_waiting == 2
        assert s.peak_queue_length == 2
        assert s.energy_offered_kwh == pytest.approx(10.0)
