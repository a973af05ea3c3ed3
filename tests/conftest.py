"""Shared test fixtures — sample configs, a mock chargeable device and a fake clock."""

from __future__ import annotations

import pytest

from evtol_simulator.config import (
    Scenario,
    SimulationConfig,
    StationConfig,
    VehicleConfig,
)


class MockDevice:
    """Chargeable stand-in: fixed rate, full once ``capacity`` is reached."""

    def __init__(self, name: str, rate: float = 1.0, capacity: float = 3.0) -> None:
        self.name = name
        self.rate = rate
        self.capacity = capacity
        self.charge = 0.0
        self.deliveries: list[float] = []

    def add_charge(self, kwh: float) -> None:
        self.deliveries.append(kwh)
        self.charge = min(self.charge + kwh, self.capacity)

    def charge_rate(self) -> float:
        return self.rate

    def has_full_charge(self) -> bool:
        return self.charge == self.capacity

    def __repr__(self) -> str:
        return f"MockDevice({self.name!r})"


class FakeClock:
    """Deterministic nanosecond clock; ``sleep`` advances it instantly."""

    def __init__(self, start_ns: int = 1_000_000_000) -> None:
        self.now_ns = start_ns
        self.sleeps: list[float] = []

    def __call__(self) -> int:
        return self.now_ns

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now_ns += max(1, round(seconds * 1_000_000_000))

    def advance_ms(self, ms: float) -> None:
        self.now_ns += round(ms * 1_000_000)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_device():
    return MockDevice


@pytest.fixture
def alpha() -> VehicleConfig:
    return VehicleConfig(
        company_name="Alpha Company",
        cruise_speed_mph=120,
        battery_capacity_kwh=320,
        time_to_charge_hours=0.60,
        energy_use_kwh_per_mile=1.6,
        passenger_count=4,
        fault_probability_per_hour=0.25,
    )


@pytest.fixture
def drain_half() -> VehicleConfig:
    """100 kWh pack that loses exactly 51 kWh per 1000 ms of flight.

    energy_use_kwh_per_ms = 1.0 × 183_600 / 3_600_000 = 0.051 → 51 kWh per second.
    Charge rate = 100 / (0.001 × 3_600_000) = 1/36 kWh per ms.
    """
    return VehicleConfig(
        company_name="Drain Co",
        cruise_speed_mph=183_600,
        battery_capacity_kwh=100,
        time_to_charge_hours=0.001,
        energy_use_kwh_per_mile=1.0,
        passenger_count=2,
        fault_probability_per_hour=0.0,
    )


@pytest.fixture
def fast_scenario(alpha: VehicleConfig) -> Scenario:
    """Short, heavily compressed run that finishes in a few milliseconds."""
    return Scenario(
        companies=[alpha],
        station=StationConfig(charging_bays=2),
        simulation=SimulationConfig(
            total_vehicles=4,
            total_minutes=1,
            time_compression=6_000,
            timestep_ms=1_000,
            random_seed=7,
        ),
    )
