"""eVTOL vehicle — flight / wait / charge state machine with fault sampling.

Lifecycle::

    UNKNOWN ──begin()──▶ FLYING ──low charge──▶ WAITING
                           ▲                       │ station delivers charge
                           └──── full ◀── CHARGING ◀┘

Time in each state is accumulated in virtual milliseconds.  While flying,
the battery drains at ``energy_use_kwh_per_ms`` and a fault may be
recorded.  The per-hour fault probability is scaled linearly to the tick
interval:

  p_interval = p_hour / 3_600_000 × dt

which is only a good approximation while ``p_interval`` stays well below 1.

Leaving WAITING is driven by the station: the first ``add_charge`` call
moves the vehicle to CHARGING (or straight back to FLYING if that single
delivery fills the battery).
"""

from __future__ import annotations

from enum import Enum

import numpy as np

from evtol_simulator.config.vehicle import MS_PER_HOUR, VehicleConfig
from evtol_simulator.engine.charging_station import ChargingStation

# Percent of capacity below which a flying vehicle queues for a bay.
LOW_CHARGE_THRESHOLD_PCT = 0.5


class VehicleState(str, Enum):
    UNKNOWN = "UNKNOWN"
    FLYING = "FLYING"
    WAITING = "WAITING"
    CHARGING = "CHARGING"


class Vehicle:
    """One eVTOL in the population.  Implements ``Tickable`` and ``Chargeable``.

    Parameters
    ----------
    config : VehicleConfig
        Immutable aircraft description, shared with other vehicles.
    station : ChargingStation | None
        Where the vehicle recharges.  Without one, a vehicle that runs low
        stays WAITING for the rest of the run.
    rng : np.random.Generator | None
        Private random source for fault draws.  ``None`` seeds a fresh
        generator from OS entropy.
    low_charge_threshold_pct : float
        Percent-of-capacity level that sends the vehicle to the station.
        Must be in ``(0, 100]``: charge never drops below 0.
    """

    def __init__(
        self,
        config: VehicleConfig,
        station: ChargingStation | None = None,
        rng: np.random.Generator | None = None,
        low_charge_threshold_pct: float = LOW_CHARGE_THRESHOLD_PCT,
    ) -> None:
        if not 0 < low_charge_threshold_pct <= 100:
            raise ValueError("low_charge_threshold_pct must be in (0, 100].")
        self._config = config
        self._station = station
        self._rng = rng if rng is not None else np.random.default_rng()
        self._low_charge_threshold_pct = low_charge_threshold_pct

        self._total_flight_time_ms = 0
        self._total_charge_time_ms = 0
        self._total_wait_time_ms = 0
        self._number_of_faults = 0
        self._current_charge_kwh = config.battery_capacity_kwh
        self._state = VehicleState.UNKNOWN

    def clone(self, rng: np.random.Generator | None = None) -> Vehicle:
        """Copy this vehicle with a new, independent random source.

        Generator state is never shared, so vehicles cloned from the same
        prototype do not fault in lock-step.
        """
        other = Vehicle(self._config, self._station, rng, self._low_charge_threshold_pct)
        other._total_flight_time_ms = self._total_flight_time_ms
        other._total_charge_time_ms = self._total_charge_time_ms
        other._total_wait_time_ms = self._total_wait_time_ms
        other._number_of_faults = self._number_of_faults
        other._current_charge_kwh = self._current_charge_kwh
        other._state = self._state
        return other

    def __copy__(self) -> Vehicle:
        return self.clone()

    # ── Tickable ────────────────────────────────────────────────────────

    def begin(self) -> None:
        if self._state is not VehicleState.UNKNOWN:
            raise RuntimeError(f"Vehicle already started (state {self._state.value}).")
        self._state = VehicleState.FLYING

    def tick(self, prev_ms: int, cur_ms: int) -> None:
        dt = cur_ms - prev_ms

        if self._state is VehicleState.FLYING:
            self._total_flight_time_ms += dt
            self._current_charge_kwh = max(self._current_charge_kwh - self.energy_use_rate() * dt, 0.0)
            if self.did_fault_occur(dt):
                self._number_of_faults += 1

            if self.percent_charge_remaining < self._low_charge_threshold_pct:
                self._state = VehicleState.WAITING
                if self._station is not None:
                    self._station.add_device(self)

        elif self._state is VehicleState.WAITING:
            self._total_wait_time_ms += dt

        elif self._state is VehicleState.CHARGING:
            self._total_charge_time_ms += dt
            if self.has_full_charge():
                self._state = VehicleState.FLYING

        else:
            raise RuntimeError("Vehicle ticked before begin().")

    # ── Chargeable ──────────────────────────────────────────────────────

    def add_charge(self, kwh: float) -> None:
        capacity = self._config.battery_capacity_kwh
        self._current_charge_kwh = min(self._current_charge_kwh + kwh, capacity)
        if self.has_full_charge():
            self._state = VehicleState.FLYING
        else:
            self._state = VehicleState.CHARGING

    def charge_rate(self) -> float:
        return self._config.charge_rate_kwh_per_ms

    def has_full_charge(self) -> bool:
        # Exact: add_charge clamps to this same value.
        return self._current_charge_kwh == self._config.battery_capacity_kwh

    # ── Faults ──────────────────────────────────────────────────────────

    def did_fault_occur(self, interval_ms: int) -> bool:
        """Draw once from the private generator for an ``interval_ms`` window."""
        prob_per_ms = self._config.fault_probability_per_hour / MS_PER_HOUR
        return self._rng.random() < prob_per_ms * interval_ms

    # ── Read-only views ─────────────────────────────────────────────────

    def energy_use_rate(self) -> float:
        """Cruise energy use (kWh per ms)."""
        return self._config.energy_use_kwh_per_ms

    @property
    def config(self) -> VehicleConfig:
        return self._config

    @property
    def company_name(self) -> str:
        return self._config.company_name

    @property
    def state(self) -> VehicleState:
        return self._state

    @property
    def current_charge_kwh(self) -> float:
        return self._current_charge_kwh

    @property
    def percent_charge_remaining(self) -> float:
        return self._current_charge_kwh / self._config.battery_capacity_kwh * 100.0

    @property
    def total_flight_time_ms(self) -> int:
        return self._total_flight_time_ms

    @property
    def total_charge_time_ms(self) -> int:
        return self._total_charge_time_ms

    @property
    def total_wait_time_ms(self) -> int:
        return self._total_wait_time_ms

    @property
    def number_of_faults(self) -> int:
        return self._number_of_faults

    def __repr__(self) -> str:
        return (
            f"Vehicle({self.company_name!r}, state={self._state.value}, "
            f"charge={self.percent_charge_remaining:.1f}%)"
        )
