"""Orchestrator — builds the population and runs it against the scheduler.

Each tick follows this sequence:
  every vehicle.tick(prev, cur), in population order
  → station.tick(prev, cur)
  → optional progress hook

The station ticks after the vehicles, so a vehicle that runs low during its
own tick and finds a free bay is charged in the same pass.

Entry point: ``run_simulation(scenario)``
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from evtol_simulator.config.scenario import Scenario
from evtol_simulator.engine.charging_station import ChargingStation
from evtol_simulator.engine.factory import VehicleFactory
from evtol_simulator.engine.scheduler import SimulationScheduler
from evtol_simulator.engine.summary import summarize_companies, summarize_station, summarize_vehicle
from evtol_simulator.engine.vehicle import Vehicle
from evtol_simulator.models.results import SimulationParameters, SimulationResult

logger = logging.getLogger(__name__)


class Simulation:
    """One run of a scenario.  Each instance can only run once.

    Usage::

        sim = Simulation(scenario)
        sim.run()
        result = sim.result()
    """

    def __init__(
        self,
        scenario: Scenario,
        on_tick: Callable[[int, int], None] | None = None,
    ) -> None:
        self._scenario = scenario
        self._on_tick = on_tick
        self._has_run = False
        self._ticks = 0
        self._wall_seconds = 0.0
        self._station: ChargingStation | None = None
        self._vehicles: list[Vehicle] = []

    @property
    def scenario(self) -> Scenario:
        return self._scenario

    @property
    def station(self) -> ChargingStation | None:
        return self._station

    @property
    def vehicles(self) -> list[Vehicle]:
        return list(self._vehicles)

    def run(self) -> None:
        if self._has_run:
            raise RuntimeError("Each Simulation instance can only run once.")
        self._has_run = True

        sim = self._scenario.simulation
        self._station = ChargingStation(self._scenario.station.charging_bays)

        factory = VehicleFactory(seed=sim.random_seed)
        for company in self._scenario.companies:
            factory.add_prototype(Vehicle(
                company, self._station,
                low_charge_threshold_pct=sim.low_charge_threshold_pct,
            ))

        for _ in range(sim.total_vehicles):
            vehicle = factory.create_vehicle()
            vehicle.begin()
            self._vehicles.append(vehicle)
        self._station.begin()

        scheduler = SimulationScheduler(
            sim.timestep_ms, self._handle_tick, sim.total_minutes, sim.time_compression,
        )

        logger.info(
            "Starting simulation: %d vehicles, %d bays, %.0f virtual minutes "
            "(about %.2f real minutes)",
            sim.total_vehicles, self._station.capacity, sim.total_minutes,
            scheduler.real_duration_minutes,
        )
        started = time.perf_counter()
        self._ticks = scheduler.start()
        self._wall_seconds = time.perf_counter() - started
        logger.info("Simulation finished: %d ticks in %.2f s", self._ticks, self._wall_seconds)

    def _handle_tick(self, prev_ms: int, cur_ms: int) -> None:
        for vehicle in self._vehicles:
            vehicle.tick(prev_ms, cur_ms)
        self._station.tick(prev_ms, cur_ms)
        if self._on_tick is not None:
            self._on_tick(prev_ms, cur_ms)

    def result(self) -> SimulationResult:
        if not self._has_run:
            raise RuntimeError("Simulation has not been run yet.")

        sim = self._scenario.simulation
        return SimulationResult(
            parameters=SimulationParameters(
                total_vehicles=sim.total_vehicles,
                charging_bays=self._scenario.station.charging_bays,
                total_minutes=sim.total_minutes,
                time_compression=sim.time_compression,
                timestep_ms=sim.timestep_ms,
            ),
            ticks=self._ticks,
            wall_seconds=round(self._wall_seconds, 3),
            vehicles=[summarize_vehicle(v) for v in self._vehicles],
            companies=summarize_companies(self._vehicles),
            station=summarize_station(self._station),
        )


def run_simulation(
    scenario: Scenario,
    on_tick: Callable[[int, int], None] | None = None,
) -> SimulationResult:
    """Run ``scenario`` once and return its ``SimulationResult``."""
    simulation = Simulation(scenario, on_tick)
    simulation.run()
    return simulation.result()
