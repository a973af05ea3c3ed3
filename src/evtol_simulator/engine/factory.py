"""Population factory — clones vehicles from randomly chosen prototypes."""

from __future__ import annotations

import numpy as np

from evtol_simulator.engine.vehicle import Vehicle


class VehicleFactory:
    """Keeps a list of prototype vehicles and hands out independent copies.

    Usage::

        factory = VehicleFactory(seed=42)
        factory.add_prototype(Vehicle(alpha_config, station))
        factory.add_prototype(Vehicle(beta_config, station))
        fleet = [factory.create_vehicle() for _ in range(20)]

    Every created vehicle receives a generator built from its own child of
    the factory's ``SeedSequence``.  A seeded factory therefore reproduces
    the same population and the same fault draws, while no two vehicles
    share random state.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed_seq = np.random.SeedSequence(seed)
        self._rng = np.random.default_rng(self._seed_seq.spawn(1)[0])
        self._prototypes: list[Vehicle] = []

    @property
    def prototypes(self) -> tuple[Vehicle, ...]:
        return tuple(self._prototypes)

    def add_prototype(self, vehicle: Vehicle) -> None:
        self._prototypes.append(vehicle)

    def create_vehicle(self) -> Vehicle:
        """Clone a prototype picked uniformly at random."""
        if not self._prototypes:
            raise ValueError("VehicleFactory has no prototypes to create from.")
        index = int(self._rng.integers(len(self._prototypes)))
        rng = np.random.default_rng(self._seed_seq.spawn(1)[0])
        return self._prototypes[index].clone(rng)
