"""Charging station — fixed number of bays with a FIFO waiting line.

Each tick the station runs three steps in order:

  1. deliver ``charge_rate × dt`` to every device in a bay
  2. release every device that now reports a full charge
  3. admit devices from the head of the waiting line into free bays

Because admission happens after delivery, a device admitted on tick T is
first charged on tick T+1.  The orchestrator relies on that ordering by
ticking every vehicle before the station.
"""

from __future__ import annotations

from collections import deque

from evtol_simulator.engine.contracts import Chargeable


class ChargingStation:
    """Bounded pool of charging bays shared by the whole population.

    Usage::

        station = ChargingStation(capacity=3)
        station.add_device(vehicle)        # bay if free, else waiting line
        station.tick(prev_ms, cur_ms)      # charge, release, admit

    Invariants: at most ``capacity`` devices charge at once, and a device
    is never both charging and waiting.  Callers must not add a device
    that is already tracked.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._charging: list[Chargeable] = []
        self._waiting: deque[Chargeable] = deque()

        self._energy_offered_kwh = 0.0
        self._peak_queue_length = 0

    # ── Public API ──────────────────────────────────────────────────────

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def charging_devices(self) -> tuple[Chargeable, ...]:
        return tuple(self._charging)

    @property
    def waiting_devices(self) -> tuple[Chargeable, ...]:
        """Waiting line, head first."""
        return tuple(self._waiting)

    @property
    def available_bays(self) -> int:
        return self._capacity - len(self._charging)

    @property
    def energy_offered_kwh(self) -> float:
        """Energy offered to devices across all ticks, before any clamping (kWh)."""
        return self._energy_offered_kwh

    @property
    def peak_queue_length(self) -> int:
        return self._peak_queue_length

    def begin(self) -> None:
        pass

    def add_device(self, device: Chargeable) -> None:
        """Put ``device`` in a free bay, or at the tail of the waiting line."""
        if len(self._charging) < self._capacity:
            self._charging.append(device)
        else:
            self._waiting.append(device)
            self._peak_queue_length = max(self._peak_queue_length, len(self._waiting))

    def tick(self, prev_ms: int, cur_ms: int) -> None:
        dt = cur_ms - prev_ms

        # ── 1. Charge every occupied bay ────────────────────────────────
        for device in self._charging:
            kwh = device.charge_rate() * dt
            device.add_charge(kwh)
            self._energy_offered_kwh += kwh

        # ── 2. Release full devices ─────────────────────────────────────
        self._charging = [d for d in self._charging if not d.has_full_charge()]

        # ── 3. Admit from the head of the line ──────────────────────────
        while len(self._charging) < self._capacity and self._waiting:
            self._charging.append(self._waiting.popleft())
