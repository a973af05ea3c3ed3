"""Capabilities shared by everything the simulation drives.

The station and the scheduler only ever see these protocols, never a
concrete vehicle type.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Tickable(Protocol):
    """Anything that receives per-timestep updates."""

    def begin(self) -> None:
        """Establish the initial state.  Called once, before any tick."""
        ...

    def tick(self, prev_ms: int, cur_ms: int) -> None:
        """Advance from ``prev_ms`` to ``cur_ms`` (virtual ms since start)."""
        ...


@runtime_checkable
class Chargeable(Protocol):
    """A device that can be charged at a charging station."""

    def add_charge(self, kwh: float) -> None: ...

    def charge_rate(self) -> float:
        """kWh per virtual millisecond the device can accept."""
        ...

    def has_full_charge(self) -> bool: ...
