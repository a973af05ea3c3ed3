"""Top-level scenario — bundles every input for one run."""

from pydantic import BaseModel, Field

from evtol_simulator.config.vehicle import VehicleConfig, default_companies
from evtol_simulator.config.station import StationConfig


class SimulationConfig(BaseModel):
    """Run-level settings: population size, clock and thresholds."""

    total_vehicles: int = Field(default=20, ge=1, description="Vehicles in the population")
    total_minutes: float = Field(default=180.0, gt=0, description="Virtual simulation duration (minutes)")
    time_compression: float = Field(
        default=60.0, gt=0,
        description="Virtual ms per wall-clock ms. 1 = real time, "
                    "60 = one real second per virtual minute.",
    )
    timestep_ms: int = Field(default=1_000, gt=0, description="Virtual tick size (ms)")
    low_charge_threshold_pct: float = Field(
        default=0.5, gt=0, le=100.0,
        description="Percent of capacity below which a flying vehicle queues for a charge. "
                    "0.5 means half of one percent, i.e. an almost flat battery.",
    )
    random_seed: int | None = Field(
        default=None,
        description="Optional seed for a reproducible population and fault sequence. "
                    "None = non-deterministic.",
    )


class Scenario(BaseModel):
    """Complete input bundle for one simulation run."""

    companies: list[VehicleConfig] = Field(default_factory=default_companies, min_length=1)
    station: StationConfig = Field(default_factory=StationConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
