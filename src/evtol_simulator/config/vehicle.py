"""Vehicle configuration — one aircraft type per company."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Milliseconds in one hour — all rates are expressed per virtual millisecond.
MS_PER_HOUR = 60.0 * 60.0 * 1000.0


class VehicleConfig(BaseModel):
    """Immutable description of an eVTOL type.

    Shared by every vehicle spawned from the same prototype, so it is frozen.
    """

    model_config = ConfigDict(frozen=True)

    company_name: str = Field(default="Alpha Company", min_length=1, description="Manufacturer / operator label")
    cruise_speed_mph: float = Field(default=120.0, gt=0, description="Cruise speed (mph)")
    battery_capacity_kwh: float = Field(default=320.0, gt=0, description="Usable battery capacity (kWh)")
    time_to_charge_hours: float = Field(default=0.6, gt=0, description="Time for an empty-to-full charge (hours)")
    energy_use_kwh_per_mile: float = Field(default=1.6, gt=0, description="Energy use at cruise (kWh/mile)")
    passenger_count: int = Field(default=4, gt=0, description="Passengers carried per flight")
    fault_probability_per_hour: float = Field(
        default=0.25, ge=0, le=1.0,
        description="Probability of a fault per hour of flight. "
                    "Scaled linearly to the tick interval when sampled.",
    )

    @field_validator("company_name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("company_name cannot be blank")
        return value

    @property
    def charge_rate_kwh_per_ms(self) -> float:
        """Rate at which the battery accepts charge (kWh per ms)."""
        return self.battery_capacity_kwh / (self.time_to_charge_hours * MS_PER_HOUR)

    @property
    def energy_use_kwh_per_ms(self) -> float:
        """Energy drawn while flying at cruise speed (kWh per ms)."""
        return self.energy_use_kwh_per_mile * self.cruise_speed_mph / MS_PER_HOUR


def default_companies() -> list[VehicleConfig]:
    """The five company presets of the base case."""
    return [
        VehicleConfig(
            company_name="Alpha Company", cruise_speed_mph=120, battery_capacity_kwh=320,
            time_to_charge_hours=0.60, energy_use_kwh_per_mile=1.6, passenger_count=4,
            fault_probability_per_hour=0.25,
        ),
        VehicleConfig(
            company_name="Beta Company", cruise_speed_mph=100, battery_capacity_kwh=100,
            time_to_charge_hours=0.20, energy_use_kwh_per_mile=1.5, passenger_count=5,
            fault_probability_per_hour=0.10,
        ),
        VehicleConfig(
            company_name="Charlie Company", cruise_speed_mph=220, battery_capacity_kwh=320,
            time_to_charge_hours=0.80, energy_use_kwh_per_mile=2.2, passenger_count=3,
            fault_probability_per_hour=0.05,
        ),
        VehicleConfig(
            company_name="Delta Company", cruise_speed_mph=90, battery_capacity_kwh=120,
            time_to_charge_hours=0.62, energy_use_kwh_per_mile=0.8, passenger_count=2,
            fault_probability_per_hour=0.22,
        ),
        VehicleConfig(
            company_name="Echo Company", cruise_speed_mph=30, battery_capacity_kwh=150,
            time_to_charge_hours=0.30, energy_use_kwh_per_mile=5.8, passenger_count=2,
            fault_probability_per_hour=0.61,
        ),
    ]
