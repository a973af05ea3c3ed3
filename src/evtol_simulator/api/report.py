"""Text report — fixed-width tables of a finished run.

Converts a ``SimulationResult`` into three sections:
  1. Simulation parameters
  2. Individual vehicle stats
  3. Company stats
"""

from __future__ import annotations

from evtol_simulator.models.results import SimulationResult


def format_report(result: SimulationResult) -> str:
    """Render ``result`` as plain text, one section per block."""
    sections: list[str] = [
        "*" * 32 + " R E S U L T S " + "*" * 32,
        _parameters_section(result),
        _vehicle_section(result),
        _company_section(result),
    ]
    return "\n\n".join(sections) + "\n"


def _parameters_section(result: SimulationResult) -> str:
    p = result.parameters
    st = result.station
    return "\n".join([
        "Simulation Parameters",
        f"  Number of eVTOLs:            {p.total_vehicles}",
        f"  Number of Charging Bays:     {p.charging_bays}",
        f"  Total Simulation Time:       {p.total_minutes:g} minutes",
        f"  Simulation Time Compression: {p.time_compression:g}",
        f"  Timestep Interval:           {p.timestep_ms} milliseconds",
        f"  Ticks Fired:                 {result.ticks}",
        f"  Peak Charging Queue:         {st.peak_queue_length}",
    ])


def _vehicle_section(result: SimulationResult) -> str:
    lines = [
        "Individual eVTOL Stats",
        f"{'COMPANY':>20}{'FLIGHT':>10}{'CHARGE':>10}{'WAIT':>10}{'FAULTS':>10}{'ENDING':>10}{'CHARGE':>11}",
        f"{'':>20}{'MINUTES':>10}{'MINUTES':>10}{'MINUTES':>10}{'':>10}{'STATE':>10}{'REMAINING':>11}",
        f"{'-' * 18:>20}" + f"{'-' * 8:>10}" * 5 + f"{'-' * 9:>11}",
    ]
    for v in result.vehicles:
        lines.append(
            f"{v.company_name:>20}"
            f"{v.flight_minutes:>10.2f}{v.charge_minutes:>10.2f}{v.wait_minutes:>10.2f}"
            f"{v.faults:>10}{v.ending_state:>10}{v.percent_charge_remaining:>10.2f}%"
        )
    return "\n".join(lines)


def _company_section(result: SimulationResult) -> str:
    lines = [
        "Company Stats",
        f"{'COMPANY':>20}{'COUNT':>10}{'AVERAGE':>10}{'AVERAGE':>10}{'AVERAGE':>10}{'MAX':>10}{'TOTAL':>10}",
        f"{'':>20}{'':>10}{'FLT TIME':>10}{'CHG TIME':>10}{'WAT TIME':>10}{'NUMBER':>10}{'PASSENGR':>10}",
        f"{'':>20}{'':>10}{'MINUTES':>10}{'MINUTES':>10}{'MINUTES':>10}{'FAULTS':>10}{'MILES':>10}",
        f"{'-' * 18:>20}" + f"{'-' * 8:>10}" * 6,
    ]
    for c in result.companies:
        lines.append(
            f"{c.company_name:>20}{c.vehicle_count:>10}"
            f"{c.avg_flight_minutes:>10.2f}{c.avg_charge_minutes:>10.2f}{c.avg_wait_minutes:>10.2f}"
            f"{c.max_faults:>10}{c.total_passenger_miles:>10.2f}"
        )
    return "\n".join(lines)
