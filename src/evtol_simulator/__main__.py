"""Command-line entry point.

    python -m evtol_simulator [scenario.yaml]

Runs the scenario (the built-in base case when no file is given), printing
one dot per real second of progress, then the text report.
"""

from __future__ import annotations

import argparse
import logging
import sys

from evtol_simulator.api.report import format_report
from evtol_simulator.config.loader import load_scenario
from evtol_simulator.config.scenario import Scenario
from evtol_simulator.engine.orchestrator import run_simulation


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="evtol-sim", description="Run an eVTOL charging simulation.")
    parser.add_argument("scenario", nargs="?", help="YAML scenario file (defaults to the base case)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    scenario = load_scenario(args.scenario) if args.scenario else Scenario()
    sim = scenario.simulation
    virtual_ms_per_real_second = sim.time_compression * 1000

    def progress(prev_ms: int, cur_ms: int) -> None:
        # one dot each time a real second's worth of virtual time is crossed
        if int(cur_ms // virtual_ms_per_real_second) > int(prev_ms // virtual_ms_per_real_second):
            sys.stdout.write(".")
            sys.stdout.flush()

    print(f"Starting simulation, about {sim.total_minutes / sim.time_compression:.2f} real minutes")
    result = run_simulation(scenario, on_tick=progress)
    print("\nSimulation finished\n")
    print(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
