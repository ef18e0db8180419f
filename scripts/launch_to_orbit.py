#!/usr/bin/env python
"""Example: Fly a launch second by second with a telemetry observer.

This script drives RocketSystem directly, without the console front end:
1. Run pre-launch checks and launch
2. Step the flight one second at a time
3. Print a telemetry row every few seconds from an observer
4. Report the final state

Pass a starting fuel level to try a marginal launch, e.g. 8 runs dry before reaching orbit.

Usage:
    uv run python scripts/launch_to_orbit.py [initial_fuel]
"""

import sys

from rocketsim import MissionStatus, RocketState, RocketSystem, SimConfig
from rocketsim.simulation import MIN_FUEL_FOR_ORBIT, ORBIT_ALTITUDE


class TelemetryPrinter:
    """Prints one row per `interval` seconds of flight."""

    def __init__(self, interval: float = 2.0) -> None:
        self.interval = interval
        self.last_print_time = -interval

    def on_state_update(self, state: RocketState) -> None:
        if state.status is not MissionStatus.IN_FLIGHT:
            return
        if state.time - self.last_print_time >= self.interval:
            print(
                f"  T+{state.time:5.1f}s | Stage {state.stage} | "
                f"Fuel {state.fuel:5.1f}% | Alt {state.altitude:6.1f} km | "
                f"Speed {state.speed:8.1f} km/h"
            )
            self.last_print_time = state.time


def run_launch(initial_fuel: float = 100.0) -> RocketState:
    print("=" * 60)
    print("LAUNCH TO ORBIT SIMULATION")
    print("=" * 60)

    print("\nMission Parameters:")
    print(f"  Target altitude: {ORBIT_ALTITUDE:.0f} km")
    print(f"  Minimum fuel at insertion: {MIN_FUEL_FOR_ORBIT:.0f}%")
    print(f"  Initial fuel: {initial_fuel:.0f}%")

    system = RocketSystem(
        state=RocketState(fuel=initial_fuel),
        config=SimConfig(seed=1),
    )
    system.add_observer(TelemetryPrinter())

    print("\nRunning pre-launch checks...")
    system.perform_pre_launch_checks()
    system.launch()

    print("\nRunning simulation...")
    print("-" * 60)

    t_max = 600
    while system.get_state().status is MissionStatus.IN_FLIGHT and system.get_state().time < t_max:
        system.advance_time(1)

    state = system.get_state()
    print("-" * 60)
    print("\nFINAL STATE:")
    print(f"  Time: {state.time:.1f} s")
    print(f"  {state.summary()}")

    if state.status is MissionStatus.ORBIT_ACHIEVED:
        print("\n✓ ORBIT ACHIEVED!")
    else:
        print(f"\n✗ {state.status.value} at T+{state.time:.1f}s")

    return state


if __name__ == "__main__":
    fuel = float(sys.argv[1]) if len(sys.argv) > 1 else 100.0
    run_launch(fuel)
