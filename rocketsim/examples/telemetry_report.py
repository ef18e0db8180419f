#!/usr/bin/env python
"""Flight telemetry example for Rocketsim.

Flies a rocket from the pad to orbit, then:

1. Builds a FlightResult from the recorded history
2. Prints the telemetry table (Polars DataFrame)
3. Exports the telemetry to JSON under outputs/
"""

from pathlib import Path

from rocketsim import (
    CommandInvoker,
    FastForwardCommand,
    FlightResult,
    LaunchCommand,
    RocketSystem,
    SimConfig,
    StartChecksCommand,
    configure_logging,
    export_flight_to_json,
)


def main() -> None:
    """Run the telemetry example."""
    print("=" * 60)
    print("Rocketsim - Flight Telemetry Example")
    print("=" * 60)

    config = SimConfig(seed=42, transient_fault_probability=0.0)
    configure_logging(level="WARNING")

    system = RocketSystem(config=config)
    invoker = CommandInvoker()
    invoker.execute_command(StartChecksCommand(system))
    invoker.execute_command(LaunchCommand(system))
    invoker.execute_command(FastForwardCommand(system, 60))

    result = FlightResult.from_system(system)
    final = result.final_state

    print(f"\nFinal status: {final.status.value}")
    print(f"Flight time:  {final.time:.0f} s")
    print(f"Max altitude: {result.altitude.max():.1f} km")
    print(f"Max speed:    {result.speed.max():.1f} km/h")

    print("\nTelemetry:")
    print(result.to_dataframe())

    path = export_flight_to_json(result, Path("outputs") / "flight_telemetry.json")
    print(f"\nExported flight data to {path}")


if __name__ == "__main__":
    main()
