#!/usr/bin/env python
"""Scripted launch example for Rocketsim.

Runs the fixed demo command list against a fresh simulator:

1. Show the help text
2. Run pre-launch checks
3. Launch
4. Fast forward 10 s and print status
5. Fast forward 50 s (orbit is reached on the way) and print status

Then prints the command history.
"""

from rocketsim import SimConfig, configure_logging, run_scripted


def main() -> None:
    """Run the scripted launch example."""
    config = SimConfig(seed=7, step_delay=0.0)
    configure_logging(level=config.log_level)

    simulator = run_scripted(config=config)

    print()
    print("=" * 60)
    print("Command history:")
    for index, command in enumerate(simulator.invoker.get_history(), start=1):
        print(f"  {index}. {command.description}")
    print(f"Final status: {simulator.system.get_state().status.value}")


if __name__ == "__main__":
    main()
