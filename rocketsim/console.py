"""Console front end for the launch simulator.

Maps text input to commands, renders flight telemetry through an observer,
and drives either an interactive read loop or a fixed scripted demo.

Commands:
    start_checks    Initiate pre-launch system checks
    launch          Launch the rocket (after checks)
    fast_forward X  Advance simulation by X seconds
    status          Display current mission status
    help            Show the command list
    exit            Exit the simulator (interactive loop only)

Usage:
    python -m rocketsim
"""

import logging
import sys
import time
from collections.abc import Iterable
from typing import TextIO

from rocketsim.commands import (
    CommandInvoker,
    FastForwardCommand,
    LaunchCommand,
    StartChecksCommand,
)
from rocketsim.config import SimConfig
from rocketsim.exceptions import InvalidCommandError, SimulationError
from rocketsim.log import configure_logging
from rocketsim.simulation import RocketSystem
from rocketsim.state import MissionStatus, RocketState

log = logging.getLogger(__name__)

DEMO_COMMANDS: tuple[str, ...] = (
    "help",
    "start_checks",
    "launch",
    "fast_forward 10",
    "status",
    "fast_forward 50",
    "status",
)

HELP_TEXT = """
=== AVAILABLE COMMANDS ===
start_checks    - Initiate pre-launch system checks
launch          - Launch the rocket (after checks)
fast_forward X  - Advance simulation by X seconds
status          - Display current mission status
help            - Show this help message
exit            - Exit the simulator
=========================
"""

WELCOME_BANNER = """
+========================================+
|   ROCKET LAUNCH SIMULATOR v1.0         |
+========================================+

Type "help" for available commands
"""


# =============================================================================
# Display (observer)
# =============================================================================


class ConsoleDisplay:
    """Logs a telemetry line for every in-flight state update."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else log

    def on_state_update(self, state: RocketState) -> None:
        if state.status is MissionStatus.IN_FLIGHT:
            self._logger.info(state.summary())


def format_status(state: RocketState) -> str:
    """Render the multi-line mission status block."""
    return (
        "\n=== MISSION STATUS ===\n"
        f"Status: {state.status.value}\n"
        f"Stage: {state.stage}\n"
        f"Fuel: {state.fuel:.1f}%\n"
        f"Altitude: {state.altitude:.1f} km\n"
        f"Speed: {state.speed:.1f} km/h\n"
        "=====================\n"
    )


# =============================================================================
# Simulator front end
# =============================================================================


class RocketLaunchSimulator:
    """Wires the rocket system, command invoker and display together."""

    def __init__(
        self,
        config: SimConfig | None = None,
        logger: logging.Logger | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.config = config or SimConfig()
        self._logger = logger if logger is not None else log
        self._out = out if out is not None else sys.stdout

        self.system = RocketSystem(config=self.config, logger=self._logger)
        self.invoker = CommandInvoker(logger=self._logger)
        self.display = ConsoleDisplay(logger=self._logger)
        self.system.add_observer(self.display)

    def process_input(self, text: str) -> None:
        """Run one line of user input. Errors are logged, never raised."""
        try:
            command = text.strip().lower()

            if command == "start_checks":
                self.invoker.execute_command(StartChecksCommand(self.system))
            elif command == "launch":
                self.invoker.execute_command(LaunchCommand(self.system))
            elif command.startswith("fast_forward"):
                self.invoker.execute_command(self._parse_fast_forward(text, command))
            elif command == "status":
                self.display_status()
            elif command == "help":
                self.display_help()
            else:
                raise InvalidCommandError(text)
        except SimulationError as error:
            self._logger.error(str(error))
        except Exception:
            self._logger.error("An unexpected error occurred")

    def _parse_fast_forward(self, text: str, command: str) -> FastForwardCommand:
        parts = command.split()
        if len(parts) != 2 or parts[0] != "fast_forward":
            raise InvalidCommandError(text)

        token = parts[1]
        seconds = int(token) if token.isascii() and token.isdigit() else 0
        if seconds <= 0:
            raise SimulationError("Fast forward value must be a positive number")

        return FastForwardCommand(self.system, seconds, logger=self._logger)

    def display_status(self) -> None:
        self._out.write(format_status(self.system.get_state()))

    def display_help(self) -> None:
        self._out.write(HELP_TEXT)

    def display_welcome(self) -> None:
        self._out.write(WELCOME_BANNER + "\n")


# =============================================================================
# Drivers
# =============================================================================


def run_scripted(
    commands: Iterable[str] = DEMO_COMMANDS,
    config: SimConfig | None = None,
    out: TextIO | None = None,
) -> RocketLaunchSimulator:
    """Feed a fixed list of commands to a fresh simulator.

    Returns:
        The simulator, for inspecting the final state and history
    """
    out = out if out is not None else sys.stdout
    simulator = RocketLaunchSimulator(config=config, out=out)
    simulator.display_welcome()

    commands = list(commands)
    for index, command in enumerate(commands):
        out.write(f"\n> {command}\n")
        simulator.process_input(command)

        if index < len(commands) - 1:
            out.write("\n" + "-" * 60 + "\n")
            if simulator.config.step_delay > 0:
                time.sleep(simulator.config.step_delay)

    return simulator


def run_interactive(
    stdin: TextIO | None = None,
    config: SimConfig | None = None,
    out: TextIO | None = None,
) -> int:
    """Read commands line by line until ``exit`` or end of input.

    Returns:
        Process exit code
    """
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    simulator = RocketLaunchSimulator(config=config, out=out)
    simulator.display_welcome()

    out.write("> ")
    out.flush()
    for line in stdin:
        text = line.strip()
        if text.lower() == "exit":
            out.write("Shutting down simulator...\n")
            break
        simulator.process_input(text)
        out.write("> ")
        out.flush()
    else:
        out.write("\n")

    out.write("Simulator terminated.\n")
    return 0


def main() -> int:
    """Entry point for the ``rocketsim`` console script."""
    config = SimConfig()
    configure_logging(level=config.log_level)
    return run_interactive(config=config)
