"""Rocketsim - Console rocket launch simulator.

A small two-stage launch simulator built from the Command, State, Strategy
and Observer patterns. Text commands are mapped to guarded command objects,
which drive a mission state machine one simulated second at a time.

Example:
    >>> from rocketsim import CommandInvoker, LaunchCommand, RocketSystem, StartChecksCommand
    >>> from rocketsim import FastForwardCommand
    >>>
    >>> system = RocketSystem()
    >>> invoker = CommandInvoker()
    >>> invoker.execute_command(StartChecksCommand(system))
    >>> invoker.execute_command(LaunchCommand(system))
    >>> invoker.execute_command(FastForwardCommand(system, 10))
    >>> print(system.get_state().summary())
    Stage: 1, Fuel: 90.0%, Altitude: 100.0 km, Speed: 10000.0 km/h
"""

__version__ = "1.0.0"

from rocketsim.commands import (
    Command,
    CommandInvoker,
    FastForwardCommand,
    LaunchCommand,
    StartChecksCommand,
)
from rocketsim.config import SimConfig
from rocketsim.console import (
    ConsoleDisplay,
    RocketLaunchSimulator,
    run_interactive,
    run_scripted,
)
from rocketsim.exceptions import (
    InvalidCommandError,
    InvalidStateError,
    SimulationError,
    UnknownStageError,
)
from rocketsim.export import export_flight_to_json
from rocketsim.log import LogHistory, configure_logging
from rocketsim.simulation import FlightResult, RocketObserver, RocketSystem
from rocketsim.stages import (
    Stage1Strategy,
    Stage2Strategy,
    StageFactory,
    StageStrategy,
    create_stage,
)
from rocketsim.state import MissionStatus, RocketState

__all__ = [
    # Version
    "__version__",
    # State
    "MissionStatus",
    "RocketState",
    # Stages
    "StageStrategy",
    "Stage1Strategy",
    "Stage2Strategy",
    "StageFactory",
    "create_stage",
    # Simulation
    "RocketSystem",
    "RocketObserver",
    "FlightResult",
    "SimConfig",
    # Commands
    "Command",
    "CommandInvoker",
    "StartChecksCommand",
    "LaunchCommand",
    "FastForwardCommand",
    # Console
    "ConsoleDisplay",
    "RocketLaunchSimulator",
    "run_interactive",
    "run_scripted",
    # Errors
    "SimulationError",
    "InvalidCommandError",
    "InvalidStateError",
    "UnknownStageError",
    # Logging and export
    "LogHistory",
    "configure_logging",
    "export_flight_to_json",
]
