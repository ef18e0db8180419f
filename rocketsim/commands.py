"""User-triggered operations as guarded command objects.

A command checks its own precondition (``can_execute``) and delegates the
work to the RocketSystem. The invoker refuses commands whose precondition
fails and keeps an ordered history of the ones that ran.

Example:
    >>> from rocketsim.commands import CommandInvoker, LaunchCommand, StartChecksCommand
    >>> from rocketsim.simulation import RocketSystem
    >>>
    >>> system = RocketSystem()
    >>> invoker = CommandInvoker()
    >>> invoker.execute_command(StartChecksCommand(system))
    >>> invoker.execute_command(LaunchCommand(system))
    >>> [c.description for c in invoker.get_history()]
    ['Start pre-launch system checks', 'Launch the rocket']
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from beartype import beartype

from rocketsim.exceptions import InvalidStateError, SimulationError
from rocketsim.simulation import RocketSystem
from rocketsim.state import MissionStatus

log = logging.getLogger(__name__)


@runtime_checkable
class Command(Protocol):
    """Protocol every command implements."""

    @property
    def description(self) -> str:
        ...

    def can_execute(self) -> bool:
        ...

    def execute(self) -> None:
        ...


# =============================================================================
# Concrete Commands
# =============================================================================


@beartype
@dataclass(frozen=True)
class StartChecksCommand:
    """Run pre-launch checks. Allowed only before anything else happened."""

    system: RocketSystem

    @property
    def description(self) -> str:
        return "Start pre-launch system checks"

    def can_execute(self) -> bool:
        return self.system.get_state().status is MissionStatus.PRE_LAUNCH

    def execute(self) -> None:
        self.system.perform_pre_launch_checks()


@beartype
@dataclass(frozen=True)
class LaunchCommand:
    """Launch once the checks report ready."""

    system: RocketSystem

    @property
    def description(self) -> str:
        return "Launch the rocket"

    def can_execute(self) -> bool:
        return self.system.get_state().status is MissionStatus.READY_TO_LAUNCH

    def execute(self) -> None:
        self.system.launch()


@beartype
@dataclass(frozen=True)
class FastForwardCommand:
    """Advance the flight by a positive number of seconds."""

    system: RocketSystem
    seconds: int
    logger: logging.Logger = field(default=log, repr=False, compare=False)

    @property
    def description(self) -> str:
        return f"Fast forward {self.seconds} seconds"

    def can_execute(self) -> bool:
        return self.system.get_state().status is MissionStatus.IN_FLIGHT and self.seconds > 0

    def execute(self) -> None:
        self.logger.info(f"Fast forwarding {self.seconds} seconds...")
        self.system.advance_time(self.seconds)


# =============================================================================
# Invoker
# =============================================================================


@beartype
class CommandInvoker:
    """Runs commands after checking their precondition and records them."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else log
        self._history: list[Command] = []

    def execute_command(self, command: Command) -> None:
        """Execute a command if its precondition holds.

        Raises:
            InvalidStateError: If ``command.can_execute()`` is false; the
                command is neither executed nor recorded
        """
        try:
            if not command.can_execute():
                raise InvalidStateError(f"Cannot execute command: {command.description}")

            self._logger.info(f"Executing: {command.description}")
            command.execute()
            self._history.append(command)
        except SimulationError as error:
            self._logger.error(str(error))
            raise
        except Exception:
            self._logger.error("Command execution failed")
            raise

    def get_history(self) -> list[Command]:
        """Get executed commands in order (copy)."""
        return self._history.copy()
