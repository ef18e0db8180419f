"""Exception hierarchy for the launch simulator.

Every error raised on purpose by the simulator derives from
SimulationError so the console loop can report it and keep running.
"""


class SimulationError(Exception):
    """Base class for simulator errors."""


class InvalidCommandError(SimulationError):
    """User input could not be mapped to a command."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Invalid command: {command}")
        self.command = command


class InvalidStateError(SimulationError):
    """Operation attempted outside the mission status it requires."""


class UnknownStageError(SimulationError):
    """No stage strategy is defined for the requested stage number."""

    def __init__(self, stage_number: int) -> None:
        super().__init__(f"Unknown stage: {stage_number}")
        self.stage_number = stage_number
