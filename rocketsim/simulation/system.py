"""Rocket system: the mission state machine.

The system owns the rocket state, the active stage strategy and the list of
observers. Commands call into it; it mutates state one simulated second at a
time and pushes a snapshot to every observer after each change.

State machine:
    PRE_LAUNCH -> CHECKS_IN_PROGRESS -> READY_TO_LAUNCH   (pre-launch checks)
    READY_TO_LAUNCH -> IN_FLIGHT                          (launch)
    IN_FLIGHT -> IN_FLIGHT | ORBIT_ACHIEVED | MISSION_FAILED  (advance_time)

ORBIT_ACHIEVED and MISSION_FAILED are terminal.

Example:
    >>> from rocketsim.simulation import RocketSystem
    >>>
    >>> system = RocketSystem()
    >>> system.perform_pre_launch_checks()
    >>> system.launch()
    >>> system.advance_time(10)
    >>> state = system.get_state()
    >>> state.fuel, state.altitude, state.speed
    (90.0, 100.0, 10000.0)
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from rocketsim.config import SimConfig
from rocketsim.exceptions import InvalidStateError, SimulationError
from rocketsim.stages import StageFactory, StageStrategy
from rocketsim.state import MissionStatus, RocketState

log = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

ORBIT_ALTITUDE: float = 160.0  # [km]
MIN_FUEL_FOR_ORBIT: float = 5.0  # [%]

PRE_LAUNCH_SYSTEMS: tuple[str, ...] = (
    "Flight computer",
    "Navigation system",
    "Fuel tanks",
    "Engine systems",
    "Communication array",
)


# =============================================================================
# Observer Interface
# =============================================================================


@runtime_checkable
class RocketObserver(Protocol):
    """Receives a state snapshot after every state-affecting step."""

    def on_state_update(self, state: RocketState) -> None:
        ...


# =============================================================================
# Rocket System
# =============================================================================


@beartype
@dataclass
class RocketSystem:
    """Mission state machine.

    Attributes:
        state: Current rocket state (owned; read it through get_state())
        config: Run configuration
        logger: Logger for mission events (defaults to the module logger)
    """
    state: RocketState = field(default_factory=RocketState)
    config: SimConfig = field(default_factory=SimConfig)
    logger: logging.Logger = field(default=log, repr=False)

    # Internal
    _stage: StageStrategy | None = field(default=None, init=False, repr=False)
    _observers: list[RocketObserver] = field(default_factory=list, init=False, repr=False)
    _rng: np.random.Generator = field(init=False, repr=False)
    _history: list[RocketState] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        # Owned copy; callers keep no handle on the live state
        self.state = self.state.copy()
        self._rng = self.config.make_rng()
        if self.state.status is MissionStatus.IN_FLIGHT and self.state.stage >= 1:
            self._stage = StageFactory.create_stage(self.state.stage)
        if self.config.record_history:
            self._history = [self.state.copy()]

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def add_observer(self, observer: RocketObserver) -> None:
        """Register an observer. Duplicates are notified twice."""
        self._observers.append(observer)

    def _notify_observers(self) -> None:
        # No isolation: an observer error stops the fan-out and propagates
        for observer in self._observers:
            observer.on_state_update(self.state.copy())

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_state(self) -> RocketState:
        """Get current state.

        Returns a copy to prevent external modification.
        """
        return self.state.copy()

    @property
    def current_stage(self) -> StageStrategy | None:
        """Active stage strategy (None before launch)."""
        return self._stage

    def get_history(self) -> list[RocketState]:
        """Get recorded telemetry snapshots."""
        return self._history.copy()

    def clear_history(self) -> None:
        """Clear recorded telemetry, keeping the current snapshot."""
        self._history = [self.state.copy()]

    def _record(self) -> None:
        if self.config.record_history:
            self._history.append(self.state.copy())

    # -------------------------------------------------------------------------
    # Lifecycle operations
    # -------------------------------------------------------------------------

    def perform_pre_launch_checks(self) -> None:
        """Run the pre-launch checklist and move to READY_TO_LAUNCH.

        Each subsystem may report a simulated transient fault, which is
        always recovered by an immediate retry.
        """
        try:
            self.logger.info("Initiating pre-launch system checks...")
            self.state.status = MissionStatus.CHECKS_IN_PROGRESS

            for system in PRE_LAUNCH_SYSTEMS:
                if self._rng.random() < self.config.transient_fault_probability:
                    self.logger.warning(f"{system}: Transient error detected. Retrying...")
                    self.logger.info(f"{system}: Retry successful.")
                self.logger.info(f"{system}: OK")

            self.state.status = MissionStatus.READY_TO_LAUNCH
            self.logger.info("All systems are 'Go' for launch.")
            self._notify_observers()
        except Exception as error:
            self._log_error(error, "Pre-launch checks failed")
            raise

    def launch(self) -> None:
        """Ignite stage 1.

        Raises:
            InvalidStateError: If pre-launch checks have not completed
        """
        try:
            if self.state.status is not MissionStatus.READY_TO_LAUNCH:
                raise InvalidStateError("Cannot launch: Pre-launch checks not completed")

            self.logger.info("Launching rocket!")
            self.state.stage = 1
            self.state.status = MissionStatus.IN_FLIGHT
            self._stage = StageFactory.create_stage(1)
            self._record()
            self._notify_observers()
        except Exception as error:
            self._log_error(error, "Launch failed")
            raise

    def advance_time(self, seconds: int) -> None:
        """Simulate up to ``seconds`` one-second steps.

        Stops early on fuel exhaustion or orbit insertion.

        Raises:
            InvalidStateError: If the rocket is not in flight
        """
        try:
            if self.state.status is not MissionStatus.IN_FLIGHT:
                raise InvalidStateError("Rocket is not in flight")

            for _ in range(seconds):
                if not self._update_flight_parameters():
                    break
        except Exception as error:
            self._log_error(error, "Flight simulation error")
            raise

    # -------------------------------------------------------------------------
    # Flight step
    # -------------------------------------------------------------------------

    def _update_flight_parameters(self) -> bool:
        """Advance one second. Returns False when the flight halts."""
        stage = self._stage
        if stage is None:
            self.logger.error("No stage strategy available")
            return False

        state = self.state
        state.fuel -= stage.fuel_consumption_rate

        if state.fuel <= 0.0:
            state.fuel = 0.0
            state.time += 1.0
            self._mission_failed("Insufficient fuel")
            return False

        state.altitude += stage.altitude_increment
        state.speed += stage.speed_increment
        state.time += 1.0

        # Orbit wins over separation within the same second
        if state.altitude >= ORBIT_ALTITUDE and state.fuel >= MIN_FUEL_FOR_ORBIT:
            self._achieve_orbit()
            return False

        if stage.should_separate(state.fuel):
            self._separate_stage()

        self._record()
        self._notify_observers()
        return True

    def _separate_stage(self) -> None:
        self.logger.info(f"Stage {self._stage.stage_name} complete. Separating stage.")
        self.state.stage += 1
        self._stage = StageFactory.create_stage(self.state.stage)
        self.logger.info(f"Entering Stage {self._stage.stage_name}.")

    def _achieve_orbit(self) -> None:
        self.state.status = MissionStatus.ORBIT_ACHIEVED
        self._record()
        self.logger.info("Orbit achieved! Mission Successful.")
        self._notify_observers()

    def _mission_failed(self, reason: str) -> None:
        self.state.status = MissionStatus.MISSION_FAILED
        self._record()
        self.logger.error(f"Mission Failed due to {reason}.")
        self._notify_observers()

    def _log_error(self, error: Exception, context: str) -> None:
        if isinstance(error, SimulationError):
            self.logger.error(f"{context}: {error}")
        else:
            self.logger.error(f"{context}: Unexpected error - {error}")


# =============================================================================
# Results and Analysis
# =============================================================================


@beartype
@dataclass
class FlightResult:
    """Telemetry from a flight.

    Provides array access to the recorded snapshots.
    """
    states: list[RocketState]

    @property
    def time(self) -> NDArray[np.float64]:
        """Flight time [s]."""
        return np.array([s.time for s in self.states], dtype=np.float64)

    @property
    def stage(self) -> NDArray[np.int64]:
        """Active stage number."""
        return np.array([s.stage for s in self.states], dtype=np.int64)

    @property
    def fuel(self) -> NDArray[np.float64]:
        """Fuel history [%]."""
        return np.array([s.fuel for s in self.states], dtype=np.float64)

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history [km]."""
        return np.array([s.altitude for s in self.states], dtype=np.float64)

    @property
    def speed(self) -> NDArray[np.float64]:
        """Speed history [km/h]."""
        return np.array([s.speed for s in self.states], dtype=np.float64)

    @property
    def status(self) -> list[MissionStatus]:
        return [s.status for s in self.states]

    @property
    def final_state(self) -> RocketState:
        if not self.states:
            raise ValueError("FlightResult has no recorded states")
        return self.states[-1]

    @classmethod
    def from_system(cls, system: RocketSystem) -> "FlightResult":
        """Create result from a system's recorded history."""
        return cls(states=system.get_history())

    def to_dataframe(self):
        """Convert to Polars DataFrame."""
        import polars as pl

        return pl.DataFrame({
            "time": self.time,
            "stage": self.stage,
            "fuel": self.fuel,
            "altitude": self.altitude,
            "speed": self.speed,
            "status": [s.value for s in self.status],
        })
