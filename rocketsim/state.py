"""Mission status and rocket state snapshot.

The state holds five flight variables plus the simulated time since launch:

- stage: active propulsion stage (0 before launch)
- fuel: remaining propellant [% of full load]
- altitude: height above the pad [km]
- speed: vehicle speed [km/h]
- status: current MissionStatus
- time: seconds of flight simulated since launch [s]
"""

from dataclasses import dataclass
from enum import Enum

from beartype import beartype


class MissionStatus(Enum):
    """Mission lifecycle states."""

    PRE_LAUNCH = "Pre-Launch"
    CHECKS_IN_PROGRESS = "System Checks"
    READY_TO_LAUNCH = "Ready for Launch"
    IN_FLIGHT = "In Flight"
    ORBIT_ACHIEVED = "Orbit Achieved"
    MISSION_FAILED = "Mission Failed"

    @property
    def is_terminal(self) -> bool:
        """True once no operation can move the mission on."""
        return self in (MissionStatus.ORBIT_ACHIEVED, MissionStatus.MISSION_FAILED)


@beartype
@dataclass
class RocketState:
    """Mutable rocket state owned by a RocketSystem.

    Attributes:
        stage: Active stage number (0 = on the pad)
        fuel: Remaining fuel [%], clamped to 0 on depletion
        altitude: Altitude [km]
        speed: Speed [km/h]
        status: Mission status
        time: Flight time since launch [s]
    """
    stage: int = 0
    fuel: float = 100.0
    altitude: float = 0.0
    speed: float = 0.0
    status: MissionStatus = MissionStatus.PRE_LAUNCH
    time: float = 0.0

    def __post_init__(self) -> None:
        """Validate ranges."""
        if self.stage < 0:
            raise ValueError(f"stage must be >= 0, got {self.stage}")
        if not 0.0 <= self.fuel <= 100.0:
            raise ValueError(f"fuel must be in [0, 100], got {self.fuel}")
        if self.altitude < 0.0:
            raise ValueError(f"altitude must be >= 0, got {self.altitude}")
        if self.speed < 0.0:
            raise ValueError(f"speed must be >= 0, got {self.speed}")

    def copy(self) -> "RocketState":
        """Create a copy of this state."""
        return RocketState(
            stage=self.stage,
            fuel=self.fuel,
            altitude=self.altitude,
            speed=self.speed,
            status=self.status,
            time=self.time,
        )

    def summary(self) -> str:
        """One-line flight readout."""
        return (
            f"Stage: {self.stage}, Fuel: {self.fuel:.1f}%, "
            f"Altitude: {self.altitude:.1f} km, "
            f"Speed: {self.speed:.1f} km/h"
        )
