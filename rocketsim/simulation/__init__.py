"""Mission simulation: the rocket state machine and its telemetry.

Example:
    >>> from rocketsim.simulation import FlightResult, RocketSystem
    >>>
    >>> system = RocketSystem()
    >>> system.perform_pre_launch_checks()
    >>> system.launch()
    >>> system.advance_time(30)
    >>> FlightResult.from_system(system).final_state.status
    <MissionStatus.ORBIT_ACHIEVED: 'Orbit Achieved'>
"""

from rocketsim.simulation.system import (
    MIN_FUEL_FOR_ORBIT,
    ORBIT_ALTITUDE,
    PRE_LAUNCH_SYSTEMS,
    FlightResult,
    RocketObserver,
    RocketSystem,
)

__all__ = [
    "MIN_FUEL_FOR_ORBIT",
    "ORBIT_ALTITUDE",
    "PRE_LAUNCH_SYSTEMS",
    "FlightResult",
    "RocketObserver",
    "RocketSystem",
]
