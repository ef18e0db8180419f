"""Run settings for the launch simulator.

Flight constants (orbit altitude, minimum orbital fuel, the stage table)
are fixed and live in :mod:`rocketsim.simulation.system` and
:mod:`rocketsim.stages`. This module only holds the ambient knobs of a run.
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype


@beartype
@dataclass
class SimConfig:
    """Simulator run configuration.

    Attributes:
        log_level: Level name passed to logging setup
        transient_fault_probability: Chance of a simulated (always recovered)
            fault per subsystem during pre-launch checks [0-1]
        seed: Seed for the fault random generator (None = nondeterministic)
        record_history: Whether to keep a telemetry snapshot per second
        step_delay: Pause between scripted demo commands [s]
    """
    log_level: str = "INFO"
    transient_fault_probability: float = 0.1
    seed: int | None = None
    record_history: bool = True
    step_delay: float = 0.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.transient_fault_probability <= 1.0:
            raise ValueError(
                "transient_fault_probability must be in [0, 1], "
                f"got {self.transient_fault_probability}"
            )
        if self.step_delay < 0.0:
            raise ValueError(f"step_delay must be non-negative, got {self.step_delay}")

    def make_rng(self) -> np.random.Generator:
        """Create the random generator used for simulated faults."""
        return np.random.default_rng(self.seed)
