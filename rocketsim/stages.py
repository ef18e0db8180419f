"""Propulsion stage strategies.

Each stage is a constant bundle of per-second rates plus a separation
predicate over remaining fuel. Only two stages exist; asking the factory
for anything else is an error.

| Stage | Burn [%/s] | Climb [km/s] | Accel [km/h per s] | Separates at |
|-------|-----------:|-------------:|-------------------:|--------------|
| 1     | 1.0        | 10           | 1000               | fuel <= 30   |
| 2     | 0.5        | 15           | 800                | never        |

Example:
    >>> from rocketsim.stages import StageFactory
    >>>
    >>> stage = StageFactory.create_stage(1)
    >>> stage.fuel_consumption_rate
    1.0
    >>> stage.should_separate(30.0)
    True
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from beartype import beartype

from rocketsim.exceptions import UnknownStageError


@runtime_checkable
class StageStrategy(Protocol):
    """Protocol every propulsion stage implements."""

    @property
    def fuel_consumption_rate(self) -> float:
        """Fuel burned per second [%]."""
        ...

    @property
    def altitude_increment(self) -> float:
        """Altitude gained per second [km]."""
        ...

    @property
    def speed_increment(self) -> float:
        """Speed gained per second [km/h]."""
        ...

    @property
    def stage_name(self) -> str:
        """Display name of the stage."""
        ...

    def should_separate(self, fuel: float) -> bool:
        """Whether the stage is spent at this fuel level."""
        ...


@beartype
@dataclass(frozen=True, slots=True)
class Stage1Strategy:
    """First stage: heavy burn, separates once fuel falls to the threshold."""

    fuel_consumption_rate: float = 1.0
    altitude_increment: float = 10.0
    speed_increment: float = 1000.0
    stage_name: str = "1"
    separation_fuel: float = 30.0

    def should_separate(self, fuel: float) -> bool:
        return fuel <= self.separation_fuel


@beartype
@dataclass(frozen=True, slots=True)
class Stage2Strategy:
    """Second (final) stage: never separates."""

    fuel_consumption_rate: float = 0.5
    altitude_increment: float = 15.0
    speed_increment: float = 800.0
    stage_name: str = "2"

    def should_separate(self, fuel: float) -> bool:
        return False


_STAGES: dict[int, StageStrategy] = {
    1: Stage1Strategy(),
    2: Stage2Strategy(),
}


class StageFactory:
    """Creates the strategy for a stage number."""

    @staticmethod
    @beartype
    def create_stage(stage_number: int) -> StageStrategy:
        """Get the strategy for a stage.

        Args:
            stage_number: 1 or 2

        Returns:
            Stage strategy

        Raises:
            UnknownStageError: If no strategy exists for the stage
        """
        try:
            return _STAGES[stage_number]
        except KeyError:
            raise UnknownStageError(stage_number) from None

    @staticmethod
    def supported_stages() -> tuple[int, ...]:
        """Stage numbers the factory can build."""
        return tuple(sorted(_STAGES))


create_stage = StageFactory.create_stage
