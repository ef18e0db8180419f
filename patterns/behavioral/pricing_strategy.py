"""Strategy pattern: dynamic ride pricing.

A ride service delegates fare calculation to an interchangeable pricing
strategy that can be swapped at runtime.

Example:
    >>> from patterns.behavioral import NormalStrategy, RideService, SurgeStrategy
    >>>
    >>> service = RideService(NormalStrategy())
    >>> service.calculate_fare(25.0)
    25.0
    >>> service.set_strategy(SurgeStrategy(2.5))
    >>> service.calculate_fare(25.0)
    62.5
"""

import logging
from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

from beartype import beartype

log = logging.getLogger(__name__)

Weather = Literal["sunny", "rainy", "stormy"]

WEATHER_MULTIPLIERS: dict[str, float] = {
    "sunny": 1.0,
    "rainy": 1.3,
    "stormy": 1.8,
}


@beartype
@dataclass(frozen=True)
class PricingConditions:
    """Conditions a strategy may consider when deciding if it applies."""
    weather: Weather
    demand: Literal["low", "medium", "high"]
    time_of_day: Literal["morning", "afternoon", "evening", "night"]
    distance: float


@runtime_checkable
class PricingStrategy(Protocol):
    @property
    def name(self) -> str:
        ...

    def calculate(self, base_fare: float) -> float:
        ...

    def is_applicable(self, conditions: PricingConditions) -> bool:
        ...


def _validate_base_fare(base_fare: float) -> None:
    if isinstance(base_fare, bool) or not isinstance(base_fare, (int, float)) or base_fare <= 0:
        raise ValueError(f"Invalid base fare: {base_fare}. Must be a positive number.")


class NormalStrategy:
    """Fare as quoted, rounded to cents."""

    @property
    def name(self) -> str:
        return "Normal Pricing"

    def calculate(self, base_fare: float) -> float:
        _validate_base_fare(base_fare)
        return round(base_fare, 2)

    def is_applicable(self, conditions: PricingConditions) -> bool:
        return conditions.demand == "low" and conditions.weather == "sunny"


class SurgeStrategy:
    """Multiplies the fare during high demand or at night."""

    def __init__(self, multiplier: float = 2.0) -> None:
        if multiplier <= 1 or multiplier > 5:
            raise ValueError(f"Invalid surge multiplier: {multiplier}. Must be between 1 and 5.")
        self.multiplier = multiplier

    @property
    def name(self) -> str:
        return f"Surge Pricing ({self.multiplier}x)"

    def calculate(self, base_fare: float) -> float:
        _validate_base_fare(base_fare)
        return round(base_fare * self.multiplier, 2)

    def is_applicable(self, conditions: PricingConditions) -> bool:
        return conditions.demand == "high" or conditions.time_of_day == "night"


class WeatherStrategy:
    """Weather surcharge. Prices for rain unless told otherwise."""

    def __init__(self, weather: Weather = "rainy") -> None:
        if weather not in WEATHER_MULTIPLIERS:
            raise ValueError(f"Unknown weather '{weather}'. Available: {list(WEATHER_MULTIPLIERS)}")
        self.weather = weather

    @property
    def name(self) -> str:
        return "Weather-Based Pricing"

    def calculate(self, base_fare: float) -> float:
        _validate_base_fare(base_fare)
        return round(base_fare * WEATHER_MULTIPLIERS[self.weather], 2)

    def is_applicable(self, conditions: PricingConditions) -> bool:
        return conditions.weather in ("rainy", "stormy")


class RideService:
    """Context object holding the active pricing strategy."""

    def __init__(self, strategy: PricingStrategy, logger: logging.Logger | None = None) -> None:
        if strategy is None:
            raise ValueError("Pricing strategy is required")
        self._strategy = strategy
        self._logger = logger if logger is not None else log

    def set_strategy(self, strategy: PricingStrategy) -> None:
        if strategy is None:
            raise ValueError("Strategy cannot be None")

        old_name = self._strategy.name
        self._strategy = strategy
        self._logger.info(f"Strategy changed from {old_name} to {strategy.name}")

    def calculate_fare(self, base_fare: float) -> float:
        try:
            fare = self._strategy.calculate(base_fare)
        except Exception as error:
            self._logger.error(f"Error calculating fare: {error}")
            raise
        self._logger.info(f"Fare calculated: ${fare} using {self._strategy.name}")
        return fare

    @property
    def active_strategy(self) -> str:
        return self._strategy.name
