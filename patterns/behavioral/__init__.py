"""Behavioral pattern demos: Observer (sports updates) and Strategy (ride pricing)."""

from patterns.behavioral.pricing_strategy import (
    NormalStrategy,
    PricingConditions,
    PricingStrategy,
    RideService,
    SurgeStrategy,
    WeatherStrategy,
)
from patterns.behavioral.sports_observer import (
    EventData,
    NotificationPreferences,
    Observer,
    SportsEventSubject,
    User,
)

__all__ = [
    # Observer
    "EventData",
    "NotificationPreferences",
    "Observer",
    "SportsEventSubject",
    "User",
    # Strategy
    "NormalStrategy",
    "PricingConditions",
    "PricingStrategy",
    "RideService",
    "SurgeStrategy",
    "WeatherStrategy",
]
