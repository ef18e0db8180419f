"""Observer pattern: live sports score updates.

A match (the subject) pushes events to subscribed users (the observers).
Unlike the rocket system, the subject isolates observers from each other:
one failing observer is logged and counted, the rest are still notified.

Example:
    >>> from patterns.behavioral import SportsEventSubject, User
    >>>
    >>> match = SportsEventSubject("Premier League: Manchester vs Liverpool")
    >>> match.subscribe(User("user_001", "Alice"))
    >>> match.score_update("Manchester", 1, "15:32")
    [15:32:01] 🟡[Alice] Team Manchester scored! Current Score: 1 (15:32)
        Metadata: {"team": "Manchester", "score": 1, "game_time": "15:32"}
"""

import json
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Literal, Protocol, runtime_checkable

from beartype import beartype

log = logging.getLogger(__name__)

Priority = Literal["low", "medium", "high"]

PRIORITY_LEVELS: dict[str, int] = {"low": 0, "medium": 1, "high": 2}
PRIORITY_INDICATORS: dict[str, str] = {"low": "🔵", "medium": "🟡", "high": "🔴"}


@beartype
@dataclass(frozen=True)
class EventData:
    """A single match event."""
    type: str
    message: str
    priority: Priority
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: dict[str, Any] | None = None


@runtime_checkable
class Observer(Protocol):
    @property
    def id(self) -> str:
        ...

    def update(self, event: EventData) -> None:
        ...


@beartype
@dataclass(frozen=True)
class NotificationPreferences:
    """Which events a user wants to see.

    Attributes:
        enabled_event_types: Event types to receive (empty = all)
        minimum_priority: Lowest priority delivered
        max_notifications_per_hour: Informational rate cap
    """
    enabled_event_types: tuple[str, ...] = ()
    minimum_priority: Priority = "low"
    max_notifications_per_hour: int = 50

    def should_receive(self, event: EventData) -> bool:
        if PRIORITY_LEVELS[event.priority] < PRIORITY_LEVELS[self.minimum_priority]:
            return False
        return not self.enabled_event_types or event.type in self.enabled_event_types


class User:
    """A subscriber that prints the events it cares about."""

    def __init__(
        self,
        user_id: str,
        name: str,
        preferences: NotificationPreferences | None = None,
    ) -> None:
        if not user_id.strip():
            raise ValueError("User ID cannot be empty")
        if not name.strip():
            raise ValueError("User name cannot be empty")
        self._id = user_id
        self.name = name
        self.preferences = preferences or NotificationPreferences()

    @property
    def id(self) -> str:
        return self._id

    def update(self, event: EventData) -> None:
        try:
            if not self.preferences.should_receive(event):
                return

            stamp = event.timestamp.strftime("%H:%M:%S")
            indicator = PRIORITY_INDICATORS[event.priority]
            print(f"[{stamp}] {indicator}[{self.name}] {event.message}")

            if event.metadata:
                print(f"    Metadata: {json.dumps(event.metadata)}")
        except (TypeError, ValueError) as error:
            log.error(f"Error updating user {self.name}: {error}")

    def update_preferences(self, **changes: Any) -> None:
        """Replace selected preference fields, keeping the others."""
        self.preferences = replace(self.preferences, **changes)


class SportsEventSubject:
    """A match that broadcasts score events to its subscribers."""

    def __init__(self, event_name: str, logger: logging.Logger | None = None) -> None:
        if not event_name.strip():
            raise ValueError("Event name cannot be empty")
        self.event_name = event_name
        self._logger = logger if logger is not None else log
        self._observers: dict[str, Observer] = {}
        self._event_history: list[EventData] = []

    def subscribe(self, observer: Observer) -> None:
        if observer is None:
            raise ValueError("Observer cannot be None")

        if observer.id in self._observers:
            self._logger.info(f"Observer {observer.id} already subscribed")
            return

        self._observers[observer.id] = observer
        self._logger.info(f"Observer {observer.id} subscribed to {self.event_name}")

    def unsubscribe(self, observer: Observer) -> None:
        if observer is None:
            raise ValueError("Observer cannot be None")

        if self._observers.pop(observer.id, None) is not None:
            self._logger.info(f"Observer {observer.id} unsubscribed from {self.event_name}")

    def _notify_observers(self, event: EventData) -> None:
        if not self._observers:
            self._logger.info("No observers to notify")
            return

        succeeded = failed = 0
        for observer in list(self._observers.values()):
            try:
                observer.update(event)
                succeeded += 1
            except Exception as error:
                failed += 1
                self._logger.error(f"Failed to notify observer {observer.id}: {error}")

        self._logger.info(f"Notification complete: {succeeded} succeeded, {failed} failed")

    def score_update(self, team: str, score: int, game_time: str | None = None) -> None:
        if not team.strip():
            raise ValueError("Team name cannot be empty")
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            raise ValueError("Score must be a non-negative number")

        suffix = f" ({game_time})" if game_time else ""
        event = EventData(
            type="score_update",
            message=f"Team {team} scored! Current Score: {score}{suffix}",
            priority="medium",
            metadata={"team": team, "score": score, "game_time": game_time},
        )
        self._event_history.append(event)
        self._notify_observers(event)

    def game_end(self, winner: str, final_score: str) -> None:
        event = EventData(
            type="game_end",
            message=f"Game Over! Winner: {winner}. Final Score: {final_score}",
            priority="high",
            metadata={"winner": winner, "final_score": final_score},
        )
        self._event_history.append(event)
        self._notify_observers(event)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def get_event_history(self) -> list[EventData]:
        return self._event_history.copy()
