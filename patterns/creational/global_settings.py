"""Shared application settings.

The classic Singleton hides one global instance behind ``get_instance()``.
Here the single instance is created explicitly at process start and handed
to every consumer, which keeps the "one shared store" behaviour without
hidden global state.

Example:
    >>> from patterns.creational import GlobalSettings
    >>>
    >>> settings = GlobalSettings()
    >>> settings.set("maxRetries", 5)
    >>> settings.get("maxRetries")
    5
    >>> settings.set("maxRetries", 42)
    Traceback (most recent call last):
    ...
    ValueError: Invalid value for setting 'maxRetries': 42
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from beartype import beartype

log = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "appName": "Smart Transport System",
    "version": "1.0.0",
    "debugMode": False,
    "maxRetries": 3,
    "timeoutMs": 5000,
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


VALIDATION_RULES: dict[str, Callable[[Any], bool]] = {
    "maxRetries": lambda value: _is_int(value) and 0 <= value <= 10,
    "timeoutMs": lambda value: _is_int(value) and 1000 <= value <= 30000,
    "debugMode": lambda value: isinstance(value, bool),
}


@beartype
@dataclass(frozen=True)
class SettingChange:
    """One recorded setting change."""
    key: str
    old_value: Any
    new_value: Any
    timestamp: datetime = field(default_factory=datetime.now)


class GlobalSettings:
    """Validated key/value settings store with change history."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else log
        self._settings: dict[str, Any] = dict(DEFAULT_SETTINGS)
        self._change_history: list[SettingChange] = []
        self._logger.info("GlobalSettings instance created")

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str) or not key:
            raise ValueError("Setting key must be a non-empty string")

    def set(self, key: str, value: Any) -> None:
        self._check_key(key)

        rule = VALIDATION_RULES.get(key)
        if rule is not None and not rule(value):
            raise ValueError(f"Invalid value for setting '{key}': {value}")

        old_value = self._settings.get(key)
        self._settings[key] = value
        self._change_history.append(SettingChange(key=key, old_value=old_value, new_value=value))
        self._logger.info(f"[Settings] {key} changed from {old_value} to {value}")

    def get(self, key: str, default: Any = None) -> Any:
        self._check_key(key)
        return self._settings.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._settings

    def remove(self, key: str) -> bool:
        self._check_key(key)
        if key not in self._settings:
            return False
        del self._settings[key]
        self._logger.info(f"[Settings] Removed setting: {key}")
        return True

    def all_settings(self) -> dict[str, Any]:
        return dict(self._settings)

    def get_change_history(self) -> list[SettingChange]:
        return self._change_history.copy()

    def __copy__(self):
        raise TypeError("GlobalSettings cannot be copied; pass the instance around instead")

    def __deepcopy__(self, memo):
        raise TypeError("GlobalSettings cannot be copied; pass the instance around instead")
