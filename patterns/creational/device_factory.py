"""Factory pattern: smart home device creation.

Callers ask the factory for a device by kind; the factory picks the
concrete class, assigns an id, initializes the device and logs it.

Example:
    >>> from patterns.creational import SmartDeviceFactory
    >>>
    >>> factory = SmartDeviceFactory()
    >>> light = factory.create_device("light", "living-room-light")
    >>> light.perform_action("setBrightness", {"level": 75})
    True
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from beartype import beartype

log = logging.getLogger(__name__)


@beartype
@dataclass
class DeviceStatus:
    """Health snapshot of a device."""
    is_online: bool = True
    battery_level: int | None = None
    last_activity: datetime = field(default_factory=datetime.now)
    error_state: str | None = None


@runtime_checkable
class SmartDevice(Protocol):
    @property
    def id(self) -> str:
        ...

    @property
    def type(self) -> str:
        ...

    @property
    def capabilities(self) -> list[str]:
        ...

    def initialize(self) -> None:
        ...

    def get_status(self) -> DeviceStatus:
        ...

    def perform_action(self, action: str, params: dict[str, Any] | None = None) -> bool:
        ...


class _Device:
    """Shared id/status bookkeeping for the concrete devices."""

    type = "Device"
    capabilities: list[str] = []
    ready_message = "initialized"

    def __init__(self, device_id: str, status: DeviceStatus | None = None) -> None:
        if not device_id.strip():
            raise ValueError("Device ID cannot be empty")
        self._id = device_id
        self._status = status or DeviceStatus()

    @property
    def id(self) -> str:
        return self._id

    def initialize(self) -> None:
        print(f"[{self._id}] {self.type} {self.ready_message}")
        self._status.last_activity = datetime.now()

    def get_status(self) -> DeviceStatus:
        return replace(self._status)

    def perform_action(self, action: str, params: dict[str, Any] | None = None) -> bool:
        self._status.last_activity = datetime.now()
        handler = getattr(self, f"_do_{action}", None)
        if action not in self.capabilities or handler is None:
            print(f"[{self._id}] Unknown action: {action}")
            return False
        try:
            return handler(params or {})
        except (KeyError, TypeError, ValueError) as error:
            self._status.error_state = str(error)
            return False


class SmartLight(_Device):
    type = "Smart Light"
    capabilities = ["toggle", "setBrightness", "setColor", "schedule"]
    ready_message = "initialized - Ready for commands"

    def __init__(self, device_id: str) -> None:
        super().__init__(device_id)
        self.is_on = False
        self.brightness = 100
        self.color = "white"

    def _do_toggle(self, params: dict[str, Any]) -> bool:
        self.is_on = not self.is_on
        print(f"[{self.id}] Light {'ON' if self.is_on else 'OFF'}")
        return True

    def _do_setBrightness(self, params: dict[str, Any]) -> bool:
        level = params.get("level")
        if not isinstance(level, int) or not 0 <= level <= 100:
            return False
        self.brightness = level
        print(f"[{self.id}] Brightness set to {level}%")
        return True

    def _do_setColor(self, params: dict[str, Any]) -> bool:
        color = params.get("color")
        if not color:
            return False
        self.color = color
        print(f"[{self.id}] Color set to {color}")
        return True


class SmartCamera(_Device):
    type = "Smart Camera"
    capabilities = ["startRecording", "stopRecording", "setResolution", "takeSnapshot"]
    ready_message = "initialized - Surveillance ready"
    resolutions = ("720p", "1080p", "4K")

    def __init__(self, device_id: str) -> None:
        super().__init__(device_id, DeviceStatus(battery_level=85))
        self.is_recording = False
        self.resolution = "1080p"

    def _do_startRecording(self, params: dict[str, Any]) -> bool:
        if self.is_recording:
            return False
        self.is_recording = True
        print(f"[{self.id}] Recording started at {self.resolution}")
        return True

    def _do_stopRecording(self, params: dict[str, Any]) -> bool:
        if not self.is_recording:
            return False
        self.is_recording = False
        print(f"[{self.id}] Recording stopped")
        return True

    def _do_setResolution(self, params: dict[str, Any]) -> bool:
        resolution = params.get("resolution")
        if resolution not in self.resolutions:
            return False
        self.resolution = resolution
        print(f"[{self.id}] Resolution set to {resolution}")
        return True

    def _do_takeSnapshot(self, params: dict[str, Any]) -> bool:
        print(f"[{self.id}] Snapshot taken at {self.resolution}")
        return True


class SmartThermostat(_Device):
    type = "Smart Thermostat"
    capabilities = ["setTemperature", "setMode", "getTemperature", "schedule"]
    ready_message = "initialized - Climate control ready"
    modes = ("heating", "cooling", "auto", "off")

    def __init__(self, device_id: str) -> None:
        super().__init__(device_id)
        self.temperature = 72
        self.target_temperature = 72
        self.mode = "auto"

    def _do_setTemperature(self, params: dict[str, Any]) -> bool:
        temperature = params.get("temperature")
        if not isinstance(temperature, (int, float)) or not 50 <= temperature <= 90:
            return False
        self.target_temperature = temperature
        print(f"[{self.id}] Target temperature set to {temperature}°F")
        return True

    def _do_setMode(self, params: dict[str, Any]) -> bool:
        mode = params.get("mode")
        if mode not in self.modes:
            return False
        self.mode = mode
        print(f"[{self.id}] Mode set to {mode}")
        return True

    def _do_getTemperature(self, params: dict[str, Any]) -> bool:
        print(f"[{self.id}] Current: {self.temperature}°F, Target: {self.target_temperature}°F")
        return True


DEVICE_TYPES: dict[str, type[_Device]] = {
    "light": SmartLight,
    "camera": SmartCamera,
    "thermostat": SmartThermostat,
}


class SmartDeviceFactory:
    """Creates and initializes devices by kind."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else log
        self._counter = 0

    def create_device(self, kind: str, custom_id: str | None = None) -> SmartDevice:
        """Create a device.

        Args:
            kind: One of ``supported_types()`` (case-insensitive)
            custom_id: Device id; defaults to ``<kind>-<n>``

        Raises:
            ValueError: For an empty or unknown kind
        """
        if not isinstance(kind, str) or not kind:
            raise ValueError("Device type must be a non-empty string")

        try:
            cls = DEVICE_TYPES.get(kind.lower())
            if cls is None:
                raise ValueError(
                    f"Unknown device type: {kind}. "
                    f"Supported types: {', '.join(self.supported_types())}"
                )

            device_id = custom_id or f"{kind}-{self._counter + 1}"
            device = cls(device_id)
            device.initialize()
            self._counter += 1
        except ValueError as error:
            self._logger.error(f"Failed to create device of type '{kind}': {error}")
            raise

        self._logger.info(f"Created device: {device.type} with ID: {device_id}")
        return device

    @staticmethod
    def supported_types() -> list[str]:
        return list(DEVICE_TYPES)

    @property
    def device_count(self) -> int:
        return self._counter
