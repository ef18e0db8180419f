"""Creational pattern demos: shared settings (Singleton) and smart devices (Factory)."""

from patterns.creational.device_factory import (
    DeviceStatus,
    SmartCamera,
    SmartDevice,
    SmartDeviceFactory,
    SmartLight,
    SmartThermostat,
)
from patterns.creational.global_settings import GlobalSettings, SettingChange

__all__ = [
    # Settings
    "GlobalSettings",
    "SettingChange",
    # Factory
    "DeviceStatus",
    "SmartCamera",
    "SmartDevice",
    "SmartDeviceFactory",
    "SmartLight",
    "SmartThermostat",
]
