"""Tests for the shared settings store and the smart device factory."""

import copy
import logging

import pytest

from patterns.creational import (
    GlobalSettings,
    SmartCamera,
    SmartDevice,
    SmartDeviceFactory,
    SmartLight,
    SmartThermostat,
)


@pytest.fixture(autouse=True)
def info_logs(caplog):
    caplog.set_level(logging.INFO, logger="patterns")
    return caplog


# =============================================================================
# Settings Tests
# =============================================================================


class TestGlobalSettings:
    """Test validated settings with change history."""

    @pytest.fixture
    def settings(self):
        return GlobalSettings()

    def test_defaults(self, settings):
        assert settings.all_settings() == {
            "appName": "Smart Transport System",
            "version": "1.0.0",
            "debugMode": False,
            "maxRetries": 3,
            "timeoutMs": 5000,
        }

    def test_creation_is_logged(self, caplog):
        GlobalSettings()
        assert "GlobalSettings instance created" in caplog.messages

    def test_set_records_change(self, settings, caplog):
        settings.set("maxRetries", 5)

        assert settings.get("maxRetries") == 5
        change = settings.get_change_history()[-1]
        assert (change.key, change.old_value, change.new_value) == ("maxRetries", 3, 5)
        assert "[Settings] maxRetries changed from 3 to 5" in caplog.messages

    def test_new_key_has_no_old_value(self, settings):
        settings.set("theme", "dark")
        assert settings.get_change_history()[-1].old_value is None

    @pytest.mark.parametrize(
        "key,value",
        [
            ("maxRetries", 42),
            ("maxRetries", -1),
            ("maxRetries", True),
            ("timeoutMs", 500),
            ("timeoutMs", 5000.0),
            ("debugMode", "yes"),
        ],
    )
    def test_validation(self, settings, key, value):
        before = settings.all_settings()

        with pytest.raises(ValueError, match=f"Invalid value for setting '{key}'"):
            settings.set(key, value)

        assert settings.all_settings() == before
        assert settings.get_change_history() == []

    def test_empty_key(self, settings):
        with pytest.raises(ValueError):
            settings.set("", 1)
        with pytest.raises(ValueError):
            settings.get("")

    def test_get_default(self, settings):
        assert settings.get("missing") is None
        assert settings.get("missing", "fallback") == "fallback"

    def test_remove(self, settings):
        assert settings.has("version")
        assert settings.remove("version") is True
        assert not settings.has("version")
        assert settings.remove("version") is False

    def test_all_settings_is_a_copy(self, settings):
        settings.all_settings()["maxRetries"] = 9
        assert settings.get("maxRetries") == 3

    def test_shared_instance_sees_updates(self, settings):
        """Every consumer handed the instance observes the same store."""
        ui, network = settings, settings
        ui.set("debugMode", True)
        assert network.get("debugMode") is True

    def test_cannot_be_copied(self, settings):
        with pytest.raises(TypeError):
            copy.copy(settings)
        with pytest.raises(TypeError):
            copy.deepcopy(settings)


# =============================================================================
# Factory Tests
# =============================================================================


class TestSmartDeviceFactory:
    """Test device creation by kind."""

    @pytest.fixture
    def factory(self):
        return SmartDeviceFactory()

    def test_creates_concrete_types(self, factory, capsys):
        light = factory.create_device("light", "living-room-light")
        camera = factory.create_device("CAMERA")
        thermostat = factory.create_device("thermostat")

        assert isinstance(light, SmartLight)
        assert isinstance(camera, SmartCamera)
        assert isinstance(thermostat, SmartThermostat)
        assert (light.id, camera.id, thermostat.id) == ("living-room-light", "CAMERA-2", "thermostat-3")
        assert factory.device_count == 3
        assert "[living-room-light] Smart Light initialized - Ready for commands" in capsys.readouterr().out

    def test_creation_is_logged(self, factory, caplog):
        factory.create_device("light", "hall")
        assert "Created device: Smart Light with ID: hall" in caplog.messages

    def test_unknown_type(self, factory, caplog):
        with pytest.raises(ValueError, match="Unknown device type: toaster"):
            factory.create_device("toaster")

        assert factory.device_count == 0
        assert any(m.startswith("Failed to create device of type 'toaster'") for m in caplog.messages)

    def test_failed_creation_is_not_counted(self, factory):
        """A device that fails to build leaves the count and next id alone."""
        with pytest.raises(ValueError, match="Device ID cannot be empty"):
            factory.create_device("light", "   ")

        assert factory.device_count == 0
        assert factory.create_device("light").id == "light-1"
        assert factory.device_count == 1

    def test_empty_type(self, factory):
        with pytest.raises(ValueError):
            factory.create_device("")

    def test_supported_types(self, factory):
        assert factory.supported_types() == ["light", "camera", "thermostat"]

    def test_devices_satisfy_protocol(self, factory):
        for kind in factory.supported_types():
            assert isinstance(factory.create_device(kind), SmartDevice)


class TestDevices:
    """Test device actions."""

    def test_light_actions(self, capsys):
        light = SmartLight("lamp")

        assert light.perform_action("toggle")
        assert light.is_on
        assert light.perform_action("setBrightness", {"level": 75})
        assert light.brightness == 75
        assert not light.perform_action("setBrightness", {"level": 150})
        assert light.brightness == 75
        assert "[lamp] Light ON" in capsys.readouterr().out

    def test_unknown_action(self, capsys):
        light = SmartLight("lamp")

        assert not light.perform_action("fly")
        assert "[lamp] Unknown action: fly" in capsys.readouterr().out

    def test_camera_recording(self):
        camera = SmartCamera("cam")

        assert not camera.perform_action("stopRecording")
        assert camera.perform_action("startRecording")
        assert not camera.perform_action("startRecording")
        assert camera.perform_action("setResolution", {"resolution": "4K"})
        assert not camera.perform_action("setResolution", {"resolution": "8K"})
        assert camera.resolution == "4K"

    def test_camera_status_is_a_copy(self):
        camera = SmartCamera("cam")
        status = camera.get_status()
        status.battery_level = 0

        assert camera.get_status().battery_level == 85

    def test_thermostat_range(self):
        thermostat = SmartThermostat("main")

        assert thermostat.perform_action("setTemperature", {"temperature": 68})
        assert not thermostat.perform_action("setTemperature", {"temperature": 100})
        assert thermostat.target_temperature == 68
        assert thermostat.perform_action("setMode", {"mode": "cooling"})
        assert not thermostat.perform_action("setMode", {"mode": "turbo"})

    def test_blank_id(self):
        with pytest.raises(ValueError):
            SmartLight("  ")
