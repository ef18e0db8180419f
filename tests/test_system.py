"""Unit tests for the RocketSystem mission state machine.

Covers the launch lifecycle, flight arithmetic, stage separation, orbit
insertion, fuel exhaustion, observer fan-out and telemetry history.
"""

import logging

import numpy as np
import pytest
from numpy.testing import assert_allclose

from rocketsim import (
    FlightResult,
    InvalidStateError,
    MissionStatus,
    RocketState,
    RocketSystem,
    SimConfig,
    Stage2Strategy,
    UnknownStageError,
)
from rocketsim.simulation import PRE_LAUNCH_SYSTEMS


@pytest.fixture
def config():
    """Deterministic configuration without simulated faults."""
    return SimConfig(transient_fault_probability=0.0, seed=0)


@pytest.fixture
def launched(config):
    """A system that has completed checks and launched."""
    system = RocketSystem(config=config)
    system.perform_pre_launch_checks()
    system.launch()
    return system


def in_flight(stage: int, fuel: float, altitude: float = 0.0, config=None) -> RocketSystem:
    """Build a system already in flight at the given stage."""
    state = RocketState(
        stage=stage,
        fuel=fuel,
        altitude=altitude,
        status=MissionStatus.IN_FLIGHT,
    )
    return RocketSystem(state=state, config=config or SimConfig(transient_fault_probability=0.0))


class Recorder:
    """Observer that keeps every snapshot it receives."""

    def __init__(self):
        self.states = []

    def on_state_update(self, state):
        self.states.append(state)


# =============================================================================
# Lifecycle Tests
# =============================================================================


class TestLifecycle:
    """Test the pre-flight transitions."""

    def test_initial_state(self, config):
        system = RocketSystem(config=config)
        state = system.get_state()

        assert state == RocketState()
        assert system.current_stage is None

    def test_checks_make_ready(self, config, caplog):
        caplog.set_level(logging.INFO, logger="rocketsim")
        system = RocketSystem(config=config)

        system.perform_pre_launch_checks()

        assert system.get_state().status is MissionStatus.READY_TO_LAUNCH
        for name in PRE_LAUNCH_SYSTEMS:
            assert f"{name}: OK" in caplog.messages
        assert "All systems are 'Go' for launch." in caplog.messages

    def test_transient_faults_always_recover(self, caplog):
        """Faults are reported and retried but never block launch."""
        caplog.set_level(logging.INFO, logger="rocketsim")
        system = RocketSystem(config=SimConfig(transient_fault_probability=1.0))

        system.perform_pre_launch_checks()

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == len(PRE_LAUNCH_SYSTEMS)
        assert "Flight computer: Transient error detected. Retrying..." in caplog.messages
        assert "Flight computer: Retry successful." in caplog.messages
        assert system.get_state().status is MissionStatus.READY_TO_LAUNCH

    def test_no_faults_when_probability_zero(self, config, caplog):
        caplog.set_level(logging.INFO, logger="rocketsim")
        RocketSystem(config=config).perform_pre_launch_checks()

        assert not [r for r in caplog.records if r.levelno == logging.WARNING]

    def test_launch_sets_stage_one(self, launched):
        state = launched.get_state()

        assert state.stage == 1
        assert state.status is MissionStatus.IN_FLIGHT
        assert state.fuel == 100.0
        assert launched.current_stage.stage_name == "1"

    def test_launch_before_checks(self, config, caplog):
        """Launching from PRE_LAUNCH raises and leaves the state alone."""
        caplog.set_level(logging.INFO, logger="rocketsim")
        system = RocketSystem(config=config)

        with pytest.raises(InvalidStateError, match="Pre-launch checks not completed"):
            system.launch()

        assert system.get_state() == RocketState()
        assert "Launch failed: Cannot launch: Pre-launch checks not completed" in caplog.messages

    def test_advance_before_launch(self, config):
        system = RocketSystem(config=config)

        with pytest.raises(InvalidStateError, match="Rocket is not in flight"):
            system.advance_time(5)

    def test_get_state_returns_copy(self, launched):
        state = launched.get_state()
        state.fuel = 1.0

        assert launched.get_state().fuel == 100.0

    def test_constructor_state_is_not_shared(self, config):
        """The caller's state object cannot reach into the system."""
        state = RocketState()
        system = RocketSystem(state=state, config=config)

        state.fuel = 1.0
        state.status = MissionStatus.IN_FLIGHT

        assert system.get_state() == RocketState()

    def test_unknown_stage_in_flight(self):
        """A system cannot be built in flight on a stage with no strategy."""
        with pytest.raises(UnknownStageError):
            in_flight(stage=3, fuel=50.0)


# =============================================================================
# Flight Tests
# =============================================================================


class TestFlight:
    """Test the per-second flight update."""

    def test_ten_seconds_of_stage_one(self, launched):
        launched.advance_time(10)
        state = launched.get_state()

        assert state.stage == 1
        assert state.status is MissionStatus.IN_FLIGHT
        assert_allclose([state.fuel, state.altitude, state.speed], [90.0, 100.0, 10000.0])
        assert state.time == 10.0

    def test_orbit_reached_on_stage_one(self, launched, caplog):
        """Stage 1 reaches 160 km at t=16 with fuel to spare; the run stops there."""
        caplog.set_level(logging.INFO, logger="rocketsim")
        launched.advance_time(10)
        launched.advance_time(50)
        state = launched.get_state()

        assert state.status is MissionStatus.ORBIT_ACHIEVED
        assert state.stage == 1
        assert_allclose([state.fuel, state.altitude, state.speed], [84.0, 160.0, 16000.0])
        assert state.time == 16.0
        assert "Orbit achieved! Mission Successful." in caplog.messages

    def test_terminal_state_rejects_advance(self, launched):
        launched.advance_time(60)
        before = launched.get_state()

        with pytest.raises(InvalidStateError):
            launched.advance_time(10)

        assert launched.get_state() == before

    def test_stage_separation(self, caplog):
        caplog.set_level(logging.INFO, logger="rocketsim")
        system = in_flight(stage=1, fuel=31.0)

        system.advance_time(1)
        state = system.get_state()

        assert state.stage == 2
        assert state.status is MissionStatus.IN_FLIGHT
        assert_allclose([state.fuel, state.altitude, state.speed], [30.0, 10.0, 1000.0])
        assert isinstance(system.current_stage, Stage2Strategy)
        assert "Stage 1 complete. Separating stage." in caplog.messages
        assert "Entering Stage 2." in caplog.messages

    def test_stage_two_reaches_orbit(self):
        """After separation stage 2 climbs 15 km/s until 160 km."""
        system = in_flight(stage=1, fuel=31.0)
        system.advance_time(100)
        state = system.get_state()

        assert state.status is MissionStatus.ORBIT_ACHIEVED
        assert state.stage == 2
        assert_allclose([state.fuel, state.altitude, state.speed], [25.0, 160.0, 9000.0])
        assert state.time == 11.0

    def test_orbit_wins_over_separation(self):
        """Orbit insertion is checked before separation in the same second."""
        system = in_flight(stage=1, fuel=31.0, altitude=150.0)
        system.advance_time(1)
        state = system.get_state()

        assert state.status is MissionStatus.ORBIT_ACHIEVED
        assert state.stage == 1
        assert state.fuel == 30.0

    def test_orbit_needs_minimum_fuel(self):
        """Above 160 km with under 5% fuel the rocket keeps burning and fails."""
        system = in_flight(stage=2, fuel=5.0, altitude=150.0)
        system.advance_time(20)
        state = system.get_state()

        assert state.status is MissionStatus.MISSION_FAILED
        assert state.fuel == 0.0
        assert state.altitude == 285.0
        assert state.time == 10.0

    @pytest.mark.parametrize("stage,fuel", [(1, 1.0), (2, 0.5)])
    def test_fuel_exhaustion(self, stage, fuel, caplog):
        """Running dry fails the mission without moving the rocket."""
        caplog.set_level(logging.INFO, logger="rocketsim")
        system = in_flight(stage=stage, fuel=fuel)

        system.advance_time(5)
        state = system.get_state()

        assert state.status is MissionStatus.MISSION_FAILED
        assert state.fuel == 0.0
        assert state.altitude == 0.0
        assert state.speed == 0.0
        assert state.time == 1.0
        assert "Mission Failed due to Insufficient fuel." in caplog.messages

    def test_zero_seconds_is_noop(self, launched):
        launched.advance_time(0)
        assert launched.get_state().time == 0.0


# =============================================================================
# Observer Tests
# =============================================================================


class TestObservers:
    """Test observer notification."""

    def test_every_change_is_pushed(self, config):
        system = RocketSystem(config=config)
        recorder = Recorder()
        system.add_observer(recorder)

        system.perform_pre_launch_checks()
        system.launch()
        system.advance_time(3)

        statuses = [s.status for s in recorder.states]
        assert statuses == [MissionStatus.READY_TO_LAUNCH] + [MissionStatus.IN_FLIGHT] * 4
        assert [s.time for s in recorder.states] == [0.0, 0.0, 1.0, 2.0, 3.0]

    def test_terminal_transitions_are_pushed(self):
        system = in_flight(stage=1, fuel=1.0)
        recorder = Recorder()
        system.add_observer(recorder)

        system.advance_time(1)

        assert [s.status for s in recorder.states] == [MissionStatus.MISSION_FAILED]

    def test_observers_receive_copies(self, launched):
        class Meddler:
            def on_state_update(self, state):
                state.fuel = 0.0

        launched.add_observer(Meddler())
        launched.advance_time(1)

        assert launched.get_state().fuel == 99.0

    def test_failing_observer_stops_later_observers(self, config):
        """Observers run in registration order; one that raises ends the fan-out."""
        calls = []

        class First:
            def on_state_update(self, state):
                calls.append("first")

        class Broken:
            def on_state_update(self, state):
                calls.append("broken")
                raise RuntimeError("display offline")

        class After:
            def on_state_update(self, state):
                calls.append("after")

        system = RocketSystem(config=config)
        for observer in (First(), Broken(), After()):
            system.add_observer(observer)

        with pytest.raises(RuntimeError):
            system.perform_pre_launch_checks()

        assert calls == ["first", "broken"]

    def test_observer_error_propagates(self, config, caplog):
        """A failing observer aborts the operation that notified it."""
        caplog.set_level(logging.INFO, logger="rocketsim")

        class Broken:
            def on_state_update(self, state):
                raise RuntimeError("display offline")

        system = RocketSystem(config=config)
        system.add_observer(Broken())

        with pytest.raises(RuntimeError, match="display offline"):
            system.perform_pre_launch_checks()

        assert "Pre-launch checks failed: Unexpected error - display offline" in caplog.messages


# =============================================================================
# History Tests
# =============================================================================


class TestHistory:
    """Test telemetry recording and FlightResult."""

    def test_history_records_each_second(self, launched):
        launched.advance_time(60)
        history = launched.get_history()

        # Pad snapshot, launch, then 16 flight seconds
        assert len(history) == 18
        assert history[0].status is MissionStatus.PRE_LAUNCH
        assert history[-1].status is MissionStatus.ORBIT_ACHIEVED

    def test_history_disabled(self):
        system = RocketSystem(config=SimConfig(record_history=False, transient_fault_probability=0.0))
        system.perform_pre_launch_checks()
        system.launch()
        system.advance_time(5)

        assert system.get_history() == []

    def test_clear_history_keeps_current(self, launched):
        launched.advance_time(5)
        launched.clear_history()

        assert launched.get_history() == [launched.get_state()]

    def test_flight_result_arrays(self, launched):
        launched.advance_time(60)
        result = FlightResult.from_system(launched)

        assert result.time[-1] == 16.0
        assert result.stage.dtype == np.int64
        assert_allclose(result.altitude.max(), 160.0)
        assert_allclose(result.speed.max(), 16000.0)
        assert np.all(np.diff(result.fuel) <= 0.0)
        assert result.final_state.status is MissionStatus.ORBIT_ACHIEVED

    def test_flight_result_dataframe(self, launched):
        launched.advance_time(60)
        df = FlightResult.from_system(launched).to_dataframe()

        assert df.columns == ["time", "stage", "fuel", "altitude", "speed", "status"]
        assert df.height == 18
        assert df["status"][-1] == "Orbit Achieved"

    def test_empty_result_has_no_final_state(self):
        with pytest.raises(ValueError):
            FlightResult(states=[]).final_state
