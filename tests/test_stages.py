"""Unit tests for propulsion stage strategies and the stage factory."""

import pytest

from rocketsim import (
    Stage1Strategy,
    Stage2Strategy,
    StageFactory,
    StageStrategy,
    UnknownStageError,
    create_stage,
)
from rocketsim.exceptions import SimulationError


class TestStageRates:
    """Test the per-second rates of each stage."""

    def test_stage1_rates(self):
        stage = Stage1Strategy()

        assert stage.fuel_consumption_rate == 1.0
        assert stage.altitude_increment == 10.0
        assert stage.speed_increment == 1000.0
        assert stage.stage_name == "1"

    def test_stage2_rates(self):
        stage = Stage2Strategy()

        assert stage.fuel_consumption_rate == 0.5
        assert stage.altitude_increment == 15.0
        assert stage.speed_increment == 800.0
        assert stage.stage_name == "2"

    def test_strategies_satisfy_protocol(self):
        assert isinstance(Stage1Strategy(), StageStrategy)
        assert isinstance(Stage2Strategy(), StageStrategy)

    def test_strategies_are_immutable(self):
        stage = Stage1Strategy()
        with pytest.raises(AttributeError):
            stage.fuel_consumption_rate = 2.0


class TestSeparation:
    """Test the separation predicate."""

    def test_stage1_separates_at_threshold(self):
        """Stage 1 is spent at 30% fuel or less."""
        stage = Stage1Strategy()

        assert not stage.should_separate(30.5)
        assert stage.should_separate(30.0)
        assert stage.should_separate(12.0)

    def test_stage2_never_separates(self):
        stage = Stage2Strategy()

        assert not stage.should_separate(100.0)
        assert not stage.should_separate(0.0)


class TestStageFactory:
    """Test stage lookup by number."""

    def test_known_stages(self):
        assert isinstance(StageFactory.create_stage(1), Stage1Strategy)
        assert isinstance(StageFactory.create_stage(2), Stage2Strategy)

    def test_module_alias(self):
        assert create_stage(2) == StageFactory.create_stage(2)

    def test_supported_stages(self):
        assert StageFactory.supported_stages() == (1, 2)

    @pytest.mark.parametrize("number", [0, 3, -1])
    def test_unknown_stage(self, number):
        """Anything but 1 or 2 is an UnknownStageError."""
        with pytest.raises(UnknownStageError) as excinfo:
            StageFactory.create_stage(number)

        assert str(excinfo.value) == f"Unknown stage: {number}"
        assert excinfo.value.stage_number == number
        assert isinstance(excinfo.value, SimulationError)
