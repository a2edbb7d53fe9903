"""Tests for the pipeline controller."""

import logging
import math

import pytest

from two_link_arm.control.robot_controller import PipelineResult, RobotController
from two_link_arm.control.velocity_filter import VelocityLimitFilter
from two_link_arm.errors import InvalidConfiguration, InvalidInput
from two_link_arm.robot_types import ArmGeometry, JointState
from two_link_arm.utils.config_loader import PipelineConfig


def test_run_default_pipeline():
    """Test the default run produces aligned outputs."""
    result = RobotController().run()

    assert isinstance(result, PipelineResult)
    assert len(result.raw_trajectory) == 21
    assert len(result.filtered_trajectory) == 21
    assert len(result.poses) == 21
    assert result.processing_time >= 0.0

    assert result.raw_trajectory[0].dtheta1 == -math.pi
    assert result.filtered_trajectory[0].dtheta1 == -1.0

    assert result.poses[0].x == pytest.approx(0.8)
    assert result.poses[0].y == pytest.approx(0.0)
    assert result.poses[20].x == pytest.approx(-0.5 - 0.3 * math.sqrt(3) / 2)
    assert result.poses[20].y == pytest.approx(0.15)


def test_default_filter_uses_config_limit():
    """Test the controller builds a velocity filter from the config."""
    controller = RobotController(PipelineConfig(velocity_limit=0.25))

    assert isinstance(controller.joint_filter, VelocityLimitFilter)
    assert controller.joint_filter.limit == 0.25

    result = controller.run()
    assert all(abs(s.dtheta2) == 0.25 for s in result.filtered_trajectory)


def test_custom_filter_replaces_velocity_limit():
    """Test a custom filter is used in place of the velocity limit."""
    result = RobotController(joint_filter=lambda state: state).run()

    assert result.filtered_trajectory == result.raw_trajectory


def test_geometry_used_for_kinematics():
    """Test the poses use the configured link lengths."""
    config = PipelineConfig(geometry=ArmGeometry(1.0, 2.0))

    result = RobotController(config).run()

    assert result.poses[0].x == pytest.approx(3.0)


def test_invalid_configuration_rejected_before_run():
    """Test an invalid config fails when the controller is built."""
    with pytest.raises(InvalidConfiguration):
        RobotController(PipelineConfig(num_samples=1))

    with pytest.raises(InvalidConfiguration):
        RobotController(PipelineConfig(velocity_limit=0.0))


def test_non_finite_goal_rejected():
    """Test a NaN goal angle fails the run."""
    controller = RobotController(PipelineConfig(goal=JointState(math.nan, 0.0)))

    with pytest.raises(InvalidInput):
        controller.run()


def test_controller_accepts_config_dict():
    """Test a parsed configuration dictionary can drive the controller."""
    controller = RobotController(
        {"pipeline": {"num_samples": 3, "velocity_limit": 0.5}}
    )

    assert isinstance(controller.config, PipelineConfig)
    assert controller.joint_filter.limit == 0.5

    result = controller.run()
    assert len(result.poses) == 3
    assert all(abs(s.dtheta1) == 0.5 for s in result.filtered_trajectory)


def test_controller_empty_dict_uses_defaults():
    """Test an empty dictionary falls back to the default parameters."""
    assert RobotController({}).config == PipelineConfig()


def test_controller_rejects_invalid_config_dict():
    """Test invalid dictionary values raise InvalidConfiguration."""
    with pytest.raises(InvalidConfiguration):
        RobotController({"pipeline": {"num_samples": 1}})

    with pytest.raises(InvalidConfiguration):
        RobotController({"pipeline": {"link1_length": "long"}})


def test_controller_rejects_unknown_config_type():
    """Test a config that is neither a dict nor a PipelineConfig is rejected."""
    with pytest.raises(InvalidConfiguration):
        RobotController(["num_samples", 3])


def test_run_logs_stage_progress(caplog):
    """Test each pipeline stage reports completion at INFO."""
    caplog.set_level(logging.INFO, logger="two_link_arm")

    RobotController().run()

    messages = [
        r.getMessage()
        for r in caplog.records
        if r.name == "two_link_arm.control.robot_controller"
        and r.levelno == logging.INFO
    ]
    assert "Generated trajectory with 21 points" in messages
    assert any(m.startswith("Applied rate filter") for m in messages)
    assert any(m.startswith("Computed 21 end-effector poses") for m in messages)
