"""Trajectory pipeline for a planar two-link robot arm.

The pipeline has three stages:
- Linear joint-space trajectory generation
- Joint velocity limiting
- Forward kinematics of every sample
"""

from two_link_arm.control.robot_controller import PipelineResult, RobotController
from two_link_arm.control.trajectory_planner import Trajectory, generate_trajectory
from two_link_arm.control.velocity_filter import (
    VelocityLimitFilter,
    apply_filter,
    apply_velocity_limit,
)
from two_link_arm.errors import ArmPipelineError, InvalidConfiguration, InvalidInput
from two_link_arm.kinematics.forward_kinematics import forward_kinematics
from two_link_arm.robot_types import ArmGeometry, EndEffectorPose, JointState
from two_link_arm.utils.config_loader import PipelineConfig

__version__ = "0.1.0"

__all__ = [
    "ArmGeometry",
    "ArmPipelineError",
    "EndEffectorPose",
    "InvalidConfiguration",
    "InvalidInput",
    "JointState",
    "PipelineConfig",
    "PipelineResult",
    "RobotController",
    "Trajectory",
    "VelocityLimitFilter",
    "apply_filter",
    "apply_velocity_limit",
    "forward_kinematics",
    "generate_trajectory",
]
