"""Pytest configuration and shared fixtures."""

import math

import pytest

from two_link_arm.control.trajectory_planner import generate_trajectory
from two_link_arm.robot_types import ArmGeometry, JointState


@pytest.fixture
def start_state():
    """Fixture providing the default start configuration."""
    return JointState(theta1=0.0, theta2=0.0)


@pytest.fixture
def goal_state():
    """Fixture providing the default goal configuration."""
    return JointState(theta1=-math.pi, theta2=-math.pi / 6.0)


@pytest.fixture
def geometry():
    """Fixture providing the default 0.5 m / 0.3 m arm."""
    return ArmGeometry(link1_length=0.5, link2_length=0.3)


@pytest.fixture
def default_trajectory(start_state, goal_state):
    """Fixture providing the default 21-sample trajectory."""
    return generate_trajectory(start_state, goal_state, 21)
