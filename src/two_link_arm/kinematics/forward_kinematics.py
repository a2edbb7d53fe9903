"""Forward kinematics of the planar two-link arm."""

from typing import List, Optional

import numpy as np

from two_link_arm.robot_types import ArmGeometry, EndEffectorPose, JointState


def forward_kinematics(
    state: JointState,
    geometry: Optional[ArmGeometry] = None,
) -> EndEffectorPose:
    """Compute the end-effector position for a joint state.

    Args:
        state: Joint state; only the angles are used
        geometry: Link lengths (default: 0.5 m and 0.3 m)

    Returns:
        End-effector position in the base frame
    """
    if geometry is None:
        geometry = ArmGeometry()

    l1 = geometry.link1_length
    l2 = geometry.link2_length
    elbow = state.theta1 + state.theta2

    x = l1 * np.cos(state.theta1) + l2 * np.cos(elbow)
    y = l1 * np.sin(state.theta1) + l2 * np.sin(elbow)
    return EndEffectorPose(x=float(x), y=float(y))


def solve_trajectory(
    states: List[JointState],
    geometry: Optional[ArmGeometry] = None,
) -> List[EndEffectorPose]:
    """Compute the end-effector position of every state, in order."""
    if geometry is None:
        geometry = ArmGeometry()
    return [forward_kinematics(state, geometry) for state in states]
