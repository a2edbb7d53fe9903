"""Geometric helpers for the arm workspace.

This module provides reach-envelope checks for end-effector poses.
"""

from typing import Tuple

import numpy as np

from two_link_arm.robot_types import ArmGeometry, EndEffectorPose


def reach_radius(pose: EndEffectorPose) -> float:
    """Compute the distance of a pose from the arm base.

    Args:
        pose: End-effector pose

    Returns:
        Euclidean distance to the origin (meters)
    """
    return float(np.hypot(pose.x, pose.y))


def reach_envelope(geometry: ArmGeometry) -> Tuple[float, float]:
    """Compute the annulus reachable by the arm tip.

    Args:
        geometry: Arm link lengths

    Returns:
        (inner_radius, outer_radius) as (|L1 - L2|, L1 + L2)
    """
    return (
        abs(geometry.link1_length - geometry.link2_length),
        geometry.link1_length + geometry.link2_length,
    )


def within_reach_envelope(
    pose: EndEffectorPose,
    geometry: ArmGeometry,
    tolerance: float = 1e-9,
) -> bool:
    """Check if a pose lies in the reachable annulus.

    Args:
        pose: End-effector pose to check
        geometry: Arm link lengths
        tolerance: Slack allowed on both bounds (meters)

    Returns:
        True if the pose is reachable, False otherwise
    """
    inner, outer = reach_envelope(geometry)
    radius = reach_radius(pose)
    return inner - tolerance <= radius <= outer + tolerance
