"""Kinematics of the planar two-link arm."""

from two_link_arm.kinematics.forward_kinematics import (
    forward_kinematics,
    solve_trajectory,
)

__all__ = ["forward_kinematics", "solve_trajectory"]
