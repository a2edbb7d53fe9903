"""Rate limiting of commanded joint velocities.

A filter is any callable that maps one JointState to a new JointState.
``apply_filter`` runs such a callable over every sample of a trajectory.
"""

import logging
import math
from typing import Callable

from two_link_arm.control.trajectory_planner import Trajectory
from two_link_arm.errors import InvalidConfiguration
from two_link_arm.robot_types import JointState, sign

logger = logging.getLogger(__name__)

JointStateFilter = Callable[[JointState], JointState]


def clamp_rate(rate: float, limit: float) -> float:
    """Clamp a rate to [-limit, limit] while keeping its sign."""
    return sign(rate) * min(abs(rate), abs(limit))


class VelocityLimitFilter:
    """Clamp both joint velocities of a state to a maximum magnitude.

    Joint angles pass through unchanged.
    """

    def __init__(self, limit: float):
        """Initialize the filter.

        Args:
            limit: Maximum angular velocity magnitude (radians/second)

        Raises:
            InvalidConfiguration: If limit is not a positive finite number
        """
        if not math.isfinite(limit) or limit <= 0:
            raise InvalidConfiguration(
                f"velocity_limit must be positive, got {limit}"
            )
        self.limit = float(limit)

    def __call__(self, state: JointState) -> JointState:
        return JointState(
            theta1=state.theta1,
            theta2=state.theta2,
            dtheta1=clamp_rate(state.dtheta1, self.limit),
            dtheta2=clamp_rate(state.dtheta2, self.limit),
        )

    def __repr__(self) -> str:
        return f"VelocityLimitFilter(limit={self.limit})"


def apply_filter(
    trajectory: Trajectory,
    joint_filter: JointStateFilter,
) -> Trajectory:
    """Apply a per-sample filter to a trajectory.

    Args:
        trajectory: Trajectory to filter
        joint_filter: Pure function applied to each joint state

    Returns:
        New trajectory with the filtered samples, in the same order
    """
    filtered = [joint_filter(state) for state in trajectory]
    logger.debug(f"Applied {joint_filter!r} to {len(filtered)} samples")
    return trajectory.with_samples(filtered)


def apply_velocity_limit(trajectory: Trajectory, limit: float) -> Trajectory:
    """Clamp the velocities of every sample to ``limit``."""
    return apply_filter(trajectory, VelocityLimitFilter(limit))
