"""Joint-space trajectory generation for the two-link arm.

This module interpolates linearly between a start and a goal joint state.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple, Union, overload

import numpy as np

from two_link_arm.errors import InvalidConfiguration
from two_link_arm.robot_types import JointState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trajectory(Sequence[JointState]):
    """Ordered, fixed-length sequence of joint states.

    Index 0 is the start configuration and the last index is the goal.

    Attributes:
        samples: Joint state at each sample
        alphas: Interpolation fraction of each sample, in [0, 1]
    """

    samples: Tuple[JointState, ...]
    alphas: np.ndarray = field(compare=False, repr=False)

    @overload
    def __getitem__(self, index: int) -> JointState: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[JointState, ...]: ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[JointState, Tuple[JointState, ...]]:
        return self.samples[index]

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[JointState]:
        return iter(self.samples)

    @property
    def start(self) -> JointState:
        """First sample, the start configuration."""
        return self.samples[0]

    @property
    def goal(self) -> JointState:
        """Last sample, the goal configuration."""
        return self.samples[-1]

    def with_samples(self, samples: Sequence[JointState]) -> "Trajectory":
        """Return a trajectory with new samples and the same alphas.

        Raises:
            ValueError: If the number of samples changes
        """
        if len(samples) != len(self.samples):
            raise ValueError(
                f"Expected {len(self.samples)} samples, got {len(samples)}"
            )
        return Trajectory(samples=tuple(samples), alphas=self.alphas)

    def to_array(self) -> np.ndarray:
        """Stack samples into an (N, 4) array of theta1, theta2, dtheta1, dtheta2."""
        return np.array(
            [[s.theta1, s.theta2, s.dtheta1, s.dtheta2] for s in self.samples],
            dtype=np.float64,
        )


def interpolation_alpha(index: int, num_samples: int) -> float:
    """Fraction of the move completed at a sample index.

    Args:
        index: Sample index in [0, num_samples)
        num_samples: Total number of samples, endpoints included

    Returns:
        index / (num_samples - 1), clamped to [0, 1]

    Raises:
        InvalidConfiguration: If num_samples is below 2
    """
    _check_num_samples(num_samples)
    alpha = index / (num_samples - 1)
    return float(np.clip(alpha, 0.0, 1.0))


def interpolate_linear(
    start: JointState,
    goal: JointState,
    alpha: float,
) -> JointState:
    """Linearly interpolate the joint angles between start and goal.

    The velocity fields are set to the total displacement of each joint,
    not to a derivative. The velocity filter later limits them to the
    allowed rate.

    Args:
        start: Starting joint state
        goal: Final joint state
        alpha: Fraction of the move in [0, 1]; values outside are clamped

    Returns:
        Interpolated joint state
    """
    alpha = min(max(alpha, 0.0), 1.0)

    d_theta1 = goal.theta1 - start.theta1
    d_theta2 = goal.theta2 - start.theta2

    # Same as start + alpha * (goal - start), but bit-exact at alpha 0 and 1
    return JointState(
        theta1=(1.0 - alpha) * start.theta1 + alpha * goal.theta1,
        theta2=(1.0 - alpha) * start.theta2 + alpha * goal.theta2,
        dtheta1=d_theta1,
        dtheta2=d_theta2,
    )


def generate_trajectory(
    start: JointState,
    goal: JointState,
    num_samples: int,
) -> Trajectory:
    """Generate a linear joint-space trajectory from start to goal.

    Args:
        start: Starting joint state
        goal: Target joint state
        num_samples: Number of samples, both endpoints included

    Returns:
        Trajectory with num_samples joint states

    Raises:
        InvalidConfiguration: If num_samples is below 2
        InvalidInput: If start or goal has non-finite values
    """
    _check_num_samples(num_samples)
    start.ensure_finite()
    goal.ensure_finite()

    alphas = np.clip(
        np.arange(num_samples, dtype=np.float64) / (num_samples - 1), 0.0, 1.0
    )
    samples = tuple(
        interpolate_linear(start, goal, float(alpha)) for alpha in alphas
    )

    logger.debug(
        f"Generated {num_samples} samples from "
        f"({start.theta1:.4f}, {start.theta2:.4f}) to "
        f"({goal.theta1:.4f}, {goal.theta2:.4f})"
    )
    return Trajectory(samples=samples, alphas=alphas)


def _check_num_samples(num_samples: int) -> None:
    if isinstance(num_samples, bool) or not isinstance(
        num_samples, (int, np.integer)
    ):
        raise InvalidConfiguration(
            f"num_samples must be an integer, got {num_samples!r}"
        )
    if num_samples < 2:
        raise InvalidConfiguration(
            f"num_samples must be at least 2, got {num_samples}"
        )
