"""Data types shared across the trajectory pipeline.

This module defines the joint-space state of the arm, the Cartesian pose of
its tip, and the link geometry used by forward kinematics.
"""

import math
from dataclasses import dataclass

from two_link_arm.errors import InvalidConfiguration, InvalidInput

DEFAULT_LINK1_LENGTH = 0.5  # [m]
DEFAULT_LINK2_LENGTH = 0.3  # [m]
DEFAULT_VELOCITY_LIMIT = 1.0  # [rad/s]
DEFAULT_NUM_SAMPLES = 21  # includes endpoints


def sign(value: float) -> float:
    """Return -1.0 for negative input and 1.0 otherwise (zero included)."""
    if value < 0:
        return -1.0
    return 1.0


@dataclass(frozen=True)
class JointState:
    """One sample of the arm configuration.

    Attributes:
        theta1: Joint 1 angle (radians)
        theta2: Joint 2 angle (radians)
        dtheta1: Joint 1 commanded velocity (radians/second)
        dtheta2: Joint 2 commanded velocity (radians/second)
    """

    theta1: float
    theta2: float
    dtheta1: float = 0.0
    dtheta2: float = 0.0

    def is_finite(self) -> bool:
        """Check that no angle or velocity is NaN or infinite."""
        return all(
            math.isfinite(v)
            for v in (self.theta1, self.theta2, self.dtheta1, self.dtheta2)
        )

    def ensure_finite(self) -> "JointState":
        """Return self, raising InvalidInput if any field is NaN or infinite."""
        if not self.is_finite():
            raise InvalidInput(f"Joint state must be finite, got {self}")
        return self


@dataclass(frozen=True)
class EndEffectorPose:
    """Position of the arm tip in the base frame.

    Attributes:
        x: X coordinate (meters)
        y: Y coordinate (meters)
    """

    x: float
    y: float


@dataclass(frozen=True)
class ArmGeometry:
    """Link lengths of the planar two-link arm (meters)."""

    link1_length: float = DEFAULT_LINK1_LENGTH
    link2_length: float = DEFAULT_LINK2_LENGTH

    def __post_init__(self) -> None:
        for name in ("link1_length", "link2_length"):
            length = getattr(self, name)
            if not math.isfinite(length) or length <= 0:
                raise InvalidConfiguration(
                    f"{name} must be a positive length, got {length}"
                )
