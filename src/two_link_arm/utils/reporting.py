"""Text formatting of pipeline results for console output."""

from typing import TYPE_CHECKING, Iterator, List, Sequence, Tuple, TypeVar

from two_link_arm.errors import InvalidConfiguration
from two_link_arm.robot_types import EndEffectorPose, JointState

if TYPE_CHECKING:
    from two_link_arm.control.robot_controller import PipelineResult

T = TypeVar("T")

TITLE = "=== Robot Kinematics & Control ==="


def format_joint_state(state: JointState) -> str:
    """Format a joint state with 4 decimals, e.g. ``θ1 = 0.0000 rad | ...``.

    Args:
        state: Joint state to format

    Returns:
        Angles in rad and velocities in rad/s, separated by ``|``
    """
    return (
        f"θ1 = {state.theta1:.4f} rad | "
        f"θ2 = {state.theta2:.4f} rad | "
        f"dθ1 = {state.dtheta1:.4f} rad/s | "
        f"dθ2 = {state.dtheta2:.4f} rad/s"
    )


def format_end_effector_pose(pose: EndEffectorPose) -> str:
    """Format a pose as ``x = 0.8000 m | y = 0.0000 m``."""
    return f"x = {pose.x:.4f} m | y = {pose.y:.4f} m"


def decimate(items: Sequence[T], stride: int = 1) -> Iterator[Tuple[int, T]]:
    """Yield (index, item) for every stride-th item, starting at index 0.

    Raises:
        InvalidConfiguration: If stride is below 1
    """
    if isinstance(stride, bool) or not isinstance(stride, int) or stride < 1:
        raise InvalidConfiguration(
            f"Decimation stride must be a positive integer, got {stride!r}"
        )
    for index in range(0, len(items), stride):
        yield index, items[index]


def format_decimated_joint_states(
    states: Sequence[JointState],
    stride: int = 1,
) -> List[str]:
    """Format every stride-th joint state as ``[i] <state>``."""
    return [f"[{i}] {format_joint_state(s)}" for i, s in decimate(states, stride)]


def format_report(result: "PipelineResult", stride: int = 1) -> str:
    """Build the full text report of a pipeline run.

    Args:
        result: PipelineResult to report
        stride: Decimation used for the trajectory listings

    Returns:
        Multi-line report: start and goal states, the trajectory before and
        after the rate filter, then every end-effector pose
    """
    config = result.config
    lines = [
        TITLE,
        "",
        "Start state:",
        format_joint_state(config.start),
        "Goal state:",
        format_joint_state(config.goal),
        "",
        f"Trajectory points: {len(result.raw_trajectory)}",
        "Before rate filter",
        *format_decimated_joint_states(result.raw_trajectory, stride),
        "",
        "After rate filter",
        *format_decimated_joint_states(result.filtered_trajectory, stride),
        "",
        "End-Effector Trajectory (all points)",
    ]
    lines.extend(
        f"[{i}]  {format_end_effector_pose(pose)}"
        for i, pose in enumerate(result.poses)
    )
    return "\n".join(lines)
