"""Example script for the two-link arm trajectory pipeline.

This script runs the pipeline with the packaged default configuration and
compares a custom rate filter against the default velocity limit.
"""

import logging
import math

from two_link_arm.control.robot_controller import RobotController
from two_link_arm.control.velocity_filter import VelocityLimitFilter
from two_link_arm.robot_types import JointState
from two_link_arm.utils.config_loader import build_pipeline_config
from two_link_arm.utils.geometry import reach_envelope, within_reach_envelope
from two_link_arm.utils.logging_config import setup_logging
from two_link_arm.utils.reporting import format_report


# Setup logging
setup_logging(log_level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main function for the trajectory demo."""
    config = build_pipeline_config()
    logger.info(f"Running pipeline with {config.num_samples} samples")

    result = RobotController(config).run()
    print(format_report(result, config.report_decimation))

    inner, outer = reach_envelope(config.geometry)
    reachable = all(
        within_reach_envelope(pose, config.geometry) for pose in result.poses
    )
    logger.info(
        f"Reach envelope [{inner:.2f}, {outer:.2f}] m, "
        f"all poses reachable: {reachable}"
    )

    # A tighter limit on joint 1 only, passed as a plain function
    slow_joint1 = VelocityLimitFilter(0.25)

    def limit_joint1(state: JointState) -> JointState:
        return JointState(
            theta1=state.theta1,
            theta2=state.theta2,
            dtheta1=slow_joint1(state).dtheta1,
            dtheta2=state.dtheta2,
        )

    custom = RobotController(config, joint_filter=limit_joint1).run()
    final = custom.filtered_trajectory.goal
    logger.info(
        f"Custom filter: dθ1 = {final.dtheta1:.4f} rad/s, "
        f"dθ2 = {final.dtheta2:.4f} rad/s "
        f"(unclamped dθ2 magnitude {math.pi / 6:.4f})"
    )


if __name__ == "__main__":
    main()
