"""Command-line entry point for the two-link arm trajectory pipeline."""

import argparse
import logging
import sys
from typing import List, Optional

from two_link_arm.control.robot_controller import RobotController
from two_link_arm.errors import ArmPipelineError
from two_link_arm.utils.config_loader import build_pipeline_config
from two_link_arm.utils.logging_config import setup_logging
from two_link_arm.utils.reporting import format_report

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description=(
            "Generate a joint-space trajectory for a planar two-link arm, "
            "limit its joint velocities and print the end-effector path."
        )
    )
    parser.add_argument(
        "--config",
        "-c",
        help="YAML config file (default: packaged arm_config.yaml)",
    )
    parser.add_argument(
        "--num-samples",
        "-n",
        type=int,
        help="Number of trajectory samples, endpoints included",
    )
    parser.add_argument(
        "--velocity-limit",
        type=float,
        help="Maximum joint velocity magnitude in rad/s",
    )
    parser.add_argument("--link1", type=float, help="Length of link 1 in meters")
    parser.add_argument("--link2", type=float, help="Length of link 2 in meters")
    parser.add_argument(
        "--start",
        nargs=2,
        type=float,
        metavar=("THETA1", "THETA2"),
        help="Start joint angles in radians",
    )
    parser.add_argument(
        "--goal",
        nargs=2,
        type=float,
        metavar=("THETA1", "THETA2"),
        help="Goal joint angles in radians",
    )
    parser.add_argument(
        "--decimation",
        "-d",
        type=int,
        help="Print every Nth trajectory sample",
    )
    parser.add_argument("--log-dir", help="Directory for the log file")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the pipeline and print the report.

    Returns:
        Process exit status: 0 on success, 1 on a configuration error
    """
    args = parse_args(argv)
    setup_logging(
        log_dir=args.log_dir,
        log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        config = build_pipeline_config(
            args.config,
            start=args.start,
            goal=args.goal,
            num_samples=args.num_samples,
            velocity_limit=args.velocity_limit,
            link1_length=args.link1,
            link2_length=args.link2,
            report_decimation=args.decimation,
        )
        result = RobotController(config).run()
    except (ArmPipelineError, FileNotFoundError) as e:
        logger.error(f"Pipeline not run: {e}")
        return 1

    print(format_report(result, config.report_decimation))
    return 0


if __name__ == "__main__":
    sys.exit(main())
