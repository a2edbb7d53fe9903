"""Controller that runs the two-link arm trajectory pipeline.

The pipeline runs three stages in order: trajectory generation, velocity
limiting and forward kinematics.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from two_link_arm.control.trajectory_planner import Trajectory, generate_trajectory
from two_link_arm.control.velocity_filter import (
    JointStateFilter,
    VelocityLimitFilter,
    apply_filter,
)
from two_link_arm.errors import InvalidConfiguration
from two_link_arm.kinematics.forward_kinematics import solve_trajectory
from two_link_arm.robot_types import EndEffectorPose
from two_link_arm.utils.config_loader import PipelineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Output of one pipeline run.

    All three sequences share the same indices.

    Attributes:
        config: Configuration the run used
        raw_trajectory: Trajectory as generated
        filtered_trajectory: Trajectory after velocity limiting
        poses: End-effector pose of each filtered sample
        processing_time: Time taken by the run (seconds)
    """

    config: PipelineConfig
    raw_trajectory: Trajectory
    filtered_trajectory: Trajectory
    poses: List[EndEffectorPose]
    processing_time: float


class RobotController:
    """Runs trajectory generation, velocity limiting and forward kinematics.

    The velocity stage defaults to a VelocityLimitFilter built from the
    config, but any JointState -> JointState callable can replace it.
    """

    def __init__(
        self,
        config: Optional[Union[PipelineConfig, Dict[str, Any]]] = None,
        joint_filter: Optional[JointStateFilter] = None,
    ):
        """Initialize the controller.

        Args:
            config: Pipeline parameters, either a PipelineConfig or a parsed
                configuration dictionary (default: PipelineConfig())
            joint_filter: Per-sample filter replacing the velocity limit

        Raises:
            InvalidConfiguration: If the configuration is invalid
        """
        if config is None:
            config = PipelineConfig()
        elif isinstance(config, dict):
            config = PipelineConfig.from_dict(config)
        elif not isinstance(config, PipelineConfig):
            raise InvalidConfiguration(
                "config must be a PipelineConfig or dict, "
                f"got {type(config).__name__}"
            )
        self.config = config
        self.config.validate()
        self.joint_filter = (
            joint_filter
            if joint_filter is not None
            else VelocityLimitFilter(self.config.velocity_limit)
        )

    def plan(self) -> Trajectory:
        """Generate the unfiltered trajectory."""
        return generate_trajectory(
            self.config.start,
            self.config.goal,
            self.config.num_samples,
        )

    def run(self) -> PipelineResult:
        """Run all pipeline stages.

        Returns:
            PipelineResult with both trajectories and the end-effector poses

        Raises:
            InvalidInput: If the start or goal angles are not finite
        """
        start_time = time.perf_counter()

        raw = self.plan()
        logger.info(f"Generated trajectory with {len(raw)} points")

        filtered = apply_filter(raw, self.joint_filter)
        logger.info(f"Applied rate filter: {self.joint_filter!r}")

        poses = solve_trajectory(list(filtered), self.config.geometry)
        processing_time = time.perf_counter() - start_time
        logger.info(
            f"Computed {len(poses)} end-effector poses in {processing_time:.4f}s"
        )

        return PipelineResult(
            config=self.config,
            raw_trajectory=raw,
            filtered_trajectory=filtered,
            poses=poses,
            processing_time=processing_time,
        )
