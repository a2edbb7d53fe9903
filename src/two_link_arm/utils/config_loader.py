"""Configuration loading for the trajectory pipeline.

Configuration files are YAML with a ``pipeline`` section holding the motion
parameters and an optional ``report`` section for the text output.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from two_link_arm.errors import InvalidConfiguration
from two_link_arm.robot_types import (
    DEFAULT_LINK1_LENGTH,
    DEFAULT_LINK2_LENGTH,
    DEFAULT_NUM_SAMPLES,
    DEFAULT_VELOCITY_LIMIT,
    ArmGeometry,
    JointState,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent / "configs" / "arm_config.yaml"
)
DEFAULT_DECIMATION = 5


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML configuration file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Parsed configuration dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidConfiguration: If the file is not valid YAML or not a mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfiguration(
                f"Could not parse {config_path}: {e}"
            ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise InvalidConfiguration(
            f"Config root in {config_path} must be a mapping, "
            f"got {type(config).__name__}"
        )
    return config


def _joint_state_from(value: Any, name: str) -> JointState:
    if isinstance(value, JointState):
        return value
    if isinstance(value, dict):
        try:
            return JointState(
                theta1=float(value["theta1"]),
                theta2=float(value["theta2"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidConfiguration(
                f"{name} must define numeric theta1 and theta2: {e}"
            ) from e
    if isinstance(value, (list, tuple)) and len(value) == 2:
        try:
            return JointState(theta1=float(value[0]), theta2=float(value[1]))
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"{name} angles must be numeric: {e}") from e
    raise InvalidConfiguration(
        f"{name} must be a pair of angles [theta1, theta2], got {value!r}"
    )


def _whole_number(value: Any) -> Any:
    # YAML writes 21.0 for some integer settings
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


@dataclass(frozen=True)
class PipelineConfig:
    """Parameters of one pipeline run.

    Attributes:
        start: Start joint state
        goal: Goal joint state
        num_samples: Trajectory length, endpoints included
        velocity_limit: Maximum joint velocity magnitude (radians/second)
        geometry: Arm link lengths
        report_decimation: Stride used when printing trajectories
    """

    start: JointState = field(default_factory=lambda: JointState(0.0, 0.0))
    goal: JointState = field(
        default_factory=lambda: JointState(-math.pi, -math.pi / 6.0)
    )
    num_samples: int = DEFAULT_NUM_SAMPLES
    velocity_limit: float = DEFAULT_VELOCITY_LIMIT
    geometry: ArmGeometry = field(default_factory=ArmGeometry)
    report_decimation: int = DEFAULT_DECIMATION

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "PipelineConfig":
        """Build a validated config from a parsed configuration dictionary.

        Missing keys fall back to the defaults.

        Raises:
            InvalidConfiguration: If a value is missing its expected type or
                fails validation
        """
        pipeline = config.get("pipeline", {}) or {}
        report = config.get("report", {}) or {}
        if not isinstance(pipeline, dict) or not isinstance(report, dict):
            raise InvalidConfiguration(
                "'pipeline' and 'report' sections must be mappings"
            )

        defaults = cls()
        try:
            num_samples = _whole_number(
                pipeline.get("num_samples", defaults.num_samples)
            )
            decimation = _whole_number(
                report.get("decimation", defaults.report_decimation)
            )
            geometry = ArmGeometry(
                link1_length=float(
                    pipeline.get("link1_length", DEFAULT_LINK1_LENGTH)
                ),
                link2_length=float(
                    pipeline.get("link2_length", DEFAULT_LINK2_LENGTH)
                ),
            )
            velocity_limit = float(
                pipeline.get("velocity_limit", defaults.velocity_limit)
            )
        except InvalidConfiguration:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"Invalid pipeline value: {e}") from e

        result = cls(
            start=_joint_state_from(pipeline.get("start", defaults.start), "start"),
            goal=_joint_state_from(pipeline.get("goal", defaults.goal), "goal"),
            num_samples=num_samples,
            velocity_limit=velocity_limit,
            geometry=geometry,
            report_decimation=decimation,
        )
        result.validate()
        return result

    def with_overrides(self, **overrides: Any) -> "PipelineConfig":
        """Return a validated copy with the non-None overrides applied.

        Accepts the dataclass fields plus ``link1_length`` and
        ``link2_length``.
        """
        values = {k: v for k, v in overrides.items() if v is not None}
        link1 = values.pop("link1_length", self.geometry.link1_length)
        link2 = values.pop("link2_length", self.geometry.link2_length)
        for name in ("start", "goal"):
            if name in values:
                values[name] = _joint_state_from(values[name], name)
        for name in ("num_samples", "report_decimation"):
            if name in values:
                values[name] = _whole_number(values[name])
        try:
            geometry = ArmGeometry(float(link1), float(link2))
            if "velocity_limit" in values:
                values["velocity_limit"] = float(values["velocity_limit"])
        except InvalidConfiguration:
            raise
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"Invalid override value: {e}") from e

        fields = {
            "start": self.start,
            "goal": self.goal,
            "num_samples": self.num_samples,
            "velocity_limit": self.velocity_limit,
            "geometry": geometry,
            "report_decimation": self.report_decimation,
        }
        unknown = set(values) - set(fields)
        if unknown:
            raise InvalidConfiguration(f"Unknown config keys: {sorted(unknown)}")
        fields.update(values)

        result = PipelineConfig(**fields)
        result.validate()
        return result

    def validate(self) -> None:
        """Check the parameters before the pipeline runs.

        Raises:
            InvalidConfiguration: If num_samples < 2, velocity_limit <= 0
                or report_decimation < 1
        """
        if isinstance(self.num_samples, bool) or not isinstance(
            self.num_samples, int
        ):
            raise InvalidConfiguration(
                f"num_samples must be an integer, got {self.num_samples!r}"
            )
        if self.num_samples < 2:
            raise InvalidConfiguration(
                f"num_samples must be at least 2, got {self.num_samples}"
            )
        if isinstance(self.velocity_limit, bool) or not isinstance(
            self.velocity_limit, (int, float)
        ):
            raise InvalidConfiguration(
                f"velocity_limit must be a number, got {self.velocity_limit!r}"
            )
        if not math.isfinite(self.velocity_limit) or self.velocity_limit <= 0:
            raise InvalidConfiguration(
                f"velocity_limit must be positive, got {self.velocity_limit}"
            )
        if (
            isinstance(self.report_decimation, bool)
            or not isinstance(self.report_decimation, int)
            or self.report_decimation < 1
        ):
            raise InvalidConfiguration(
                "report decimation must be a positive integer, "
                f"got {self.report_decimation!r}"
            )


def build_pipeline_config(
    config_path: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> PipelineConfig:
    """Load a pipeline config from file and apply overrides.

    Args:
        config_path: YAML file to read (default: packaged arm_config.yaml)
        **overrides: Values that replace the file's settings; None is ignored

    Returns:
        Validated PipelineConfig

    Raises:
        FileNotFoundError: If config_path does not exist
        InvalidConfiguration: If the resulting parameters are invalid
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    try:
        config = PipelineConfig.from_dict(load_config(path))
        if overrides:
            config = config.with_overrides(**overrides)
    except InvalidConfiguration as e:
        logger.error(f"Rejected configuration from {path}: {e}")
        raise
    logger.debug(f"Loaded pipeline config from {path}: {config}")
    return config
