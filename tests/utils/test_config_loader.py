"""Tests for pipeline configuration loading."""

import logging
import math

import pytest

from two_link_arm.errors import InvalidConfiguration
from two_link_arm.robot_types import ArmGeometry, JointState
from two_link_arm.utils.config_loader import (
    DEFAULT_CONFIG_PATH,
    PipelineConfig,
    build_pipeline_config,
    load_config,
)


@pytest.fixture
def write_config(tmp_path):
    """Fixture returning a helper that writes YAML text to a file."""

    def _write(text: str):
        path = tmp_path / "arm_config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def test_packaged_defaults():
    """Test the packaged config matches the built-in defaults."""
    assert DEFAULT_CONFIG_PATH.exists()

    config = build_pipeline_config()

    assert config.start == JointState(0.0, 0.0)
    assert config.goal.theta1 == pytest.approx(-math.pi)
    assert config.goal.theta2 == pytest.approx(-math.pi / 6)
    assert config.num_samples == 21
    assert config.velocity_limit == 1.0
    assert config.geometry == ArmGeometry(0.5, 0.3)
    assert config.report_decimation == 5


def test_load_config_from_file(write_config):
    """Test values from a YAML file override defaults."""
    path = write_config(
        "pipeline:\n"
        "  start: {theta1: 0.1, theta2: 0.2}\n"
        "  goal: [1.0, 2.0]\n"
        "  num_samples: 5\n"
        "  velocity_limit: 0.5\n"
        "  link1_length: 1.0\n"
        "report:\n"
        "  decimation: 2\n"
    )

    config = build_pipeline_config(path)

    assert config.start == JointState(0.1, 0.2)
    assert config.goal == JointState(1.0, 2.0)
    assert config.num_samples == 5
    assert config.velocity_limit == 0.5
    assert config.geometry == ArmGeometry(1.0, 0.3)
    assert config.report_decimation == 2


def test_empty_file_uses_defaults(write_config):
    """Test an empty file yields the default config."""
    assert load_config(write_config("")) == {}
    assert build_pipeline_config(write_config("")) == PipelineConfig()


def test_missing_file(tmp_path):
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "pipeline: [unclosed\n",
        "- 1\n- 2\n",
        "pipeline: [1, 2]\n",
        "pipeline:\n  num_samples: 1\n",
        "pipeline:\n  num_samples: many\n",
        "pipeline:\n  velocity_limit: 0\n",
        "pipeline:\n  velocity_limit: fast\n",
        "pipeline:\n  link2_length: -0.3\n",
        "pipeline:\n  start: [0.0]\n",
        "pipeline:\n  goal: {theta1: 1.0}\n",
        "report:\n  decimation: 0\n",
    ],
)
def test_invalid_config_files(write_config, text):
    """Test malformed or out-of-range files are rejected."""
    with pytest.raises(InvalidConfiguration):
        build_pipeline_config(write_config(text))


def test_overrides_replace_file_values():
    """Test keyword overrides win over the file and None is ignored."""
    config = build_pipeline_config(
        num_samples=3,
        velocity_limit=None,
        start=[0.5, 0.5],
        link2_length=0.7,
    )

    assert config.num_samples == 3
    assert config.velocity_limit == 1.0
    assert config.start == JointState(0.5, 0.5)
    assert config.geometry == ArmGeometry(0.5, 0.7)


def test_overrides_are_validated():
    """Test invalid overrides raise InvalidConfiguration."""
    with pytest.raises(InvalidConfiguration):
        build_pipeline_config(num_samples=1)

    with pytest.raises(InvalidConfiguration):
        build_pipeline_config(link1_length=0.0)

    with pytest.raises(InvalidConfiguration):
        PipelineConfig().with_overrides(unknown_key=1)


def test_validate_rejects_bool_samples():
    """Test a boolean sample count is not accepted as an integer."""
    with pytest.raises(InvalidConfiguration):
        PipelineConfig(num_samples=True).validate()


def test_rejection_logged_at_error(caplog):
    """Test a rejected configuration is logged before the error is raised."""
    caplog.set_level(logging.ERROR, logger="two_link_arm")

    with pytest.raises(InvalidConfiguration):
        build_pipeline_config(num_samples=1)

    errors = [
        r
        for r in caplog.records
        if r.name == "two_link_arm.utils.config_loader"
        and r.levelno == logging.ERROR
    ]
    assert len(errors) == 1
    assert "num_samples must be at least 2" in errors[0].getMessage()


@pytest.mark.parametrize(
    "overrides",
    [
        {"velocity_limit": "fast"},
        {"velocity_limit": [1.0]},
        {"link1_length": "x"},
        {"link2_length": object()},
        {"num_samples": "21"},
        {"report_decimation": 2.5},
    ],
)
def test_non_numeric_overrides_rejected(overrides):
    """Test wrongly typed overrides raise InvalidConfiguration."""
    with pytest.raises(InvalidConfiguration):
        build_pipeline_config(**overrides)


def test_validate_rejects_non_numeric_limit():
    """Test a string velocity limit fails validation cleanly."""
    with pytest.raises(InvalidConfiguration):
        PipelineConfig(velocity_limit="fast").validate()


def test_whole_float_counts_accepted(write_config):
    """Test YAML floats with no fraction are read as integer counts."""
    path = write_config(
        "pipeline:\n  num_samples: 11.0\nreport:\n  decimation: 5.0\n"
    )

    config = build_pipeline_config(path)

    assert config.num_samples == 11
    assert config.report_decimation == 5
    assert isinstance(config.report_decimation, int)


def test_whole_float_overrides_accepted():
    """Test whole-number float overrides are converted to integers."""
    config = build_pipeline_config(num_samples=4.0, report_decimation=2.0)

    assert config.num_samples == 4
    assert config.report_decimation == 2
