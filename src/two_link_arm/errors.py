"""Exceptions raised by the two-link arm pipeline."""


class ArmPipelineError(ValueError):
    """Base class for pipeline errors."""


class InvalidConfiguration(ArmPipelineError):
    """Raised when pipeline parameters cannot produce a trajectory.

    Covers a sample count below two, non-positive link lengths, a
    non-positive velocity limit and a non-positive report stride.
    """


class InvalidInput(ArmPipelineError):
    """Raised when a joint state carries non-finite angles."""
