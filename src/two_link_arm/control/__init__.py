"""Trajectory generation, velocity limiting and pipeline control."""
