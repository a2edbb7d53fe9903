"""Setup script for the Two-Link Arm trajectory pipeline."""

from setuptools import find_packages, setup

setup(
    name="two-link-arm",
    version="0.1.0",
    description="Joint-space trajectory generation, velocity limiting and forward kinematics for a planar two-link arm",
    author="VIP Research Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"two_link_arm": ["configs/*.yaml"]},
    python_requires=">=3.10",
    install_requires=[
        "numpy>=2.0.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "hypothesis>=6.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "two-link-arm=two_link_arm.cli:main",
        ],
    },
)
