"""
StageCraft — Setup Script
==========================
Installs StageCraft as a local editable package so that all internal
imports (e.g. `from stagecraft.assembly.director import assemble`) work
seamlessly from any script or notebook.

Usage:
    cd /path/to/stagecraft
    pip install -e .
"""

from setuptools import setup, find_packages

setup(
    name="stagecraft",
    version="0.1.0",
    author="Aditya",
    description=(
        "StageCraft: Staged Rocket Assembly with Payload-Driven Stage "
        "Branching and Proportional Fuel Calibration"
    ),
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
    ],
)
