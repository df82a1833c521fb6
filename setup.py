"""
Setup configuration for sway-workspace-nav.

GNOME-style dynamic workspace navigation for the Sway window manager.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read long description from README if it exists
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="sway-workspace-nav",
    version="0.4.0",
    description="Navigate and create Sway workspaces per output like GNOME does",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="sway-workspace-nav contributors",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "i3ipc>=2.2.1",
        "pydantic>=2.0",
    ],
    python_requires=">=3.11",
    entry_points={
        "console_scripts": [
            "sway-workspace-nav=sway_workspace_nav.cli.commands:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
)
