"""sway-workspace-nav - GNOME-style dynamic workspace navigation for Sway.

This package provides:
- A snapshot of the focused output's workspaces built from Sway IPC
- Next/previous navigation between workspaces, creating new ones on demand
- Next/previous navigation between the visible workspaces of each output
- Focus and container-move commands driven by the computed destination
"""

__version__ = "0.4.0"
__author__ = "sway-workspace-nav contributors"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__license__"]
