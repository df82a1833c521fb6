"""Command-line interface for sway-workspace-nav."""
