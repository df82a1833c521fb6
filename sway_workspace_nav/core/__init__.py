"""Core components: sway IPC client, snapshot builder, navigation engine."""

from .navigation import pick_destination
from .snapshot import build_snapshot, snapshot_from_sway
from .sway_client import SwayClient

__all__ = ["pick_destination", "build_snapshot", "snapshot_from_sway", "SwayClient"]
