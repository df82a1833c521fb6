# Data models for layout topology and navigation policy

from .policy import BoundaryPolicy, Command, Direction, NavigationPolicy, Target
from .topology import NavigationSnapshot, OutputInfo, WorkspaceInfo

__all__ = [
    "BoundaryPolicy",
    "Command",
    "Direction",
    "NavigationPolicy",
    "Target",
    "NavigationSnapshot",
    "OutputInfo",
    "WorkspaceInfo",
]
