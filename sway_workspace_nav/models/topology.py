"""Layout topology models built from Sway IPC replies.

OutputInfo and WorkspaceInfo mirror the GET_OUTPUTS and GET_WORKSPACES
replies. NavigationSnapshot is the reduced, read-only view the navigation
engine works on; it is rebuilt on every invocation.
"""

from typing import Any, Dict, FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OutputInfo(BaseModel):
    """Physical display from Sway IPC GET_OUTPUTS.

    Outputs order left-to-right by position (x, then y, then name).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Output identifier (HDMI-A-1, eDP-1, etc.)")
    x: int = Field(default=0, description="Layout x coordinate")
    y: int = Field(default=0, description="Layout y coordinate")
    active: bool = Field(default=True, description="Whether output is currently active")

    @property
    def sort_key(self) -> Tuple[int, int, str]:
        return (self.x, self.y, self.name)


class WorkspaceInfo(BaseModel):
    """Workspace from Sway IPC GET_WORKSPACES.

    ``representation`` is sway's textual layout summary (e.g. ``H[foot firefox]``);
    it is empty or missing when the workspace holds no windows.
    """

    model_config = ConfigDict(frozen=True)

    num: int = Field(..., description="Workspace number (-1 for named-only workspaces)")
    name: str = Field(default="", description="Workspace name")
    output: str = Field(..., description="Owning output name")
    focused: bool = Field(default=False)
    visible: bool = Field(default=False)
    representation: str = Field(default="", description="Sway layout representation")

    @property
    def is_empty(self) -> bool:
        return not self.representation.strip()


class NavigationSnapshot(BaseModel):
    """Compact view of the layout used to pick a destination.

    Attributes:
        current_workspace: Number of the focused workspace
        workspaces_on_focused_output: Ascending workspace numbers on the focused output
        workspaces_on_unfocused_outputs: Numbers reserved by other outputs
        boundary_workspace_empty: Whether the wrap-boundary workspace has no windows
        current_workspace_empty: Whether the focused workspace has no windows;
            defaults to boundary_workspace_empty when omitted
        visible_workspace_per_output: Visible workspace number per output, left to right

    Examples:
        >>> snap = NavigationSnapshot(
        ...     current_workspace=2,
        ...     workspaces_on_focused_output=(1, 2),
        ...     workspaces_on_unfocused_outputs=frozenset({3}),
        ... )
        >>> (snap.min_workspace, snap.max_workspace)
        (1, 2)
    """

    model_config = ConfigDict(frozen=True)

    current_workspace: int
    workspaces_on_focused_output: Tuple[int, ...] = Field(..., min_length=1)
    workspaces_on_unfocused_outputs: FrozenSet[int] = Field(default_factory=frozenset)
    boundary_workspace_empty: bool = False
    current_workspace_empty: bool = False
    visible_workspace_per_output: Tuple[int, ...] = Field(default_factory=tuple)

    @model_validator(mode="before")
    @classmethod
    def default_current_emptiness(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("current_workspace_empty") is None:
            data = {**data, "current_workspace_empty": data.get("boundary_workspace_empty", False)}
        return data

    @model_validator(mode="after")
    def validate_partition(self):
        """Focused-output numbers are sorted, contain current and stay off other outputs."""
        focused = self.workspaces_on_focused_output
        if list(focused) != sorted(set(focused)):
            raise ValueError("workspaces_on_focused_output must be ascending and unique")
        if self.current_workspace not in focused:
            raise ValueError(
                f"Current workspace {self.current_workspace} is not on the focused output"
            )
        overlap = set(focused) & self.workspaces_on_unfocused_outputs
        if overlap:
            raise ValueError(f"Workspaces {sorted(overlap)} belong to more than one output")
        return self

    @property
    def min_workspace(self) -> int:
        return self.workspaces_on_focused_output[0]

    @property
    def max_workspace(self) -> int:
        return self.workspaces_on_focused_output[-1]

    def to_json(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "current_workspace": self.current_workspace,
            "workspaces_on_focused_output": list(self.workspaces_on_focused_output),
            "workspaces_on_unfocused_outputs": sorted(self.workspaces_on_unfocused_outputs),
            "boundary_workspace_empty": self.boundary_workspace_empty,
            "current_workspace_empty": self.current_workspace_empty,
            "visible_workspace_per_output": list(self.visible_workspace_per_output),
        }
