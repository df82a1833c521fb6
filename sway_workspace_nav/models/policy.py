"""Navigation request and policy models.

Command, target and direction are closed sets validated once at the CLI
boundary. NavigationPolicy holds the flags that decide between wrapping,
walking into gaps and creating new workspaces.
"""

from enum import Enum
from typing import List, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import ErrorCode, InvalidPolicyArgument


def _parse_member(enum_cls: Type[Enum], value: str, code: ErrorCode, kind: str):
    """Parse an enum member from string (case-insensitive).

    Raises:
        InvalidPolicyArgument: If value is not a valid member
    """
    try:
        return enum_cls(value.strip().lower())
    except (ValueError, AttributeError):
        raise InvalidPolicyArgument(
            code=code,
            kind=kind,
            value=value,
            choices=choices(enum_cls),
        )


class Command(str, Enum):
    """What to do with the destination workspace."""

    MOVE_FOCUS_TO = "move-focus-to"
    MOVE_CONTAINER_TO = "move-container-to"

    @classmethod
    def from_str(cls, value: str) -> "Command":
        return _parse_member(cls, value, ErrorCode.INVALID_COMMAND, "command")


class Target(str, Enum):
    """Axis to navigate along."""

    WORKSPACE = "workspace"
    OUTPUT = "output"

    @classmethod
    def from_str(cls, value: str) -> "Target":
        return _parse_member(cls, value, ErrorCode.INVALID_TARGET, "target")


class Direction(str, Enum):
    """Direction to navigate in."""

    PREV = "prev"
    NEXT = "next"

    @classmethod
    def from_str(cls, value: str) -> "Direction":
        return _parse_member(cls, value, ErrorCode.INVALID_DIRECTION, "direction")


class BoundaryPolicy(str, Enum):
    """Which workspace's emptiness decides between wrapping and creating.

    - CURRENT: the focused workspace
    - MAXIMUM: the highest-numbered workspace on the focused output

    The policy governs the "next" wrap and the reuse of the trailing slot.
    "prev" from the lowest workspace always looks at the focused workspace.
    """

    CURRENT = "current"
    MAXIMUM = "maximum"

    @classmethod
    def from_str(cls, value: str) -> "BoundaryPolicy":
        return _parse_member(cls, value, ErrorCode.INVALID_BOUNDARY, "boundary")


def choices(enum_cls: Type[Enum]) -> List[str]:
    """Return the string values accepted for an enum."""
    return [member.value for member in enum_cls]


class NavigationPolicy(BaseModel):
    """Policy flags for workspace-axis navigation.

    Attributes:
        walk_into_gaps: Cycle through every free number in 1..max instead of
            only the workspaces that exist on the focused output
        static_behaviour: Never create workspaces; only visit existing
            numbers and wrap
        boundary: Which workspace's emptiness gates wrap versus create

    Examples:
        >>> NavigationPolicy().creates_workspaces
        True

        >>> NavigationPolicy.model_validate({"static": True}).static_behaviour
        True
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    walk_into_gaps: bool = Field(default=False, description="Cycle through gap numbers")
    static_behaviour: bool = Field(default=False, alias="static", description="Disable workspace creation")
    boundary: BoundaryPolicy = Field(default=BoundaryPolicy.CURRENT, description="Wrap boundary definition")

    @field_validator("boundary", mode="before")
    @classmethod
    def parse_boundary(cls, v):
        if isinstance(v, str) and not isinstance(v, BoundaryPolicy):
            return BoundaryPolicy.from_str(v)
        return v

    @property
    def creates_workspaces(self) -> bool:
        return not self.static_behaviour
