"""Topology snapshot builder.

Reduces the sway layout (tree, outputs, workspaces) into a NavigationSnapshot:
- the focused workspace and the ascending numbers on the focused output
- the numbers reserved by other outputs
- the emptiness of the wrap-boundary workspace and of the focused workspace
- the visible workspace of each active output, left to right

The snapshot is built fresh right before a destination is computed; nothing
is cached between invocations.
"""

import logging
from typing import Iterable, List, Optional

from ..errors import (
    DuplicateWorkspaceNumber,
    EmptyFocusedWorkspaceSet,
    ErrorCode,
    InconsistentLayout,
    NoFocusedOutput,
    NoFocusedWorkspace,
)
from ..models.policy import BoundaryPolicy
from ..models.topology import NavigationSnapshot, OutputInfo, WorkspaceInfo


logger = logging.getLogger(__name__)


def _focused_child(node) -> Optional[object]:
    """Return the child that is first in ``node``'s focus stack, if any."""
    focus = getattr(node, "focus", None) or []
    if not focus:
        return None
    for child in list(node.nodes or []) + list(node.floating_nodes or []):
        if child.id == focus[0]:
            return child
    return None


def find_focused_output_name(tree) -> str:
    """Walk the focus chain from the root to the first output node.

    Args:
        tree: Root container from GET_TREE

    Returns:
        Name of the focused output

    Raises:
        NoFocusedOutput: If no output lies on the focus chain
    """
    node = tree
    while node is not None:
        if node.type == "output":
            logger.debug(f"Focused output: {node.name}")
            return node.name
        node = _focused_child(node)
    raise NoFocusedOutput()


def sort_outputs(outputs: Iterable[OutputInfo]) -> List[OutputInfo]:
    """Active outputs ordered left-to-right by position."""
    return sorted((o for o in outputs if o.active), key=lambda o: o.sort_key)


def visible_workspace_per_output(
    outputs: Iterable[OutputInfo],
    workspaces: Iterable[WorkspaceInfo],
) -> List[int]:
    """Visible workspace number for each output in position order.

    Outputs without a visible workspace are skipped, not padded.
    """
    visible = [ws for ws in workspaces if ws.visible]
    result = []
    for output in sort_outputs(outputs):
        match = next((ws for ws in visible if ws.output == output.name), None)
        if match is not None:
            result.append(match.num)
    return result


def build_snapshot(
    focused_output_name: str,
    outputs: Iterable[OutputInfo],
    workspaces: Iterable[WorkspaceInfo],
    boundary: BoundaryPolicy = BoundaryPolicy.CURRENT,
) -> NavigationSnapshot:
    """Build a NavigationSnapshot from already-fetched IPC replies.

    Args:
        focused_output_name: Name of the focused output
        outputs: GET_OUTPUTS reply
        workspaces: GET_WORKSPACES reply
        boundary: Which workspace's emptiness is recorded as the wrap boundary

    Returns:
        Snapshot of the layout

    Raises:
        NoFocusedWorkspace: If no workspace is focused
        EmptyFocusedWorkspaceSet: If the focused output owns no workspaces
        InconsistentLayout: If the focused workspace is on another output
        DuplicateWorkspaceNumber: If a focused-output number also lives on another output
    """
    workspaces = list(workspaces)

    current = next((ws for ws in workspaces if ws.focused), None)
    if current is None:
        raise NoFocusedWorkspace()

    on_focused = [ws for ws in workspaces if ws.output == focused_output_name]
    elsewhere = [ws for ws in workspaces if ws.output != focused_output_name]
    if not on_focused:
        raise EmptyFocusedWorkspaceSet(focused_output_name)

    if current.output != focused_output_name:
        raise InconsistentLayout(
            code=ErrorCode.NO_FOCUSED_WORKSPACE,
            message=(
                f"Focused workspace {current.num} is on {current.output}, "
                f"not on focused output {focused_output_name}"
            ),
            suggestion="Retry once the output focus change has settled",
            context={"workspace": current.num, "output": focused_output_name},
        )

    focused_numbers = sorted({ws.num for ws in on_focused})
    # Named-only workspaces report -1 and can never collide with a new number
    reserved = frozenset(ws.num for ws in elsewhere if ws.num > 0)

    # Sway accepts "1" on one output and "1:mail" on another
    duplicates = sorted(reserved.intersection(focused_numbers))
    if duplicates:
        owners = sorted({focused_output_name} | {ws.output for ws in elsewhere if ws.num in duplicates})
        raise DuplicateWorkspaceNumber(duplicates, owners)

    if boundary is BoundaryPolicy.MAXIMUM:
        top = focused_numbers[-1]
        boundary_empty = all(ws.is_empty for ws in on_focused if ws.num == top)
    else:
        boundary_empty = current.is_empty

    snapshot = NavigationSnapshot(
        current_workspace=current.num,
        workspaces_on_focused_output=tuple(focused_numbers),
        workspaces_on_unfocused_outputs=reserved,
        boundary_workspace_empty=boundary_empty,
        current_workspace_empty=current.is_empty,
        visible_workspace_per_output=tuple(visible_workspace_per_output(outputs, workspaces)),
    )
    logger.debug(f"Snapshot: {snapshot.to_json()}")
    return snapshot


def snapshot_from_sway(client, boundary: BoundaryPolicy = BoundaryPolicy.CURRENT) -> NavigationSnapshot:
    """Query sway and build a snapshot.

    Args:
        client: SwayClient (or any object with get_tree/get_outputs/get_workspaces)
        boundary: Wrap boundary definition

    Raises:
        CompositorUnreachable: If an IPC query fails
        InconsistentLayout: If the layout has no well-defined focus
    """
    focused_output_name = find_focused_output_name(client.get_tree())
    outputs = client.get_outputs()
    workspaces = client.get_workspaces()
    return build_snapshot(focused_output_name, outputs, workspaces, boundary)
