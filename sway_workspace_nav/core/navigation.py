"""Navigation engine: pick the destination workspace number.

All functions here are pure over a NavigationSnapshot and always return a
workspace number; failures can only come from building the snapshot or from
sway IPC.

Workspace axis
    Without gap-walking and with dynamic creation, "next" moves to the next
    existing workspace on the focused output, creates a new trailing
    workspace past the last one, or wraps to the first when the boundary
    workspace is empty. "prev" mirrors that with a new leading workspace.
    With ``walk_into_gaps`` or ``static_behaviour`` the engine walks a
    cyclic candidate list instead.

Output axis
    Cycles through the visible workspace of each output, left to right.
    Never creates anything.
"""

import logging
from typing import List, Optional, Sequence

from ..models.policy import Direction, NavigationPolicy, Target
from ..models.topology import NavigationSnapshot


logger = logging.getLogger(__name__)


def _cycle(sequence: Sequence[int], current: int, direction: Direction) -> Optional[int]:
    """Step one position from ``current`` in ``sequence``, wrapping at both ends.

    Returns None when ``current`` is not in the sequence.
    """
    try:
        index = list(sequence).index(current)
    except ValueError:
        return None
    step = 1 if direction is Direction.NEXT else -1
    return sequence[(index + step) % len(sequence)]


def new_workspace_at_end(snapshot: NavigationSnapshot) -> int:
    """Smallest number above the focused output's last workspace not used elsewhere.

    At most ``len(reserved) + 1`` numbers are tried, so the search is bounded.
    """
    reserved = snapshot.workspaces_on_unfocused_outputs
    # sway rejects non-positive numbers; named-only outputs report -1
    start = max(snapshot.max_workspace, 0) + 1
    return next(n for n in range(start, start + len(reserved) + 1) if n not in reserved)


def new_workspace_at_start(snapshot: NavigationSnapshot) -> int:
    """Largest free number below the focused output's first workspace.

    Falls back to the first workspace itself when every number down to 1 is
    reserved.
    """
    reserved = snapshot.workspaces_on_unfocused_outputs
    return next(
        (n for n in range(snapshot.min_workspace - 1, 0, -1) if n not in reserved),
        snapshot.min_workspace,
    )


def recycles_boundary(snapshot: NavigationSnapshot) -> bool:
    """Whether an empty boundary workspace is reused instead of creating a new one."""
    return snapshot.boundary_workspace_empty and len(snapshot.workspaces_on_focused_output) > 1


def next_workspace_on_focused_output(snapshot: NavigationSnapshot) -> int:
    """Next existing workspace, a wrap to the first, or a new trailing workspace."""
    current = snapshot.current_workspace
    if current == snapshot.max_workspace and recycles_boundary(snapshot):
        return snapshot.min_workspace

    later = [n for n in snapshot.workspaces_on_focused_output if n > current]
    if later:
        return later[0]
    return new_workspace_at_end(snapshot)


def prev_workspace_on_focused_output(snapshot: NavigationSnapshot) -> int:
    """Previous existing workspace, a new leading workspace, or a new trailing one."""
    current = snapshot.current_workspace
    # Always the focused workspace's emptiness, whatever the boundary policy
    if current == snapshot.min_workspace and snapshot.current_workspace_empty:
        return new_workspace_at_start(snapshot)

    earlier = [n for n in snapshot.workspaces_on_focused_output if n < current]
    if earlier:
        return earlier[-1]
    return new_workspace_at_end(snapshot)


def workspace_candidates(snapshot: NavigationSnapshot, policy: NavigationPolicy) -> List[int]:
    """Ordered cycling domain for the workspace axis.

    With ``walk_into_gaps`` the domain is every number in ``1..max`` that no
    other output holds, plus whatever exists on the focused output. Unless
    creation is disabled, or an empty boundary workspace is recycled, a new
    trailing number is appended.
    """
    reserved = snapshot.workspaces_on_unfocused_outputs
    existing = set(snapshot.workspaces_on_focused_output)
    if policy.walk_into_gaps:
        dense = {n for n in range(1, snapshot.max_workspace + 1) if n not in reserved}
        candidates = sorted(dense | existing)
    else:
        candidates = sorted(existing)

    if policy.creates_workspaces and not recycles_boundary(snapshot):
        candidates.append(new_workspace_at_end(snapshot))
    return candidates


def workspace_on_focused_output(
    snapshot: NavigationSnapshot,
    direction: Direction,
    policy: Optional[NavigationPolicy] = None,
) -> int:
    """Destination along the focused output's workspaces.

    Args:
        snapshot: Current layout snapshot
        direction: NEXT or PREV
        policy: Navigation policy (default: dynamic, no gap-walking)

    Returns:
        Destination workspace number
    """
    policy = policy or NavigationPolicy()

    if not policy.walk_into_gaps and policy.creates_workspaces:
        if direction is Direction.NEXT:
            return next_workspace_on_focused_output(snapshot)
        return prev_workspace_on_focused_output(snapshot)

    candidates = workspace_candidates(snapshot, policy)
    logger.debug(f"Workspace candidates: {candidates}")
    # current is always a candidate: it exists on the focused output
    return _cycle(candidates, snapshot.current_workspace, direction)


def visible_workspace_on_output(snapshot: NavigationSnapshot, direction: Direction) -> int:
    """Visible workspace on the next/previous output, by position.

    Returns the current workspace unchanged when it is not one of the visible
    workspaces.
    """
    destination = _cycle(snapshot.visible_workspace_per_output, snapshot.current_workspace, direction)
    if destination is None:
        logger.debug(
            f"Workspace {snapshot.current_workspace} not in visible list "
            f"{list(snapshot.visible_workspace_per_output)}; staying put"
        )
        return snapshot.current_workspace
    return destination


def pick_destination(
    snapshot: NavigationSnapshot,
    target: Target,
    direction: Direction,
    policy: Optional[NavigationPolicy] = None,
) -> int:
    """Destination workspace for a (target, direction) request.

    Examples:
        >>> snap = NavigationSnapshot(
        ...     current_workspace=7,
        ...     workspaces_on_focused_output=(2, 5, 7),
        ...     boundary_workspace_empty=True,
        ... )
        >>> pick_destination(snap, Target.WORKSPACE, Direction.NEXT)
        2
    """
    if target is Target.OUTPUT:
        destination = visible_workspace_on_output(snapshot, direction)
    else:
        destination = workspace_on_focused_output(snapshot, direction, policy)

    logger.info(
        f"{target.value} {direction.value}: {snapshot.current_workspace} -> {destination}"
    )
    return destination
