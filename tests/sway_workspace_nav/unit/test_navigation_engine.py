"""Unit tests for the navigation engine."""

import itertools

import pytest

from sway_workspace_nav.core.navigation import (
    new_workspace_at_end,
    new_workspace_at_start,
    pick_destination,
    visible_workspace_on_output,
    workspace_candidates,
    workspace_on_focused_output,
)
from sway_workspace_nav.models.policy import Direction, NavigationPolicy, Target
from sway_workspace_nav.models.topology import NavigationSnapshot


NEXT = Direction.NEXT
PREV = Direction.PREV

DYNAMIC = NavigationPolicy()
STATIC = NavigationPolicy(static_behaviour=True)
GAPS = NavigationPolicy(walk_into_gaps=True)
STATIC_GAPS = NavigationPolicy(walk_into_gaps=True, static_behaviour=True)


def snap(current, focused, reserved=(), empty=False, visible=(), current_empty=None):
    return NavigationSnapshot(
        current_workspace=current,
        workspaces_on_focused_output=tuple(focused),
        workspaces_on_unfocused_outputs=frozenset(reserved),
        boundary_workspace_empty=empty,
        current_workspace_empty=current_empty,
        visible_workspace_per_output=tuple(visible),
    )


class TestNewWorkspaceNumbers:
    """Synthesizing numbers for new workspaces."""

    def test_at_end_is_one_past_max(self):
        assert new_workspace_at_end(snap(2, [1, 2])) == 3

    def test_at_end_skips_reserved(self):
        assert new_workspace_at_end(snap(3, [3], reserved={4, 5, 7})) == 6

    def test_at_end_never_non_positive(self):
        """Named-only workspaces report -1; new numbers still start at 1."""
        assert new_workspace_at_end(snap(-1, [-1])) == 1
        assert new_workspace_at_end(snap(-1, [-1], reserved={1})) == 2

    def test_at_start_takes_closest_free_number_below_min(self):
        assert new_workspace_at_start(snap(4, [4, 6], reserved={3})) == 2

    def test_at_start_floors_at_one(self):
        """Falls back to the minimum when nothing free exists below it."""
        assert new_workspace_at_start(snap(3, [3], reserved={1, 2})) == 3
        assert new_workspace_at_start(snap(1, [1, 2])) == 1


class TestNextWorkspace:
    """Dynamic "next" without gap-walking."""

    def test_moves_to_next_existing(self):
        assert workspace_on_focused_output(snap(1, [1, 4, 6]), NEXT) == 4

    def test_wraps_to_min_when_boundary_empty(self):
        assert workspace_on_focused_output(snap(7, [2, 5, 7], empty=True), NEXT) == 2

    def test_creates_past_non_empty_max(self):
        assert workspace_on_focused_output(snap(3, [3], reserved={4}), NEXT) == 5

    def test_creates_past_max_with_several_workspaces(self):
        assert workspace_on_focused_output(snap(2, [1, 2], reserved={3}), NEXT) == 4

    def test_single_empty_workspace_does_not_wrap_to_itself(self):
        assert workspace_on_focused_output(snap(3, [3], empty=True), NEXT) == 4

    def test_empty_non_max_workspace_moves_forward(self):
        assert workspace_on_focused_output(snap(2, [1, 2, 3], empty=True), NEXT) == 3


class TestPrevWorkspace:
    """Dynamic "prev" without gap-walking."""

    def test_moves_to_previous_existing(self):
        assert workspace_on_focused_output(snap(6, [1, 4, 6]), PREV) == 4

    def test_empty_min_creates_leading_workspace(self):
        assert workspace_on_focused_output(snap(3, [3, 5], reserved={2}, empty=True), PREV) == 1

    def test_single_empty_workspace_creates_at_start(self):
        assert workspace_on_focused_output(snap(4, [4], empty=True), PREV) == 3

    def test_empty_workspace_one_stays(self):
        assert workspace_on_focused_output(snap(1, [1, 2], empty=True), PREV) == 1

    def test_non_empty_min_falls_back_to_trailing_creation(self):
        assert workspace_on_focused_output(snap(2, [2, 3], reserved={4}), PREV) == 5


class TestMaximumBoundary:
    """Boundary taken from the highest workspace rather than the focused one."""

    def test_prev_from_non_empty_min_ignores_empty_max(self):
        snapshot = snap(3, [3, 5], empty=True, current_empty=False)
        assert workspace_on_focused_output(snapshot, PREV) == 6

    def test_prev_from_empty_min_with_non_empty_max(self):
        snapshot = snap(3, [3, 5], empty=False, current_empty=True)
        assert workspace_on_focused_output(snapshot, PREV) == 2

    def test_next_from_non_empty_workspace_below_empty_max(self):
        snapshot = snap(3, [3, 5], empty=True, current_empty=False)
        assert workspace_on_focused_output(snapshot, NEXT) == 5

    def test_next_from_non_empty_max_creates(self):
        snapshot = snap(5, [3, 5], empty=False, current_empty=False)
        assert workspace_on_focused_output(snapshot, NEXT) == 6

    def test_gap_prev_recycles_empty_max(self):
        """An empty highest workspace replaces the trailing slot."""
        snapshot = snap(1, [1, 5], reserved={3}, empty=True, current_empty=False)
        assert workspace_on_focused_output(snapshot, PREV, GAPS) == 5


class TestStaticBehaviour:
    """Static cycling only visits existing workspaces."""

    def test_next_wraps_from_max(self):
        assert workspace_on_focused_output(snap(7, [2, 5, 7]), NEXT, STATIC) == 2

    def test_prev_wraps_from_min(self):
        assert workspace_on_focused_output(snap(2, [2, 5, 7]), PREV, STATIC) == 7

    def test_single_workspace_stays(self):
        assert workspace_on_focused_output(snap(3, [3]), NEXT, STATIC) == 3
        assert workspace_on_focused_output(snap(3, [3]), PREV, STATIC) == 3

    @pytest.mark.parametrize("current", [5, 7])
    def test_next_then_prev_returns_to_start(self, current):
        focused = [2, 5, 7, 9]
        there = workspace_on_focused_output(snap(current, focused), NEXT, STATIC)
        back = workspace_on_focused_output(snap(there, focused), PREV, STATIC)
        assert there != current
        assert back == current


class TestGapWalking:
    """Walking through unused numbers between existing workspaces."""

    def test_candidates_skip_reserved_numbers(self):
        snapshot = snap(5, [1, 5], reserved={3})
        assert workspace_candidates(snapshot, STATIC_GAPS) == [1, 2, 4, 5]
        assert workspace_candidates(snapshot, GAPS) == [1, 2, 4, 5, 6]

    def test_next_lands_on_gap(self):
        assert workspace_on_focused_output(snap(2, [2, 5], reserved={3}), NEXT, GAPS) == 4

    def test_prev_lands_on_gap_below_min(self):
        assert workspace_on_focused_output(snap(3, [3, 4]), PREV, GAPS) == 2

    @pytest.mark.parametrize("policy", [GAPS, STATIC_GAPS])
    @pytest.mark.parametrize("direction", [NEXT, PREV])
    @pytest.mark.parametrize("start", [1, 2, 4, 5])
    def test_never_visits_reserved_number(self, policy, direction, start):
        snapshot = snap(start, sorted({start, 5}), reserved={3})
        assert workspace_on_focused_output(snapshot, direction, policy) != 3

    def test_creates_past_non_empty_max(self):
        assert workspace_on_focused_output(snap(5, [1, 5], reserved={6}), NEXT, GAPS) == 7

    def test_empty_boundary_wraps_instead_of_creating(self):
        assert workspace_on_focused_output(snap(5, [1, 5], empty=True), NEXT, GAPS) == 1

    def test_prev_from_first_wraps_to_new_trailing_slot(self):
        assert workspace_on_focused_output(snap(1, [1, 5]), PREV, GAPS) == 6

    def test_static_gap_walk_wraps_without_creating(self):
        assert workspace_on_focused_output(snap(5, [1, 5]), NEXT, STATIC_GAPS) == 1


class TestOutputAxis:
    """Cycling through the visible workspace of each output."""

    def test_next_wraps_to_first_output(self):
        assert visible_workspace_on_output(snap(8, [8], visible=[1, 3, 8]), NEXT) == 1

    def test_prev_wraps_to_last_output(self):
        assert visible_workspace_on_output(snap(1, [1], visible=[1, 3, 8]), PREV) == 8

    def test_moves_to_neighbour(self):
        assert visible_workspace_on_output(snap(3, [3], visible=[1, 3, 8]), NEXT) == 8
        assert visible_workspace_on_output(snap(3, [3], visible=[1, 3, 8]), PREV) == 1

    @pytest.mark.parametrize("direction", [NEXT, PREV])
    def test_current_not_visible_is_a_no_op(self, direction):
        assert visible_workspace_on_output(snap(4, [4], visible=[1, 3, 8]), direction) == 4

    def test_single_output_stays(self):
        assert visible_workspace_on_output(snap(2, [1, 2], visible=[2]), NEXT) == 2


class TestPickDestination:
    """Dispatch on (target, direction)."""

    def test_workspace_target(self):
        snapshot = snap(7, [2, 5, 7], empty=True, visible=[7, 9])
        assert pick_destination(snapshot, Target.WORKSPACE, NEXT) == 2

    def test_output_target_ignores_workspace_policy(self):
        snapshot = snap(7, [2, 5, 7], empty=True, visible=[7, 9])
        assert pick_destination(snapshot, Target.OUTPUT, NEXT, STATIC_GAPS) == 9

    def test_default_policy_is_dynamic(self):
        assert pick_destination(snap(3, [3]), Target.WORKSPACE, NEXT) == 4


class TestTotality:
    """Every request yields a number that never collides with another output."""

    def test_all_small_layouts(self):
        numbers = range(1, 6)
        policies = [DYNAMIC, STATIC, GAPS, STATIC_GAPS]
        for size in range(1, 4):
            for focused in itertools.combinations(numbers, size):
                reserved = {n for n in numbers if n not in focused and n % 2 == 0}
                for current, empty, policy, direction in itertools.product(
                    focused, [False, True], policies, [NEXT, PREV]
                ):
                    snapshot = snap(current, focused, reserved=reserved, empty=empty)
                    destination = workspace_on_focused_output(snapshot, direction, policy)
                    assert isinstance(destination, int)
                    assert destination >= 1
                    assert destination not in reserved
                    if policy.static_behaviour and not policy.walk_into_gaps:
                        assert destination in focused
