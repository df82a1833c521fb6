"""Pytest configuration and shared fixtures for sway_workspace_nav tests."""

import itertools
from typing import Callable, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from sway_workspace_nav.models.topology import OutputInfo, WorkspaceInfo


_ids = itertools.count(1000)


def _con(con_type: str, name: str, nodes: Optional[list] = None, focus: Optional[list] = None) -> MagicMock:
    """Mock i3ipc.Con with the attributes the snapshot builder reads."""
    con = MagicMock()
    # MagicMock(name=...) names the mock itself, so set attributes afterwards
    con.id = next(_ids)
    con.type = con_type
    con.name = name
    con.nodes = nodes or []
    con.floating_nodes = []
    con.focus = focus or []
    return con


def _output_reply(name: str, x: int, y: int = 0, active: bool = True) -> MagicMock:
    reply = MagicMock()
    reply.name = name
    reply.rect = MagicMock(x=x, y=y, width=1920, height=1080)
    reply.active = active
    return reply


def _workspace_reply(ws: Dict) -> MagicMock:
    reply = MagicMock()
    reply.num = ws["num"]
    reply.name = ws.get("name", str(ws["num"]))
    reply.output = ws["output"]
    reply.focused = ws.get("focused", False)
    reply.visible = ws.get("visible", False)
    reply.ipc_data = {
        "num": ws["num"],
        "output": ws["output"],
        "representation": ws.get("representation", "H[foot]"),
    }
    return reply


def _command_reply(success: bool = True, error: Optional[str] = None) -> MagicMock:
    reply = MagicMock()
    reply.success = success
    reply.error = error
    return reply


@pytest.fixture
def sway_tree() -> Callable[..., MagicMock]:
    """Factory for a mock layout tree whose focus chain ends on ``focused_output``.

    Each output gets one workspace child so the chain continues past it, and a
    ``__i3`` scratchpad output is always present but never focused.
    """

    def build(output_names: List[str], focused_output: Optional[str]) -> MagicMock:
        outputs = []
        for name in ["__i3"] + list(output_names):
            workspace = _con("workspace", f"ws-{name}")
            outputs.append(_con("output", name, nodes=[workspace], focus=[workspace.id]))
        root_focus = [o.id for o in outputs if o.name == focused_output]
        return _con("root", "root", nodes=outputs, focus=root_focus)

    return build


@pytest.fixture
def fake_sway(sway_tree) -> Callable[..., MagicMock]:
    """Factory for a mock i3ipc.Connection answering the three layout queries.

    Args (of the returned factory):
        outputs: list of (name, x) tuples
        workspaces: list of dicts with num, output and optional focused,
            visible, representation
        focused_output: output on the tree's focus chain
        command_results: replies returned by every ``command`` call
    """

    def build(
        outputs: List[tuple],
        workspaces: List[Dict],
        focused_output: Optional[str],
        command_results: Optional[list] = None,
    ) -> MagicMock:
        conn = MagicMock()
        conn.get_tree.return_value = sway_tree([name for name, _ in outputs], focused_output)
        conn.get_outputs.return_value = [_output_reply(name, x) for name, x in outputs]
        conn.get_workspaces.return_value = [_workspace_reply(ws) for ws in workspaces]
        conn.command.return_value = command_results or [_command_reply()]
        return conn

    return build


@pytest.fixture
def command_reply() -> Callable[..., MagicMock]:
    """Factory for RUN_COMMAND result objects."""
    return _command_reply


@pytest.fixture
def dual_head_layout() -> Dict:
    """Laptop (left) plus external monitor (right).

    eDP-1 holds 1, 2 (focused, visible) and 5 (empty); DP-1 holds 3 (visible) and 4.
    """
    return {
        "outputs": [("DP-1", 1920), ("eDP-1", 0)],
        "workspaces": [
            {"num": 1, "output": "eDP-1"},
            {"num": 2, "output": "eDP-1", "focused": True, "visible": True},
            {"num": 3, "output": "DP-1", "visible": True},
            {"num": 4, "output": "DP-1"},
            {"num": 5, "output": "eDP-1", "representation": ""},
        ],
        "focused_output": "eDP-1",
    }


@pytest.fixture
def workspace_info() -> Callable[..., WorkspaceInfo]:
    """Factory for WorkspaceInfo with sensible defaults."""

    def build(num: int, output: str = "eDP-1", **kwargs) -> WorkspaceInfo:
        kwargs.setdefault("name", str(num))
        kwargs.setdefault("representation", "H[foot]")
        return WorkspaceInfo(num=num, output=output, **kwargs)

    return build


@pytest.fixture
def output_info() -> Callable[..., OutputInfo]:
    """Factory for OutputInfo."""

    def build(name: str, x: int = 0, y: int = 0, active: bool = True) -> OutputInfo:
        return OutputInfo(name=name, x=x, y=y, active=active)

    return build
