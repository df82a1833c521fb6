"""Sway IPC client for querying layout state and issuing navigation commands.

This module provides a synchronous wrapper around i3ipc.Connection for:
- Layout tree (GET_TREE)
- Workspaces (GET_WORKSPACES)
- Outputs/monitors (GET_OUTPUTS)
- Sending commands (RUN_COMMAND)

Replies are converted into the typed models from ``models.topology`` so the
rest of the package never touches i3ipc objects directly, apart from the
layout tree.
"""

import logging
from typing import List, Optional

import i3ipc

from ..errors import CommandRejected, CompositorUnreachable
from ..models.topology import OutputInfo, WorkspaceInfo


logger = logging.getLogger(__name__)


class SwayClient:
    """Synchronous wrapper for sway IPC queries and commands.

    The connection is opened lazily on first use, or explicitly through
    ``connect()`` / the context manager protocol. Pass ``connection`` to use an
    existing (or mocked) i3ipc connection.
    """

    def __init__(self, connection: Optional[i3ipc.Connection] = None, socket_path: Optional[str] = None):
        """Initialize sway client.

        Args:
            connection: Existing i3ipc connection to reuse
            socket_path: Explicit IPC socket path (default: $SWAYSOCK / $I3SOCK)
        """
        self._connection = connection
        self._socket_path = socket_path

    def connect(self) -> None:
        """Connect to the sway IPC socket.

        Raises:
            CompositorUnreachable: If connection fails
        """
        if self._connection is not None:
            return
        try:
            logger.debug("Connecting to sway IPC socket")
            self._connection = i3ipc.Connection(socket_path=self._socket_path, auto_reconnect=False)
            logger.debug("Connected to sway IPC")
        except Exception as e:
            logger.error(f"Failed to connect to sway IPC: {e}")
            raise CompositorUnreachable("connect", str(e))

    def close(self) -> None:
        """Close the sway connection."""
        # i3ipc has no explicit close; the socket closes with the connection object
        self._connection = None

    @property
    def connection(self) -> i3ipc.Connection:
        if self._connection is None:
            self.connect()
        return self._connection

    def get_tree(self) -> i3ipc.Con:
        """Get the sway layout tree (GET_TREE).

        Returns:
            Root container with full layout hierarchy

        Raises:
            CompositorUnreachable: If query fails
        """
        try:
            logger.debug("IPC query: GET_TREE")
            return self.connection.get_tree()
        except CompositorUnreachable:
            raise
        except Exception as e:
            logger.error(f"GET_TREE failed: {e}")
            raise CompositorUnreachable("GET_TREE", str(e))

    def get_outputs(self) -> List[OutputInfo]:
        """Get all outputs (GET_OUTPUTS).

        Returns:
            List of OutputInfo, in the order sway reports them

        Raises:
            CompositorUnreachable: If query fails
        """
        try:
            logger.debug("IPC query: GET_OUTPUTS")
            outputs = self.connection.get_outputs()
        except CompositorUnreachable:
            raise
        except Exception as e:
            logger.error(f"GET_OUTPUTS failed: {e}")
            raise CompositorUnreachable("GET_OUTPUTS", str(e))

        logger.debug(f"GET_OUTPUTS returned {len(outputs)} output(s)")
        return [
            OutputInfo(
                name=out.name,
                x=out.rect.x,
                y=out.rect.y,
                active=bool(out.active),
            )
            for out in outputs
        ]

    def get_workspaces(self) -> List[WorkspaceInfo]:
        """Get all workspaces (GET_WORKSPACES).

        Returns:
            List of WorkspaceInfo; ``representation`` comes from sway's raw reply

        Raises:
            CompositorUnreachable: If query fails
        """
        try:
            logger.debug("IPC query: GET_WORKSPACES")
            workspaces = self.connection.get_workspaces()
        except CompositorUnreachable:
            raise
        except Exception as e:
            logger.error(f"GET_WORKSPACES failed: {e}")
            raise CompositorUnreachable("GET_WORKSPACES", str(e))

        logger.debug(f"GET_WORKSPACES returned {len(workspaces)} workspace(s)")
        return [
            WorkspaceInfo(
                num=ws.num,
                name=ws.name or "",
                output=ws.output,
                focused=bool(ws.focused),
                visible=bool(ws.visible),
                # i3 has no representation field; sway always sends it
                representation=(getattr(ws, "ipc_data", None) or {}).get("representation") or "",
            )
            for ws in workspaces
        ]

    def command(self, cmd: str) -> None:
        """Send a command to sway (RUN_COMMAND).

        Args:
            cmd: sway command string

        Raises:
            CompositorUnreachable: If the command could not be delivered
            CommandRejected: If sway reports a failed result
        """
        try:
            logger.debug(f"IPC command: {cmd}")
            results = self.connection.command(cmd)
        except CompositorUnreachable:
            raise
        except Exception as e:
            logger.error(f"RUN_COMMAND failed for '{cmd}': {e}")
            raise CompositorUnreachable("RUN_COMMAND", str(e))

        failed = [r for r in results if not r.success]
        logger.debug(f"RUN_COMMAND completed: {len(results) - len(failed)}/{len(results)} succeeded")
        if failed:
            raise CommandRejected(cmd, [getattr(r, "error", None) for r in failed])

    # Navigation commands

    def focus_workspace(self, number: int) -> None:
        """Focus (creating if needed) the workspace with the given number."""
        self.command(f"workspace number {number}")

    def move_container_to_workspace(self, number: int) -> None:
        """Move the focused container to the workspace with the given number."""
        self.command(f"move container to workspace number {number}")

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
