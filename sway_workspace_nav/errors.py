"""
Error handling for sway-workspace-nav.

Every failure is surfaced to the CLI boundary and turned into a non-zero
exit code. Navigation decisions are never retried: the compositor state may
have changed between attempts.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ErrorCode(Enum):
    """
    Error codes for sway-workspace-nav.

    Ranges:
    - 1000-1099: Argument and configuration errors
    - 1400-1499: Sway IPC errors
    - 1500-1599: Layout state errors
    """

    # Argument and configuration errors (1000-1099)
    INVALID_COMMAND = 1000
    INVALID_TARGET = 1001
    INVALID_DIRECTION = 1002
    INVALID_BOUNDARY = 1003
    INVALID_CONFIG = 1010

    # Sway IPC errors (1400-1499)
    SWAY_NOT_RUNNING = 1400
    SWAY_IPC_FAILED = 1401
    COMMAND_REJECTED = 1402

    # Layout state errors (1500-1599)
    NO_FOCUSED_OUTPUT = 1500
    NO_FOCUSED_WORKSPACE = 1501
    EMPTY_FOCUSED_WORKSPACE_SET = 1502
    DUPLICATE_WORKSPACE_NUMBER = 1503


class NavigationError(Exception):
    """Base exception for workspace navigation errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize navigation error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for JSON output.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


class InvalidPolicyArgument(NavigationError):
    """A command, target, direction or policy value could not be parsed."""

    def __init__(
        self,
        code: ErrorCode,
        kind: str,
        value: Any,
        choices: Optional[Iterable[str]] = None,
        suggestion: Optional[str] = None,
        reason: Optional[str] = None
    ):
        """
        Initialize invalid argument error.

        Args:
            code: Error code identifying the argument kind
            kind: Argument name (e.g. "command", "direction")
            value: Rejected value
            choices: Accepted values, if the argument is a closed set
            suggestion: Recovery suggestion
            reason: Why the value was rejected
        """
        context: Dict[str, Any] = {"kind": kind, "value": value}
        message = f"Invalid {kind}: {value!r}"
        if reason:
            context["reason"] = reason
            message += f" ({reason})"
        if choices is not None:
            choices = list(choices)
            context["choices"] = choices
            message += f". Expected one of [{', '.join(choices)}]"
            suggestion = suggestion or f"Use one of: {', '.join(choices)}"

        super().__init__(
            code=code,
            message=message,
            suggestion=suggestion,
            context=context
        )


class ConfigLoadError(InvalidPolicyArgument):
    """Policy configuration file could not be loaded."""

    def __init__(self, file_path: str, reason: str):
        """
        Initialize configuration load error.

        Args:
            file_path: Path to configuration file
            reason: Reason for load failure
        """
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            kind="configuration",
            value=file_path,
            suggestion="Check file syntax; accepted keys are walk_into_gaps, static and boundary",
            reason=reason
        )


class CompositorUnreachable(NavigationError):
    """Sway IPC connection could not be established or a call failed."""

    def __init__(self, operation: str, reason: str):
        """
        Initialize Sway IPC error.

        Args:
            operation: IPC operation that failed
            reason: Reason for failure
        """
        super().__init__(
            code=ErrorCode.SWAY_IPC_FAILED if operation != "connect" else ErrorCode.SWAY_NOT_RUNNING,
            message=f"Sway IPC {operation} failed: {reason}",
            suggestion="Ensure Sway is running and SWAYSOCK points at its IPC socket",
            context={"operation": operation, "reason": reason}
        )


class CommandRejected(NavigationError):
    """Sway answered a command with success=false."""

    def __init__(self, command: str, errors: Iterable[str]):
        """
        Initialize rejected command error.

        Args:
            command: Command string sent to sway
            errors: Error strings reported by sway
        """
        errors = [e for e in errors if e]
        reason = "; ".join(errors) if errors else "no error message"
        super().__init__(
            code=ErrorCode.COMMAND_REJECTED,
            message=f"Sway rejected '{command}': {reason}",
            suggestion="Run the command with swaymsg to inspect the failure",
            context={"command": command, "errors": errors}
        )


class InconsistentLayout(NavigationError):
    """Layout reported by sway has no well-defined navigation origin."""


class NoFocusedOutput(InconsistentLayout):
    """No output node lies on the tree's focus chain."""

    def __init__(self):
        super().__init__(
            code=ErrorCode.NO_FOCUSED_OUTPUT,
            message="Could not find the focused output in the layout tree",
            suggestion="Focus a window or workspace and try again"
        )


class NoFocusedWorkspace(InconsistentLayout):
    """GET_WORKSPACES reported no focused workspace."""

    def __init__(self):
        super().__init__(
            code=ErrorCode.NO_FOCUSED_WORKSPACE,
            message="Sway reported no focused workspace",
            suggestion="Focus a workspace and try again"
        )


class EmptyFocusedWorkspaceSet(InconsistentLayout):
    """The focused output reported zero workspaces."""

    def __init__(self, output_name: str):
        super().__init__(
            code=ErrorCode.EMPTY_FOCUSED_WORKSPACE_SET,
            message=f"Focused output {output_name} has no workspaces",
            context={"output": output_name}
        )


class DuplicateWorkspaceNumber(InconsistentLayout):
    """The same workspace number exists on the focused output and another output."""

    def __init__(self, numbers: List[int], outputs: List[str]):
        super().__init__(
            code=ErrorCode.DUPLICATE_WORKSPACE_NUMBER,
            message=(
                f"Workspace number(s) {numbers} exist on more than one output "
                f"({', '.join(outputs)})"
            ),
            suggestion="Rename one of the workspaces so each number lives on a single output",
            context={"numbers": numbers, "outputs": outputs}
        )
