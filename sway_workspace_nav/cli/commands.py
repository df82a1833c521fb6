"""CLI command handling for sway-workspace-nav.

Usage:
    sway-workspace-nav [move-focus-to|move-container-to] [workspace|output] [prev|next]
                       [--walk-into-gaps] [--static | --dynamic] [--boundary current|maximum]

Exit codes:
  0 - Destination reached (or printed with --dry-run)
  1 - Sway rejected the navigation command
  2 - Invalid arguments or configuration
  3 - Sway IPC unreachable
  4 - Layout has no well-defined focused output/workspace
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Callable, List, Optional

from .. import __version__
from ..core.config import apply_overrides, load_policy
from ..core.navigation import pick_destination
from ..core.snapshot import snapshot_from_sway
from ..core.sway_client import SwayClient
from ..errors import (
    CommandRejected,
    CompositorUnreachable,
    InconsistentLayout,
    InvalidPolicyArgument,
    NavigationError,
)
from ..models.policy import BoundaryPolicy, Command, Direction, NavigationPolicy, Target, choices
from .logging_config import get_logger, log_timing, setup_logging


EXIT_OK = 0
EXIT_COMMAND_REJECTED = 1
EXIT_INVALID_ARGUMENT = 2
EXIT_COMPOSITOR_UNREACHABLE = 3
EXIT_INCONSISTENT_LAYOUT = 4


# ANSI color codes for output
class Colors:
    RESET = "\033[0m"
    RED = "\033[31m"
    BLUE = "\033[34m"


def print_error_with_remediation(error: str, remediation: Optional[str]) -> None:
    """Print error with remediation steps to stderr.

    Format: "Error: <issue>" followed by "Remediation: <steps>" when known.
    """
    print(f"{Colors.RED}✗ Error:{Colors.RESET} {error}", file=sys.stderr)
    if remediation:
        print(f"{Colors.BLUE}  Remediation:{Colors.RESET} {remediation}", file=sys.stderr)


def _enum_argument(parse: Callable[[str], object]) -> Callable[[str], object]:
    """Adapt an enum ``from_str`` to an argparse ``type`` callable."""

    def convert(value: str):
        try:
            return parse(value)
        except InvalidPolicyArgument as e:
            raise argparse.ArgumentTypeError(e.message)

    return convert


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sway-workspace-nav",
        description="Automatically create workspaces under sway like gnome does",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"sway-workspace-nav {__version__}"
    )

    # Logging flags
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging (INFO level)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level, includes verbose)"
    )

    parser.add_argument(
        "command",
        nargs="?",
        default=Command.MOVE_FOCUS_TO.value,
        type=_enum_argument(Command.from_str),
        metavar="{" + ",".join(choices(Command)) + "}",
        help="What to do with the destination (default: move-focus-to)"
    )
    parser.add_argument(
        "to",
        nargs="?",
        default=Target.WORKSPACE.value,
        type=_enum_argument(Target.from_str),
        metavar="{" + ",".join(choices(Target)) + "}",
        help="Navigate among the focused output's workspaces or among outputs (default: workspace)"
    )
    parser.add_argument(
        "dir",
        nargs="?",
        default=Direction.NEXT.value,
        type=_enum_argument(Direction.from_str),
        metavar="{" + ",".join(choices(Direction)) + "}",
        help="Direction (default: next)"
    )

    # Policy flags; None means "not given" so the config file value is kept
    parser.add_argument(
        "--walk-into-gaps",
        action="store_const",
        const=True,
        default=None,
        help="Visit unused workspace numbers between existing ones"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--static",
        dest="static_behaviour",
        action="store_const",
        const=True,
        default=None,
        help="Never create workspaces; wrap around existing ones"
    )
    mode.add_argument(
        "--dynamic",
        dest="static_behaviour",
        action="store_const",
        const=False,
        help="Create workspaces at either end when needed (default)"
    )
    parser.add_argument(
        "--boundary",
        type=_enum_argument(BoundaryPolicy.from_str),
        default=None,
        metavar="{" + ",".join(choices(BoundaryPolicy)) + "}",
        help="Workspace whose emptiness decides between wrapping and creating (default: current)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Policy configuration file (default: ~/.config/sway-workspace-nav/config.json)"
    )
    parser.add_argument(
        "--socket",
        default=None,
        help="Sway IPC socket path (default: $SWAYSOCK)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the destination workspace instead of switching to it"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="With --dry-run, print snapshot, policy and destination as JSON"
    )

    return parser


def resolve_policy(args: argparse.Namespace) -> NavigationPolicy:
    """Combine the config file with CLI overrides.

    Raises:
        InvalidPolicyArgument: If the config file is invalid
    """
    policy = load_policy(args.config)
    return apply_overrides(policy, {
        "walk_into_gaps": args.walk_into_gaps,
        "static_behaviour": args.static_behaviour,
        "boundary": args.boundary,
    })


def execute(client: SwayClient, command: Command, destination: int) -> None:
    """Issue the sway command(s) for ``command``.

    Moving a container also focuses the destination so focus follows the window.

    Raises:
        CompositorUnreachable: If a command cannot be delivered
        CommandRejected: If sway refuses a command
    """
    if command is Command.MOVE_CONTAINER_TO:
        client.move_container_to_workspace(destination)
    client.focus_workspace(destination)


def run(args: argparse.Namespace) -> int:
    """Build the snapshot, pick the destination and act on it."""
    logger = get_logger()
    policy = resolve_policy(args)
    logger.debug(f"Request: {args.command.value} {args.to.value} {args.dir.value}, policy {policy}")

    with SwayClient(socket_path=args.socket) as client:
        with log_timing("Build snapshot", logger):
            snapshot = snapshot_from_sway(client, policy.boundary)

        destination = pick_destination(snapshot, args.to, args.dir, policy)

        if args.dry_run:
            if args.json:
                print(json.dumps({
                    "command": args.command.value,
                    "to": args.to.value,
                    "dir": args.dir.value,
                    "policy": policy.model_dump(mode="json"),
                    "snapshot": snapshot.to_json(),
                    "destination": destination,
                }, indent=2))
            else:
                print(destination)
            return EXIT_OK

        execute(client, args.command, destination)

    return EXIT_OK


def cli_main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.json and not args.dry_run:
        parser.error("--json requires --dry-run")

    setup_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        return run(args)
    except InvalidPolicyArgument as e:
        print_error_with_remediation(e.message, e.suggestion)
        return EXIT_INVALID_ARGUMENT
    except CompositorUnreachable as e:
        print_error_with_remediation(e.message, e.suggestion)
        return EXIT_COMPOSITOR_UNREACHABLE
    except InconsistentLayout as e:
        print_error_with_remediation(e.message, e.suggestion)
        return EXIT_INCONSISTENT_LAYOUT
    except CommandRejected as e:
        print_error_with_remediation(e.message, e.suggestion)
        return EXIT_COMMAND_REJECTED
    except NavigationError as e:
        logger.error(f"Unhandled navigation error: {e.to_dict()}")
        print_error_with_remediation(e.message, e.suggestion)
        return EXIT_COMMAND_REJECTED


def main() -> None:
    """Console script entry point."""
    sys.exit(cli_main())
