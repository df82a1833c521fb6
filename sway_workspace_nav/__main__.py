"""Entry point for ``python -m sway_workspace_nav``."""

import sys

from sway_workspace_nav.cli.commands import cli_main


def main() -> int:
    """Run the CLI and return its exit code."""
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
