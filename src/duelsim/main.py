"""Entry-point for launching the scripted session."""
from __future__ import annotations

from .presentation.cli.app import main as cli_main


def main() -> int:
    """Run the CLI presentation layer."""
    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
