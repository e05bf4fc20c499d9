"""Console entrypoint for the mondrian application.

This module delegates to :mod:`mondrian.cli` so that running
``python -m mondrian`` or the installed ``mondrian`` console script
executes the same application code.
"""

from __future__ import annotations

from mondrian.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`mondrian.cli.main`)."""
    raise SystemExit(cli_main())


if __name__ == "__main__":
    main()
