"""CLI entry point for orbital-clock."""

from __future__ import annotations

# Must run before importing modules that use 3.12+ syntax.
import sys

if sys.version_info < (3, 12):  # noqa: UP036
    print("Error: orbital-clock requires Python 3.12 or higher.")
    print(
        "You are running Python {}.{}".format(  # noqa: UP032
            sys.version_info.major, sys.version_info.minor
        )
    )
    sys.exit(1)

from orbital_clock.cli.commands.root import cli  # noqa: E402


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
