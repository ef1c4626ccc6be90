"""Command-line entry point for the finance calculators."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from fincli import invest, realestate


def build_parser() -> argparse.ArgumentParser:
    """Build the ``fin`` argument parser with all command groups."""
    parser = argparse.ArgumentParser(prog="fin", description="Finance CLI: Do Finance.")
    parser.set_defaults(handler=lambda args: parser.print_help())
    subparsers = parser.add_subparsers(title="commands", metavar="COMMAND")
    realestate.register_commands(subparsers)
    invest.register_commands(subparsers)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        args.handler(args)
    except (ValueError, ArithmeticError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())