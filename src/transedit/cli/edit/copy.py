"""
transedit edit copy command.

SUMMARY: Copy a translation key in all locales
"""

from __future__ import annotations

import argparse
import sys

from transedit.cli import add_standard_flags, run_edit_command

SUMMARY = "Copy a translation key in all locales"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("origin", help="Key-path to copy from")
    parser.add_argument("destination", help="Key-path to copy to")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    return run_edit_command(args, ["copy", args.origin, args.destination])


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
