"""
transedit edit move command.

SUMMARY: Move or rename a translation key in all locales

When only the last segment changes the key is renamed in place, keeping its
position. Otherwise the entry is removed and re-inserted at the destination,
possibly in another namespace file of the same locale.
"""

from __future__ import annotations

import argparse
import sys

from transedit.cli import add_standard_flags, run_edit_command

SUMMARY = "Move or rename a translation key in all locales"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("origin", help="Current key-path (e.g., 'loginPage.title')")
    parser.add_argument("destination", help="New key-path (e.g., 'authPage.title')")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    return run_edit_command(args, ["move", args.origin, args.destination])


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
