"""
transedit edit outdated command.

SUMMARY: Flag a translation as outdated in all non-base locales

Appends the OUTDATED modifier to the key (``title`` becomes
``title(OUTDATED)``). Base locale files are never modified.
"""

from __future__ import annotations

import argparse
import sys

from transedit.cli import add_standard_flags, run_edit_command

SUMMARY = "Flag a translation as outdated in all non-base locales"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("path", help="Key-path to flag (e.g., 'loginPage.title')")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    return run_edit_command(args, ["outdated", args.path])


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
