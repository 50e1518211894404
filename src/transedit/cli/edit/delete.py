"""
transedit edit delete command.

SUMMARY: Delete a translation key from all locales
"""

from __future__ import annotations

import argparse
import sys

from transedit.cli import add_standard_flags, run_edit_command

SUMMARY = "Delete a translation key from all locales"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("path", help="Key-path to delete (e.g., 'loginPage.title')")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    return run_edit_command(args, ["delete", args.path])


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
