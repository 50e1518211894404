"""
transedit edit add command.

SUMMARY: Add a translation to one locale

Inserts a value at a key-path in every file of the given locale (and, with
namespaces enabled, of the path's namespace), creating parent keys as needed.
"""

from __future__ import annotations

import argparse
import sys

from transedit.cli import add_standard_flags, run_edit_command

SUMMARY = "Add a translation to one locale"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("locale", help="Target locale (e.g., 'fr', 'de-CH')")
    parser.add_argument("path", help="Key-path to add (e.g., 'greetings.hello')")
    parser.add_argument("value", help="Translation value")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    return run_edit_command(args, ["add", args.locale, args.path, args.value])


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
