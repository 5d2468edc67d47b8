#!/usr/bin/env python3
"""
REGOP CLI
---------
Command-line driver: collects patterns and operators from flags and/or a
recipe file, runs them over each input, then previews the result as a diff
or writes it back.

Author: Regop Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from typing import List, Optional, TextIO

from regop.cli.formatter import DiffFormatter
from regop.config.recipe import Recipe, load_recipe
from regop.core.engine import STDIN_MARKER, RegopEngine
from regop.core.errors import RegopError

VERSION = "0.5.0"

EPILOG = r"""Examples:

  # Increment edition in Cargo.toml by one
  regop -r 'edition = "(?<edition>[^"]+)' -o '<edition>:inc' Cargo.toml

  # Swap anyhow major and patch version, increment minor by 3
  regop -r 'anyhow = "(?<major>\d+)\.(?<minor>\d+)\.(?<patch>\d+)"' \
    -o '<major>:swap:<patch>' -o '<minor>:inc:3' Cargo.toml

  # Update all major versions in all toml files
  find -name '*.toml' | regop -w -r '"(?<major>\d+)\.(?<minor>\d+)\.(?<patch>\d+)"' -o '<major>:inc'

  # Read from stdin and write to stdout
  cat Cargo.toml | regop -w -r 'version = "(?<major>\d)' -o '<major>:rep:21' -

Operators: inc[:n] dec[:n] mul:n div:n rep:x del swap:<group> append:x prepend:x upper lower
"""


class RegopCLI:
    """
    CLI wrapper that translates user flags into Engine runs.
    """

    def __init__(self, stdin: Optional[TextIO] = None, formatter: Optional[DiffFormatter] = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.formatter = formatter or DiffFormatter()
        self.parser = argparse.ArgumentParser(
            prog="regop",
            description="Easy file manipulation with regex and operators.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=EPILOG,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags."""
        self.parser.add_argument("--version", action="version", version=f"regop {VERSION}")
        self.parser.add_argument("-w", "--write", action="store_true",
                                 help="Write to files, will write to stdout if input file is `-`")
        self.parser.add_argument("-l", "--lines", action="store_true",
                                 help="Operate on lines individually, one by one")
        self.parser.add_argument("-r", "--regex", action="append", default=[],
                                 help="Regular expression with named groups, can be repeated")
        self.parser.add_argument("-o", "--op", action="append", default=[],
                                 help="Operator like '<group>:inc:2', can be repeated")
        self.parser.add_argument("--recipe", help="YAML file with 'regex', 'op' and 'lines' entries")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        self.parser.add_argument("file", nargs="*",
                                 help="File to operate on, use `-` for stdin, can be repeated")

    def _build_recipe(self, args: argparse.Namespace) -> Recipe:
        recipe = load_recipe(args.recipe) if args.recipe else Recipe()
        recipe = recipe.extend(args.regex, args.op, args.lines)
        if not recipe.regex:
            self.parser.error("at least one regex is required (-r/--regex or --recipe)")
        if not recipe.op:
            self.parser.error("at least one operator is required (-o/--op or --recipe)")
        return recipe

    def _handle_file(self, engine: RegopEngine, file: str, write: bool):
        """
        Preview mode shows a diff of changes; write mode applies them
        (stdin content goes to stdout).
        """
        report = engine.process_file(file, write=write)
        if report["content"] is None:
            return

        if not write:
            self.formatter.display_diff(report["original"], report["content"], file)
        elif file == STDIN_MARKER:
            self.formatter.display_content(report["content"])

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit code."""
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

        try:
            recipe = self._build_recipe(args)
            patterns, operators = recipe.build()
            engine = RegopEngine(patterns, operators, lines=recipe.lines, stdin=self.stdin)

            files = args.file or engine.iter_file_names()
            for file in files:
                self._handle_file(engine, file, args.write)
        except RegopError as e:
            self.formatter.display_error(str(e))
            return 1

        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(RegopCLI().run())
    except KeyboardInterrupt:
        DiffFormatter().display_error("Terminated by user.")
        sys.exit(1)


if __name__ == "__main__":
    main()
