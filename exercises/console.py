"""Shared plumbing for the console exercises: argument parsing, logging setup and line input."""

import argparse
import logging
import sys
from typing import TextIO


def build_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more (-v info, -vv debug)")
    parser.add_argument("--no-interactive", action="store_true", help="Run the built-in test cases only")
    return parser


def configure_logging(verbosity: int) -> None:
    """Map -v counts to log levels: WARNING by default, INFO for -v, DEBUG for -vv and above."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def prompt(message: str, stdin: TextIO | None = None) -> str | None:
    """Print `message` without a newline and read one line. Returns None at end of input."""
    print(message, end="", flush=True)
    line = (stdin or sys.stdin).readline()
    if not line:
        print()
        return None
    return line.rstrip("\r\n")


def parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None
