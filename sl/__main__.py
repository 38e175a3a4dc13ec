"""CLI: python -m sl [-e EXPR | FILE]

Without arguments, reads one form per line from stdin and echoes its
canonical form. Logging level comes from the LOGLEVEL environment variable.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .errors import ParseError
from .parser import parse_line
from .types import ReplConfig


def _get_log_level() -> int:
    level = getattr(logging, os.getenv("LOGLEVEL", "").upper(), None)
    if isinstance(level, int):
        return level
    return logging.WARNING


def echo_line(line: str, out: TextIO, err: TextIO) -> bool:
    """Parse one line and print its rendering or the error. Returns success."""
    try:
        node = parse_line(line)
    except ParseError as e:
        print(e, file=err)
        return False
    if node is not None:
        print(node, file=out)
    return True


def run_lines(lines: Iterable[str], out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    ok = True
    for line in lines:
        ok = echo_line(line.rstrip("\n"), out, err) and ok
    return 0 if ok else 1


def run_repl(cfg: ReplConfig) -> int:
    import readline

    readline.set_history_length(cfg.history_length)
    if cfg.history_file and os.path.exists(cfg.history_file):
        readline.read_history_file(cfg.history_file)
    try:
        while True:
            try:
                line = input(cfg.prompt)
            except KeyboardInterrupt:
                print()
                continue
            except EOFError:
                print()
                return 0
            echo_line(line, sys.stdout, sys.stderr)
    finally:
        if cfg.history_file:
            try:
                readline.write_history_file(cfg.history_file)
            except OSError as e:
                logging.warning("could not save history to %s: %s", cfg.history_file, e)


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=_get_log_level(), format="%(message)s", stream=sys.stderr)

    parser = argparse.ArgumentParser(prog="sl", description="Parse sl S-expressions and print their canonical form.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-e", "--expr", help="parse a single expression and exit")
    group.add_argument("file", nargs="?", type=Path, help="read one expression per line from FILE")
    args = parser.parse_args(argv)

    if args.expr is not None:
        return 0 if echo_line(args.expr, sys.stdout, sys.stderr) else 1
    if args.file is not None:
        with args.file.open() as f:
            return run_lines(f)
    if sys.stdin.isatty():
        return run_repl(ReplConfig.from_env())
    return run_lines(sys.stdin)


if __name__ == "__main__":
    sys.exit(main())
