"""
Scan and parse Lox expressions, printing their syntax tree.

Usage:
  python -m lox [script] [--tokens] [--debug]

Without a script, expressions are read line by line from an interactive prompt.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from icecream import ic

from lox.error.communicator import ErrorRaiser
from lox.error.error import PrinterException
from lox.parser.parser import Parser
from lox.scanner.scanner import Scanner
from lox.tree.printer import AstPrinter
from lox.tree.tree import Node

# Exit codes, following sysexits.h
EX_USAGE = 64
EX_DATAERR = 65

ic.configureOutput(prefix="lox| ")
ic.disable()


def run(source: str, errors: ErrorRaiser, show_tokens: bool = False) -> Optional[Node]:
    """Scan and parse `source`, then print either its tokens or its syntax tree.

    Diagnostics are printed to stderr instead, in which case nothing is printed to
    stdout and None is returned.
    """
    scanner = Scanner(source, errors)
    tokens = scanner.scan()
    ic(tokens)

    parser = Parser(source, errors)
    tree = parser.parse(tokens)
    ic(tree)

    # The parser may produce a tree despite earlier scanner errors
    if errors.had_error:
        errors.report()
        return None

    if show_tokens:
        for token in tokens:
            print(f"{token.type.name} {token.lexeme} {token.literal}")
    else:
        try:
            output = AstPrinter().print(tree)
        except PrinterException as exception:
            print(f"Error: {exception}", file=sys.stderr)
            return None
        print(output)
    return tree


def run_file(path: Path, show_tokens: bool = False) -> int:
    tree = run(path.read_text(encoding="utf8"), ErrorRaiser(), show_tokens)
    return EX_DATAERR if tree is None else 0


def run_prompt(show_tokens: bool = False) -> int:
    while True:
        print("> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            return 0
        # Every line gets a fresh collector, so one mistake does not end the session
        run(line, ErrorRaiser(), show_tokens)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lox", description="Parse a Lox expression and print its syntax tree."
    )
    parser.add_argument("script", nargs="*", help="Path to a file holding one expression")
    parser.add_argument("--tokens", action="store_true", help="Print the scanned tokens instead of the tree")
    parser.add_argument("--debug", action="store_true", help="Trace the tokens and tree with icecream")

    args = parser.parse_args(argv)

    if len(args.script) > 1:
        print("Usage: lox [script]")
        return EX_USAGE

    if args.debug:
        ic.enable()
    else:
        ic.disable()

    if args.script:
        return run_file(Path(args.script[0]), args.tokens)
    return run_prompt(args.tokens)


if __name__ == "__main__":
    raise SystemExit(main())
