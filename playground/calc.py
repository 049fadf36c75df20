#!/usr/bin/env python3
"""
calc.py

Command-line calculator over the parsemath pipeline.

Usage examples:
    python -m playground.calc "3+2-1*5/4"
    python -m playground.calc --ast "2^3^2"
    python -m playground.calc --file expressions.txt
    python -m playground.calc -- "-3+5"    # leading minus needs --
    python -m playground.calc            # interactive, one expression per line
"""

import argparse
import logging
import sys

from parsemath.ast_utils import ast_to_pretty
from parsemath.errors import ParseMathError
from parsemath.eval import evaluate
from parsemath.parser import parse
from engine.batch import evaluate_batch, summarize

EXIT_WORDS = {"exit", "quit"}


def run_one(src: str, show_ast: bool = False, out=None, err=None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        ast = parse(src)
        if show_ast:
            print(ast_to_pretty(ast), file=out)
        print(evaluate(ast), file=out)
    except ParseMathError as e:
        print(f"error: {e}", file=err)
        return 1
    except RecursionError:
        print("error: expression nested too deeply", file=err)
        return 1
    return 0


def run_file(path: str, out=None) -> int:
    out = out or sys.stdout
    with open(path, "r", encoding="utf-8") as f:
        lines = [line.strip() for line in f if line.strip()]
    df = evaluate_batch(lines)
    print(df.to_string(index=False), file=out)
    stats = summarize(df)
    print(f"\n{stats['ok']}/{stats['total']} evaluated, {stats['failed']} failed", file=out)
    return 1 if stats["failed"] else 0


def repl(inp=None, out=None, err=None, show_ast: bool = False) -> int:
    inp = inp or sys.stdin
    out = out or sys.stdout
    interactive = inp.isatty()
    while True:
        if interactive:
            print("> ", end="", file=out, flush=True)
        line = inp.readline()
        if not line:
            break
        src = line.strip()
        if not src:
            continue
        if src in EXIT_WORDS:
            break
        run_one(src, show_ast=show_ast, out=out, err=err)
    return 0


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Evaluate arithmetic expressions.")
    ap.add_argument("expr", nargs="?", help="expression to evaluate; omit for interactive mode")
    ap.add_argument("--ast", action="store_true", help="print the parsed tree before the result")
    ap.add_argument("--file", help="evaluate every non-blank line of a file")
    ap.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.file:
        return run_file(args.file)
    if args.expr is not None:
        return run_one(args.expr, show_ast=args.ast)
    return repl(show_ast=args.ast)


if __name__ == "__main__":
    sys.exit(main())
