"""
CLI entry point. Run as: python -m hornlog [options]

    python -m hornlog --program peano --query "add(X, Y, s(s(z)))"
    python -m hornlog --load family.pl          # then query interactively
"""

import argparse
import os
import sys

from .core.clauses import ClauseStore
from .core.engine import take_answers, format_answer
from .syntax import Parser, ParseError, load_file
from .programs import PROGRAMS, load_program
from .repl import Repl
from .visualization import print_store, print_history, export_dot


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def default_max_answers() -> int:
    try:
        return positive_int(os.environ.get("HORNLOG_MAX_ANSWERS", "10"))
    except argparse.ArgumentTypeError:
        return 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hornlog", description="Horn-clause query engine")
    parser.add_argument("--load", action="append", default=[], metavar="FILE",
                        help="Load a program file (repeatable)")
    parser.add_argument("--program", choices=list(PROGRAMS.keys()), default=None,
                        help="Preload a built-in program")
    parser.add_argument("--query", type=str, default=None,
                        help="Run one query and exit instead of starting the REPL")
    parser.add_argument("--max-answers", type=positive_int, default=default_max_answers(),
                        help="Answers to print for --query (default 10, env HORNLOG_MAX_ANSWERS)")
    parser.add_argument("--max-steps", type=positive_int, default=None,
                        help="Give up a --query after this many expansions")
    parser.add_argument("--dot",     type=str, default=None, help="Export predicate graph to file")
    parser.add_argument("--list",    action="store_true",    help="Print the loaded clauses")
    parser.add_argument("--history", action="store_true",    help="Print the search log of --query")
    parser.add_argument("--verbose", action="store_true",    help="Trace every expansion")
    return parser


def run_query(store, parser, text, max_answers, max_steps=None,
              verbose=False, history=False) -> int:
    """Print up to max_answers answers for text. Exit status 0 iff any answer was found."""
    try:
        goals = parser.parse_goals(text)
    except ParseError as e:
        print(f"syntax error: {e}", file=sys.stderr)
        return 2

    query = store.query(goals, verbose=verbose, record_history=history)
    try:
        answers, reason = take_answers(query, limit=max_answers, max_steps=max_steps)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 1

    for answer in answers:
        print(format_answer(answer))
    if reason == "exhausted":
        print("false." if not answers else "no more answers.")
    else:
        print(f"[stopped] {reason} after {query.steps} steps")

    if history:
        print_history(query)
    return 0 if answers else 1


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    store = ClauseStore()
    parser = Parser()

    if args.program:
        clauses = load_program(args.program, store, parser)
        print(f"Program: {args.program} ({len(clauses)} clauses)")

    for path in args.load:
        try:
            clauses = load_file(path, store, parser)
        except OSError as e:
            print(f"cannot read {path}: {e.strerror or e}", file=sys.stderr)
            return 2
        except ParseError as e:
            print(f"syntax error in {path}: {e}", file=sys.stderr)
            return 2
        print(f"Loaded {len(clauses)} clauses from {path}")

    if args.list:
        print_store(store)

    if args.dot:
        export_dot(store, args.dot)

    if args.query is not None:
        return run_query(store, parser, args.query, args.max_answers,
                         max_steps=args.max_steps, verbose=args.verbose,
                         history=args.history)

    Repl(store, parser, verbose=args.verbose).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
