"""
CLI entry point. Run as: python -m backchain KB_FILE [KB_FILE ...] [-q QUERY ...]

With no -q, queries are read from stdin, one per line.
"""

import argparse
import logging
import sys

from .display import print_answer
from .errors import BackchainError, KnowledgeBaseError
from .inference.backward import BackwardChainer
from .loader import load_knowledge_base, parse_query

# Each level of a proof costs a few Python frames; the interpreter's
# default of 1000 gives up on proofs a few hundred rules deep.
DEFAULT_RECURSION_LIMIT = 5000


def run_query(chainer: BackwardChainer, text: str, show_all: bool = False) -> bool:
    """Parse, prove and print one query. Returns True if it was proved."""
    try:
        goals = parse_query(text)
    except BackchainError as e:
        print(f"error: {e}", file=sys.stderr)
        return False
    try:
        bindings = chainer.ask(goals)
    except RecursionError:
        print("no (recursion limit reached; search too deep or non-terminating)")
        return False
    print_answer(goals, bindings, show_all)
    return bindings is not None


def main(argv=None):
    parser = argparse.ArgumentParser(description="Backward-chaining inference over Horn clauses")
    parser.add_argument("kb", nargs="+", help="Knowledge base file(s), read in order")
    parser.add_argument("-q", "--query", action="append", default=[],
                        help="Query to prove (repeatable); default: read stdin")
    parser.add_argument("--bindings", action="store_true",
                        help="Also show the full binding list of each proof")
    parser.add_argument("--verbose", action="store_true", help="Trace the search")
    parser.add_argument("--recursion-limit", type=int, default=DEFAULT_RECURSION_LIMIT,
                        help="Python recursion limit for deep proofs "
                             f"(default {DEFAULT_RECURSION_LIMIT}; never lowered)")
    args = parser.parse_args(argv)

    if args.recursion_limit > sys.getrecursionlimit():
        sys.setrecursionlimit(args.recursion_limit)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        kb = load_knowledge_base(*args.kb)
    except KnowledgeBaseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    chainer = BackwardChainer(kb)
    queries = args.query or (line for line in sys.stdin)
    for text in queries:
        text = text.strip()
        if not text or text[0] in "%#":
            continue
        if not args.query:
            print(f"?- {text}")
        run_query(chainer, text, show_all=args.bindings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
