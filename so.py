"""
Print the best Stack Overflow answer for a query, code first.

Usage:
  so python read file line by line
  so -v 1 -a 2 golang string to int   # second answer, with surrounding prose
  so -l -n 5 rust borrow checker      # list the top 5 matches

Optional env vars:
  SO_API_URL     -> default: https://api.stackexchange.com/2.3
  SO_SITE        -> default: stackoverflow
  SO_TIMEOUT     -> request timeout in seconds (default: 10)
  SO_LOG_LEVEL   -> default: WARNING
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from config import Options, Settings, get_settings
from errors import RetrievalError
from html_text import unescape
from models import Question
from render import show_answer
from stackexchange import StackExchangeClient


USAGE = "usage: so [-v level] [-l] [-a N] [-n N] <query>"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="so",
        description="Show Stack Overflow answers in the terminal",
        usage="%(prog)s [-v level] [-l] [-a N] [-n N] <query>",
    )
    ap.add_argument("-v", dest="verbosity", type=int, default=0, help="verbosity level (0=snippet only, 1=with context, 2=full)")
    ap.add_argument("-l", dest="list_results", action="store_true", help="list search results with answer counts")
    ap.add_argument("-a", dest="answer", type=int, default=1, help="answer number to show")
    ap.add_argument("-n", dest="limit", type=int, default=10, help="number of search results")
    ap.add_argument("query", nargs=argparse.REMAINDER, help="search terms")
    return ap


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def print_results(results: List[Question], out: TextIO) -> None:
    for i, q in enumerate(results, start=1):
        print(f"[{i}] {unescape(q.title)} ({q.answer_count} answers)", file=out)


def main(argv: Optional[Sequence[str]] = None, client: Optional[StackExchangeClient] = None) -> int:
    args = build_parser().parse_args(argv)
    if not args.query:
        print(USAGE, file=sys.stderr)
        return 1

    options = Options(
        verbosity=args.verbosity,
        list_results=args.list_results,
        answer=args.answer,
        limit=args.limit,
    )
    settings = get_settings()
    configure_logging(settings)
    client = client or StackExchangeClient(settings)

    query = " ".join(args.query)
    try:
        results = client.search(query, options.limit)
    except RetrievalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if not results:
        print("no results")
        return 0

    if options.list_results:
        print_results(results, sys.stdout)
        return 0

    show_answer(client, results[0], options, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
