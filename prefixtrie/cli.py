"""Command line: print the first words of a dictionary matching a prefix."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from prefixtrie.constants import DEFAULT_LIMIT, DEFAULT_PREFIX
from prefixtrie.dictionary import Dictionary

log = logging.getLogger("prefixtrie")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefixtrie",
        description="List dictionary words starting with a prefix",
    )
    parser.add_argument("prefix", nargs="?", default=DEFAULT_PREFIX,
                        help=f"Prefix to complete (default: {DEFAULT_PREFIX!r})")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to a newline-delimited word list")
    parser.add_argument("--limit", "-n", type=int, default=DEFAULT_LIMIT,
                        help=f"Maximum number of words to print (default: {DEFAULT_LIMIT})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def _emit(line: str) -> None:
    # Words read with surrogateescape go back out as their original bytes.
    sys.stdout.buffer.write(line.encode("utf-8", "surrogateescape") + b"\n")


def run(prefix: str, limit: int, dictionary: Dictionary) -> None:
    words = dictionary.complete(prefix, limit)
    _emit(f"First {len(words)} words matching prefix {prefix}:")
    for word in words:
        _emit(word)
    sys.stdout.buffer.flush()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.limit < 0:
        parser.error("--limit must be zero or positive")

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.dict and not os.path.isfile(args.dict):
        log.error("Dictionary file not found: %s", args.dict)
        return 1

    try:
        dictionary = Dictionary(args.dict)
    except OSError as exc:
        log.error("Could not read dictionary: %s", exc)
        return 1

    run(args.prefix, args.limit, dictionary)
    dictionary.trie.destroy()
    return 0
