#!/usr/bin/env python
"""Drive a Trie with a stream of commands.

Input is a sequence of whitespace-delimited tokens, for example:

  INSERT car
  INSERT cat
  AUTOCOMPLETE ca 0
  AUTOCORRECT cbt 1
  EXIT

Each result is printed on its own line; searches that find nothing print
"No words found". AUTOCOMPLETE with mode 0 prints three lines
(lexicographic, shortest, most frequent).
"""

import argparse
import fileinput
import sys
from typing import Iterable, Iterator, TextIO

from wordtrie.args import add_standard_args, get_trie_from_args
from wordtrie.completer import autocomplete
from wordtrie.corrector import autocorrect
from wordtrie.trie import Trie

NO_MATCH = "No words found"


class CommandError(ValueError):
    """A malformed command. The loop reports it and moves on."""


def tokenize(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next_arg(tokens: Iterator[str], op: str) -> str:
    tok = next(tokens, None)
    if tok is None:
        raise CommandError(f"{op}: missing argument")
    return tok


def _next_int(tokens: Iterator[str], op: str) -> int:
    tok = _next_arg(tokens, op)
    try:
        return int(tok)
    except ValueError:
        raise CommandError(f"{op}: expected an integer, got {tok!r}") from None


def run_command(trie: Trie, op: str, tokens: Iterator[str]) -> list[str]:
    """Execute one command, consuming its arguments. Returns output lines."""
    match op:
        case "INSERT":
            trie.insert(_next_arg(tokens, op))
        case "REMOVE":
            trie.remove(_next_arg(tokens, op))
        case "LOAD":
            trie.load(_next_arg(tokens, op))
        case "AUTOCORRECT":
            word = _next_arg(tokens, op)
            k = _next_int(tokens, op)
            return [autocorrect(trie, word, k) or NO_MATCH]
        case "AUTOCOMPLETE":
            word = _next_arg(tokens, op)
            mode = _next_int(tokens, op)
            return [w or NO_MATCH for w in autocomplete(trie, word, mode)]
        case _:
            raise CommandError(f"Unknown command: {op}")
    return []


def run_commands(trie: Trie, tokens: Iterable[str], out: TextIO | None = None):
    """Run commands until EXIT or the end of input.

    Bad commands (invalid words, bad numbers, unknown ops) are reported on
    stderr and skipped. Errors opening a LOAD file propagate.
    """
    if out is None:
        out = sys.stdout
    it = iter(tokens)
    for op in it:
        if op == "EXIT":
            break
        try:
            lines = run_command(trie, op, it)
        except ValueError as e:
            sys.stderr.write(f"error: {e}\n")
            continue
        for line in lines:
            out.write(line + "\n")


def main():
    parser = argparse.ArgumentParser(
        prog="wordtrie",
        description="Insert, remove, complete and correct words in a trie.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing commands, or stdin"
    )
    args = parser.parse_args()

    try:
        trie = get_trie_from_args(args)
        with fileinput.input(files=args.files, encoding="utf-8") as lines:
            run_commands(trie, tokenize(lines))
    except OSError as e:
        sys.stderr.write(f"{e.filename}: {e.strerror}\n")
        sys.exit(e.errno or 1)
    except UnicodeDecodeError as e:
        sys.stderr.write(f"error: {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
