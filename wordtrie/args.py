"""Standard command-line arguments shared across tools."""

import argparse

from wordtrie.trie import Trie, make_trie


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "--dictionary",
        type=str,
        default=None,
        help="Path to a word list to load before running. Words are "
        "whitespace-delimited and must be lowercase a-z.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_trie_from_args(args: argparse.Namespace) -> Trie:
    if args.dictionary:
        return make_trie(args.dictionary)
    return Trie()
