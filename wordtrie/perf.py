#!/usr/bin/env python
"""I/O-free performance test.

Inserts random words into a trie (or loads --dictionary), then times
prefix completion and autocorrect queries against it.

$ poetry run python -m wordtrie.perf --random_seed 808813 200000
"""

import argparse
import random
import time

from tqdm import tqdm

from wordtrie.args import add_standard_args, get_trie_from_args
from wordtrie.completer import MODE_ALL, autocomplete
from wordtrie.corrector import autocorrect
from wordtrie.trie import ALPHABET, Trie


def random_word(min_len=3, max_len=10) -> str:
    n = random.randint(min_len, max_len)
    return "".join(random.choice(ALPHABET) for _ in range(n))


def timed(label: str, fn, items: list):
    start_s = time.time()
    for item in tqdm(items, desc=label, smoothing=0):
        fn(item)
    elapsed_s = time.time() - start_s
    rate = len(items) / elapsed_s if elapsed_s else float("inf")
    print(f"{label}: {elapsed_s:.2f}s, {rate:.2f} ops/sec")


def main():
    parser = argparse.ArgumentParser(
        prog="Trie perf test",
        description="Measure the speed of trie operations, free from I/O.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "--queries",
        type=int,
        default=10_000,
        help="Number of completion and correction queries to run.",
    )
    parser.add_argument(
        "--k",
        type=int,
        default=1,
        help="Substitution budget for autocorrect queries.",
    )
    parser.add_argument(
        "num_words",
        type=int,
        help="Number of random words to insert",
        default=100_000,
        nargs="?",
    )
    args = parser.parse_args()
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    t: Trie = get_trie_from_args(args)
    words = [random_word() for _ in range(args.num_words)]
    timed("insert", t.insert, words)
    print(f"{t.size()} words, {t.node_count} nodes")

    prefixes = [random_word(1, 3) for _ in range(args.queries)]
    timed("autocomplete", lambda p: autocomplete(t, p, MODE_ALL), prefixes)

    queries = [random_word(3, 6) for _ in range(args.queries)]
    timed("autocorrect", lambda w: autocorrect(t, w, args.k), queries)


if __name__ == "__main__":
    main()
