import argparse
from pathlib import Path

from wordtrie.args import add_standard_args, get_trie_from_args

TESTDATA = Path(__file__).parent.parent / "testdata"


def parse(argv: list[str], **kwargs):
    parser = argparse.ArgumentParser()
    add_standard_args(parser, **kwargs)
    return parser.parse_args(argv)


def test_no_dictionary():
    t = get_trie_from_args(parse([]))
    assert t.size() == 0


def test_dictionary():
    t = get_trie_from_args(parse(["--dictionary", str(TESTDATA / "words-small.txt")]))
    assert t.count("cat") == 3
    assert "bath" in t


def test_random_seed():
    assert parse([], random_seed=True).random_seed == -1
    assert parse(["--random_seed", "42"], random_seed=True).random_seed == 42
    assert not hasattr(parse([]), "random_seed")
