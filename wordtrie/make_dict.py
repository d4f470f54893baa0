#!/usr/bin/env python
"""Filter a word list down to words the trie accepts (lowercase a-z only)."""

import fileinput

from wordtrie.trie import is_trie_word


def clean_word(word: str) -> str | None:
    word = word.strip()
    return word if is_trie_word(word) else None


def main():
    for line in fileinput.input():
        word = clean_word(line)
        if word:
            print(word)


if __name__ == "__main__":
    main()
