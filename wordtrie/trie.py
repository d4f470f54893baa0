from typing import Iterable, Iterator, Self

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)
LETTER_A = ord("a")
# Longest word the trie accepts. Searches recurse once per letter.
MAX_WORD_LENGTH = 99


class InvalidWordError(ValueError):
    """Raised for words that are empty, too long, or contain characters outside a-z."""


def is_trie_word(word: str):
    if not word or len(word) > MAX_WORD_LENGTH:
        return False
    for let in word:
        if let < "a" or let > "z":
            return False
    return True


def to_idx(letter: str) -> int:
    return ord(letter) - LETTER_A


def check_word(word: str, allow_empty=False):
    if word == "" and allow_empty:
        return
    if not isinstance(word, str) or not is_trie_word(word):
        raise InvalidWordError(
            f"not a lowercase a-z word of at most {MAX_WORD_LENGTH} letters: {word!r}"
        )


class TrieNode:
    _children: list[Self | None]
    _terminal_count: int
    _subtree_word_count: int

    def __init__(self):
        self._terminal_count = 0
        self._subtree_word_count = 0
        self._children = [None] * ALPHABET_SIZE

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def is_word(self):
        return self._terminal_count > 0

    def terminal_count(self):
        return self._terminal_count

    def subtree_word_count(self):
        return self._subtree_word_count

    def has_children(self):
        return any(c is not None for c in self._children)

    def children(self) -> Iterator[tuple[int, Self]]:
        """Populated slots in alphabet order."""
        for i, child in enumerate(self._children):
            if child is not None:
                yield i, child

    def size(self):
        return self._terminal_count + sum(c.size() for c in self._children if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)


class Trie:
    """A 26-ary prefix tree with per-subtree word counts.

    Every node tracks how many times the word ending at it was inserted
    (terminal_count) and how many word endings live in its subtree
    (subtree_word_count). The root is never pruned, even when empty.
    """

    root: TrieNode
    alphabet: str
    node_count: int

    def __init__(self):
        self.root = TrieNode()
        self.alphabet = ALPHABET
        self.node_count = 1

    def insert(self, word: str) -> None:
        check_word(word)
        node = self.root
        node._subtree_word_count += 1
        for let in word:
            c = to_idx(let)
            child = node._children[c]
            if child is None:
                child = node._children[c] = TrieNode()
                self.node_count += 1
            node = child
            node._subtree_word_count += 1
        node._terminal_count += 1

    def remove(self, word: str) -> bool:
        """Remove one occurrence of word. Returns False if it wasn't present.

        The whole path is checked before any counter changes, so removing
        a missing word leaves the trie untouched.
        """
        check_word(word)
        path = [self.root]
        for let in word:
            c = to_idx(let)
            if not path[-1].starts_word(c):
                return False
            path.append(path[-1].descend(c))

        last = path[-1]
        if last._terminal_count == 0:
            return False

        last._terminal_count -= 1
        for node in path:
            node._subtree_word_count -= 1

        # Only the tail of the path can have become empty. A node with no
        # words below it has no live children either, so it can be dropped
        # from its parent directly.
        depth = len(word)
        while depth > 0 and path[depth]._subtree_word_count == 0:
            assert not path[depth].has_children()
            path[depth - 1]._children[to_idx(word[depth - 1])] = None
            self.node_count -= 1
            depth -= 1
        return True

    def find_prefix(self, prefix: str) -> TrieNode | None:
        check_word(prefix, allow_empty=True)
        node = self.root
        for let in prefix:
            c = to_idx(let)
            if not node.starts_word(c):
                return None
            node = node.descend(c)
        return node

    def find_word(self, word: str) -> TrieNode | None:
        node = self.find_prefix(word)
        if node is not None and node.is_word():
            return node
        return None

    def count(self, word: str) -> int:
        node = self.find_prefix(word)
        return node.terminal_count() if node else 0

    def __contains__(self, word: str):
        return is_trie_word(word) and self.find_word(word) is not None

    def size(self):
        return self.root.subtree_word_count()

    def __len__(self):
        return self.size()

    def words(self, prefix="") -> Iterator[tuple[str, int]]:
        """Yield (word, multiplicity) pairs in alphabetical order."""
        node = self.find_prefix(prefix)
        if node is None:
            return
        buf = list(prefix)
        yield from _walk(node, buf, self.alphabet)

    def load(self, path: str) -> int:
        """Insert every whitespace-delimited token in the file.

        Returns the number of words inserted.
        """
        n = 0
        with open(path, encoding="utf-8") as f:
            for line in f:
                for word in line.split():
                    self.insert(word)
                    n += 1
        return n

    def check_invariants(self):
        n = _check_node(self.root, is_root=True)
        assert n == self.node_count, f"node_count={self.node_count}, actual={n}"

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "Trie":
        trie = Trie()
        for word in words:
            trie.insert(word)
        return trie


def _walk(node: TrieNode, buf: list[str], alphabet: str) -> Iterator[tuple[str, int]]:
    if node.is_word():
        yield "".join(buf), node.terminal_count()
    for i, child in node.children():
        buf.append(alphabet[i])
        yield from _walk(child, buf, alphabet)
        buf.pop()


def _check_node(node: TrieNode, is_root=False) -> int:
    """Verify the count invariants below node; returns the number of nodes."""
    assert node.terminal_count() >= 0
    if not is_root:
        assert node.subtree_word_count() > 0, "unpruned empty node"
    n = 1
    total = node.terminal_count()
    for _, child in node.children():
        n += _check_node(child)
        total += child.subtree_word_count()
    assert node.subtree_word_count() == total, (
        f"subtree_word_count={node.subtree_word_count()}, expected {total}"
    )
    return n


def make_trie(dict_input: str) -> Trie:
    t = Trie()
    t.load(dict_input)
    return t
