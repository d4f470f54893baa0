"""Prefix completion over a Trie.

All three searches walk down the path spelled by the prefix, then do a
depth-first search below it, visiting children in alphabet order. The word
being built lives in a single list that grows and shrinks with the DFS.
"""

from wordtrie.trie import Trie, TrieNode

MODE_ALL = 0
MODE_LEXICOGRAPHIC = 1
MODE_SHORTEST = 2
MODE_MOST_FREQUENT = 3
MODES = (MODE_ALL, MODE_LEXICOGRAPHIC, MODE_SHORTEST, MODE_MOST_FREQUENT)


def _first_word(node: TrieNode, buf: list[str], alphabet: str) -> str | None:
    if node.is_word():
        return "".join(buf)
    for i, child in node.children():
        buf.append(alphabet[i])
        found = _first_word(child, buf, alphabet)
        buf.pop()
        if found is not None:
            return found
    return None


def complete_lexicographic(trie: Trie, prefix: str) -> str | None:
    """The alphabetically first word starting with prefix."""
    node = trie.find_prefix(prefix)
    if node is None:
        return None
    return _first_word(node, list(prefix), trie.alphabet)


def complete_shortest(trie: Trie, prefix: str) -> str | None:
    """The shortest word starting with prefix; ties go to the first in DFS order."""
    node = trie.find_prefix(prefix)
    if node is None:
        return None
    best: str | None = None
    buf = list(prefix)

    def dfs(n: TrieNode):
        nonlocal best
        if best is not None and len(buf) >= len(best):
            return
        if n.is_word():
            best = "".join(buf)
            # Everything below is longer.
            return
        for i, child in n.children():
            buf.append(trie.alphabet[i])
            dfs(child)
            buf.pop()

    dfs(node)
    return best


def complete_most_frequent(trie: Trie, prefix: str) -> str | None:
    """The most frequently inserted word starting with prefix.

    Ties go to the first word in DFS (alphabetical) order.
    """
    node = trie.find_prefix(prefix)
    if node is None:
        return None
    best: str | None = None
    best_count = 0
    buf = list(prefix)

    def dfs(n: TrieNode):
        nonlocal best, best_count
        if n.terminal_count() > best_count:
            best = "".join(buf)
            best_count = n.terminal_count()
        for i, child in n.children():
            # A subtree can't contain a word more frequent than its total.
            if child.subtree_word_count() <= best_count:
                continue
            buf.append(trie.alphabet[i])
            dfs(child)
            buf.pop()

    dfs(node)
    return best


COMPLETERS = {
    MODE_LEXICOGRAPHIC: complete_lexicographic,
    MODE_SHORTEST: complete_shortest,
    MODE_MOST_FREQUENT: complete_most_frequent,
}


def autocomplete(trie: Trie, prefix: str, mode: int) -> list[str | None]:
    """Run the completion(s) selected by mode.

    Mode 0 runs all three, in the order lexicographic, shortest, most
    frequent. Each entry is None if no word starts with prefix.
    """
    if mode not in MODES:
        raise ValueError(f"Invalid autocomplete mode: {mode}")
    if mode == MODE_ALL:
        modes = [MODE_LEXICOGRAPHIC, MODE_SHORTEST, MODE_MOST_FREQUENT]
    else:
        modes = [mode]
    return [COMPLETERS[m](trie, prefix) for m in modes]
