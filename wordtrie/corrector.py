"""Find a same-length word within a Hamming distance of a query."""

from wordtrie.trie import Trie, TrieNode, check_word


def autocorrect(trie: Trie, word: str, k: int) -> str | None:
    """Return the first word in alphabetical order that has the same length
    as word and differs from it in at most k positions, or None.

    This is the first acceptable match, not the closest one.
    """
    check_word(word, allow_empty=True)
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    n = len(word)
    buf: list[str] = []

    def dfs(node: TrieNode, diff: int) -> str | None:
        depth = len(buf)
        if depth == n:
            return "".join(buf) if node.is_word() else None
        want = word[depth]
        for i, child in node.children():
            let = trie.alphabet[i]
            d = diff + (let != want)
            if d > k:
                continue
            buf.append(let)
            found = dfs(child, d)
            buf.pop()
            if found is not None:
                return found
        return None

    return dfs(trie.root, 0)
