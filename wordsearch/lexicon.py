from __future__ import annotations

import logging
from typing import Iterable, Iterator

from wordsearch.errors import InvalidInputError, NotReadyError

logger = logging.getLogger("boggle")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str) -> bool:
        """Add a word. Returns False if it was already present."""
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if node.is_word:
            return False
        node.is_word = True
        return True

    def find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node


class Lexicon:
    """Ordered set of uppercase words with membership and prefix queries.

    Populated once via load(); queries before that raise NotReadyError.
    """

    def __init__(self):
        self._trie = Trie()
        self._words: list[str] = []
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self, words: Iterable[str] | None) -> Lexicon:
        if words is None:
            raise InvalidInputError("word source is required")
        for raw in words:
            if not isinstance(raw, str):
                raise InvalidInputError(f"words must be strings, got {raw!r}")
            word = raw.strip().upper()
            if word and self._trie.insert(word):
                self._words.append(word)
        self._words.sort()
        self._loaded = True
        return self

    def _check_ready(self, value: str | None, what: str):
        if value is None:
            raise InvalidInputError(f"{what} is required")
        if not self._loaded:
            raise NotReadyError("lexicon has not been loaded")

    def contains(self, word: str) -> bool:
        self._check_ready(word, "word")
        node = self._trie.find(word.upper())
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        self._check_ready(prefix, "prefix")
        if not prefix:
            return bool(self._words)
        # Every trie node lies on the path of at least one stored word.
        return self._trie.find(prefix.upper()) is not None

    def words_with_min_length(self, min_length: int) -> Iterator[str]:
        return (w for w in self._words if len(w) >= min_length)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._loaded and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)


def load_lexicon(path) -> Lexicon:
    """Load a dictionary file, taking the first whitespace-delimited token of each line."""
    if path is None:
        raise InvalidInputError("dictionary path is required")
    try:
        with open(path, "r", encoding="utf-8") as f:
            tokens = [line.split()[0] for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError(f"cannot read dictionary {path}: {e}") from e
    lexicon = Lexicon().load(tokens)
    logger.info("Loaded %d words from %s", len(lexicon), path)
    return lexicon
