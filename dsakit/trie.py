"""A prefix tree of words, each optionally carrying a value."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False
    value: Any = None
    count: int = 0  # words that end at or pass through this node


class Trie:
    """A prefix tree supporting insertion, lookup, prefix queries and deletion."""

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def _node(self, word: str) -> Optional[_Node]:
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def _add(self, word: str) -> _Node:
        existing = self._node(word)
        if existing is not None and existing.is_end:
            return existing
        node = self._root
        node.count += 1
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.count += 1
        node.is_end = True
        self._size += 1
        return node

    def insert(self, word: str) -> None:
        """Add ``word``; adding a word already present changes nothing."""
        self._add(word)

    def insert_with_value(self, word: str, value: Any) -> None:
        """Add ``word`` with ``value``, replacing the value of an existing word."""
        self._add(word).value = value

    def search(self, word: str) -> bool:
        """Return whether ``word`` was inserted."""
        node = self._node(word)
        return node is not None and node.is_end

    def search_with_value(self, word: str) -> Any:
        """Return the value stored with ``word``; raise KeyError if absent."""
        node = self._node(word)
        if node is None or not node.is_end:
            raise KeyError(word)
        return node.value

    def starts_with(self, prefix: str) -> bool:
        """Return whether any stored word begins with ``prefix``."""
        return self._node(prefix) is not None

    def count_prefix(self, prefix: str) -> int:
        """Return how many stored words begin with ``prefix``."""
        node = self._node(prefix)
        return 0 if node is None else node.count

    def _walk(self, node: _Node, prefix: str) -> Iterator[str]:
        if node.is_end:
            yield prefix
        for ch, child in node.children.items():
            yield from self._walk(child, prefix + ch)

    def find_all_with_prefix(self, prefix: str) -> list[str]:
        """Return every stored word that begins with ``prefix``."""
        node = self._node(prefix)
        if node is None:
            return []
        return list(self._walk(node, prefix))

    def delete(self, word: str) -> bool:
        """Remove ``word``; return whether it was present. The empty word is never removed."""
        if not word:
            return False
        path = [self._root]
        for ch in word:
            child = path[-1].children.get(ch)
            if child is None:
                return False
            path.append(child)
        terminal = path[-1]
        if not terminal.is_end:
            return False
        terminal.is_end = False
        terminal.value = None
        self._size -= 1
        for node in path:
            node.count -= 1
        for parent, ch, child in zip(reversed(path[:-1]), reversed(word), reversed(path[1:])):
            if child.count:
                break
            del parent.children[ch]
        return True


def main(argv: Sequence[str] | None = None) -> int:
    """Print a demonstration of the trie."""
    print("=== Trie (Prefix Tree) Algorithm Demonstrations ===\n")

    print("Example 1: Basic Word Dictionary")
    print("Demonstrating basic word storage and retrieval")
    dictionary = Trie()
    words = ["cat", "car", "cart", "dog", "done"]
    print("\nInserting words:", words)
    for word in words:
        dictionary.insert(word)

    print("\nSearching for words:")
    for word in ["cat", "car", "cart", "dog", "do", "done", "cats"]:
        print(f"'{word}' exists: {str(dictionary.search(word)).lower()}")

    print("\nChecking prefixes:")
    for prefix in ["ca", "do", "tr"]:
        has_prefix = dictionary.starts_with(prefix)
        count = dictionary.count_prefix(prefix)
        print(f"Prefix '{prefix}': exists={str(has_prefix).lower()}, word count={count}")
        if has_prefix:
            print(f"Words with prefix '{prefix}': {dictionary.find_all_with_prefix(prefix)}")

    print("\nExample 2: Dictionary with Word Definitions")
    print("Demonstrating storage of words with associated values")
    definitions = Trie()
    entries = {
        "code": "Instructions for a computer",
        "coding": "The process of writing computer programs",
        "coder": "Someone who writes code",
        "algorithm": "A step-by-step procedure for calculations",
    }
    print("\nInserting words with definitions:")
    for word, meaning in entries.items():
        definitions.insert_with_value(word, meaning)
        print(f"Added: {word}")

    print("\nLooking up definitions:")
    for word in ["code", "coding", "coder", "algorithm", "programmer"]:
        try:
            print(f"{word}: {definitions.search_with_value(word)}")
        except KeyError:
            print(f"{word}: Not found in dictionary")

    print("\nExample 3: Dynamic Dictionary Operations")
    print("Demonstrating insertion, deletion, and prefix operations")
    dynamic = Trie()
    print("\nStep 1: Inserting words")
    for word in ["apple", "app", "apricot", "banana", "band"]:
        dynamic.insert(word)
        print(f"Added: {word}")

    print("\nStep 2: Words with prefix 'ap':")
    ap_words = dynamic.find_all_with_prefix("ap")
    print(f"Found {len(ap_words)} words: {ap_words}")

    print("\nStep 3: Deleting words")
    for word in ["app", "banana", "notexist"]:
        print(f"Deleting '{word}': {str(dynamic.delete(word)).lower()}")

    print("\nStep 4: Final dictionary state")
    print(f"Dictionary size: {len(dynamic)}")
    print("Words with prefix 'ap':", dynamic.find_all_with_prefix("ap"))
    print("Words with prefix 'ban':", dynamic.find_all_with_prefix("ban"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())