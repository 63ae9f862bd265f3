import logging
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26


def char_index(ch: str) -> int:
    """
    Map a character to its position in the supported alphabet.

    Args:
        ch (str): A single character.

    Returns:
        int: 0 for 'a' through 25 for 'z', or -1 if the character
             is not a lowercase Latin letter.
    """
    if len(ch) != 1:
        return -1
    index = ord(ch) - ord("a")
    if 0 <= index < ALPHABET_SIZE:
        return index
    return -1


class TrieNode:
    """
    A single character position in the trie.

    Attributes:
        value (str | None):
            The character of this node. None only for the root.
        children (dict[str, TrieNode]):
            Mapping from a character to the next TrieNode.
        is_end (bool):
            True if some inserted string terminates at this node.
    """
    __slots__ = ("value", "children", "is_end")

    def __init__(self, value: Optional[str] = None):
        self.value = value
        self.children = {}
        self.is_end = False

    def accumulate(self) -> list[str]:
        """
        Collect every suffix stored below this node.

        The node's own character is not included; the caller prepends it.
        A leaf always counts as the end of a string.

        Returns:
            list[str]: Suffixes depth first in child iteration order,
                       a terminal node before its descendants.
        """
        suffixes = []
        stack = [(self, "")]
        while stack:
            node, suffix = stack.pop()
            if node.value is not None and (node.is_end or not node.children):
                suffixes.append(suffix)
            # reversed so the first child is popped first
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, suffix + ch))
        return suffixes


class Trie:
    """
    A prefix tree over lowercase Latin letters supporting insertion
    and retrieval of every stored string sharing a prefix.

    Input is lowercased before use. Characters outside a-z are
    reported through the module logger and never raise.

    Not thread safe; callers sharing a Trie must synchronize.
    """

    def __init__(self):
        """Initialize an empty trie."""
        self.root = TrieNode()

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: Optional[str]) -> None:
        """
        Insert a string into the trie.

        An unsupported character stops the insertion at that point;
        the characters before it stay in the trie.

        Args:
            word (str | None): The string to insert. None is ignored.

        Returns:
            None
        """
        if word is None:
            return

        node = self.root
        for ch in word.lower():
            if char_index(ch) == -1:
                logger.warning("Following character is not supported in this Trie: %r", ch)
                return
            if ch not in node.children:
                node.children[ch] = TrieNode(ch)
            node = node.children[ch]

        if node is not self.root:
            node.is_end = True

    def search(self, prefix: Optional[str]) -> Optional[list[str]]:
        """
        Retrieve all stored strings beginning with a prefix.

        Args:
            prefix (str | None): The prefix to match. An empty prefix
                matches everything.

        Returns:
            list[str] | None: Lowercased matches, or None when the prefix
                is None, contains an unsupported character, or leads
                nowhere in the trie.
        """
        if prefix is None:
            return None

        prefix = prefix.lower()
        node = self.root
        for ch in prefix:
            if char_index(ch) == -1:
                logger.warning("Following character is not supported in this Trie: %r", ch)
                return None
            node = node.children.get(ch)
            if node is None:
                return None

        return [prefix + suffix for suffix in node.accumulate()]

    def __iter__(self) -> Iterator[str]:
        """
        Iterate over all strings stored in the trie.

        Yields:
            str: Next stored string.
        """
        yield from self.search("")
