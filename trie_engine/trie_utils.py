import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import LOGGER_NAME, ROOT_SENTINEL
from .node_utils import Node, bucket_index
from .validation_utils import validate_input

logger = logging.getLogger(LOGGER_NAME)


class Trie:
    """
    Prefix tree over the lowercase English alphabet.

    Every operation costs O(m) for a word of length m. Input is validated and
    lowercased before the tree is touched, so an invalid value never leaves a
    partial change behind.
    """

    def __init__(self, root: Optional[Node] = None):
        # a pre-built root lets fixtures seed arbitrary tree shapes
        self.root = root if root is not None else Node(ROOT_SENTINEL)

    def _find_node(self, word: str) -> Optional[Node]:
        cur = self.root
        for letter in word:
            cur = cur.children[bucket_index(letter)]
            if cur is None:
                return None
        return cur

    def insert(self, value: str) -> None:
        """Insert a word. Inserting a word twice leaves the trie unchanged."""
        word = validate_input(value)
        cur = self.root
        for letter in word:
            index = bucket_index(letter)
            if cur.children[index] is None:
                cur.children[index] = Node(letter)
            cur = cur.children[index]
        cur.is_word_end = True
        logger.debug(f"Inserted '{word}'")

    def contains(self, value: str) -> bool:
        """True if the value was inserted as a complete word"""
        node = self._find_node(validate_input(value))
        return node is not None and node.is_word_end

    def contains_prefix(self, value: str) -> bool:
        """True if some stored word starts with the value (the value itself included)"""
        return self._find_node(validate_input(value)) is not None

    def remove(self, value: str) -> None:
        """
        Remove a word if it is stored as a complete word.

        Walks down once, remembering the deepest fork node (a word end or a
        node with more than one child) and the slot leading from it towards
        the word. Three outcomes:

        1. The word is isolated: its whole chain below the fork is detached.
        2. The word is a prefix of another word ("auto" with "automobile"):
           only the end marker is cleared.
        3. The word extends another word ("automobile" with "auto"): only
           the suffix past the shorter word is detached.

        Args:
            value: The word to remove

        Raises:
            InvalidInputError: If the value is None, blank or not alphabetic
        """
        word = validate_input(value)

        cur = self.root
        last_fork = self.root
        last_fork_index = bucket_index(word[0])

        for letter in word:
            index = bucket_index(letter)
            child = cur.children[index]
            if child is None:
                logger.debug(f"Nothing to remove, '{word}' is not in the trie")
                return
            if cur.is_word_end or cur.child_count() > 1:
                last_fork = cur
                last_fork_index = index
            cur = child

        if not cur.is_word_end:
            logger.debug(f"Nothing to remove, '{word}' is only a prefix")
            return
        cur.is_word_end = False

        if not cur.is_empty():
            logger.debug(f"Unmarked '{word}', nodes kept for longer words")
            return

        last_fork.children[last_fork_index] = None
        logger.debug(f"Removed '{word}', detached '{chr(ord('a') + last_fork_index)}' branch below '{last_fork.letter}'")

    def remove_recursive(self, value: str) -> None:
        """
        Remove a word with a post-order walk.

        Same outcomes as remove(): the path is recorded on the way down and
        unwound bottom-up, detaching each child that is left dead. The path
        is an explicit stack, so word length is not bound by the interpreter's
        recursion limit. The root is always kept.

        Raises:
            InvalidInputError: If the value is None, blank or not alphabetic
        """
        word = validate_input(value)

        path: List[Tuple[Node, int]] = []
        cur = self.root
        for letter in word:
            index = bucket_index(letter)
            child = cur.children[index]
            if child is None:
                break
            path.append((cur, index))
            cur = child
        else:
            cur.is_word_end = False

        for parent, index in reversed(path):
            if not parent.children[index].is_dead():
                break
            parent.children[index] = None
        logger.debug(f"Post-order removal finished for '{word}'")

    def words(self) -> Iterator[str]:
        """Yield every stored word in alphabetical order"""
        stack: List[Tuple[Node, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word_end:
                yield prefix
            # reversed so the lowest letter is popped first
            for child in reversed(node.children):
                if child is not None:
                    stack.append((child, prefix + child.letter))

    def __iter__(self) -> Iterator[str]:
        return self.words()

    def dump(self) -> str:
        """
        Human-readable listing of the trie.

        "-word" lines mark word ends and leaves; "prefix:" lines open each
        branch that starts at the root or right after a word end.
        """
        lines: List[str] = []
        stack: List[Tuple[Node, str, bool]] = [(self.root, "", False)]
        while stack:
            node, prefix, opens_branch = stack.pop()
            if opens_branch:
                lines.append(f"{prefix}:")
            if node.is_word_end or node.is_empty():
                lines.append(f"-{prefix}")
            opens = node is self.root or node.is_word_end
            for child in reversed(node.children):
                if child is not None:
                    stack.append((child, prefix + child.letter, opens))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return f"Trie({self.root!r})"


def build_trie_from_words(words: Iterable[str]) -> Trie:
    """Build a trie from an iterable of words, e.g. the lines of a dictionary file"""
    trie = Trie()
    count = 0
    for line in words:
        word = line.strip()
        if word:  # Skip empty lines
            trie.insert(word)
            count += 1
    logger.info(f"Built trie from {count} words")
    return trie
