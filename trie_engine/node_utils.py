from typing import List, Optional

from .config import ALPHABET_SIZE


def bucket_index(letter: str) -> int:
    # position in the English alphabet, 'a' -> 0
    return ord(letter) - ord("a")


class Node:
    def __init__(self, letter: str):
        self.letter = letter
        self.is_word_end = False
        self.children: List[Optional["Node"]] = [None] * ALPHABET_SIZE

    def child_count(self) -> int:
        return sum(1 for child in self.children if child is not None)

    def is_empty(self) -> bool:
        return all(child is None for child in self.children)

    def is_dead(self) -> bool:
        """A node that ends no word and leads nowhere"""
        return not self.is_word_end and self.is_empty()

    def __repr__(self) -> str:
        # one level only, chains can be arbitrarily deep
        marker = "!" if self.is_word_end else ""
        letters = ",".join(child.letter for child in self.children if child is not None)
        return f"({self.letter}{marker}) -> [{letters}]"
