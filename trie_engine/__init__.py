from .node_utils import Node
from .validation_utils import InvalidInputError
from .trie_utils import Trie, build_trie_from_words
from .fixture_utils import NodeView, build_trie, load_fixtures

__all__ = [
    "Node",
    "InvalidInputError",
    "Trie",
    "build_trie_from_words",
    "NodeView",
    "build_trie",
    "load_fixtures",
]
