import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .config import ALPHABET_SIZE, LOGGER_NAME
from .node_utils import Node, bucket_index
from .trie_utils import Trie

logger = logging.getLogger(LOGGER_NAME)


class NodeView(BaseModel):
    """Serializable description of a trie node and its subtree"""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, description="Case name, set on fixture roots")
    value: str = Field(..., min_length=1, max_length=1, description="Letter of the node")
    is_word_end: bool = Field(default=False, alias="isWordEnd")
    children: Optional[List[Optional["NodeView"]]] = Field(
        default=None,
        description=f"Either {ALPHABET_SIZE} positional slots (null when empty) or child views placed by letter",
    )


NodeView.model_rebuild()

_fixture_adapter = TypeAdapter(List[NodeView])


def _child_slot(view: NodeView) -> int:
    if not "a" <= view.value <= "z":
        raise ValueError(f"Child letter must be a-z, got '{view.value}'")
    return bucket_index(view.value)


def _is_positional(children: List[Optional[NodeView]]) -> bool:
    if len(children) != ALPHABET_SIZE:
        return False
    # a full list of letters is sparse unless every letter already sits in its own slot
    if any(child is None for child in children):
        return True
    return all(_child_slot(child) == position for position, child in enumerate(children))


def _placed_children(view: NodeView) -> Iterator[Tuple[int, NodeView]]:
    if not view.children:
        return
    positional = _is_positional(view.children)
    for position, child_view in enumerate(view.children):
        if child_view is None:
            continue
        index = _child_slot(child_view)
        if positional and index != position:
            raise ValueError(f"Letter '{child_view.value}' found in slot {position}, expected slot {index}")
        yield index, child_view


def _node_of(view: NodeView) -> Node:
    node = Node(view.value)
    node.is_word_end = view.is_word_end
    return node


def node_from_view(view: NodeView) -> Node:
    """
    Build real owned nodes from a tree description.

    Args:
        view: Root of the description; its own letter is taken as-is

    Returns:
        A new Node owning a copy of the described subtree

    Raises:
        ValueError: If a child letter is outside a-z, a positional slot holds
            the wrong letter, or two children share a letter
    """
    root = _node_of(view)
    stack: List[Tuple[Node, NodeView]] = [(root, view)]
    while stack:
        node, current = stack.pop()
        for index, child_view in _placed_children(current):
            if node.children[index] is not None:
                raise ValueError(f"Duplicate child '{child_view.value}' under '{current.value}'")
            child = _node_of(child_view)
            node.children[index] = child
            stack.append((child, child_view))
    return root


def view_from_node(node: Node) -> NodeView:
    """Snapshot a subtree as a sparse NodeView, children in letter order"""
    root_view = NodeView(value=node.letter, is_word_end=node.is_word_end)
    stack: List[Tuple[Node, NodeView]] = [(node, root_view)]
    while stack:
        current, current_view = stack.pop()
        for child in current.children:
            if child is None:
                continue
            child_view = NodeView(value=child.letter, is_word_end=child.is_word_end)
            if current_view.children is None:
                current_view.children = []
            current_view.children.append(child_view)
            stack.append((child, child_view))
    return root_view


def build_trie(view: NodeView) -> Trie:
    """Build a trie whose root is described by view, bypassing insert()"""
    return Trie(root=node_from_view(view))


def load_fixtures(path: Union[str, Path]) -> Dict[str, NodeView]:
    """
    Read named tree descriptions from a JSON array.

    Args:
        path: JSON file holding a list of NodeView objects, each with an id

    Returns:
        Mapping of case id to its root NodeView
    """
    logger.info(f"Loading trie fixtures: {path}")
    views = _fixture_adapter.validate_json(Path(path).read_text(encoding="utf-8"))

    cases: Dict[str, NodeView] = {}
    for view in views:
        if view.id is None:
            raise ValueError(f"Fixture root '{view.value}' in {path} has no id")
        if view.id in cases:
            raise ValueError(f"Fixture id '{view.id}' appears more than once in {path}")
        cases[view.id] = view
    logger.info(f"Loaded {len(cases)} trie fixtures: {sorted(cases)}")
    return cases
