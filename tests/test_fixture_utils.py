import json

import pytest
from pydantic import ValidationError

from trie_engine import NodeView, Trie, build_trie, load_fixtures
from trie_engine.config import ALPHABET_SIZE
from trie_engine.fixture_utils import node_from_view, view_from_node
from trie_engine.node_utils import bucket_index


def test_fixture_file_cases(trie_cases):
    assert set(trie_cases) == {"commonFirstLetter", "commonPrefix", "differentBranches", "singleValue"}


@pytest.mark.parametrize(
    "case_name, words",
    [
        ("commonFirstLetter", ["ant", "auto"]),
        ("commonPrefix", ["auto", "automobile"]),
        ("differentBranches", ["auto", "trie"]),
        ("singleValue", ["trie"]),
    ],
)
def test_fixture_trees_hold_expected_words(trie_factory, case_name, words):
    assert list(trie_factory(case_name)) == words


def test_fixture_trees_match_inserted_trees(trie_factory):
    inserted = Trie()
    inserted.insert("ant")
    inserted.insert("auto")
    assert view_from_node(trie_factory("commonFirstLetter").root) == view_from_node(inserted.root)


def test_each_build_gets_its_own_nodes(trie_factory):
    first = trie_factory("singleValue")
    second = trie_factory("singleValue")
    first.remove("trie")
    assert list(first) == []
    assert list(second) == ["trie"]


def test_positional_children():
    slots = [None] * ALPHABET_SIZE
    slots[bucket_index("b")] = NodeView(value="b", is_word_end=True)
    trie = build_trie(NodeView(value=" ", children=slots))
    assert list(trie) == ["b"]


def test_positional_child_in_wrong_slot():
    slots = [None] * ALPHABET_SIZE
    slots[0] = NodeView(value="b", is_word_end=True)
    with pytest.raises(ValueError, match="slot"):
        node_from_view(NodeView(value=" ", children=slots))


def test_duplicate_sparse_children():
    view = NodeView(value=" ", children=[NodeView(value="a"), NodeView(value="a", is_word_end=True)])
    with pytest.raises(ValueError, match="Duplicate"):
        node_from_view(view)


def test_child_letter_outside_alphabet():
    with pytest.raises(ValueError, match="a-z"):
        node_from_view(NodeView(value=" ", children=[NodeView(value="A")]))


def test_view_requires_single_letter():
    with pytest.raises(ValidationError):
        NodeView(value="ab")


def test_view_accepts_json_aliases():
    view = NodeView.model_validate({"value": "a", "isWordEnd": True})
    assert view.is_word_end


def test_load_fixtures_requires_ids(tmp_path):
    path = tmp_path / "trie.json"
    path.write_text(json.dumps([{"value": " ", "children": [{"value": "a", "isWordEnd": True}]}]))
    with pytest.raises(ValueError, match="no id"):
        load_fixtures(path)


def test_load_fixtures_rejects_malformed_json(tmp_path):
    path = tmp_path / "trie.json"
    path.write_text("[{")
    with pytest.raises(ValidationError):
        load_fixtures(path)


def test_view_from_node_round_trip(trie_factory):
    trie = trie_factory("differentBranches")
    rebuilt = build_trie(view_from_node(trie.root))
    assert list(rebuilt) == ["auto", "trie"]


def test_full_sparse_children_out_of_order():
    children = [NodeView(value=chr(ord("z") - i), is_word_end=True) for i in range(ALPHABET_SIZE)]
    trie = build_trie(NodeView(value=" ", children=children))
    assert list(trie) == [chr(ord("a") + i) for i in range(ALPHABET_SIZE)]


def test_full_children_in_letter_order():
    children = [NodeView(value=chr(ord("a") + i), is_word_end=True) for i in range(ALPHABET_SIZE)]
    trie = build_trie(NodeView(value=" ", children=children))
    assert trie.root.child_count() == ALPHABET_SIZE
    assert trie.contains("q")


def test_load_fixtures_rejects_duplicate_ids(tmp_path):
    path = tmp_path / "trie.json"
    case = {"id": "single", "value": " ", "children": [{"value": "a", "isWordEnd": True}]}
    path.write_text(json.dumps([case, case]))
    with pytest.raises(ValueError, match="more than once"):
        load_fixtures(path)


def test_deep_tree_converts_both_ways():
    word = "z" * 1500
    trie = Trie()
    trie.insert(word)
    rebuilt = build_trie(view_from_node(trie.root))
    assert list(rebuilt) == [word]
