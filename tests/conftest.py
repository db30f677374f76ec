import pathlib

import pytest

from trie_engine import Trie, build_trie, load_fixtures
from trie_engine.config import setup_logging

FIXTURE_FILE = pathlib.Path(__file__).resolve().parent / "fixtures" / "trie.json"

setup_logging("DEBUG")


@pytest.fixture(scope="session")
def trie_cases():
    return load_fixtures(FIXTURE_FILE)


@pytest.fixture
def trie_factory(trie_cases):
    def make(case_name: str) -> Trie:
        if case_name not in trie_cases:
            raise KeyError(f"Unknown trie case: {case_name}")
        return build_trie(trie_cases[case_name])

    return make


@pytest.fixture(params=["remove", "remove_recursive"])
def remover(request):
    """Both removal strategies, called as remover(trie, word)"""
    return lambda trie, word: getattr(trie, request.param)(word)
