"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexigraph import config as cfg
from lexigraph.dictionary import Dictionary
from lexigraph.schema import Language, Word


@pytest.fixture
def en():
    return Language("en", "English")


@pytest.fixture
def ru():
    return Language("ru", "Russian")


@pytest.fixture
def de():
    return Language("de", "German")


@pytest.fixture
def dictionary(en, ru):
    """Dictionary seeded with English, plus Russian."""
    d = Dictionary(en)
    d.add_language(ru)
    return d


@pytest.fixture
def populated(dictionary, en, ru, de):
    """Dictionary with build/строить, словарь/wortschatz and two German verbs."""
    dictionary.add_language(de)
    build = Word("build", en)
    dictionary.add_word(build)
    dictionary.add_translation(build, Word("строить", ru))
    dictionary.add_word(Word("словарь", ru))
    dictionary.add_translation(Word("словарь", ru), Word("wortschatz", de))
    dictionary.add_translation(build, Word("errichten", de))
    dictionary.add_translation(build, Word("aufbauen", de))
    return dictionary


@pytest.fixture
def fresh_config():
    """Drop the cached config before and after a test."""
    cfg.reset()
    yield cfg
    cfg.reset()
