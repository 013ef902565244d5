"""Shared fixtures."""

import json
import random

import pytest

from cryptograms.services.corpus.quotes import QuotationCorpus
from cryptograms.services.keys.generator import KeyGenerator
from cryptograms.services.store.memory import MemoryTokenStore

SHORT_TWAIN = "The secret of getting ahead is getting started. The rest follows from that."
MEDIUM_WILDE = (
    "Experience is simply the name we give our mistakes, and we learn little "
    "from anything else."
)
LONG_CURIE = (
    "Nothing in life is to be feared, it is only to be understood. Now is the "
    "time to understand more, so that we may fear less."
)
PANGRAM = (
    "The quick brown fox jumps over the lazy dog. Can't-I'm<>12932. "
    "Cwm fjord bank glyphs vext quiz!"
)

QUOTES = [
    {"quote": SHORT_TWAIN, "author": "Mark Twain"},
    {"quote": MEDIUM_WILDE, "author": "Oscar Wilde"},
    {"quote": LONG_CURIE, "author": "Marie Curie"},
    {"quote": PANGRAM, "author": "jz9", "genre": "testing"},
    {"quote": "Too short to be selected.", "author": "Mark Twain"},
]

WORDS = ["fortification", "morsecode", "lantern", "", "not-a-word", "Zephyr"]


@pytest.fixture
def quotes_file(tmp_path):
    path = tmp_path / "quotes.json"
    path.write_text(json.dumps(QUOTES), encoding="utf-8")
    return path


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def corpus(quotes_file):
    return QuotationCorpus.from_file(quotes_file, rng=random.Random(7))


@pytest.fixture
def keys():
    return KeyGenerator(["FORTIFICATION", "LANTERN", "ZEPHYR"], rng=random.Random(42))


@pytest.fixture
def store():
    return MemoryTokenStore()
