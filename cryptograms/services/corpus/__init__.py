"""Quotation corpus and keyword list."""

from cryptograms.services.corpus.quotes import (
    QuotationCorpus,
    get_corpus,
    get_words,
    load_words,
)

__all__ = [
    "QuotationCorpus",
    "get_corpus",
    "get_words",
    "load_words",
]
