import json
import logging
import random
import string
from functools import lru_cache
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from cryptograms.core.config import get_settings
from cryptograms.core.exceptions import CorpusLoadError, NotFoundError
from cryptograms.models.schemas import LengthBucket, Quotation

logger = logging.getLogger(__name__)

_QUOTATIONS = TypeAdapter(list[Quotation])


class QuotationCorpus:
    """
    Read-only set of quotations, queryable by length bucket.

    Quotations are grouped by bucket once at construction; nothing mutates
    the corpus afterwards, so concurrent readers need no locking.
    """

    def __init__(self, quotations: Sequence[Quotation], rng: random.Random | None = None):
        if not quotations:
            raise CorpusLoadError("Quotation corpus is empty")

        self._quotations = tuple(quotations)
        self._by_bucket: dict[LengthBucket, tuple[Quotation, ...]] = {
            bucket: tuple(q for q in self._quotations if bucket.contains(q.length))
            for bucket in LengthBucket
        }
        self._rng = rng or random.Random()

    @classmethod
    def from_file(cls, path: Path, rng: random.Random | None = None) -> "QuotationCorpus":
        """
        Load quotations from a JSON list of ``{"quote", "author"}`` records.

        Raises:
            CorpusLoadError: if the file is missing, malformed or empty
        """
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except OSError as e:
            raise CorpusLoadError(f"Cannot read quotations file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise CorpusLoadError(f"Quotations file {path} is not valid JSON: {e}") from e

        try:
            quotations = _QUOTATIONS.validate_python(raw)
        except PydanticValidationError as e:
            raise CorpusLoadError(
                f"Quotations file {path} is malformed",
                {"errors": e.errors(include_url=False)},
            ) from e

        corpus = cls(quotations, rng=rng)
        logger.info(
            "Loaded %d quotations from %s (%s)",
            len(corpus),
            path,
            ", ".join(f"{b.value}={len(corpus._by_bucket[b])}" for b in LengthBucket),
        )
        return corpus

    def __len__(self) -> int:
        return len(self._quotations)

    def select(self, bucket: LengthBucket, author: str | None = None) -> Quotation:
        """
        Draw a quotation uniformly among those in ``bucket``.

        Args:
            bucket: Length bucket the quotation's byte length must fall in
            author: Optional case-insensitive substring of the author's name

        Raises:
            NotFoundError: if no quotation matches
        """
        candidates = self._by_bucket[bucket]
        if author is not None:
            needle = author.casefold()
            candidates = tuple(
                q for q in candidates
                if q.author is not None and needle in q.author.casefold()
            )

        if not candidates:
            raise NotFoundError(bucket.value, author)

        return self._rng.choice(candidates)


def load_words(path: Path) -> tuple[str, ...]:
    """
    Load the keyword list: one word per line, upper-cased.

    Blank lines and entries with anything but ASCII letters are skipped.

    Raises:
        CorpusLoadError: if the file is missing or has no usable words
    """
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise CorpusLoadError(f"Cannot read words file {path}: {e}") from e

    words = tuple(
        word.upper()
        for word in (line.strip() for line in lines)
        if word and all(c in string.ascii_letters for c in word)
    )
    if not words:
        raise CorpusLoadError(f"Words file {path} has no usable words")

    logger.info("Loaded %d keywords from %s", len(words), path)
    return words


@lru_cache
def get_corpus() -> QuotationCorpus:
    """Get the process-wide corpus, loading it on first use."""
    return QuotationCorpus.from_file(get_settings().quotes_file)


@lru_cache
def get_words() -> tuple[str, ...]:
    """Get the process-wide keyword list, loading it on first use."""
    return load_words(get_settings().words_file)
