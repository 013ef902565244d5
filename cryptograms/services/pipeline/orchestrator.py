"""
Cryptogram orchestrator - issues puzzles and reveals their plaintexts.

Issuing a cryptogram runs these steps in order:
1. Resolve the plaintext (supplied verbatim, or drawn from the corpus)
2. Resolve the key (supplied and validated, or generated)
3. Encode the plaintext with the chosen cipher
4. Store the original plaintext under a fresh token
5. Assemble the cryptogram

A failure in steps 1-3 happens before any token is allocated.
"""

import logging
from dataclasses import dataclass

from cryptograms.core.exceptions import CryptogramError, PlaintextTooLongError, ValidationError
from cryptograms.models.schemas import CipherType, CryptogramRequest, LengthBucket
from cryptograms.services.corpus.quotes import QuotationCorpus
from cryptograms.services.keys.generator import KeyGenerator
from cryptograms.services.store.base import TokenStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cryptogram:
    """An issued puzzle."""

    ciphertext: str
    type: CipherType
    length: LengthBucket
    author: str | None
    token: int


class CryptogramOrchestrator:
    """
    Composes corpus, key generator, cipher engines and token store.

    Holds no mutable state of its own; the store is the only shared state
    touched while issuing.
    """

    def __init__(
        self,
        corpus: QuotationCorpus,
        keys: KeyGenerator,
        store: TokenStore,
        max_plaintext_length: int = 1000,
        default_length: LengthBucket = LengthBucket.MEDIUM,
    ):
        self.corpus = corpus
        self.keys = keys
        self.store = store
        self.max_plaintext_length = max_plaintext_length
        self.default_length = default_length

    async def issue(self, request: CryptogramRequest) -> Cryptogram:
        """
        Produce a cryptogram for the request.

        Raises:
            ValidationError: the supplied plaintext is too long or not valid Unicode
            NotFoundError: no quotation matches the length and author
            InvalidKeyError: the supplied key fails validation
            StorageError: the plaintext could not be stored
        """
        try:
            plaintext, author = self._resolve_plaintext(request)

            key = self.keys.resolve(request.type, request.key, request.keying)
            engine = self.keys.engine(request.type)
            ciphertext = engine.encode(plaintext, key)

            token = await self.store.put(plaintext)
        except CryptogramError as e:
            logger.warning("Could not issue %s cryptogram: %s", request.type.value, e.message)
            raise

        logger.debug("Issued %s cryptogram with token %d", request.type.value, token)

        return Cryptogram(
            ciphertext=ciphertext,
            type=request.type,
            length=LengthBucket.of(plaintext),
            author=author,
            token=token,
        )

    async def reveal(self, token: int) -> str:
        """
        Return the original plaintext issued under ``token``.

        Raises:
            TokenNotFoundError: the token was never issued
        """
        logger.debug("Revealing token %d", token)
        return await self.store.get(token)

    def _resolve_plaintext(self, request: CryptogramRequest) -> tuple[str, str | None]:
        if request.plaintext is not None:
            try:
                length = len(request.plaintext.encode("utf-8"))
            except UnicodeEncodeError as e:
                raise ValidationError(
                    "Plaintext is not valid Unicode text",
                    {"position": e.start, "reason": e.reason},
                ) from e
            if length > self.max_plaintext_length:
                raise PlaintextTooLongError(length, self.max_plaintext_length)
            return request.plaintext, None

        quotation = self.corpus.select(request.length or self.default_length, request.author)
        return quotation.text, quotation.author
