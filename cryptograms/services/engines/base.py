import logging
import random
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, TypeVar

from cryptograms.core.exceptions import InvalidKeyError, KeyGenerationError
from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.keys import Key, KeyOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - encode(): Encrypt plaintext with a typed key
    - decode(): Invert encode() (verification only)
    - generate_random_key(): Draw a key from the valid key space
    - parse_key(): Turn a user-supplied key string into a typed key
    - key_violation(): Name the constraint a typed key breaks, if any
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    description: str
    key_space: str

    requires_key: ClassVar[bool] = True

    @abstractmethod
    def encode(self, plaintext: str, key: Key) -> str:
        """
        Encrypt plaintext with the given key.

        Must be deterministic: the same plaintext and key always give the
        same ciphertext.
        """
        pass

    @abstractmethod
    def decode(self, ciphertext: str, key: Key) -> str:
        """Decrypt ciphertext produced by encode() with the same key."""
        pass

    @abstractmethod
    def generate_random_key(self, rng: random.Random, options: KeyOptions) -> Key:
        """
        Generate a random valid key for this cipher.

        Args:
            rng: Source of randomness
            options: Word list, keying mode and sampling limits

        Returns:
            A key for which key_violation() is None
        """
        pass

    @abstractmethod
    def parse_key(self, text: str, options: KeyOptions | None = None) -> Key:
        """
        Parse a user-supplied key.

        Args:
            text: The key as the user wrote it
            options: Size limits for parsed keys; defaults apply when omitted

        Raises:
            InvalidKeyError: naming the violated constraint
        """
        pass

    @abstractmethod
    def key_violation(self, key: Key) -> str | None:
        """Describe why ``key`` is unusable, or None if it is valid."""
        pass

    def validate_key(self, key: Key) -> bool:
        """Validate that a typed key is valid for this cipher."""
        return self.key_violation(key) is None

    def check_key(self, key: Key) -> Key:
        """Return ``key`` unchanged, or raise InvalidKeyError."""
        violation = self.key_violation(key)
        if violation is not None:
            raise self.invalid_key(violation)
        return key

    def invalid_key(self, constraint: str) -> InvalidKeyError:
        return InvalidKeyError(self.cipher_type.value, constraint)

    def sample(
        self,
        draw: Callable[[], T],
        accept: Callable[[T], bool],
        max_attempts: int,
    ) -> T:
        """
        Rejection sampling: draw candidates until one is accepted.

        Raises:
            KeyGenerationError: if ``max_attempts`` draws were all rejected
        """
        for attempt in range(1, max_attempts + 1):
            candidate = draw()
            if accept(candidate):
                if attempt > 1:
                    logger.debug("%s key accepted after %d draws", self.name, attempt)
                return candidate

        logger.warning("%s key generation gave up after %d draws", self.name, max_attempts)
        raise KeyGenerationError(
            self.cipher_type.value,
            f"no valid key in {max_attempts} attempts",
        )
