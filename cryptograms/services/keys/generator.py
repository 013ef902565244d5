import logging
import random
from typing import Sequence

from cryptograms.core.config import Settings
from cryptograms.core.exceptions import InvalidKeyError
from cryptograms.models.schemas import CipherType, KeyingMode
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.keys import Key, KeyOptions
from cryptograms.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


class KeyGenerator:
    """
    Produces keys that satisfy a cipher's validity constraints.

    Generated keys come from the cipher engine's rejection sampler; supplied
    keys are parsed into the typed key and validated. Either way the key
    returned has passed the engine's validity predicate.
    """

    def __init__(
        self,
        words: Sequence[str] = (),
        settings: Settings | None = None,
        rng: random.Random | None = None,
        registry: EngineRegistry | None = None,
    ):
        self.words = tuple(words)
        self.max_attempts = settings.key_generation_max_attempts if settings else 1000
        self.matrix_size = settings.hill_matrix_size if settings else 2
        self.max_matrix_size = settings.hill_max_size if settings else 6
        self.rng = rng or random.Random()
        self.registry = registry or EngineRegistry()

    def options(self, keying: KeyingMode = KeyingMode.RANDOM) -> KeyOptions:
        return KeyOptions(
            words=self.words,
            keying=keying,
            max_attempts=self.max_attempts,
            matrix_size=self.matrix_size,
            max_matrix_size=self.max_matrix_size,
        )

    def generate(self, cipher_type: CipherType, keying: KeyingMode = KeyingMode.RANDOM) -> Key:
        """Draw a random valid key for ``cipher_type``."""
        engine = self.engine(cipher_type)
        key = engine.generate_random_key(self.rng, self.options(keying))
        return engine.check_key(key)

    def validate(self, cipher_type: CipherType, candidate: str) -> Key:
        """
        Parse and validate a supplied key.

        Raises:
            InvalidKeyError: naming the violated constraint
        """
        engine = self.engine(cipher_type)
        try:
            return engine.parse_key(candidate, self.options())
        except InvalidKeyError as e:
            logger.debug("Rejected supplied %s key: %s", cipher_type.value, e.constraint)
            raise

    def resolve(
        self,
        cipher_type: CipherType,
        candidate: str | None = None,
        keying: KeyingMode = KeyingMode.RANDOM,
    ) -> Key:
        """Validate ``candidate`` if given and the cipher takes a key, else generate one."""
        engine = self.engine(cipher_type)
        if not engine.requires_key:
            return None
        if candidate is not None:
            return self.validate(cipher_type, candidate)
        return self.generate(cipher_type, keying)

    def engine(self, cipher_type: CipherType) -> CipherEngine:
        """
        Raises:
            EngineNotFoundError: if ``cipher_type`` has no engine
        """
        return self.registry.get_engine(cipher_type)
