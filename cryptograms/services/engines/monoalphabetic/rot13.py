import random
from typing import ClassVar

from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.alphabet import shift_text
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.keys import Key, KeyOptions
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class ROT13Engine(CipherEngine):
    """
    ROT13 cipher engine.

    ROT13 is a special case of the Caesar cipher with a fixed shift of 13.
    Since 13 is exactly half of 26, applying ROT13 twice returns the original text,
    making encryption and decryption identical operations.
    """

    name = "ROT13 Cipher"
    cipher_type = CipherType.ROT13
    description = (
        "A special case of Caesar cipher with shift 13. "
        "Applying ROT13 twice returns the original text."
    )
    key_space = "no key"

    requires_key: ClassVar[bool] = False
    SHIFT: ClassVar[int] = 13

    def encode(self, plaintext: str, key: Key = None) -> str:
        """Encrypt (same as decrypt for ROT13)."""
        return shift_text(plaintext, self.SHIFT)

    def decode(self, ciphertext: str, key: Key = None) -> str:
        """Decrypt (same as encrypt for ROT13)."""
        return shift_text(ciphertext, self.SHIFT)

    def generate_random_key(self, rng: random.Random, options: KeyOptions) -> None:
        return None

    def parse_key(self, text: str, options: KeyOptions | None = None) -> None:
        """Any supplied key is ignored."""
        return None

    def key_violation(self, key: Key) -> str | None:
        return None
