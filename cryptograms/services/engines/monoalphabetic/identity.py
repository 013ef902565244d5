import random
from typing import ClassVar

from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.keys import Key, KeyOptions
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class IdentityEngine(CipherEngine):
    """Returns the plaintext unchanged."""

    name = "Identity"
    cipher_type = CipherType.IDENTITY
    description = "No encryption at all; useful for warm-up rounds."
    key_space = "no key"

    requires_key: ClassVar[bool] = False

    def encode(self, plaintext: str, key: Key = None) -> str:
        return plaintext

    def decode(self, ciphertext: str, key: Key = None) -> str:
        return ciphertext

    def generate_random_key(self, rng: random.Random, options: KeyOptions) -> None:
        return None

    def parse_key(self, text: str, options: KeyOptions | None = None) -> None:
        return None

    def key_violation(self, key: Key) -> str | None:
        return None
