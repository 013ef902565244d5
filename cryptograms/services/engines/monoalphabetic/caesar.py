import random
from typing import ClassVar

from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.alphabet import shift_text
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.keys import Key, KeyOptions, ShiftKey
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. Case is preserved and anything that is not a letter
    passes through unchanged.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )
    key_space = "an integer shift from 1 to 25"

    MIN_SHIFT: ClassVar[int] = 1
    MAX_SHIFT: ClassVar[int] = 25

    def encode(self, plaintext: str, key: Key) -> str:
        """Shift each letter forward by the key."""
        return shift_text(plaintext, self._shift(key))

    def decode(self, ciphertext: str, key: Key) -> str:
        """Shift each letter forward by 26 minus the key."""
        return shift_text(ciphertext, 26 - self._shift(key))

    def generate_random_key(self, rng: random.Random, options: KeyOptions) -> ShiftKey:
        """Generate a random shift (1-25, excluding 0 and 26)."""
        return ShiftKey(rng.randint(self.MIN_SHIFT, self.MAX_SHIFT))

    def parse_key(self, text: str, options: KeyOptions | None = None) -> ShiftKey:
        try:
            key = ShiftKey(int(text.strip()))
        except ValueError:
            raise self.invalid_key(f"shift '{text}' is not an integer")
        self.check_key(key)
        return key

    def key_violation(self, key: Key) -> str | None:
        if not isinstance(key, ShiftKey):
            return "expected a shift"
        if not self.MIN_SHIFT <= key.shift <= self.MAX_SHIFT:
            return f"shift {key.shift} is outside {self.MIN_SHIFT}..{self.MAX_SHIFT}"
        return None

    def _shift(self, key: Key) -> int:
        return self.check_key(key).shift
