import random

from cryptograms.core.exceptions import KeyGenerationError
from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.alphabet import ALPHABET, is_letter, letter_index, match_case
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.keys import Key, KeyOptions, KeywordKey
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class PortaEngine(CipherEngine):
    """
    Porta cipher engine.

    A reciprocal polyalphabetic cipher. The keyword is repeated over the
    letters of the plaintext; each keyword letter picks one of 13 rows of
    the Porta tableau (AB, CD, ..., YZ share a row). Every row swaps the
    first half of the alphabet with the second half, so applying the same
    row twice gives back the original letter.

    Only letters advance the keyword; other characters pass through.
    """

    name = "Porta Cipher"
    cipher_type = CipherType.PORTA
    description = (
        "A reciprocal polyalphabetic cipher. Each keyword letter selects one "
        "of 13 tableau rows; encryption and decryption are the same operation."
    )
    key_space = "a non-empty keyword over A-Z"

    def encode(self, plaintext: str, key: Key) -> str:
        """Encrypt (same as decrypt for Porta)."""
        keyword = self.check_key(key).keyword
        result = []
        position = 0

        for char in plaintext:
            if is_letter(char):
                row = letter_index(keyword[position % len(keyword)]) // 2
                result.append(match_case(self.tableau(row, char), char))
                position += 1
            else:
                result.append(char)

        return "".join(result)

    def decode(self, ciphertext: str, key: Key) -> str:
        """Decrypt (same as encrypt for Porta)."""
        return self.encode(ciphertext, key)

    def generate_random_key(self, rng: random.Random, options: KeyOptions) -> KeywordKey:
        """Pick a keyword from the word list."""
        if not options.words:
            raise KeyGenerationError(self.cipher_type.value, "keyword list is empty")
        return self.sample(
            lambda: KeywordKey(rng.choice(options.words).upper()),
            self.validate_key,
            options.max_attempts,
        )

    def parse_key(self, text: str, options: KeyOptions | None = None) -> KeywordKey:
        return self.check_key(KeywordKey(text.strip().upper()))

    def key_violation(self, key: Key) -> str | None:
        if not isinstance(key, KeywordKey):
            return "expected a keyword"
        if not key.keyword:
            return "keyword must not be empty"
        if any(c not in ALPHABET for c in key.keyword):
            return "keyword may only contain the letters A-Z"
        return None

    @staticmethod
    def tableau(row: int, letter: str) -> str:
        """Look up ``letter`` in tableau row ``row`` (0-12)."""
        i = letter_index(letter)
        if i < 13:
            return ALPHABET[13 + (i + row) % 13]
        return ALPHABET[(i - 13 - row) % 13]
