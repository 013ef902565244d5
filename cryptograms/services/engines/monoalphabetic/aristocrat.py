import random
from functools import partial

from cryptograms.core.exceptions import KeyGenerationError
from cryptograms.models.schemas import CipherType, KeyingMode
from cryptograms.services.engines.alphabet import (
    ALPHABET,
    is_derangement,
    k1_alphabet,
    k2_alphabet,
    substitute,
)
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.keys import Key, KeyOptions, SubstitutionKey
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class AristocratEngine(CipherEngine):
    """
    Aristocrat cipher engine.

    Each letter is replaced with another letter according to a fixed
    permutation of the alphabet. Word breaks and punctuation are kept, which
    is what makes an Aristocrat solvable by hand.

    Competition convention requires the permutation to be a derangement:
    no letter may stand for itself.
    """

    name = "Aristocrat"
    cipher_type = CipherType.ARISTOCRAT
    description = (
        "Monoalphabetic substitution with word spacing preserved. "
        "No letter is enciphered as itself."
    )
    key_space = "a derangement of the 26 letters, written as the cipher alphabet for A-Z"

    def encode(self, plaintext: str, key: Key) -> str:
        """Encrypt using the substitution key."""
        return substitute(plaintext, self._alphabet(key))

    def decode(self, ciphertext: str, key: Key) -> str:
        """Decrypt with the inverse permutation."""
        self.check_key(key)
        return substitute(ciphertext, key.inverse().alphabet)

    def generate_random_key(self, rng: random.Random, options: KeyOptions) -> SubstitutionKey:
        """
        Generate a derangement.

        RANDOM draws uniformly among all derangements. K1 and K2 build the
        alphabet from a keyword out of the word list, aligned at a random
        offset, and resample until no letter maps to itself.
        """
        if options.keying == KeyingMode.RANDOM:
            draw = partial(self._shuffled, rng)
        else:
            if not options.words:
                raise KeyGenerationError(self.cipher_type.value, "keyword list is empty")
            build = k1_alphabet if options.keying == KeyingMode.K1 else k2_alphabet

            def draw() -> str:
                return build(rng.choice(options.words), rng.randrange(26))

        alphabet = self.sample(draw, is_derangement, options.max_attempts)
        return SubstitutionKey(alphabet)

    def parse_key(self, text: str, options: KeyOptions | None = None) -> SubstitutionKey:
        return self.check_key(SubstitutionKey(text.strip().upper()))

    def key_violation(self, key: Key) -> str | None:
        if not isinstance(key, SubstitutionKey):
            return "expected a substitution alphabet"
        if len(key.alphabet) != 26 or set(key.alphabet) != set(ALPHABET):
            return "cipher alphabet must be a permutation of the 26 letters"
        for plain, cipher in zip(ALPHABET, key.alphabet):
            if plain == cipher:
                return f"not a derangement: {plain} maps to itself"
        return None

    def _alphabet(self, key: Key) -> str:
        return self.check_key(key).alphabet

    def _shuffled(self, rng: random.Random) -> str:
        letters = list(ALPHABET)
        rng.shuffle(letters)
        return "".join(letters)
