import random
from typing import ClassVar

from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.keys import Key, KeyOptions, PolluxKey
from cryptograms.services.engines.morse.code import DASH, DOT, GAP, decode_morse, encode_morse
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class PolluxEngine(CipherEngine):
    """
    Pollux cipher engine.

    The plaintext is written in Morse code and the digits 0-9 are split into
    three groups standing for dot, dash and separator. Each Morse symbol is
    replaced by any digit of its group, so the same letter rarely enciphers
    the same way twice. Knowing which group each digit belongs to is enough
    to decode.
    """

    name = "Pollux Cipher"
    cipher_type = CipherType.POLLUX
    description = (
        "Morse code with every dot, dash and separator replaced by a digit "
        "from that symbol's group."
    )
    key_space = "a symbol ('.', '-' or 'x') for each digit 0-9, each symbol used at least once"

    SYMBOLS: ClassVar[str] = DOT + DASH + GAP
    DIGITS: ClassVar[str] = "0123456789"

    def encode(self, plaintext: str, key: Key) -> str:
        """
        Replace each Morse symbol with a digit from its group.

        The digit choices come from a stream seeded by the key, so the same
        plaintext and key always give the same ciphertext.
        """
        self.check_key(key)
        groups = {
            symbol: [d for d, s in zip(self.DIGITS, key.symbols) if s == symbol]
            for symbol in self.SYMBOLS
        }
        stream = random.Random(f"{key.symbols}:{key.seed}")
        return "".join(stream.choice(groups[symbol]) for symbol in encode_morse(plaintext))

    def decode(self, ciphertext: str, key: Key) -> str:
        self.check_key(key)
        return decode_morse("".join(key.symbols[int(d)] for d in ciphertext if d.isdigit()))

    def generate_random_key(self, rng: random.Random, options: KeyOptions) -> PolluxKey:
        """Partition the digits into three non-empty groups."""
        symbols = self.sample(
            lambda: "".join(rng.choice(self.SYMBOLS) for _ in self.DIGITS),
            lambda candidate: set(candidate) == set(self.SYMBOLS),
            options.max_attempts,
        )
        return PolluxKey(symbols, seed=rng.getrandbits(32))

    def parse_key(self, text: str, options: KeyOptions | None = None) -> PolluxKey:
        return self.check_key(PolluxKey(text.strip().lower()))

    def key_violation(self, key: Key) -> str | None:
        if not isinstance(key, PolluxKey):
            return "expected a digit partition"
        if len(key.symbols) != len(self.DIGITS):
            return "partition must name a symbol for each of the 10 digits"
        if any(s not in self.SYMBOLS for s in key.symbols):
            return "partition may only use '.', '-' and 'x'"
        if set(key.symbols) != set(self.SYMBOLS):
            return "every symbol needs at least one digit"
        return None
