import random
from typing import ClassVar

from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.keys import Key, KeyOptions, MorbitKey
from cryptograms.services.engines.morse.code import GAP, decode_morse, encode_morse
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class MorbitEngine(CipherEngine):
    """
    Morbit cipher engine.

    The plaintext is written in Morse code, padded to an even number of
    symbols and read off two symbols at a time. Each of the nine possible
    symbol pairs stands for one digit from 1 to 9; that correspondence table
    is the key. Traditionally the table comes from a nine-letter keyword:
    the letter that sorts first gets 1, the next 2, and so on.

    Example with keyword MORSECODE (digits 5 6 8 9 3 1 7 2 4):
        "MORE BITS" -> "32379749578158"
    """

    name = "Morbit Cipher"
    cipher_type = CipherType.MORBIT
    description = (
        "Morse code read in pairs of symbols, each pair replaced by a digit "
        "1-9 from a keyword-derived table."
    )
    key_space = "a 9-letter keyword, or the digits 1-9 in symbol-pair order"

    PAIRS: ClassVar[tuple[str, ...]] = (
        "..", ".-", ".x", "-.", "--", "-x", "x.", "x-", "xx",
    )
    DIGITS: ClassVar[str] = "123456789"

    def encode(self, plaintext: str, key: Key) -> str:
        table = dict(zip(self.PAIRS, self.check_key(key).digits))
        symbols = encode_morse(plaintext)
        if len(symbols) % 2:
            symbols += GAP
        return "".join(table[symbols[i:i + 2]] for i in range(0, len(symbols), 2))

    def decode(self, ciphertext: str, key: Key) -> str:
        table = dict(zip(self.check_key(key).digits, self.PAIRS))
        return decode_morse("".join(table[d] for d in ciphertext if d in table))

    def generate_random_key(self, rng: random.Random, options: KeyOptions) -> MorbitKey:
        """Any ordering of 1-9 is a valid table."""
        return MorbitKey("".join(rng.sample(self.DIGITS, len(self.DIGITS))))

    def parse_key(self, text: str, options: KeyOptions | None = None) -> MorbitKey:
        text = text.strip()
        if text.isdigit():
            return self.check_key(MorbitKey(text))
        if text.isascii() and text.isalpha() and len(text) == len(self.PAIRS):
            return MorbitKey(self.keyword_digits(text))
        raise self.invalid_key("key must be a 9-letter keyword or the digits 1-9")

    def key_violation(self, key: Key) -> str | None:
        if not isinstance(key, MorbitKey):
            return "expected a digit table"
        if sorted(key.digits) != list(self.DIGITS):
            return "table must use each of the digits 1-9 exactly once"
        return None

    @classmethod
    def keyword_digits(cls, keyword: str) -> str:
        """Number the keyword letters in alphabetical order, ties left to right."""
        keyword = keyword.upper()
        order = sorted(range(len(keyword)), key=lambda i: keyword[i])
        digits = [""] * len(keyword)
        for rank, position in enumerate(order):
            digits[position] = cls.DIGITS[rank]
        return "".join(digits)
