from typing import ClassVar

from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.alphabet import is_letter, substitute
from cryptograms.services.engines.keys import Key
from cryptograms.services.engines.monoalphabetic.aristocrat import AristocratEngine
from cryptograms.services.engines.registry import EngineRegistry


@EngineRegistry.register
class PatristocratEngine(AristocratEngine):
    """
    Patristocrat cipher engine.

    Same substitution as the Aristocrat, but everything that is not a letter
    is removed first and the ciphertext is written in groups of five. The
    grouping is display only; it carries no information about word breaks.
    """

    name = "Patristocrat"
    cipher_type = CipherType.PATRISTOCRAT
    description = (
        "Monoalphabetic substitution with spaces and punctuation removed "
        "and the ciphertext written in five-letter groups."
    )

    GROUP_WIDTH: ClassVar[int] = 5

    def encode(self, plaintext: str, key: Key) -> str:
        letters = "".join(c for c in plaintext if is_letter(c))
        return self.group(substitute(letters, self._alphabet(key)))

    def decode(self, ciphertext: str, key: Key) -> str:
        """Recover the letters only; the original spacing is not in the ciphertext."""
        return super().decode(ciphertext.replace(" ", ""), key)

    @classmethod
    def group(cls, text: str) -> str:
        width = cls.GROUP_WIDTH
        return " ".join(text[i:i + width] for i in range(0, len(text), width))
