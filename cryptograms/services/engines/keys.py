"""Typed keys, one shape per cipher family."""

from dataclasses import dataclass, field
from typing import Sequence, Union

from cryptograms.models.schemas import KeyingMode


@dataclass(frozen=True)
class ShiftKey:
    """Caesar shift."""

    shift: int


@dataclass(frozen=True)
class SubstitutionKey:
    """Cipher alphabet: ``alphabet[i]`` is the cipher letter for the i-th plain letter."""

    alphabet: str

    def inverse(self) -> "SubstitutionKey":
        inverse = [""] * 26
        for i, letter in enumerate(self.alphabet):
            inverse[ord(letter) - ord("A")] = chr(ord("A") + i)
        return SubstitutionKey("".join(inverse))


@dataclass(frozen=True)
class MatrixKey:
    """Square Hill matrix with entries mod 26."""

    rows: tuple[tuple[int, ...], ...]

    @property
    def size(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class MorbitKey:
    """Digit assigned to each Morse symbol pair, in ``MORBIT_PAIRS`` order."""

    digits: str


@dataclass(frozen=True)
class PolluxKey:
    """Morse symbol (``.``, ``-`` or ``x``) assigned to each digit 0-9.

    ``seed`` drives the choice of digit within a symbol's group so that
    encoding stays a pure function of plaintext and key.
    """

    symbols: str
    seed: int = 0


@dataclass(frozen=True)
class KeywordKey:
    """Porta keyword over A-Z."""

    keyword: str


Key = Union[ShiftKey, SubstitutionKey, MatrixKey, MorbitKey, PolluxKey, KeywordKey, None]


@dataclass
class KeyOptions:
    """Inputs to key generation and parsing that do not come from the cipher itself."""

    words: Sequence[str] = field(default_factory=tuple)
    keying: KeyingMode = KeyingMode.RANDOM
    max_attempts: int = 1000
    matrix_size: int = 2
    max_matrix_size: int = 6
