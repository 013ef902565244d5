import random
from abc import ABC, abstractmethod
from typing import ClassVar

from cryptograms.core.exceptions import TokenNotFoundError


class TokenStore(ABC):
    """
    Durable mapping from issued tokens to original plaintexts.

    Tokens are random integers in ``[1, 2**53)`` so they stay opaque and are
    exact as JSON numbers. Uniqueness is enforced by the backing store, not
    by the odds of the draw.
    """

    TOKEN_UPPER_BOUND: ClassVar[int] = 2**53

    def __init__(self, rng: random.Random | None = None, allocation_attempts: int = 5):
        self._rng = rng or random.SystemRandom()
        self.allocation_attempts = allocation_attempts

    def draw_token(self) -> int:
        return self._rng.randrange(1, self.TOKEN_UPPER_BOUND)

    def check_token(self, token: int) -> int:
        """
        Reject tokens that could never have been drawn, before any lookup.

        Raises:
            TokenNotFoundError: if ``token`` is outside ``[1, 2**53)``
        """
        if not 1 <= token < self.TOKEN_UPPER_BOUND:
            raise TokenNotFoundError(token)
        return token

    @abstractmethod
    async def put(self, plaintext: str) -> int:
        """
        Record ``plaintext`` under a fresh token.

        Returns:
            The allocated token

        Raises:
            StorageError: if the entry could not be written
        """
        pass

    @abstractmethod
    async def get(self, token: int) -> str:
        """
        Look up the plaintext for ``token``.

        Raises:
            TokenNotFoundError: if the token was never issued
            StorageError: if the store could not be read
        """
        pass
