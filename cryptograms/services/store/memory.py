import asyncio
import logging
import random

from cryptograms.core.exceptions import StorageError, TokenNotFoundError
from cryptograms.services.store.base import TokenStore

logger = logging.getLogger(__name__)


class MemoryTokenStore(TokenStore):
    """In-process store; a single lock makes check-and-insert atomic."""

    def __init__(self, rng: random.Random | None = None, allocation_attempts: int = 5):
        super().__init__(rng, allocation_attempts)
        self._entries: dict[int, str] = {}
        self._lock = asyncio.Lock()

    async def put(self, plaintext: str) -> int:
        async with self._lock:
            for _ in range(self.allocation_attempts):
                token = self.draw_token()
                if token not in self._entries:
                    self._entries[token] = plaintext
                    return token
                logger.warning("Token %d already allocated, drawing again", token)

        raise StorageError(
            f"Could not allocate a unique token in {self.allocation_attempts} attempts"
        )

    async def get(self, token: int) -> str:
        try:
            return self._entries[self.check_token(token)]
        except KeyError:
            raise TokenNotFoundError(token) from None

    def __len__(self) -> int:
        return len(self._entries)
