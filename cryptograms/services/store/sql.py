import logging
import random

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cryptograms.core.exceptions import StorageError, TokenNotFoundError
from cryptograms.models.database import TokenEntry
from cryptograms.services.store.base import TokenStore

logger = logging.getLogger(__name__)


class SqlTokenStore(TokenStore):
    """
    Token store backed by the ``plaintexts`` table.

    Each put is one transaction inserting one row. The primary key rejects a
    token that is already taken; the transaction is rolled back and a new
    token drawn, so two concurrent puts can never share a token.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        rng: random.Random | None = None,
        allocation_attempts: int = 5,
    ):
        super().__init__(rng, allocation_attempts)
        self._session_factory = session_factory

    async def put(self, plaintext: str) -> int:
        for attempt in range(1, self.allocation_attempts + 1):
            token = self.draw_token()
            try:
                async with self._session_factory() as session:
                    async with session.begin():
                        session.add(TokenEntry(token=token, plaintext=plaintext))
            except IntegrityError:
                logger.warning(
                    "Token %d already allocated, drawing again (attempt %d/%d)",
                    token,
                    attempt,
                    self.allocation_attempts,
                )
                continue
            except SQLAlchemyError as e:
                logger.error("Failed to store plaintext: %s", e)
                raise StorageError(f"Failed to store plaintext: {e}") from e

            logger.debug("Allocated token %d", token)
            return token

        raise StorageError(
            f"Could not allocate a unique token in {self.allocation_attempts} attempts"
        )

    async def get(self, token: int) -> str:
        self.check_token(token)
        try:
            async with self._session_factory() as session:
                entry = await session.get(TokenEntry, token)
        except SQLAlchemyError as e:
            logger.error("Failed to read token %d: %s", token, e)
            raise StorageError(f"Failed to read token {token}: {e}") from e

        if entry is None:
            raise TokenNotFoundError(token)
        return entry.plaintext
