from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class TokenEntry(Base):
    """Maps an issued token to the original plaintext of its cryptogram."""

    __tablename__ = "plaintexts"

    # Drawn by the store, never autoincremented
    token: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    plaintext: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
