from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CipherType(str, Enum):
    """Cipher families offered by the competition rule set."""

    IDENTITY = "identity"
    ROT13 = "rot13"
    CAESAR = "caesar"
    ARISTOCRAT = "aristocrat"
    PATRISTOCRAT = "patristocrat"
    HILL = "hill"
    MORBIT = "morbit"
    POLLUX = "pollux"
    PORTA = "porta"


class LengthBucket(str, Enum):
    """Half-open byte-length ranges for selectable quotations."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @property
    def bounds(self) -> tuple[int, int]:
        return _BUCKET_BOUNDS[self]

    def contains(self, length: int) -> bool:
        low, high = self.bounds
        return low <= length < high

    @classmethod
    def of(cls, text: str) -> "LengthBucket":
        """Bucket of a text by byte length, clamped to the nearest range."""
        length = len(text.encode("utf-8"))
        for bucket in cls:
            if bucket.contains(length):
                return bucket
        return cls.SHORT if length < _BUCKET_BOUNDS[cls.SHORT][0] else cls.LONG


_BUCKET_BOUNDS: dict[LengthBucket, tuple[int, int]] = {
    LengthBucket.SHORT: (60, 90),
    LengthBucket.MEDIUM: (90, 120),
    LengthBucket.LONG: (120, 150),
}


class KeyingMode(str, Enum):
    """How an Aristocrat/Patristocrat substitution alphabet is built."""

    RANDOM = "random"
    K1 = "k1"
    K2 = "k2"


# ============================================================================
# Corpus Schemas
# ============================================================================


class Quotation(BaseModel):
    """A quotation from the corpus."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    text: str = Field(min_length=1, alias="quote")
    author: str | None = None

    @property
    def length(self) -> int:
        return len(self.text.encode("utf-8"))


# ============================================================================
# Request Schemas
# ============================================================================


class CryptogramRequest(BaseModel):
    """Request schema for /cryptogram endpoint."""

    type: CipherType
    plaintext: str | None = Field(default=None, min_length=1)
    length: LengthBucket | None = None
    author: str | None = None
    key: str | None = None
    keying: KeyingMode = KeyingMode.RANDOM


# ============================================================================
# Response Schemas
# ============================================================================


class CryptogramResponse(BaseModel):
    """Response schema for /cryptogram endpoint."""

    model_config = ConfigDict(from_attributes=True)

    ciphertext: str
    type: CipherType
    length: LengthBucket
    author: str | None
    token: int


class PlaintextResponse(BaseModel):
    """Response schema for /plaintext endpoint."""

    model_config = ConfigDict(from_attributes=True)

    token: int
    plaintext: str


class CipherInfo(BaseModel):
    """One entry of the /ciphers listing."""

    model_config = ConfigDict(from_attributes=True)

    type: CipherType = Field(validation_alias="cipher_type")
    name: str
    description: str
    requires_key: bool
    key_space: str


class VersionResponse(BaseModel):
    """Response schema for /version endpoint."""

    api_version: str


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
