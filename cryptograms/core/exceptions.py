from typing import Any


class CryptogramError(Exception):
    """Base exception for all cryptogram errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CryptogramError):
    """Raised when request validation fails."""

    pass


class PlaintextTooLongError(ValidationError):
    """Raised when a supplied plaintext exceeds the maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Plaintext length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class NotFoundError(CryptogramError):
    """Raised when no quotation matches the requested length and author."""

    def __init__(self, length: str, author: str | None = None):
        message = f"No {length} quotation found"
        if author is not None:
            message += f" by '{author}'"
        super().__init__(message, {"length": length, "author": author})


class InvalidKeyError(CryptogramError):
    """Raised when a key fails its cipher's validity predicate."""

    def __init__(self, cipher_type: str, constraint: str):
        super().__init__(
            f"Invalid {cipher_type} key: {constraint}",
            {"cipher_type": cipher_type, "constraint": constraint},
        )
        self.constraint = constraint


class KeyGenerationError(CryptogramError):
    """Raised when no valid key can be drawn, e.g. the retry ceiling was hit."""

    def __init__(self, cipher_type: str, reason: str):
        super().__init__(
            f"Could not generate a {cipher_type} key: {reason}",
            {"cipher_type": cipher_type, "reason": reason},
        )


class EngineNotFoundError(CryptogramError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, cipher_type: str):
        super().__init__(
            f"Cipher engine '{cipher_type}' not found",
            {"cipher_type": cipher_type},
        )


class TokenNotFoundError(CryptogramError):
    """Raised when a reveal request references an unknown token."""

    def __init__(self, token: int):
        super().__init__(f"Token {token} not found", {"token": token})


class CorpusLoadError(CryptogramError):
    """Raised when the quotation or word source is missing or malformed."""

    pass


class StorageError(CryptogramError):
    """Raised when the token store cannot be read or written."""

    pass
