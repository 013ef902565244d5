"""Key generation and validation."""

from cryptograms.services.keys.generator import KeyGenerator

__all__ = [
    "KeyGenerator",
]
