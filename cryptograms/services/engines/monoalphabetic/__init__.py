"""Monoalphabetic cipher engines."""

from cryptograms.services.engines.monoalphabetic.identity import IdentityEngine
from cryptograms.services.engines.monoalphabetic.rot13 import ROT13Engine
from cryptograms.services.engines.monoalphabetic.caesar import CaesarEngine
from cryptograms.services.engines.monoalphabetic.aristocrat import AristocratEngine
from cryptograms.services.engines.monoalphabetic.patristocrat import PatristocratEngine

__all__ = [
    "IdentityEngine",
    "ROT13Engine",
    "CaesarEngine",
    "AristocratEngine",
    "PatristocratEngine",
]
