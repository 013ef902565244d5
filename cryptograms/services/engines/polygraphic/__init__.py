"""Polygraphic cipher engines."""

from cryptograms.services.engines.polygraphic.hill import HillEngine

__all__ = [
    "HillEngine",
]
