"""
Pipeline services for issuing cryptograms.

The orchestrator turns a request into an encrypted quotation plus a token,
and turns a token back into the original plaintext.
"""

from cryptograms.services.pipeline.orchestrator import Cryptogram, CryptogramOrchestrator

__all__ = [
    "Cryptogram",
    "CryptogramOrchestrator",
]
