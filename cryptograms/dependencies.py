from typing import Annotated

from fastapi import Depends

from cryptograms.core.config import Settings, get_settings
from cryptograms.db.session import get_session_factory
from cryptograms.services.corpus.quotes import get_corpus, get_words
from cryptograms.services.keys.generator import KeyGenerator
from cryptograms.services.pipeline.orchestrator import CryptogramOrchestrator
from cryptograms.services.store.base import TokenStore
from cryptograms.services.store.sql import SqlTokenStore


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Token store dependency
def get_store(settings: SettingsDep) -> TokenStore:
    """Get a token store bound to the database."""
    return SqlTokenStore(
        get_session_factory(),
        allocation_attempts=settings.token_allocation_attempts,
    )

StoreDep = Annotated[TokenStore, Depends(get_store)]


# Orchestrator dependency
def get_orchestrator(settings: SettingsDep, store: StoreDep) -> CryptogramOrchestrator:
    """Get an orchestrator over the loaded corpus and keyword list."""
    return CryptogramOrchestrator(
        corpus=get_corpus(),
        keys=KeyGenerator(get_words(), settings=settings),
        store=store,
        max_plaintext_length=settings.max_plaintext_length,
    )

OrchestratorDep = Annotated[CryptogramOrchestrator, Depends(get_orchestrator)]
