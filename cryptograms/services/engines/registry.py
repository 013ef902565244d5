from typing import Type

from cryptograms.core.exceptions import EngineNotFoundError
from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.base import CipherEngine


class EngineRegistry:
    """
    One engine instance per cipher type.

    The set of cipher types is closed (``CipherType``); each engine module
    registers its class on import. Engines are stateless, so a single
    instance serves every request.
    """

    _engines: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Class decorator adding an engine for its ``cipher_type``.

            @EngineRegistry.register
            class PortaEngine(CipherEngine):
                ...

        Raises:
            ValueError: if the cipher type already has an engine
        """
        existing = cls._engines.get(engine_class.cipher_type)
        if existing is not None and type(existing) is not engine_class:
            raise ValueError(
                f"{engine_class.cipher_type.value} is already handled by "
                f"{type(existing).__name__}"
            )
        cls._engines[engine_class.cipher_type] = engine_class()
        return engine_class

    @classmethod
    def get_engine(cls, cipher_type: CipherType) -> CipherEngine:
        """
        Get the engine for ``cipher_type``.

        Raises:
            EngineNotFoundError: if no module registered one
        """
        try:
            return cls._engines[cipher_type]
        except KeyError:
            raise EngineNotFoundError(cipher_type.value) from None


def _load_engines() -> None:
    """Import every engine package so each engine registers itself."""
    from cryptograms.services.engines import monoalphabetic  # noqa: F401
    from cryptograms.services.engines import morse  # noqa: F401
    from cryptograms.services.engines import polyalphabetic  # noqa: F401
    from cryptograms.services.engines import polygraphic  # noqa: F401


_load_engines()
