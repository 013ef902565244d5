from fastapi import APIRouter

from cryptograms.models.schemas import CipherInfo, CipherType
from cryptograms.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="Every supported cipher type with a description of its valid keys.",
)
async def list_ciphers() -> list[CipherInfo]:
    return [
        CipherInfo.model_validate(EngineRegistry.get_engine(cipher_type))
        for cipher_type in CipherType
    ]
