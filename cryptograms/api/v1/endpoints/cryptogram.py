from fastapi import APIRouter

from cryptograms.dependencies import OrchestratorDep
from cryptograms.models.schemas import CryptogramRequest, CryptogramResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=CryptogramResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request or key"},
        404: {"model": ErrorResponse, "description": "No matching quotation"},
        503: {"model": ErrorResponse, "description": "Token store unavailable"},
    },
    summary="Issue a cryptogram",
    description=(
        "Encrypt a supplied plaintext, or a quotation of the requested length, "
        "and return the ciphertext with a token for retrieving the plaintext."
    ),
)
async def issue_cryptogram(
    request: CryptogramRequest,
    orchestrator: OrchestratorDep,
) -> CryptogramResponse:
    """
    Issue a new cryptogram.

    The key is ignored for ciphers that take none. Without a key one is
    generated; for Aristocrat and Patristocrat ``keying`` picks how.
    """
    cryptogram = await orchestrator.issue(request)
    return CryptogramResponse.model_validate(cryptogram)
