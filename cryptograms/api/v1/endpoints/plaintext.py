from fastapi import APIRouter

from cryptograms.dependencies import OrchestratorDep
from cryptograms.models.schemas import ErrorResponse, PlaintextResponse

router = APIRouter()


@router.get(
    "/{token}",
    response_model=PlaintextResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Token not found"},
        503: {"model": ErrorResponse, "description": "Token store unavailable"},
    },
    summary="Reveal a plaintext",
    description="Retrieve the original plaintext of an issued cryptogram for grading.",
)
async def reveal_plaintext(
    token: int,
    orchestrator: OrchestratorDep,
) -> PlaintextResponse:
    """Get the plaintext issued under a token."""
    plaintext = await orchestrator.reveal(token)
    return PlaintextResponse(token=token, plaintext=plaintext)
