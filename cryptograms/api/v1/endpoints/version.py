from fastapi import APIRouter

from cryptograms.dependencies import SettingsDep
from cryptograms.models.schemas import VersionResponse

router = APIRouter()


@router.get(
    "",
    response_model=VersionResponse,
    summary="API version",
)
async def get_version(settings: SettingsDep) -> VersionResponse:
    return VersionResponse(api_version=settings.api_version)
