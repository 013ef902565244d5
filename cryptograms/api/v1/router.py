from fastapi import APIRouter

from cryptograms.api.v1.endpoints import ciphers, cryptogram, plaintext, version

api_router = APIRouter()

api_router.include_router(
    cryptogram.router,
    prefix="/cryptogram",
    tags=["Cryptograms"],
)

api_router.include_router(
    plaintext.router,
    prefix="/plaintext",
    tags=["Plaintexts"],
)

api_router.include_router(
    ciphers.router,
    prefix="/ciphers",
    tags=["Meta"],
)

api_router.include_router(
    version.router,
    prefix="/version",
    tags=["Meta"],
)
