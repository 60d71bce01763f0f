from fastapi import APIRouter

from linecrypt.api.v1.endpoints import decrypt, encrypt, keys, stages

api_router = APIRouter()

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    keys.router,
    prefix="/keys",
    tags=["Keys"],
)

api_router.include_router(
    stages.router,
    prefix="/stages",
    tags=["Stages"],
)
