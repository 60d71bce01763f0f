from fastapi import APIRouter, HTTPException, status

from linecrypt.core.exceptions import LinecryptError, TextTooLongError
from linecrypt.dependencies import PipelineDep, SettingsDep
from linecrypt.models.schemas import (
    CipherDirection,
    DecryptRequest,
    DecryptResponse,
    ErrorResponse,
    KeyParameters,
)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt a single line of ciphertext produced by the encrypt endpoint.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    pipeline: PipelineDep,
) -> DecryptResponse:
    """Decrypt ciphertext with the key it was encrypted with."""
    try:
        if len(request.ciphertext) > settings.max_text_length:
            raise TextTooLongError(len(request.ciphertext), settings.max_text_length)

        plaintext = pipeline.decrypt(request.ciphertext, request.key)
        params = pipeline.describe(request.key)

        return DecryptResponse(
            plaintext=plaintext,
            key_parameters=KeyParameters.model_validate(params),
            explanation=pipeline.explain(request.key, CipherDirection.DECRYPT),
        )

    except LinecryptError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
