from fastapi import APIRouter, HTTPException, status

from linecrypt.core.exceptions import LinecryptError, TextTooLongError
from linecrypt.dependencies import PipelineDep, SettingsDep
from linecrypt.models.schemas import (
    CipherDirection,
    EncryptRequest,
    EncryptResponse,
    ErrorResponse,
    KeyParameters,
)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Encrypt text",
    description="Encrypt a single line of text with the substitution + transposition pipeline.",
)
async def encrypt_text(
    request: EncryptRequest,
    settings: SettingsDep,
    pipeline: PipelineDep,
) -> EncryptResponse:
    """
    Encrypt text with a key.

    The text is treated as one line: every character is one byte of the
    configured text encoding.
    """
    try:
        if len(request.text) > settings.max_text_length:
            raise TextTooLongError(len(request.text), settings.max_text_length)

        ciphertext = pipeline.encrypt(request.text, request.key)
        params = pipeline.describe(request.key)

        return EncryptResponse(
            ciphertext=ciphertext,
            key_parameters=KeyParameters.model_validate(params),
            explanation=pipeline.explain(request.key, CipherDirection.ENCRYPT),
        )

    except LinecryptError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
