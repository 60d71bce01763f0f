from fastapi import APIRouter, HTTPException, status

from linecrypt.core.exceptions import LinecryptError
from linecrypt.dependencies import PipelineDep
from linecrypt.models.schemas import ErrorResponse, KeyInspectRequest, KeyParameters

router = APIRouter()


@router.post(
    "/inspect",
    response_model=KeyParameters,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key"},
    },
    summary="Inspect key parameters",
    description="Show the block size, digest and rotation a key derives.",
)
async def inspect_key(
    request: KeyInspectRequest,
    pipeline: PipelineDep,
) -> KeyParameters:
    try:
        return KeyParameters.model_validate(pipeline.describe(request.key))
    except LinecryptError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
