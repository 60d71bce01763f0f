from fastapi import APIRouter

from linecrypt.models.schemas import StageInfo, StagesResponse
from linecrypt.services.engines.registry import StageRegistry

router = APIRouter()


@router.get(
    "",
    response_model=StagesResponse,
    summary="List cipher stages",
    description="List the registered cipher stages.",
)
async def list_stages() -> StagesResponse:
    registry = StageRegistry()
    return StagesResponse(
        stages=[
            StageInfo(
                stage_type=stage.stage_type,
                name=stage.name,
                description=stage.description,
            )
            for stage in registry.get_all_stages()
        ]
    )
