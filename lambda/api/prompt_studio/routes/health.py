from fastapi import APIRouter
from prompt_studio.routes.schemas.health import HealthCheckResponse
from prompt_studio.utils import core

router = APIRouter()


def build_health_response(message: str) -> HealthCheckResponse:
    # A model without forced tool use cannot serve /generate-prompt
    structured_output = core.supports_structured_output(core.PROMPT_MODEL_ID)
    return HealthCheckResponse(
        status="healthy" if structured_output else "degraded",
        message=message,
        model_id=core.PROMPT_MODEL_ID,
        structured_output=structured_output,
    )


@router.get("/", response_model=HealthCheckResponse)
async def root():
    """ルートエンドポイント - ヘルスチェック"""
    return build_health_response("Prompt Studio API is running")


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """ヘルスチェックエンドポイント"""
    return build_health_response("Service is operational")
