"""プロンプト生成APIルート"""
from fastapi import APIRouter, HTTPException
from aws_lambda_powertools import Logger

from prompt_studio.routes.schemas.prompt_generation import (
    GeneratePromptRequest,
    GeneratePromptResponse,
)
from prompt_studio.utils.completion_client import complete
from prompt_studio.utils.core import (
    LOG_LEVEL,
    ParseError,
    PromptGenerationError,
    SchemaViolation,
    TransportError,
)

logger = Logger(service="generate_prompt_route", level=LOG_LEVEL)

router = APIRouter()


def status_code_for(error: PromptGenerationError) -> int:
    """Upstream model failures are 502, everything else 500"""
    if isinstance(error, (TransportError, ParseError, SchemaViolation)):
        return 502
    return 500


@router.post(
    "/generate-prompt",
    response_model=GeneratePromptResponse,
    response_model_by_alias=True,
)
async def generate_prompt_endpoint(request: GeneratePromptRequest):
    """
    アイデアから英語プロンプトを生成し、必要に応じて翻訳するエンドポイント

    Args:
        request: GeneratePromptRequest (idea, target_language, prompt_style)

    Returns:
        GeneratePromptResponse (detectedLanguage, constructiveEnglishPrompt, translatedPrompt)
    """
    try:
        logger.info(
            "Received prompt generation request",
            extra={
                "idea_length": len(request.idea),
                "target_language": request.target_language,
                "prompt_style": request.prompt_style.value,
            },
        )

        result = await complete(
            request.idea, request.target_language, request.prompt_style
        )

        logger.info("Prompt generation completed successfully")

        return GeneratePromptResponse(
            detected_language=result.detected_language,
            refined_prompt=result.refined_prompt,
            translated_prompt=result.translated_prompt,
        )

    except HTTPException:
        raise
    except PromptGenerationError as e:
        logger.error(f"Error in prompt generation: {e.message}")
        raise HTTPException(status_code=status_code_for(e), detail=e.message)
