"""Bedrock client wrapper that turns a user idea into a structured prompt"""
import json
from typing import Any, Dict, Optional, Union

from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from aws_lambda_powertools import Logger

from prompt_studio.utils import core
from prompt_studio.utils.core import (
    LOG_LEVEL,
    NO_TRANSLATION,
    PROMPT_MAX_TOKENS,
    PROMPT_TEMPERATURE,
    ParseError,
    PromptGenerationError,
    SchemaViolation,
    TransportError,
    UnknownError,
    UnsupportedModelError,
    failure_message,
    supports_structured_output,
)
from prompt_studio.utils.instruction_builder import (
    PromptStyle,
    build_instruction,
    build_user_content,
)

logger = Logger(service="completion_client", level=LOG_LEVEL)

RESULT_TOOL_NAME = "return_generated_prompt"

COMPLETION_RESULT_SCHEMA = {
    "type": "object",
    "properties": {
        "detectedLanguage": {
            "type": "string",
            "description": "The language detected from the user's input text.",
        },
        "constructiveEnglishPrompt": {
            "type": "string",
            "description": (
                "A refined, constructive, and polished prompt in English based on the "
                "user's core idea. The format should match the requested prompt type "
                "(Standard or Constructive)."
            ),
        },
        "translatedPrompt": {
            "type": "string",
            "description": (
                "The translation of the English prompt into the specified target "
                "language. If no translation is requested, this must be an empty string."
            ),
        },
    },
    "required": ["detectedLanguage", "constructiveEnglishPrompt", "translatedPrompt"],
    "additionalProperties": False,
}


class CompletionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    detected_language: str = Field(..., alias="detectedLanguage")
    refined_prompt: str = Field(..., alias="constructiveEnglishPrompt")
    translated_prompt: str = Field(..., alias="translatedPrompt")


def build_converse_request(
    idea: str,
    target_language: str,
    style: PromptStyle,
    model_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build Converse API request for prompt generation

    Args:
        idea: raw user idea
        target_language: language code, or 'none'
        style: prompt style
        model_id: Bedrock model ID (defaults to PROMPT_MODEL_ID)

    Returns:
        Converse API request dictionary
    """
    return {
        "modelId": model_id or core.PROMPT_MODEL_ID,
        "system": [{"text": build_instruction(style, target_language)}],
        "messages": [
            {
                "role": "user",
                "content": [{"text": build_user_content(idea, target_language)}],
            }
        ],
        "inferenceConfig": {
            "temperature": PROMPT_TEMPERATURE,
            "maxTokens": PROMPT_MAX_TOKENS,
        },
        "toolConfig": {
            "tools": [
                {
                    "toolSpec": {
                        "name": RESULT_TOOL_NAME,
                        "description": "Return the detected language, the refined English prompt and its translation.",
                        "inputSchema": {"json": COMPLETION_RESULT_SCHEMA},
                    }
                }
            ],
            "toolChoice": {"tool": {"name": RESULT_TOOL_NAME}},
        },
    }


def extract_reply(response: Dict[str, Any]) -> Union[str, Dict[str, Any]]:
    """
    Extract the structured reply from a Converse API response

    The forced tool call carries the reply as its input. Models that answer
    in plain text instead are returned as raw text for JSON parsing.
    """
    content_list = response.get("output", {}).get("message", {}).get("content", [])

    texts = []
    for item in content_list:
        tool_use = item.get("toolUse")
        if tool_use and tool_use.get("name") == RESULT_TOOL_NAME:
            return tool_use.get("input")
        if "text" in item:
            texts.append(item["text"])

    if texts:
        return "".join(texts)

    logger.warning(
        "No structured content in Converse API response",
        extra={"stop_reason": response.get("stopReason")},
    )
    raise SchemaViolation(failure_message("the model reply contained no structured output"))


def parse_completion(
    reply: Union[str, Dict[str, Any]], target_language: Optional[str] = None
) -> CompletionResult:
    """
    Parse a model reply into a CompletionResult

    With target_language 'none' the translation must come back empty.

    Raises:
        ParseError: reply text is not valid JSON
        SchemaViolation: reply does not hold exactly the three string fields,
            or carries a translation nobody asked for
    """
    if isinstance(reply, (str, bytes)):
        try:
            reply = json.loads(reply.strip())
        except json.JSONDecodeError as e:
            raise ParseError(failure_message(f"invalid JSON in model reply ({e})")) from e

    if not isinstance(reply, dict):
        raise SchemaViolation(
            failure_message(f"expected a JSON object, got {type(reply).__name__}")
        )

    try:
        result = CompletionResult.model_validate(reply)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'reply'}: {err['msg']}"
            for err in e.errors()
        )
        raise SchemaViolation(failure_message(f"model reply does not match schema ({problems})")) from e

    if target_language == NO_TRANSLATION and result.translated_prompt != "":
        raise SchemaViolation(
            failure_message("translatedPrompt must be empty when no translation is requested")
        )
    return result


def generate_prompt(idea: str, target_language: str, style: PromptStyle) -> CompletionResult:
    """
    Generate a refined prompt (and optional translation) for a user idea

    Makes exactly one Bedrock call. Any failure is raised as a
    PromptGenerationError carrying a human-readable message.
    """
    try:
        style = PromptStyle(style)
    except ValueError as e:
        raise PromptGenerationError(failure_message(f"unknown prompt style: {style}")) from e

    model_id = core.PROMPT_MODEL_ID
    logger.info(
        "Generating prompt",
        extra={
            "idea_length": len(idea),
            "target_language": target_language,
            "prompt_style": style.value,
            "model_id": model_id,
        },
    )

    if not supports_structured_output(model_id):
        logger.error(f"Model cannot enforce structured output: {model_id}")
        raise UnsupportedModelError(
            failure_message(f"model {model_id} cannot enforce the response schema")
        )

    try:
        request = build_converse_request(idea, target_language, style, model_id)
        response = core.BEDROCK_CLIENT.converse(**request)

        result = parse_completion(extract_reply(response), target_language)

        logger.info(
            "Prompt generated successfully",
            extra={
                "detected_language": result.detected_language,
                "refined_length": len(result.refined_prompt),
                "translated_length": len(result.translated_prompt),
            },
        )
        return result

    except PromptGenerationError as e:
        logger.error(f"Prompt generation failed: {e.message}")
        raise
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Bedrock API error: {str(e)}")
        raise TransportError(failure_message(e)) from e
    except Exception as e:
        logger.exception(f"Unexpected error in prompt generation: {str(e)}")
        raise UnknownError() from e


async def complete(idea: str, target_language: str, style: PromptStyle) -> CompletionResult:
    """Async entry point; the blocking Bedrock call runs in the threadpool"""
    return await run_in_threadpool(generate_prompt, idea, target_language, style)
