"""Core settings, Bedrock client and error types for prompt generation"""
import os
from typing import Dict

import boto3
from botocore.client import Config

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# リージョン設定
BEDROCK_REGION = os.environ.get("BEDROCK_REGION", "us-east-1")

# Model IDs
MODEL_IDS = {
    "anthropic.claude-3.5-haiku": "us.anthropic.claude-3-5-haiku-20241022-v1:0",
}

PROMPT_MODEL_ID = os.environ.get(
    "PROMPT_MODEL_ID", MODEL_IDS["anthropic.claude-3.5-haiku"]
)
PROMPT_TEMPERATURE = 0.7
PROMPT_MAX_TOKENS = int(os.environ.get("PROMPT_MAX_TOKENS", "2000"))

# Cross-region inference profile prefixes in front of the base model ID
INFERENCE_PROFILE_PREFIXES = ("us.", "eu.", "apac.", "jp.", "au.", "ca.", "us-gov.", "global.")

# Forced tool use is how the schema is enforced on Bedrock
STRUCTURED_OUTPUT_MODEL_PREFIXES = (
    "anthropic.claude-3",
    "anthropic.claude-sonnet-4",
    "anthropic.claude-opus-4",
    "anthropic.claude-haiku-4",
    "amazon.nova-micro",
    "amazon.nova-lite",
    "amazon.nova-pro",
    "amazon.nova-premier",
    "amazon.nova-2-lite",
)

MAX_WORDS = 500
NO_TRANSLATION = "none"

SUPPORTED_LANGUAGES: Dict[str, str] = {
    NO_TRANSLATION: "None",
    "ar": "Arabic",
    "bn": "Bengali",
    "zh": "Chinese (Simplified)",
    "nl": "Dutch",
    "fr": "French",
    "de": "German",
    "hi": "Hindi",
    "it": "Italian",
    "ja": "Japanese",
    "ko": "Korean",
    "pt": "Portuguese",
    "ru": "Russian",
    "es": "Spanish",
    "ta": "Tamil",
    "te": "Telugu",
    "tr": "Turkish",
    "ur": "Urdu",
    "vi": "Vietnamese",
}

# Bedrock client for prompt generation
BEDROCK_CLIENT = boto3.client(
    service_name="bedrock-runtime",
    region_name=BEDROCK_REGION,
    config=Config(read_timeout=120, retries={"max_attempts": 1, "mode": "standard"}),
)

GENERATION_FAILED_PREFIX = "Failed to generate prompt"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred while generating the prompt."


class PromptGenerationError(Exception):
    """Base class for prompt generation failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(PromptGenerationError):
    """The Bedrock call did not complete"""

    pass


class ParseError(PromptGenerationError):
    """The model reply is not valid JSON"""

    pass


class SchemaViolation(PromptGenerationError):
    """The model reply does not match the completion schema"""

    pass


class UnsupportedModelError(PromptGenerationError):
    """The configured model cannot enforce schema-shaped output"""

    pass


class UnknownError(PromptGenerationError):
    def __init__(self, message: str = UNKNOWN_ERROR_MESSAGE):
        super().__init__(message)


def failure_message(cause) -> str:
    return f"{GENERATION_FAILED_PREFIX}: {cause}"


def count_words(text: str) -> int:
    """Count whitespace separated words"""
    return len(text.split())


def supports_structured_output(model_id: str) -> bool:
    """
    Check whether a Bedrock model honours forced tool use

    Args:
        model_id: Bedrock model ID or inference profile ID

    Returns:
        True if the model can be forced to answer through the schema tool
    """
    base_model_id = model_id
    for prefix in INFERENCE_PROFILE_PREFIXES:
        if base_model_id.startswith(prefix):
            base_model_id = base_model_id[len(prefix):]
            break
    return base_model_id.startswith(STRUCTURED_OUTPUT_MODEL_PREFIXES)
