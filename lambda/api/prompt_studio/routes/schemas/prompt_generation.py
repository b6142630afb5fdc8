"""プロンプト生成APIのスキーマ定義"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

from prompt_studio.utils.core import MAX_WORDS, SUPPORTED_LANGUAGES, count_words
from prompt_studio.utils.instruction_builder import PromptStyle


class GeneratePromptRequest(BaseModel):
    idea: str = Field(..., min_length=1, description="プロンプト化するユーザーのアイデア")
    target_language: str = Field("none", description="翻訳先の言語コード ('none' で翻訳なし)")
    prompt_style: PromptStyle = Field(
        PromptStyle.STANDARD, description="プロンプト形式 (STANDARD/CONSTRUCTIVE)"
    )

    @field_validator("idea")
    @classmethod
    def validate_idea(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be non-empty string")
        words = count_words(v)
        if words > MAX_WORDS:
            raise ValueError(
                f"must not exceed the {MAX_WORDS}-word limit ({words} words given)"
            )
        return v

    @field_validator("target_language")
    @classmethod
    def validate_target_language(cls, v: str) -> str:
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"unsupported language code: {v}")
        return v


class GeneratePromptResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    detected_language: str = Field(
        ..., alias="detectedLanguage", description="入力アイデアの検出言語"
    )
    refined_prompt: str = Field(
        ..., alias="constructiveEnglishPrompt", description="改善された英語プロンプト"
    )
    translated_prompt: str = Field(
        ..., alias="translatedPrompt", description="翻訳されたプロンプト (翻訳なしの場合は空文字)"
    )
