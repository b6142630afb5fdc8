from fastapi import APIRouter

from prompt_studio.routes.schemas.languages import Language, LanguagesResponse
from prompt_studio.utils.core import SUPPORTED_LANGUAGES

router = APIRouter()


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages():
    """翻訳先として選択できる言語の一覧 ('none' は翻訳なし)"""
    return LanguagesResponse(
        languages=[
            Language(code=code, name=name) for code, name in SUPPORTED_LANGUAGES.items()
        ]
    )
