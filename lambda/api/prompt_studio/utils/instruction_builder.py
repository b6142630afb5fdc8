"""System instruction templates for prompt generation"""
from enum import Enum

from prompt_studio.utils.core import NO_TRANSLATION, SUPPORTED_LANGUAGES


class PromptStyle(str, Enum):
    STANDARD = "STANDARD"
    CONSTRUCTIVE = "CONSTRUCTIVE"


NO_TRANSLATION_TASK = (
    "4. Do not perform any translation. The 'translatedPrompt' field in the "
    "JSON output must be an empty string."
)

TRANSLATION_TASK = (
    "4. Translate ONLY the generated English prompt into {language}, ensuring "
    "the translation sounds natural and fluent, as a native speaker would say it. "
    "Put the translation in the 'translatedPrompt' field."
)

CLOSING = (
    "Ensure your tone is clear, creative, and helpful. "
    "Return the result through the provided tool as a JSON object matching its schema: "
    "'detectedLanguage' (name of the input language), "
    "'constructiveEnglishPrompt' (the refined English prompt) and 'translatedPrompt'."
)

CONSTRUCTIVE_TEMPLATE = """You are an AI-powered multilingual creative assistant. Your goal is to transform a user's raw idea into a highly structured, constructive English prompt and then translate it if requested.
Tasks:
1. Detect the input language of the user's idea.
2. Understand the core idea.
3. Generate a refined, constructive English prompt using the following Markdown format:
## **Role:**
(Define the role the AI should assume for this task.)
## **Objective:**
(Clearly state the goal or outcome expected.)
## **Context:**
(Provide background, scenario, or constraints for the task.)
## **Instructions:**
### **Instruction 1 :** (First actionable step based on the user's intent)
### **Instruction 2 :** (Second actionable step)
### **Instruction 3 :** (Third actionable step)
## **Notes:**
- Add clarifications, assumptions, or constraints here.
- Keep output in Markdown format.
- Expand steps or notes if required, but always keep at least three instructions.
{translation_task}
{closing}"""

STANDARD_TEMPLATE = """You are an AI-powered multilingual creative assistant. Your goal is to transform a user's raw idea into a polished, standard English prompt and then translate it if requested.
Tasks:
1. Detect the input language of the user's idea.
2. Understand and summarize the core idea.
3. Generate a refined, short, simple, and actionable English prompt based on that idea.
{translation_task}
{closing}"""


def build_translation_task(target_language: str) -> str:
    if target_language == NO_TRANSLATION:
        return NO_TRANSLATION_TASK
    name = SUPPORTED_LANGUAGES.get(target_language)
    language = f"{name} (\"{target_language}\")" if name else f"\"{target_language}\""
    return TRANSLATION_TASK.format(language=language)


def build_instruction(style: PromptStyle, target_language: str) -> str:
    """
    Build the system instruction for one prompt generation request

    Args:
        style: STANDARD for a short prompt, CONSTRUCTIVE for the sectioned one
        target_language: language code, or 'none' to skip translation

    Returns:
        Instruction text. Identical arguments always give identical text.
    """
    style = PromptStyle(style)
    template = (
        CONSTRUCTIVE_TEMPLATE if style == PromptStyle.CONSTRUCTIVE else STANDARD_TEMPLATE
    )
    return template.format(
        translation_task=build_translation_task(target_language), closing=CLOSING
    )


def build_user_content(idea: str, target_language: str) -> str:
    if target_language == NO_TRANSLATION:
        return f'User Idea: "{idea}"'
    return f'User Idea: "{idea}"\nTarget Language for Translation: "{target_language}"'
