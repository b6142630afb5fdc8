#!/usr/bin/env python3
"""
Unit tests for the system instruction builder
"""

import unittest
import sys
import os

# Add api directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../api"))

from prompt_studio.utils.core import SUPPORTED_LANGUAGES
from prompt_studio.utils.instruction_builder import (
    PromptStyle,
    build_instruction,
    build_user_content,
)

SECTION_HEADINGS = [
    "## **Role:**",
    "## **Objective:**",
    "## **Context:**",
    "## **Instructions:**",
    "## **Notes:**",
]
NO_TRANSLATION_CLAUSE = "Do not perform any translation"
EMPTY_FIELD_CLAUSE = "'translatedPrompt' field in the JSON output must be an empty string"


class TestConstructiveInstruction(unittest.TestCase):
    """Constructive style always asks for the fixed section layout"""

    def test_sections_in_order_for_every_language(self):
        for code in SUPPORTED_LANGUAGES:
            with self.subTest(target_language=code):
                instruction = build_instruction(PromptStyle.CONSTRUCTIVE, code)
                positions = [instruction.find(heading) for heading in SECTION_HEADINGS]
                self.assertNotIn(-1, positions)
                self.assertEqual(positions, sorted(positions))

    def test_requests_three_instruction_steps(self):
        instruction = build_instruction(PromptStyle.CONSTRUCTIVE, "none")
        for step in (1, 2, 3):
            self.assertIn(f"### **Instruction {step} :**", instruction)
        self.assertIn("at least three instructions", instruction)

    def test_accepts_style_value_string(self):
        self.assertEqual(
            build_instruction("CONSTRUCTIVE", "de"),
            build_instruction(PromptStyle.CONSTRUCTIVE, "de"),
        )


class TestStandardInstruction(unittest.TestCase):
    def test_short_actionable_prompt_without_sections(self):
        instruction = build_instruction(PromptStyle.STANDARD, "none")
        self.assertIn("short, simple, and actionable English prompt", instruction)
        self.assertIn("Detect the input language", instruction)
        for heading in SECTION_HEADINGS:
            self.assertNotIn(heading, instruction)

    def test_invalid_style_rejected(self):
        with self.assertRaises(ValueError):
            build_instruction("FANCY", "none")


class TestTranslationClause(unittest.TestCase):
    """Exactly one of the two translation clauses is present"""

    def test_none_forces_empty_translation(self):
        for style in PromptStyle:
            with self.subTest(style=style):
                instruction = build_instruction(style, "none")
                self.assertIn(NO_TRANSLATION_CLAUSE, instruction)
                self.assertIn(EMPTY_FIELD_CLAUSE, instruction)
                self.assertNotIn("Translate ONLY", instruction)

    def test_language_requests_fluent_translation(self):
        for style in PromptStyle:
            for code, name in SUPPORTED_LANGUAGES.items():
                if code == "none":
                    continue
                with self.subTest(style=style, target_language=code):
                    instruction = build_instruction(style, code)
                    self.assertIn("Translate ONLY", instruction)
                    self.assertIn("fluent", instruction)
                    self.assertIn(f'{name} ("{code}")', instruction)
                    self.assertNotIn(NO_TRANSLATION_CLAUSE, instruction)
                    self.assertNotIn(EMPTY_FIELD_CLAUSE, instruction)

    def test_unlisted_language_code_still_translates(self):
        instruction = build_instruction(PromptStyle.STANDARD, "sw")
        self.assertIn('into "sw"', instruction)
        self.assertNotIn(NO_TRANSLATION_CLAUSE, instruction)


class TestDeterminism(unittest.TestCase):
    def test_identical_arguments_give_identical_text(self):
        for style in PromptStyle:
            for code in ("none", "fr", "ja"):
                with self.subTest(style=style, target_language=code):
                    self.assertEqual(
                        build_instruction(style, code), build_instruction(style, code)
                    )


class TestUserContent(unittest.TestCase):
    def test_without_translation(self):
        self.assertEqual(
            build_user_content("A mobile app for tracking daily water intake", "none"),
            'User Idea: "A mobile app for tracking daily water intake"',
        )

    def test_with_translation(self):
        self.assertEqual(
            build_user_content("Una app de recetas", "fr"),
            'User Idea: "Una app de recetas"\nTarget Language for Translation: "fr"',
        )


def main():
    """Run unit tests"""
    unittest.main(verbosity=2)


if __name__ == "__main__":
    main()
