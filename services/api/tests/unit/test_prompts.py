"""Unit tests for prompt templates."""

import pytest

from src.generation.prompts import (
    REACT_INSTRUCTIONS,
    STATIC_INSTRUCTIONS,
    build_instructions,
    build_prompt,
    build_user_message,
)


class TestInstructions:
    def test_react_instructions_name_both_fields(self):
        text = build_instructions("react")

        assert text == REACT_INSTRUCTIONS
        assert '"reactComponent"' in text
        assert '"previewHtml"' in text
        assert "Return ONLY a valid JSON object" in text

    def test_static_instructions_name_both_fields(self):
        text = build_instructions("static")

        assert text == STATIC_INSTRUCTIONS
        assert '"html" and "css"' in text
        assert "<script>" in text  # forbids scripts

    def test_unknown_profile_rejected(self):
        with pytest.raises(ValueError, match="Unknown generation profile"):
            build_instructions("vue")


class TestUserMessage:
    def test_message_embeds_prompt_without_history_section(self):
        message = build_user_message("landing page for a coffee shop")

        assert "landing page for a coffee shop" in message
        assert "Earlier requests" not in message
        assert "<!DOCTYPE html>" in message

    def test_history_rendered_oldest_first(self):
        history = ["make the hero darker", "landing page for a coffee shop"]  # newest first

        message = build_user_message("add a pricing section", history)

        assert "1. landing page for a coffee shop" in message
        assert "2. make the hero darker" in message
        assert message.index("1. landing page") < message.index("2. make the hero")
        assert message.startswith("Create a visually polished")
        assert "add a pricing section" in message

    def test_history_not_mutated(self):
        history = ["second", "first"]

        build_user_message("third", history)

        assert history == ["second", "first"]

    def test_prompt_whitespace_trimmed(self):
        message = build_user_message("   bakery site  \n")

        assert "\nbakery site\n" in message


def test_build_prompt_pairs_instructions_and_message():
    page_prompt = build_prompt("portfolio", ["older"], profile="static")

    assert page_prompt.instructions == STATIC_INSTRUCTIONS
    assert "portfolio" in page_prompt.message
    assert "1. older" in page_prompt.message
