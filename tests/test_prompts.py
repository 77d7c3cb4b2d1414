"""Tests for translation prompt construction."""

import pytest

from app.translation.prompts import PromptStyle, build_prompt


@pytest.mark.parametrize("style", list(PromptStyle))
def test_text_prompt_states_language_hint_rule(style):
    prompt = build_prompt("Hello", "en", "es", is_json=False, style=style)

    assert "Translate the following text to es." in prompt
    assert "The user indicated the input language is en" in prompt
    assert "If the text is already in es, return it unchanged" in prompt
    assert "If the text is in a different language than en, still translate it to es" in prompt
    assert "Return only the translated text, no explanations." in prompt
    assert prompt.endswith("Text to translate:\nHello")


@pytest.mark.parametrize("style", list(PromptStyle))
def test_json_prompt_demands_every_string_value_translated(style):
    document = '{"type": "playground", "count": 3}'
    prompt = build_prompt(document, "en", "es", is_json=True, style=style)

    assert "translate ALL string values" in prompt
    assert "String values that look like enums or constants" in prompt
    assert '{"type" : "carType.ENUM"} -> {"type" : "carroTipo.ENUM"}' in prompt
    assert '{"type": "patio de recreo"}' in prompt
    assert "Escape double quotes as" in prompt or 'quotes as \\"' in prompt
    assert "The user indicated the input language is en" in prompt
    assert document in prompt


def test_json_prompt_keeps_keys_and_non_string_values():
    prompt = build_prompt("{}", "en", "de", is_json=True, style=PromptStyle.STANDALONE)

    assert "Keep ALL keys in their original form (do NOT translate keys)" in prompt
    assert "Keep numbers, booleans, and null values unchanged" in prompt
    assert "Do not add or remove any fields" in prompt
    assert "no markdown, no code blocks" in prompt


def test_standalone_json_prompt_ends_with_output_marker():
    prompt = build_prompt('{"a": "b"}', "en", "fr", is_json=True, style=PromptStyle.STANDALONE)

    assert prompt.startswith("You are a precise JSON translator.")
    assert prompt.rstrip().endswith('{"a": "b"}\n\nOutput JSON:')


def test_inline_json_prompt_appends_text_last():
    prompt = build_prompt('{"a": "b"}', "en", "fr", is_json=True, style=PromptStyle.INLINE)

    assert prompt.startswith("Translate the following text to fr.")
    assert "The input is JSON." in prompt
    assert "keeping all keys unchanged" in prompt
    assert "no markdown code fences" in prompt
    assert prompt.endswith('Text to translate:\n{"a": "b"}')


def test_prompt_escape_instructions_render_single_backslashes():
    prompt = build_prompt("{}", "en", "es", is_json=True, style=PromptStyle.STANDALONE)

    assert 'Escape double quotes as \\"' in prompt
    assert "Escape backslashes as \\\\" in prompt
    assert "Escape newlines as \\n" in prompt


def test_prompt_text_with_braces_is_inserted_verbatim():
    text = "Use {placeholder} and {{double}}"
    prompt = build_prompt(text, "en", "ja")

    assert prompt.endswith(text)


def test_prompt_is_deterministic():
    first = build_prompt('{"k": "v"}', "en", "ko", is_json=True)
    second = build_prompt('{"k": "v"}', "en", "ko", is_json=True)

    assert first == second
