"""Prompt templates for LLM-backed translation."""

from enum import Enum
from textwrap import dedent


class PromptStyle(str, Enum):
    """Prompt phrasing an adapter sends upstream."""

    # Self-contained "precise JSON translator" instruction with numbered rules
    STANDALONE = "standalone"
    # Plain translation instruction with a JSON addendum appended
    INLINE = "inline"


LANGUAGE_HINT_TEMPLATE = dedent(
    """\
    The user indicated the input language is {source_lang}, but:
    - If the text is already in {target_lang}, return it unchanged
    - If the text is in a different language than {source_lang}, still translate it to {target_lang}
    """
)

# Anchors for values that look like code; the model tends to leave these alone.
JSON_EXAMPLES = dedent(
    """\
    EXAMPLES of what you MUST do (using Spanish as example):
    WRONG: {"type": "playground"}
    CORRECT: {"type": "patio de recreo"}

    WRONG: {"filename": "video_8.mp4"}
    CORRECT: {"filename": "video_8.mp4"} (keep extension) OR {"filename": "vídeo_8.mp4"} (translate if word is translatable)

    WRONG: {"type": "ai-generated"}
    CORRECT: {"type": "generado-por-ia"}

    WRONG: {"action": "chat-multiple"}
    CORRECT: {"action": "chat-múltiple"}

    WRONG: {"image": "introImage"}
    CORRECT: {"image": "imagenIntro"}
    """
)

STANDALONE_JSON_PROMPT_TEMPLATE = dedent(
    """\
    You are a precise JSON translator. Your task is to translate ALL string values in JSON to {target_lang}.

    {language_hint}
    CRITICAL RULES:
    1. Return ONLY valid JSON - no explanations, no markdown, no code blocks
    2. Translate ALL string values to {target_lang} - this includes:
       - Regular text and sentences
       - String values that look like types
       - String values that look like enums or constants
       - Single word strings
       - DO NOT skip ANY string value, even if it looks like it will break something if it is translated or if it looks like it shouldn't be translated; ALL string values should be translated (Ex. {{"type" : "carType.ENUM"}} -> {{"type" : "carroTipo.ENUM"}})
    3. Keep ALL keys in their original form (do NOT translate keys)
    4. Preserve exact structure, data types, and nesting
    5. Keep numbers, booleans, and null values unchanged
    6. Do not add or remove any fields
    7. IMPORTANT: Properly escape special characters in JSON strings:
       - Escape double quotes as \\"
       - Escape backslashes as \\\\
       - Escape newlines as \\n
       - Keep all JSON syntax valid

    Don't forget to translate ALL string values, EVEN if they look like they shouldn't be translated (filenames, urls, etc); if its a string value: Translate it!

    {examples}
    Now translate ALL string values in this JSON to {target_lang}:
    {text}

    Output JSON:"""
)

INLINE_JSON_ADDENDUM_TEMPLATE = dedent(
    """
    The input is JSON. You MUST translate ALL string values to {target_lang}, keeping all keys unchanged. This includes:
    - Regular text and sentences
    - String values that look like types (e.g., "playground", "chat-multiple")
    - String values that look like enums or constants
    - Single word strings
    - Filenames, URLs, file paths, etc, if its a string value: Translate it!
    DO NOT skip ANY string value, even if it looks like it will break something if it is translated or if it looks like it shouldn't be translated; ALL string values should be translated (Ex. {{"type" : "carType.ENUM"}} -> {{"type" : "carroTipo.ENUM"}})

    Preserve the exact JSON structure, nesting, and field set. Keep numbers, booleans, and null values unchanged. Return only valid JSON, no explanations, no markdown code fences. IMPORTANT: Properly escape all special characters in JSON strings (quotes as \\", backslashes as \\\\, newlines as \\n). Don't forget to translate ALL string values, EVEN if they look like they shouldn't be translated (filenames, urls, etc); if its a string value: Translate it!

    {examples}
    Now translate ALL string values to {target_lang}:"""
)

TEXT_INSTRUCTION = "Return only the translated text, no explanations."


def _language_hint(source_lang: str, target_lang: str) -> str:
    return LANGUAGE_HINT_TEMPLATE.format(source_lang=source_lang, target_lang=target_lang)


def build_prompt(
    text: str,
    source_lang: str,
    target_lang: str,
    is_json: bool = False,
    style: PromptStyle = PromptStyle.INLINE,
) -> str:
    """Return the instruction string sent upstream for one translation.

    ``source_lang`` is only a hint: the model is told to return text already in
    ``target_lang`` unchanged and to translate text in any other language.
    In JSON mode every string value is translated and keys, structure and
    non-string values are kept verbatim.
    """
    language_hint = _language_hint(source_lang, target_lang)

    if style is PromptStyle.STANDALONE:
        if is_json:
            return STANDALONE_JSON_PROMPT_TEMPLATE.format(
                target_lang=target_lang,
                language_hint=language_hint,
                examples=JSON_EXAMPLES,
                text=text,
            )
        return (
            f"Translate the following text to {target_lang}. {TEXT_INSTRUCTION}\n\n"
            f"{language_hint}\n"
            f"Text to translate:\n{text}"
        )

    prompt = f"Translate the following text to {target_lang}.\n\n{language_hint}"
    if is_json:
        prompt += INLINE_JSON_ADDENDUM_TEMPLATE.format(
            target_lang=target_lang, examples=JSON_EXAMPLES
        )
    else:
        prompt += f"\n{TEXT_INSTRUCTION}"
    prompt += f"\n\nText to translate:\n{text}"
    return prompt
