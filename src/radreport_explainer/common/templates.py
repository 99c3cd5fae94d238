"""Prompt templating helpers."""
from __future__ import annotations

PROMPT_TEMPLATE = """You are translating a radiology report impression into patient-friendly language.

CRITICAL REQUIREMENTS:
- Use simple, clear language that a patient without medical training can understand
- Avoid medical jargon, or explain technical terms in plain English
- Be accurate - do not add information that isn't in the original impression
- Be reassuring and warm in tone, but honest about findings
- Keep your response under {{max_characters}} characters
- Do not include any introductory phrases like 'Here is the translation' - start directly with the patient-friendly explanation

RADIOLOGY IMPRESSION:
{{input}}

Provide the patient-friendly translation now:"""


def render_prompt(template: str, user_input: str, **values: object) -> str:
    """
    Render user input and extra placeholders into the template.

    Args:
        template: Template content containing {{input}} and optional {{name}} slots.
        user_input: Input string.
        values: Additional placeholder values, substituted before the input.

    Returns:
        Rendered prompt.
    """
    for key, value in values.items():
        template = template.replace("{{" + key + "}}", str(value))
    return template.replace("{{input}}", user_input)


def build_prompt(impression: str, max_characters: int) -> str:
    """
    Build the full instruction string for one impression.

    Args:
        impression: Radiology impression, embedded verbatim.
        max_characters: Character ceiling the model is asked to respect.
    """
    return render_prompt(PROMPT_TEMPLATE, impression, max_characters=max_characters)
