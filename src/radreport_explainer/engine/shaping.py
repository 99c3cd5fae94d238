"""Length enforcement, disclaimer and display formatting for translation results."""
from __future__ import annotations
import time

from radreport_explainer.common.errors import ErrorKind
from radreport_explainer.common.schema import TranslationResult
from radreport_explainer.config import MAX_CHARACTERS

ELLIPSIS = "..."
RULE = "─" * 60

LEGAL_DISCLAIMER = f"""
{RULE}
IMPORTANT NOTICE TO PATIENTS:

This patient-friendly summary is provided for educational purposes only and is not a substitute for the official radiology report above. It is intended to help you understand medical terminology, but should not be used for self-diagnosis or treatment decisions.

Please discuss any questions, concerns, or findings with your healthcare provider. Your doctor is the best resource for interpreting your results and determining appropriate next steps for your care.

This summary was generated using artificial intelligence technology to assist in translating medical language. While every effort is made to ensure accuracy, only the official radiology report above should be considered the authoritative medical record.
{RULE}"""


def enforce_character_limit(text: str, ceiling: int = MAX_CHARACTERS) -> str:
    """
    Truncate text to the ceiling, ending in an ellipsis when cut.

    Args:
        text: Raw model output.
        ceiling: Maximum length of the returned string.
    """
    if len(text) > ceiling:
        return text[: ceiling - len(ELLIPSIS)] + ELLIPSIS
    return text


def shape_result(raw_text: str, started_at: float) -> TranslationResult:
    """Build the successful result; `started_at` is a `time.perf_counter()` reading."""
    summary = enforce_character_limit(raw_text)
    elapsed_ms = (time.perf_counter() - started_at) * 1000
    return TranslationResult(
        success=True,
        summary=summary,
        disclaimer=LEGAL_DISCLAIMER,
        character_count=len(summary),
        response_time_ms=elapsed_ms,
    )


def failed_result(message: str, kind: ErrorKind) -> TranslationResult:
    return TranslationResult(
        success=False,
        error_message=f"Translation failed: {message}",
        error_kind=kind,
    )


def format_output(result: TranslationResult) -> str:
    """Summary block as inserted below the official report."""
    if not result.success:
        return f"Error: {result.error_message}"
    return f"\n\nPATIENT-FRIENDLY SUMMARY:\n{result.summary}\n{result.disclaimer}"
