"""Translate radiology impressions into patient-friendly language via the Anthropic Messages API.

One `translate` call is one HTTPS POST. Every failure, from a blank impression
to a malformed response body, comes back as a failed `TranslationResult`
carrying an `ErrorKind`; nothing is raised to the caller.
"""
from __future__ import annotations
import logging
import time

import httpx
from pydantic import ValidationError

from radreport_explainer.common.errors import (
    ApiHttpError,
    ApiProtocolError,
    ErrorKind,
    InvalidImpressionError,
    TranslationError,
)
from radreport_explainer.common.schema import (
    ApiMessage,
    ApiResponseEnvelope,
    ChatMessage,
    TranslationResult,
)
from radreport_explainer.common.templates import build_prompt
from radreport_explainer.config import (
    ANTHROPIC_API_URL,
    ANTHROPIC_VERSION,
    MAX_CHARACTERS,
    MAX_TOKENS,
    MODEL_ID,
    REQUEST_TIMEOUT_S,
)
from radreport_explainer.engine.shaping import failed_result, shape_result

LOGGER = logging.getLogger("radreport.engine.client")


class TranslationEngine:
    """Client for the messages endpoint bound to one API key."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str = MODEL_ID,
        api_url: str = ANTHROPIC_API_URL,
        timeout: float | None = REQUEST_TIMEOUT_S,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            api_key: Anthropic API key, sent verbatim in the x-api-key header.
            model: Model identifier placed in every request body.
            api_url: Messages endpoint.
            timeout: Seconds before the request is abandoned; None waits forever.
            transport: Optional httpx transport, used by tests to stub the network.
        """
        if api_key is None:
            raise ValueError("api_key is required")
        self.model = model
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport
        self._headers = {
            "x-api-key": api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }

    def build_payload(self, prompt: str) -> ApiMessage:
        return ApiMessage(
            model=self.model,
            max_tokens=MAX_TOKENS,
            messages=[ChatMessage(role="user", content=prompt)],
        )

    async def translate(self, impression: str) -> TranslationResult:
        """
        Translate one radiology impression.

        Args:
            impression: Impression text; must contain non-whitespace characters.

        Returns:
            A successful result with summary, disclaimer and timing, or a failed
            result with an error message and kind.
        """
        try:
            if impression is None or not impression.strip():
                raise InvalidImpressionError("Impression text cannot be empty")

            start = time.perf_counter()
            raw_text = await self._call_api(build_prompt(impression, MAX_CHARACTERS))
            result = shape_result(raw_text, start)
        except TranslationError as e:
            if e.kind is ErrorKind.INVALID_INPUT:
                LOGGER.warning("Rejected impression: %s", e)
            else:
                LOGGER.error("Translation failed (%s): %s", e.kind.value, e)
            return failed_result(str(e), e.kind)
        except Exception as e:
            LOGGER.exception("Unexpected translation failure")
            return failed_result(str(e) or e.__class__.__name__, ErrorKind.UNEXPECTED)

        LOGGER.info(
            "Translated impression in %.0fms (%s chars)",
            result.response_time_ms,
            result.character_count,
        )
        return result

    async def _call_api(self, prompt: str) -> str:
        payload = self.build_payload(prompt).model_dump()
        LOGGER.debug("POST %s model=%s", self.api_url, self.model)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.post(self.api_url, headers=self._headers, json=payload)
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise ApiHttpError(
                f"API returned HTTP {status} {e.response.reason_phrase}".rstrip(),
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            raise ApiHttpError(f"Request to API failed: {e.__class__.__name__}: {e}") from e

        return extract_text(r)


def extract_text(response: httpx.Response) -> str:
    """Return the text of the first content block; later blocks are ignored."""
    try:
        envelope = ApiResponseEnvelope.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise ApiProtocolError("Invalid response from API") from e

    if not envelope.content or not envelope.content[0].text:
        raise ApiProtocolError("Invalid response from API")
    return envelope.content[0].text
