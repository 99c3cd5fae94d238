"""FastAPI wrapper around the translation engine.

Endpoints:
- GET /health
- POST /translate  { "impression": "..." }
"""
from __future__ import annotations
import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from radreport_explainer.common.errors import ErrorKind
from radreport_explainer.common.logging_setup import setup_logging
from radreport_explainer.config import LOG_LEVEL, MODEL_ID, get_api_key
from radreport_explainer.engine.client import TranslationEngine
from radreport_explainer.engine.shaping import format_output

LOGGER = logging.getLogger("radreport.serve.app")
setup_logging(LOG_LEVEL)

_STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.HTTP: 502,
    ErrorKind.PROTOCOL: 500,
    ErrorKind.UNEXPECTED: 500,
}

class TranslateIn(BaseModel):
    impression: str

class TranslateOut(BaseModel):
    success: bool
    summary: str
    disclaimer: str
    character_count: int
    response_time_ms: float
    formatted_output: str

app = FastAPI()

def get_engine() -> TranslationEngine:
    """Build an engine from the environment credential; 503 when it is missing."""
    api_key = get_api_key()
    if api_key is None:
        LOGGER.warning("ANTHROPIC_API_KEY is not set")
        raise HTTPException(status_code=503, detail="API key not configured")
    return TranslationEngine(api_key)

@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": MODEL_ID}


@app.post("/translate", response_model=TranslateOut)
async def translate(body: TranslateIn) -> TranslateOut:
    engine = get_engine()
    result = await engine.translate(body.impression)
    if not result.success:
        kind = result.error_kind or ErrorKind.UNEXPECTED
        raise HTTPException(status_code=_STATUS_BY_KIND[kind], detail=result.error_message)

    return TranslateOut(
        success=True,
        summary=result.summary or "",
        disclaimer=result.disclaimer or "",
        character_count=result.character_count,
        response_time_ms=result.response_time_ms,
        formatted_output=format_output(result),
    )
