"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict

from radreport_explainer.common.errors import ErrorKind


class ChatMessage(BaseModel):
    role: Literal["user"] = "user"
    content: str


class ApiMessage(BaseModel):
    """Outbound body for the messages endpoint."""
    model: str
    max_tokens: int
    messages: list[ChatMessage]


class ContentBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    text: str | None = None


class ApiResponseEnvelope(BaseModel):
    """Inbound body; only `content` is read, everything else is ignored."""
    model_config = ConfigDict(extra="ignore")

    content: list[ContentBlock] | None = None


@dataclass(frozen=True)
class SampleCase:
    """A named impression fed to the console driver."""
    name: str
    impression: str


@dataclass(frozen=True)
class TranslationResult:
    """Outcome of one translation call.

    On success `summary`, `disclaimer`, `character_count` and
    `response_time_ms` are set; on failure only `error_message` and
    `error_kind` are.
    """
    success: bool
    summary: str | None = None
    disclaimer: str | None = None
    character_count: int = 0
    response_time_ms: float = 0.0
    error_message: str | None = None
    error_kind: ErrorKind | None = None
