"""Failure kinds raised inside the translation pipeline."""
from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    HTTP = "http"
    PROTOCOL = "protocol"
    UNEXPECTED = "unexpected"


class TranslationError(Exception):
    """Base error; `kind` tells callers which stage failed."""

    kind: ErrorKind = ErrorKind.UNEXPECTED


class InvalidImpressionError(TranslationError, ValueError):
    kind = ErrorKind.INVALID_INPUT


class ApiHttpError(TranslationError):
    """Connection failure or non-success status from the messages endpoint."""

    kind = ErrorKind.HTTP

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ApiProtocolError(TranslationError):
    """Response body missing, not JSON, or without usable text."""

    kind = ErrorKind.PROTOCOL
