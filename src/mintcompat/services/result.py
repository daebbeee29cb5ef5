"""Service results: what every operation over a docs tree hands back.

INVARIANT: services never raise for expected failures (missing source
root, files that would change under ``--check``, I/O errors). They return
``ServiceResult(ok=False, error=...)`` and leave exit codes to the CLI.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    WOULD_CHANGE = "WOULD_CHANGE"
    IO_ERROR = "IO_ERROR"


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    ``data`` is op-specific: ``transform``/``check`` report scan counts and
    changed files, ``elements`` reports the allow-list.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        data: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result; extra keyword arguments land in ``error.detail``."""
        return cls(
            ok=False,
            op=op,
            data=data or {},
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail),
        )
