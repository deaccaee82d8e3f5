"""
clacks.demo.contracts.error_contract

Purpose:
    Stable error contract for the demo service (codes + response model).
    Used by global exception handlers to ensure consistent client responses.

Created:
    2026-10-19
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ApiErrorCode(str, Enum):
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"


class ErrorResponse(BaseModel):
    error_code: ApiErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")
