"""
clacks.demo.error_handlers

Purpose:
    Register global exception handlers that return stable ErrorResponse objects.

Notes:
    - Validation errors are rendered inside the middleware stack, so they still
      carry X-Clacks-Overhead.
    - Unhandled exceptions travel out through ClacksMiddleware unchanged and are
      rendered by Starlette's outermost ServerErrorMiddleware.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from clacks.demo.contracts.error_contract import ApiErrorCode, ErrorResponse

logger = logging.getLogger(__name__)


def _clean_validation_errors(errors: Any) -> Any:
    """
    Clean FastAPI validation errors for stable client-facing responses.

    - Strip "Value error, " prefix
    - Rewrite missing required into "Missing required field: <field>."
    - Drop ctx and url entirely for minimal/stable payloads
    """
    if not isinstance(errors, list):
        return errors

    for err in errors:
        if not isinstance(err, dict):
            continue

        msg = err.get("msg")
        if isinstance(msg, str) and msg.startswith("Value error,"):
            err["msg"] = msg[len("Value error,") :].lstrip()

        loc = err.get("loc", [])
        field_name = loc[-1] if isinstance(loc, list) and len(loc) >= 2 else None

        if err.get("type") == "missing" and field_name:
            err["msg"] = f"Missing required field: {field_name}."

        err.pop("ctx", None)
        err.pop("url", None)

    return errors


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        safe_errors = _clean_validation_errors(jsonable_encoder(exc.errors()))

        payload = ErrorResponse(
            error_code=ApiErrorCode.BAD_REQUEST,
            message="Request validation failed",
            details={"errors": safe_errors},
        )
        return JSONResponse(status_code=422, content=payload.model_dump(mode="json"))

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in request %s %s", request.method, request.url.path, exc_info=exc)

        payload = ErrorResponse(
            error_code=ApiErrorCode.INTERNAL_ERROR,
            message="Internal server error",
            details=None,
        )
        return JSONResponse(status_code=500, content=payload.model_dump(mode="json"))
