"""
clacks.demo.routes.greetings

Purpose:
    Plain demo endpoints. None of them set X-Clacks-Overhead themselves;
    the header comes from ClacksMiddleware wrapping the whole app.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from clacks.demo.contracts.api_paths import ApiPaths
from clacks.demo.contracts.api_tags import ApiTags

logger = logging.getLogger(__name__)

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.greetings])


@router.get(_paths.root, response_class=PlainTextResponse)
def root() -> str:
    return "Hello, World!"


@router.get(_paths.hello, response_class=PlainTextResponse)
def hello() -> str:
    return "hello"


@router.get(_paths.world, response_class=PlainTextResponse)
def world() -> str:
    return "world"


@router.get(_paths.json)
def json_message() -> JSONResponse:
    # Handler-owned headers must survive next to the clacks header.
    return JSONResponse(
        content={"message": "ok"},
        headers={"X-Custom-Header": "custom-value"},
    )


@router.get(_paths.greet)
def greet(name: str = Query(..., min_length=1, max_length=64)) -> dict:
    logger.debug("greeting name_len=%d", len(name))
    return {"greeting": f"Hello, {name}!"}
