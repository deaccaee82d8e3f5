"""
clacks.demo.routes.v1.info

Purpose:
    Versioned info endpoint exposing service metadata and the header
    every response is expected to carry.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter

from clacks.contracts.clacks_header import CLACKS_HEADER
from clacks.demo.contracts.api_paths import ApiPaths
from clacks.demo.contracts.api_tags import ApiTags
from clacks.demo.settings import get_settings

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.info])


@router.get(_paths.info)
def info() -> dict:
    settings = get_settings()
    # Keep this as stable contract; safe for clients to depend on.
    return {
        "api_version": "v1",
        "service": settings.service_name,
        "version": settings.service_version,
        "clacks": {
            "header": CLACKS_HEADER.name,
            "value": CLACKS_HEADER.value,
        },
    }
