"""
clacks.demo.contracts.api_paths

Purpose:
    Central definition of demo route paths and versioning.
    Keeps routing stable and prevents string duplication.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    v1_prefix: str = "/v1"
    root: str = "/"
    hello: str = "/hello"
    world: str = "/world"
    json: str = "/json"
    greet: str = "/greet"
    health: str = "/health"
    info: str = "/info"
