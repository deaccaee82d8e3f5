"""
clacks

Purpose:
    ASGI middleware adding the X-Clacks-Overhead header to every HTTP
    response, in memory of Terry Pratchett (the GNU Terry Pratchett protocol).

Usage:
    from clacks import ClacksMiddleware, wrap

    app = wrap(app)
    # or, with FastAPI / Starlette:
    app.add_middleware(ClacksMiddleware)
"""

from __future__ import annotations

from clacks.contracts.clacks_header import HEADER_NAME, HEADER_VALUE
from clacks.middleware.clacks import ClacksMiddleware, wrap

__all__ = ["HEADER_NAME", "HEADER_VALUE", "ClacksMiddleware", "wrap"]
