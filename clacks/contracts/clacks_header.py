"""
clacks.contracts.clacks_header

Purpose:
    The fixed X-Clacks-Overhead header pair ("GNU Terry Pratchett").
    A man is not dead while his name is still spoken.

See:
    https://xclacksoverhead.org/

Design Notes:
    - Name and value are process-wide constants; nothing here is configurable.
    - Keep both ASCII and single-line; they go on the wire as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field

HEADER_NAME = "X-Clacks-Overhead"
HEADER_VALUE = "GNU Terry Pratchett"


@dataclass(frozen=True)
class ClacksHeader:
    name: str = field(default=HEADER_NAME, init=False)
    value: str = field(default=HEADER_VALUE, init=False)


CLACKS_HEADER = ClacksHeader()
