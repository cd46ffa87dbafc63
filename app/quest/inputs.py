"""Boundary-layer input parsing."""

from __future__ import annotations

from app.quest.errors import ParseError


def parse_int(raw: str | int, field: str = "value") -> int:
    """Parse a whole number typed by a user; raise ParseError otherwise."""
    if isinstance(raw, bool):
        raise ParseError(field, str(raw))
    if isinstance(raw, int):
        return raw
    try:
        return int(raw.strip())
    except (AttributeError, ValueError):
        raise ParseError(field, str(raw)) from None
