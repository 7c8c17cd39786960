"""Request/response shapes for the vehicle discovery tool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stock_mcp.constants import DEFAULT_LIMIT, MAX_LIMIT


def clamp_limit(limit: int | None) -> int:
    if not limit:
        return DEFAULT_LIMIT
    return max(1, min(int(limit), MAX_LIMIT))


@dataclass
class SearchRequest:
    """User-facing filter intent.  ``None`` means "no constraint".

    ``limit`` defaults to 10 and is clamped to ``[1, 50]``.  ``query`` is
    free text kept for reporting; it is not forwarded upstream.
    """
    query: str | None = None
    make: str | None = None
    fuel: str | None = None
    condition: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        self.limit = clamp_limit(self.limit)

    def current_filters(self) -> dict[str, Any]:
        """Filters the refinement advisor checks before suggesting."""
        return {
            "make": self.make,
            "fuel": self.fuel,
            "min_price": self.min_price,
            "max_price": self.max_price,
        }

    def as_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "make": self.make,
            "fuel": self.fuel,
            "condition": self.condition,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "limit": self.limit,
        }


@dataclass
class SearchOutcome:
    """Text handed back to the tool transport plus its error flag."""
    text: str
    is_error: bool = False
