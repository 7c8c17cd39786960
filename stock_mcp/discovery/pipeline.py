"""Synchronous discovery pipeline run over one upstream response."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from stock_mcp.discovery.facets import parse_facet_breakdown, suggest_refinements
from stock_mcp.discovery.params import build_upstream_query
from stock_mcp.discovery.report import compose_report
from stock_mcp.discovery.results import (
    extract_facets,
    extract_total,
    filter_by_price,
    normalize_results,
)
from stock_mcp.models import SearchRequest


@dataclass
class DiscoveryResult:
    """Everything one search produced, before rendering."""
    total: int = 0
    breakdown: dict[str, dict[str, int]] = field(default_factory=dict)
    vehicles: list[dict[str, Any]] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    upstream_query: dict[str, Any] = field(default_factory=dict)

    def render(self) -> str:
        return compose_report(self.total, self.breakdown, self.vehicles, self.suggestions)

    def as_data_context(self, request: SearchRequest) -> dict[str, Any]:
        return {
            "request": request.as_dict(),
            "upstream_query": self.upstream_query,
            "total_matches": self.total,
            "showing": len(self.vehicles),
            "breakdown": self.breakdown,
            "vehicles": self.vehicles,
            "suggestions": self.suggestions,
        }


def run_discovery(request: SearchRequest, payload: Any) -> DiscoveryResult:
    """Normalize, filter and summarize an upstream search response.

    The sample is truncated to ``request.limit`` after price filtering; the
    total is the upstream's full match count, not the sample size.
    """
    vehicles = normalize_results(payload)
    vehicles = filter_by_price(vehicles, request.min_price, request.max_price)
    vehicles = vehicles[: request.limit]

    breakdown = parse_facet_breakdown(extract_facets(payload))
    return DiscoveryResult(
        total=extract_total(payload) or len(vehicles),
        breakdown=breakdown,
        vehicles=vehicles,
        suggestions=suggest_refinements(breakdown, request.current_filters()),
        upstream_query=build_upstream_query(request),
    )
