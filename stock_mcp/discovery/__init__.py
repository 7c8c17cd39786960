"""Result aggregation and discovery reporting over Stock API responses."""

from stock_mcp.discovery.facets import parse_facet_breakdown, suggest_refinements
from stock_mcp.discovery.params import build_upstream_query
from stock_mcp.discovery.pipeline import DiscoveryResult, run_discovery
from stock_mcp.discovery.report import compose_report
from stock_mcp.discovery.results import filter_by_price, normalize_results

__all__ = [
    "DiscoveryResult",
    "build_upstream_query",
    "compose_report",
    "filter_by_price",
    "normalize_results",
    "parse_facet_breakdown",
    "run_discovery",
    "suggest_refinements",
]
