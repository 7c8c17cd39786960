"""Plain-text discovery report."""

from __future__ import annotations

from typing import Any

from stock_mcp.constants import MAX_MAKES_SHOWN, NO_RESULTS_MESSAGE

# (breakdown category, heading, max entries shown)
_BREAKDOWN_SECTIONS: tuple[tuple[str, str, int | None], ...] = (
    ("conditions", "🏷️ BY CONDITION", None),
    ("fuel_types", "⛽ BY FUEL TYPE", None),
    ("makes", "🚗 BY MAKE", MAX_MAKES_SHOWN),
    ("body_types", "🚙 BY BODY TYPE", None),
)


def _breakdown_line(heading: str, counts: dict[str, int], cap: int | None) -> str:
    entries = list(counts.items())
    if cap is not None:
        entries = entries[:cap]
    return f"{heading}: " + ", ".join(f"{value} ({count})" for value, count in entries)


def compose_report(
    total: int,
    breakdown: dict[str, dict[str, int]],
    vehicles: list[dict[str, Any]],
    suggestions: list[str],
) -> str:
    if not vehicles:
        return NO_RESULTS_MESSAGE

    lines = [
        "📊 INVENTORY OVERVIEW",
        f"Found {total} vehicles total across all dealers",
        "",
    ]
    for category, heading, cap in _BREAKDOWN_SECTIONS:
        counts = breakdown.get(category)
        if counts:
            lines.append(_breakdown_line(heading, counts, cap))

    lines.append("")
    lines.append(f"📋 SAMPLE VEHICLES (showing {len(vehicles)} of {total})")
    for index, vehicle in enumerate(vehicles, start=1):
        lines.append(f"{index}. {vehicle.get('summary', '')}")
        price_line = f"   Price: {vehicle.get('price', '')}"
        if vehicle.get("id"):
            price_line += f" • ID: {vehicle['id']}"
        lines.append(price_line)

    if suggestions:
        lines.append("")
        lines.append("💡 REFINE YOUR SEARCH")
        lines.extend(f"• {suggestion}" for suggestion in suggestions)

    return "\n".join(lines) + "\n"
