"""Structured JSON envelopes for ``raw=True`` tool output."""

from __future__ import annotations

import json
from typing import Any

SCHEMA_VERSION = 1


def build_raw_response(tool_name: str, data_context: dict[str, Any]) -> str:
    payload = {
        "_raw": True,
        "_tool": tool_name,
        "_meta": {"schema_version": SCHEMA_VERSION},
        "data": data_context,
    }
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def build_raw_error(
    tool_name: str,
    *,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> str:
    payload: dict[str, Any] = {"error": True, "code": code, "message": message}
    if details:
        payload["details"] = details
    return build_raw_response(tool_name, payload)
