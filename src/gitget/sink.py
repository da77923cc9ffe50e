"""Terminal stage: persist the projected listing to disk or hand it back as text."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from .models import Mode, RequestContext


def serialize(result_set: Optional[List[Dict[str, Any]]]) -> str:
    """Compact JSON, byte-compatible with JavaScript's JSON.stringify."""
    return json.dumps(result_set, separators=(",", ":"), ensure_ascii=False)


def write_json(result_set: List[Dict[str, Any]], path: str) -> None:
    """Overwrite `path` with the serialized listing."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(serialize(result_set))


def deliver(result_set: Optional[List[Dict[str, Any]]], context: RequestContext) -> Optional[str]:
    """Write or return the listing; a None listing is a silent no-op in both modes."""
    if result_set is None:
        return None
    if context.mode is Mode.WRITE:
        write_json(result_set, context.output_path)
        return None
    return serialize(result_set)


__all__ = ["serialize", "write_json", "deliver"]
