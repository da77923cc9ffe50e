"""Reduce raw repository records to the five fields GitGet publishes."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .config import DEFAULT_DESCRIPTION
from .models import SortKey


def format_timestamp(value: Optional[str]) -> Optional[str]:
    """Turn `2022-05-01T12:30:00Z` into `2022-05-01 12:30:00` (relabel only, no tz math).

    Anything that is not a string (missing or malformed field) becomes None.
    """
    if not isinstance(value, str):
        return None
    value = value.replace("T", " ", 1)
    if value.endswith("Z"):
        value = value[:-1]
    return value


def project_repository(raw: Any, sort: SortKey = SortKey.PUSHED) -> Dict[str, Any]:
    """Map one API record to name/updated/owner/description/url; missing fields become None."""
    if not isinstance(raw, dict):
        raw = {}
    owner = raw.get("owner")
    return {
        "name": raw.get("name"),
        "updated": format_timestamp(raw.get(sort.timestamp_field)),
        "owner": owner.get("login") if isinstance(owner, dict) else None,
        "description": raw.get("description") or DEFAULT_DESCRIPTION,
        "url": raw.get("html_url"),
    }


def project_repositories(raw: Optional[Sequence[Any]],
                         sort: SortKey = SortKey.PUSHED) -> Optional[List[Dict[str, Any]]]:
    """Project every record in API order; None for a missing or empty listing."""
    if not raw:
        return None
    return [project_repository(entry, sort) for entry in raw]


__all__ = ["format_timestamp", "project_repository", "project_repositories"]
