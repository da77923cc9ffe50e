"""Value types passed between the GitGet pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class SortKey(str, Enum):
    """Recency metric used to order the listing and fill the `updated` field."""

    PUSHED = "pushed"
    UPDATED = "updated"

    @property
    def timestamp_field(self) -> str:
        return f"{self.value}_at"


class Mode(str, Enum):
    WRITE = "write"
    RETURN = "return"


class FetchStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestContext:
    """Everything one pipeline run needs; never shared between runs."""

    username: str
    credential: Optional[str] = field(default=None, repr=False)
    mode: Mode = Mode.WRITE
    output_path: Optional[str] = None
    sort: SortKey = SortKey.PUSHED


@dataclass(frozen=True)
class FetchResult:
    """Outcome of the repository listing request."""

    status: FetchStatus
    repositories: List[Dict[str, Any]] = field(default_factory=list)
    status_code: Optional[int] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK

    @property
    def empty(self) -> bool:
        return self.status is FetchStatus.EMPTY

    @property
    def failed(self) -> bool:
        return self.status is FetchStatus.FAILED


@dataclass(frozen=True)
class RunOutcome:
    """What a full run produced: fetch result, projected records, and sink output."""

    fetch: FetchResult
    projected: Optional[List[Dict[str, Any]]] = None
    output: Optional[str] = None
    written_to: Optional[str] = None


__all__ = ["SortKey", "Mode", "FetchStatus", "RequestContext", "FetchResult", "RunOutcome"]
