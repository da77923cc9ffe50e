"""Shared HTTP session and single-shot request helpers for the GitHub REST API."""

from __future__ import annotations

import sys
from typing import Any, Dict, Optional

import requests

from .config import REQUEST_TIMEOUT, TIME_ZONE, USER_AGENT

# Default session for the single-threaded CLI. requests does not promise that a
# Session is thread-safe; threaded callers pass their own via `session=`.
SESSION = requests.Session()
SESSION.headers.update(
    {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": USER_AGENT,
    }
)


def describe_http_error(resp: requests.Response) -> str:
    """Return GitHub's error message for a failed response, or a text snippet."""
    try:
        body = resp.json()
    except ValueError:
        body = {"text": (resp.text or "")[:300]}
    if not isinstance(body, dict):
        body = {"text": str(body)[:300]}
    return str(body.get("message") or body.get("error") or body.get("text") or "")


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    msg = describe_http_error(resp)
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {msg}", file=sys.stderr)


def request_headers(credential: Optional[str] = None) -> Dict[str, str]:
    """Build per-request headers; the Authorization header is attached only with a token."""
    headers: Dict[str, str] = {}
    if TIME_ZONE:
        headers["Time-Zone"] = TIME_ZONE
    if credential:
        headers["Authorization"] = f"token {credential}"
    return headers


def get_once(url: str,
             params: Optional[Dict[str, Any]] = None,
             credential: Optional[str] = None,
             session: Optional[requests.Session] = None) -> requests.Response:
    """Send exactly one GET (through SESSION unless `session` is given); no retry or backoff."""
    return (session or SESSION).get(
        url,
        params=params,
        headers=request_headers(credential),
        timeout=REQUEST_TIMEOUT,
    )


__all__ = [
    "SESSION",
    "describe_http_error",
    "log_http_error",
    "request_headers",
    "get_once",
]
