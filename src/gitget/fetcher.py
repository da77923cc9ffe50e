"""Fetch an account's public repositories with a single REST call."""

from __future__ import annotations

import sys
from typing import Optional
from urllib.parse import quote

import requests

from .config import BASE_URL
from .http_client import describe_http_error, get_once, log_http_error
from .models import FetchResult, FetchStatus, RequestContext


def repos_url(username: str) -> str:
    return f"{BASE_URL}/users/{quote(username, safe='')}/repos"


def fetch_repositories(context: RequestContext,
                       session: Optional[requests.Session] = None) -> FetchResult:
    """List `context.username`'s public repositories, most recent first.

    Only the first page the API returns is used. Every failure (bad username,
    non-200 status, network error, unexpected payload) is reported once on
    stderr and comes back as a FAILED result instead of an exception.
    """
    username = (context.username or "").strip()
    if not username:
        print("[error] GitGet: username must be a non-empty string.", file=sys.stderr)
        return FetchResult(FetchStatus.FAILED, reason="username must be a non-empty string")

    url = repos_url(username)
    params = {"type": "public", "sort": context.sort.value, "direction": "desc"}
    try:
        resp = get_once(url, params=params, credential=context.credential, session=session)
    except requests.RequestException as exc:
        print(f"[error] request for {url} failed: {exc}", file=sys.stderr)
        return FetchResult(FetchStatus.FAILED, reason=str(exc))

    if resp.status_code != 200:
        log_http_error(resp, url)
        return FetchResult(
            FetchStatus.FAILED,
            status_code=resp.status_code,
            reason=describe_http_error(resp) or f"HTTP {resp.status_code}",
        )

    try:
        data = resp.json()
    except ValueError as exc:
        print(f"[error] invalid JSON from {url}: {exc}", file=sys.stderr)
        return FetchResult(FetchStatus.FAILED, status_code=200, reason=f"invalid JSON: {exc}")
    if not isinstance(data, list):
        print(f"[error] unexpected payload from {url}: expected a list", file=sys.stderr)
        return FetchResult(FetchStatus.FAILED, status_code=200, reason="unexpected payload")
    if not data:
        return FetchResult(FetchStatus.EMPTY, status_code=200)
    return FetchResult(FetchStatus.OK, repositories=data, status_code=200)


__all__ = ["repos_url", "fetch_repositories"]
