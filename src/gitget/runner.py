"""Entry points wiring credential loading, fetching, projection, and the sink."""

from __future__ import annotations

import sys
from typing import List, Optional

import requests

from src.secrets import read_auth_token

from .config import DEFAULT_MODE, DEFAULT_SORT, parse_args, resolve_settings
from .fetcher import fetch_repositories
from .models import Mode, RequestContext, RunOutcome, SortKey
from .projector import project_repositories
from .sink import deliver


def build_context(user: str,
                  auth: Optional[str] = None,
                  mode: str = DEFAULT_MODE,
                  write_dir: Optional[str] = None,
                  sort: str = DEFAULT_SORT) -> Optional[RequestContext]:
    """Validate invocation arguments and load the token; None when the run must not start."""
    try:
        run_mode = Mode(mode)
    except ValueError:
        print(f"[error] GitGet: invalid mode. {mode}", file=sys.stderr)
        return None
    if run_mode is Mode.WRITE and not write_dir:
        print("[error] GitGet: write mode without output filepath.", file=sys.stderr)
        return None
    try:
        sort_key = SortKey(sort)
    except ValueError:
        print(f"[error] GitGet: invalid sort key. {sort}", file=sys.stderr)
        return None

    return RequestContext(
        username=user,
        credential=read_auth_token(auth),
        mode=run_mode,
        output_path=write_dir,
        sort=sort_key,
    )


def run(context: RequestContext, session: Optional[requests.Session] = None) -> RunOutcome:
    """Run fetch -> project -> sink for one account and report what happened.

    Pass a per-thread `session` when running several accounts concurrently.
    """
    fetch = fetch_repositories(context, session)
    projected = project_repositories(fetch.repositories, context.sort)
    output = deliver(projected, context)
    written_to = context.output_path if context.mode is Mode.WRITE and projected is not None else None
    return RunOutcome(fetch=fetch, projected=projected, output=output, written_to=written_to)


def main(user: str,
         auth: Optional[str] = None,
         mode: str = DEFAULT_MODE,
         write_dir: Optional[str] = None,
         sort: str = DEFAULT_SORT) -> Optional[str]:
    """Library entry point: JSON text in 'return' mode, None otherwise.

    None is also returned in 'return' mode when the account has no public
    repositories or the request failed; use `run` to tell those apart.
    """
    context = build_context(user, auth, mode, write_dir, sort)
    if context is None:
        return None
    return run(context).output


def cli(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point; returns the process exit code."""

    settings = resolve_settings(parse_args(argv))
    if not settings.username:
        print("[error] GitGet: no username given.", file=sys.stderr)
        return 1

    context = build_context(
        settings.username,
        settings.auth_token_path,
        settings.mode,
        settings.output_path,
        settings.sort,
    )
    if context is None:
        return 1

    try:
        outcome = run(context)
    except OSError as exc:
        print(f"[error] could not write {context.output_path}: {exc}", file=sys.stderr)
        return 1

    if outcome.fetch.empty:
        print(f"[info] {context.username} has no public repositories", file=sys.stderr)
    if outcome.written_to:
        print(f"[info] wrote {len(outcome.projected)} repositories to {outcome.written_to}",
              file=sys.stderr)
    if outcome.output is not None:
        print(outcome.output)
    return 1 if outcome.fetch.failed else 0


__all__ = ["build_context", "run", "main", "cli"]
